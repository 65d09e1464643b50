"""
HTTP client layer.

Request execution with link pagination, offset-based search paging and
query string options.
"""

from .executor import HubSpotClient, next_page_link
from .query import QueryOptions, append_query
from .search import search_all, MAX_SEARCH_LIMIT, SEARCH_RESULT_CEILING

__all__ = [
    "HubSpotClient",
    "next_page_link",
    "QueryOptions",
    "append_query",
    "search_all",
    "MAX_SEARCH_LIMIT",
    "SEARCH_RESULT_CEILING",
]
