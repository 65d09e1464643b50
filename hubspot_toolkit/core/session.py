"""Process-wide default session and verbosity state."""

import logging

from .config import DEFAULT_BASE_URL
from .models import Session, Verbosity, PreconditionError, ValidationError

logger = logging.getLogger(__name__)

# Default session used by clients created without an explicit one
_SESSION: Session | None = None
_VERBOSITY: Verbosity = Verbosity.NONE

_LEVELS = {
    Verbosity.NONE: logging.WARNING,
    Verbosity.VERBOSE: logging.INFO,
    Verbosity.EXTRA_VERBOSE: logging.DEBUG,
}


def connect(api_key: str, base_url: str = DEFAULT_BASE_URL) -> Session:
    """
    Establish the default session.

    Args:
        api_key: Private app access token
        base_url: API base URL

    Returns:
        The new default Session

    Note:
        Connecting again replaces the previous session.
    """
    global _SESSION

    if not api_key:
        raise ValidationError("An API key is required to connect")
    if not base_url:
        raise ValidationError("A base URL is required to connect")

    if _SESSION is not None:
        logger.info("Replacing existing default session")

    _SESSION = Session(base_url=base_url.rstrip("/"), api_key=api_key)
    logger.info(f"Connected default session to {_SESSION.base_url}")
    return _SESSION


def get_session() -> Session:
    """
    Return the default session.

    Raises:
        PreconditionError: If connect() has not been called
    """
    if _SESSION is None or not _SESSION.is_populated():
        raise PreconditionError("Not connected. Call connect() with an API key first.")
    return _SESSION


def reset_session() -> None:
    """
    Forget the default session.

    This is primarily intended for testing.
    """
    global _SESSION
    _SESSION = None
    logger.debug("Default session reset")


def set_verbosity(verbosity: "Verbosity | str") -> Verbosity:
    """
    Set the diagnostic output level for the toolkit's loggers.

    Args:
        verbosity: Verbosity member or its value ("none", "verbose", "extra-verbose")

    Returns:
        The applied Verbosity
    """
    global _VERBOSITY

    try:
        level = verbosity if isinstance(verbosity, Verbosity) else Verbosity(verbosity)
    except ValueError:
        raise ValidationError(
            f"Invalid verbosity '{verbosity}'. Must be one of: "
            + ", ".join(v.value for v in Verbosity)
        )

    _VERBOSITY = level
    logging.getLogger("hubspot_toolkit").setLevel(_LEVELS[level])
    return level


def get_verbosity() -> Verbosity:
    """Return the current verbosity."""
    return _VERBOSITY
