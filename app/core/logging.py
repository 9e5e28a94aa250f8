"""Process-wide logging setup."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def resolve_log_level(level: str | None, debug: bool = False) -> int | None:
    """Map a level name to a logging constant; None when the name is unknown."""
    if debug:
        return logging.DEBUG
    resolved = logging.getLevelName(str(level or "").strip().upper())
    if isinstance(resolved, int):
        return resolved
    return None


def configure_logging(level: str | None, debug: bool = False) -> int:
    """Configure the root logger and return the effective level."""
    resolved = resolve_log_level(level, debug=debug)
    effective = logging.INFO if resolved is None else resolved
    logging.basicConfig(level=effective, format=LOG_FORMAT)
    logging.getLogger().setLevel(effective)
    if resolved is None:
        logger.warning("Unknown LOG_LEVEL %r; falling back to INFO.", level)
    return effective
