"""Loguru sink setup shared by the Streamlit page."""

import sys

from loguru import logger

_configured_level: str | None = None


def configure_logging(level: str = "INFO") -> None:
    """Route loguru output to stderr at the given level.

    Streamlit re-executes the page script on every interaction, so repeated
    calls with the same level are ignored.
    """
    global _configured_level
    level = level.upper()
    if _configured_level == level:
        return

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name} - {message}",
    )
    _configured_level = level
    logger.debug(f"Logging configured at {level}")
