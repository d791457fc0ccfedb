"""Logging helpers for Corchete.

All loggers live under the "corchete" namespace, so applications can tune
the whole library with ``logging.getLogger("corchete").setLevel(...)``.
The library never installs handlers of its own.

Example:
    >>> from corchete.utils.logger import get_logger, preview
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering %s", preview(text))
"""

from __future__ import annotations

import logging

ROOT_LOGGER = "corchete"

# Longest excerpt of user text written to a log record
PREVIEW_LENGTH = 40


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the corchete namespace.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("mymodule").name
        'corchete.mymodule'
        >>> get_logger("corchete.parser").name
        'corchete.parser'
    """
    if name != ROOT_LOGGER and not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def preview(text: str, length: int = PREVIEW_LENGTH) -> str:
    """Shorten text for a log message, keeping it on one line.

    Example:
        >>> preview("x" * 50, 5)
        "'xxxxx'..."
    """
    if len(text) <= length:
        return repr(text)
    return f"{text[:length]!r}..."
