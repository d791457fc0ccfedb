"""Utility modules for Corchete.

Provides:
- logger: get_logger and preview for logging
"""

from corchete.utils.logger import get_logger, preview

__all__ = [
    "get_logger",
    "preview",
]
