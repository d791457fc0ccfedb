"""Validation helpers shared by built-in handlers.

Handlers validate before producing any HTML, so a failing span never
leaves partial output behind.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from corchete.errors import MissingAttributeError

if TYPE_CHECKING:
    from corchete.nodes import TagSpan


def require_attribute(tag: TagSpan) -> str:
    """Get the first attribute of a span, which must not be blank.

    Raises:
        MissingAttributeError: If the span has no attribute or it is blank
    """
    value = tag.attributes.first()
    if value is None or not value.strip():
        raise MissingAttributeError(tag.name)
    return value


def optional_attribute(tag: TagSpan) -> str | None:
    """Get the first attribute of a span, or None when absent or blank."""
    value = tag.attributes.first()
    if value is None or not value.strip():
        return None
    return value


__all__ = [
    "optional_attribute",
    "require_attribute",
]
