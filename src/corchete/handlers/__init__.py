"""Tag handler system for Corchete.

A handler turns one ``[name attrs]content[/name]`` span into HTML.

Key components:
- TagHandler: Protocol for handler implementations
- FunctionTag: Adapter for plain ``(raw, attributes, content)`` functions
- as_handler: Normalizes objects, classes and functions to TagHandler
- builtins: The built-in tag set

Thread Safety:
Handlers must be stateless; the registry holding them is immutable.

Example:
    >>> class SpoilerTag:
    ...     names = ("spoiler",)
    ...
    ...     def render(self, tag, context):
    ...         return f'<details><summary>Spoiler</summary>{tag.content}</details>'

"""

from corchete.handlers.contracts import optional_attribute, require_attribute
from corchete.handlers.protocol import (
    FunctionTag,
    RenderFunc,
    TagHandler,
    as_handler,
    protects_content,
)

__all__ = [
    "FunctionTag",
    "RenderFunc",
    "TagHandler",
    "as_handler",
    "optional_attribute",
    "protects_content",
    "require_attribute",
]
