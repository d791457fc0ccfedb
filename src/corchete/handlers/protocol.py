"""TagHandler protocol and adapters for user-supplied render behaviors.

A tag handler turns one matched span into HTML. Handlers come in three
shapes, all normalized to the TagHandler protocol by as_handler():

- a handler object exposing ``render(tag, context) -> str``
- a handler class, instantiated once per tag name as ``cls(name)``
- a plain function ``(raw, attributes, content) -> str``

Thread Safety:
Handlers must be stateless. All per-span state arrives as arguments.
Multiple threads may call the same handler instance concurrently.

Example:
    >>> class FooTag:
    ...     def __init__(self, name):
    ...         self.name = name
    ...
    ...     def render(self, tag, context):
    ...         return f'<a href="#{self.name}">{tag.content}</a>'

"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from corchete.attributes import Attributes
    from corchete.config import RenderContext
    from corchete.nodes import TagSpan

# (raw span, attributes, content) -> html
RenderFunc = Callable[[str, "Attributes", str], str]


@runtime_checkable
class TagHandler(Protocol):
    """Protocol for tag implementations.

    Attributes:
        names: Tuple of tag names this handler responds to.
               Example: ("b", "i", "u", "s") for inline formatting

    Handlers may also set a ``protects_content`` class attribute to True;
    the parser then renders their spans before any other tag and never
    interprets the output again (this is how ``noparse`` works).

    """

    names: ClassVar[tuple[str, ...]]
    """Tag names this handler responds to (e.g., ("left", "center"))."""

    def render(self, tag: TagSpan, context: RenderContext) -> str:
        """Render one span to HTML.

        Args:
            tag: The matched span; tag.name tells which name matched
            context: Read-only render configuration (URL templates)

        Returns:
            Replacement text for the span. Returning tag.raw unchanged
            means "leave this span alone".

        Raises:
            TagContractError: If the span lacks something the tag requires
        """
        ...


class FunctionTag:
    """Adapter exposing a plain render function as a TagHandler.

    The function receives ``(raw, attributes, content)``.
    """

    protects_content: ClassVar[bool] = False

    def __init__(self, name: str, func: RenderFunc) -> None:
        self.names = (name,)
        self.func = func

    def render(self, tag: TagSpan, context: RenderContext) -> str:
        return self.func(tag.raw, tag.attributes, tag.content)

    def __repr__(self) -> str:
        func_name = getattr(self.func, "__qualname__", repr(self.func))
        return f"FunctionTag({self.names[0]!r}, {func_name})"


def as_handler(name: str, handler: Any) -> Any:
    """Normalize any supported handler shape to a TagHandler for name.

    Args:
        name: Tag name the handler is being registered under
        handler: Handler object, handler class, or render function

    Returns:
        Object with a ``render(tag, context)`` method

    Raises:
        TypeError: If handler is none of the supported shapes
    """
    if isinstance(handler, type):
        instance = handler(name)
        if not callable(getattr(instance, "render", None)):
            msg = f"Handler class {handler.__name__} has no render() method"
            raise TypeError(msg)
        return instance

    if callable(getattr(handler, "render", None)):
        return handler

    if callable(handler):
        return FunctionTag(name, handler)

    msg = f"Unsupported handler for tag '{name}': {handler!r}"
    raise TypeError(msg)


def protects_content(handler: Any) -> bool:
    """Check whether a handler's spans must be shielded from further parsing."""
    return bool(getattr(handler, "protects_content", False))


__all__ = [
    "FunctionTag",
    "RenderFunc",
    "TagHandler",
    "as_handler",
    "protects_content",
]
