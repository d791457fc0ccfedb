"""Tag registry for handler lookup and registration.

The registry maps tag names to their handlers. Its iteration order is the
registration order, which is also the order the parser tries tags in on
every pass: built-ins first, then custom tags in the order they were added.

Thread Safety:
TagRegistry is immutable after creation. Safe to share.
Use TagRegistryBuilder for mutable construction.

Example:
    >>> builder = create_registry_with_defaults()
    >>> builder.register(SpoilerTag())
    >>> builder.register(lambda raw, attrs, content: f"<kbd>{content}</kbd>", names=("kbd",))
    >>> registry = builder.build()
    >>> handler = registry.get("spoiler")

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Any

from corchete.extractor import is_valid_tag_name
from corchete.handlers.protocol import as_handler
from corchete.utils.logger import get_logger

if TYPE_CHECKING:
    from corchete.handlers.protocol import TagHandler

logger = get_logger(__name__)


class TagRegistry:
    """Immutable registry of tag handlers.

    Thread Safety:
        Immutable after creation. Safe to share across threads.

    """

    __slots__ = ("_by_name",)

    def __init__(self, by_name: dict[str, TagHandler]) -> None:
        """Initialize registry with a pre-built mapping.

        Use TagRegistryBuilder to create instances.
        """
        self._by_name = by_name

    def get(self, name: str) -> TagHandler | None:
        """Get handler for a tag name (case-insensitive).

        Args:
            name: Tag name (e.g., "b", "thread")

        Returns:
            Handler if registered, None otherwise
        """
        return self._by_name.get(name.lower())

    def has(self, name: str) -> bool:
        """Check if tag name is registered."""
        return name.lower() in self._by_name

    @property
    def names(self) -> tuple[str, ...]:
        """All registered tag names, in registration order."""
        return tuple(self._by_name)

    @property
    def handlers(self) -> tuple[TagHandler, ...]:
        """Distinct registered handlers, in registration order."""
        return tuple({id(h): h for h in self._by_name.values()}.values())

    def items(self) -> Iterable[tuple[str, TagHandler]]:
        """(name, handler) pairs in registration order."""
        return self._by_name.items()

    def to_builder(self) -> TagRegistryBuilder:
        """Create a builder pre-populated with this registry's entries."""
        builder = TagRegistryBuilder()
        builder._by_name.update(self._by_name)
        return builder

    def __contains__(self, name: object) -> bool:
        """Support 'name in registry' syntax."""
        return isinstance(name, str) and self.has(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_name)

    def __len__(self) -> int:
        """Number of registered tag names."""
        return len(self._by_name)


class TagRegistryBuilder:
    """Mutable builder for TagRegistry.

    Use this to register handlers, then call build() to create
    an immutable registry.

    Example:
        >>> builder = TagRegistryBuilder()
        >>> builder.register(InlineTag())
        >>> builder.register(FooTag, names=("foo",))
        >>> registry = builder.build()

    """

    __slots__ = ("_by_name",)

    def __init__(self) -> None:
        """Initialize empty builder."""
        self._by_name: dict[str, TagHandler] = {}

    def register(
        self,
        handler: Any,
        *,
        names: Iterable[str] | None = None,
        replace: bool = False,
    ) -> TagRegistryBuilder:
        """Register a tag handler.

        Args:
            handler: Handler object, handler class (instantiated with each
                tag name), or ``(raw, attributes, content)`` function
            names: Tag names to register under (defaults to handler.names)
            replace: Allow replacing an existing registration. The tag keeps
                its original position in the registration order.

        Returns:
            Self for chaining

        Raises:
            TypeError: If names are not given and the handler has none,
                or the handler is not a supported shape
            ValueError: If a name is invalid, or already registered and
                replace is False
        """
        if names is None:
            if not hasattr(handler, "names"):
                msg = f"Handler {handler!r} missing 'names' attribute"
                raise TypeError(msg)
            names = handler.names

        for raw_name in names:
            if not is_valid_tag_name(raw_name):
                msg = f"Invalid tag name: {raw_name!r}"
                raise ValueError(msg)
            name = raw_name.lower()
            existing = self._by_name.get(name)
            if existing is not None:
                if not replace:
                    msg = f"Tag '{name}' already registered by {type(existing).__name__}"
                    raise ValueError(msg)
                logger.warning(
                    "Tag '%s' handler %s replaced by %r",
                    name,
                    type(existing).__name__,
                    handler,
                )
            self._by_name[name] = as_handler(name, handler)

        return self

    def register_all(self, handlers: Iterable[Any]) -> TagRegistryBuilder:
        """Register multiple handlers under their own names.

        Returns:
            Self for chaining
        """
        for handler in handlers:
            self.register(handler)
        return self

    def build(self) -> TagRegistry:
        """Build immutable registry from registered handlers."""
        return TagRegistry(dict(self._by_name))

    def __len__(self) -> int:
        """Number of registered tag names."""
        return len(self._by_name)


def _builtin_handlers() -> list[TagHandler]:
    from corchete.handlers.builtins import BUILTIN_HANDLERS

    return [handler_class() for handler_class in BUILTIN_HANDLERS]


# Cached singleton, shared across threads (TagRegistry is immutable)
_DEFAULT_REGISTRY: TagRegistry | None = None


def create_default_registry() -> TagRegistry:
    """Get the default tag registry (cached singleton).

    Returns:
        Registry with every built-in tag

    Thread Safety:
        Returns a cached immutable registry. Safe for concurrent access.
    """
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = create_registry_with_defaults().build()
    return _DEFAULT_REGISTRY


def create_registry_with_defaults() -> TagRegistryBuilder:
    """Create a builder pre-populated with the built-in tags.

    Use this to extend the default set with custom tags:

        >>> builder = create_registry_with_defaults()
        >>> builder.register(SpoilerTag())
        >>> registry = builder.build()
    """
    return TagRegistryBuilder().register_all(_builtin_handlers())


__all__ = [
    "TagRegistry",
    "TagRegistryBuilder",
    "create_default_registry",
    "create_registry_with_defaults",
]
