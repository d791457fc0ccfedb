"""
Corchete: BBCode to HTML for Python

Renders vBulletin-style bracket markup (``[tag=attr]content[/tag]``) to
HTML by repeatedly matching tag spans and substituting handler output until
the text stops changing.

Quick Start:
    >>> from corchete import parse
    >>> parse("[b]Hello[/b], [color=red]World[/color]")
    '<strong>Hello</strong>, <span style="color: red;">World</span>'

    >>> # Or use the high-level BBCode class with URL templates
    >>> from corchete import BBCode
    >>> bbcode = BBCode({"thread_url": "http://example.com/thread/{id}"})
    >>> bbcode("[thread=42]Release notes[/thread]")
    '<a href="http://example.com/thread/42">Release notes</a>'

Custom Tags:
    >>> bbcode = BBCode()
    >>> bbcode.extend("foo", lambda raw, attrs, content: f'<a href="#foo">{content}</a>')
    >>> bbcode("[foo]bar[/foo]")
    '<a href="#foo">bar</a>'

Installation:
    pip install corchete
"""

from collections.abc import Mapping
from typing import Any

from corchete.attributes import Attributes, parse_attributes
from corchete.config import DEFAULT_MAX_ITERATIONS, URL_KEYS, RenderContext
from corchete.errors import (
    CorcheteError,
    IterationLimitError,
    MissingAttributeError,
    MissingUrlTemplateError,
    RenderError,
    TagContractError,
    UnknownTagError,
)
from corchete.extractor import find_tag, iter_tag_names
from corchete.handlers import FunctionTag, TagHandler
from corchete.nodes import TagSpan
from corchete.parser import Parser
from corchete.registry import (
    TagRegistry,
    TagRegistryBuilder,
    create_default_registry,
    create_registry_with_defaults,
)

__version__ = "0.1.0"


def parse(
    text: str,
    *,
    urls: Mapping[str, str] | None = None,
    registry: TagRegistry | None = None,
) -> str:
    """Render BBCode text to HTML.

    Args:
        text: BBCode source text
        urls: URL templates for link tags (thread_url, post_url, ...)
        registry: Custom tag registry (uses defaults if None)

    Returns:
        HTML string

    Raises:
        UnknownTagError: If a tag has no handler
        MissingAttributeError: If a tag lacks a required attribute
        MissingUrlTemplateError: If a link tag's URL template is not configured

    Example:
        >>> parse("[i]emphasis[/i]")
        '<em>emphasis</em>'
    """
    if registry is None:
        registry = create_default_registry()
    return Parser(registry, RenderContext(urls=urls or {})).render(text)


class BBCode:
    """High-level BBCode processor.

    Usage:
        >>> bbcode = BBCode({"post_url": "http://example.com/posts/{post_id}"})
        >>> html = bbcode("[post]269302[/post]")

        >>> # Custom tags: functions, handler objects or handler classes
        >>> bbcode.extend("jgrossi", render_repo_link)
        >>> bbcode.extend("foo", FooTag)

    Thread Safety:
        parse() only reads immutable state. extend() swaps in a new
        registry; call it during setup, before sharing the instance.

    """

    __slots__ = ("_context", "_parser", "_registry")

    def __init__(
        self,
        urls: Mapping[str, str] | None = None,
        *,
        registry: TagRegistry | None = None,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
    ) -> None:
        """Initialize BBCode processor.

        Args:
            urls: URL templates keyed by name (see URL_KEYS)
            registry: Custom tag registry (uses defaults if None)
            max_iterations: Pass bound per parse
        """
        self._context = RenderContext(urls=urls or {}, max_iterations=max_iterations)
        self._registry = create_default_registry() if registry is None else registry
        self._parser = Parser(self._registry, self._context)

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "BBCode":
        """Create a processor from a configuration dictionary.

        Accepts the RenderContext fields ("urls", "max_iterations");
        unknown keys are ignored.
        """
        context = RenderContext.from_dict(config_dict)
        return cls(context.urls, max_iterations=context.max_iterations)

    @property
    def context(self) -> RenderContext:
        """Render configuration used for every parse."""
        return self._context

    @property
    def registry(self) -> TagRegistry:
        """Tag registry used for every parse."""
        return self._registry

    def extend(self, name: str, handler: Any) -> "BBCode":
        """Register a custom tag.

        Replacing an existing tag (built-in or custom) is allowed and logged
        as a warning; the tag keeps its place in the pass order.

        Args:
            name: Tag name
            handler: ``(raw, attributes, content) -> str`` function, handler
                object with ``render(tag, context)``, or handler class taking
                the tag name in its constructor

        Returns:
            Self for chaining
        """
        builder = self._registry.to_builder()
        builder.register(handler, names=(name,), replace=True)
        self._registry = builder.build()
        self._parser = Parser(self._registry, self._context)
        return self

    def parse(self, text: str) -> str:
        """Render BBCode text to HTML.

        Raises:
            UnknownTagError: If a tag has no handler
            TagContractError: If a tag's requirements are not met
            IterationLimitError: If rendering does not settle
        """
        return self._parser.render(text)

    def __call__(self, text: str) -> str:
        """Render BBCode text to HTML (alias for parse)."""
        return self.parse(text)


__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core API
    "parse",
    "BBCode",
    # Engine
    "Parser",
    "TagSpan",
    "find_tag",
    "iter_tag_names",
    # Attributes
    "Attributes",
    "parse_attributes",
    # Tag extensibility
    "TagHandler",
    "FunctionTag",
    "TagRegistry",
    "TagRegistryBuilder",
    "create_default_registry",
    "create_registry_with_defaults",
    # Configuration
    "RenderContext",
    "URL_KEYS",
    # Errors
    "CorcheteError",
    "RenderError",
    "UnknownTagError",
    "IterationLimitError",
    "TagContractError",
    "MissingAttributeError",
    "MissingUrlTemplateError",
]
