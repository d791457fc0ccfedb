"""Fixed-point render loop turning BBCode into HTML.

The parser rewrites a working copy of the text one span at a time:

1. Spans of protecting tags (``noparse``) are rendered first and swapped
   for opaque placeholders, so nothing inside them is ever interpreted.
2. Each pass checks that every complete tag pair in the buffer has a
   handler, then tries every registered tag name in registration order,
   replacing each match with its handler's output and re-scanning.
3. Passes repeat until one produces no rewrite.
4. Placeholders are swapped back for the protected output.

A handler that returns its span unchanged leaves it in place; scanning for
that name resumes just after the span's opening bracket.

RenderContext.max_iterations bounds the number of passes that rewrite
anything. Within a pass, each tag name may be rewritten at most
max_iterations times more than there are brackets in the buffer, so a
handler that keeps re-emitting its own tag cannot loop forever either.

Thread Safety:
Parser holds only immutable state (registry, context). All working state
is local to render(). Safe to share across threads.

Example:
    >>> parser = Parser(create_default_registry(), RenderContext())
    >>> parser.render("[b]Hello[/b]")
    '<strong>Hello</strong>'

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from corchete.errors import IterationLimitError, RenderError, UnknownTagError
from corchete.extractor import find_tag, iter_tag_names
from corchete.handlers.protocol import protects_content
from corchete.utils.logger import get_logger, preview

if TYPE_CHECKING:
    from corchete.config import RenderContext
    from corchete.handlers.protocol import TagHandler
    from corchete.registry import TagRegistry

logger = get_logger(__name__)

# Placeholder delimiters, tried in order; the first absent from the input wins.
# None of them is "[" so no tag can match across or inside a placeholder.
_PLACEHOLDER_MARKS = ("\x00", *(chr(code) for code in range(0xE000, 0xF900)))


def _placeholder_mark(text: str) -> str:
    """Pick a placeholder delimiter that does not occur in text."""
    for mark in _PLACEHOLDER_MARKS:
        if mark not in text:
            return mark
    msg = "No placeholder character is free in the input"
    raise RenderError(msg)


class Parser:
    """BBCode render engine.

    Usage:
        >>> parser = Parser(registry, RenderContext(urls={...}))
        >>> html = parser.render(text)

    """

    __slots__ = ("_context", "_protected", "_registry", "_unprotected")

    def __init__(self, registry: TagRegistry, context: RenderContext) -> None:
        """Initialize parser.

        Args:
            registry: Tag handlers, tried in registration order
            context: URL templates and pass bound
        """
        self._registry = registry
        self._context = context
        self._protected: tuple[tuple[str, TagHandler], ...] = tuple(
            (name, handler) for name, handler in registry.items() if protects_content(handler)
        )
        self._unprotected: tuple[tuple[str, TagHandler], ...] = tuple(
            (name, handler) for name, handler in registry.items() if not protects_content(handler)
        )

    @property
    def registry(self) -> TagRegistry:
        return self._registry

    @property
    def context(self) -> RenderContext:
        return self._context

    def render(self, text: str) -> str:
        """Render BBCode text to HTML.

        Args:
            text: Source text

        Returns:
            HTML. Text without complete tag pairs is returned unchanged.

        Raises:
            UnknownTagError: If a tag pair has no registered handler
            TagContractError: If a handler's requirements are not met
            IterationLimitError: If more than max_iterations passes rewrite,
                or one tag keeps rewriting within a pass
        """
        if "[" not in text:
            return text

        logger.debug("Rendering %d chars: %s", len(text), preview(text))
        limit = self._context.max_iterations
        mark = _placeholder_mark(text)
        stash: list[str] = []
        buffer = self._protect(text, stash, mark)

        passes = 0
        while True:
            self._check_unknown(buffer)
            buffer, rewrites = self._pass(buffer)
            logger.debug("Pass %d: %d rewrites", passes + 1, rewrites)
            if rewrites == 0:
                break
            passes += 1
            if passes > limit:
                raise IterationLimitError(limit)

        return self._restore(buffer, stash, mark)

    def _protect(self, text: str, stash: list[str], mark: str) -> str:
        """Swap protected spans for placeholders, stashing their output."""
        for name, handler in self._protected:
            span = find_tag(text, name)
            while span is not None:
                stash.append(handler.render(span, self._context))
                placeholder = f"{mark}{len(stash) - 1}{mark}"
                text = text[: span.start] + placeholder + text[span.end :]
                span = find_tag(text, name, span.start + len(placeholder))
        if stash:
            logger.debug("Protected %d spans", len(stash))
        return text

    def _restore(self, text: str, stash: list[str], mark: str) -> str:
        # Reverse order: a stashed output may contain earlier placeholders
        for index in range(len(stash) - 1, -1, -1):
            placeholder = f"{mark}{index}{mark}"
            text = text.replace(placeholder, stash[index], 1)
        return text

    def _check_unknown(self, text: str) -> None:
        for name in iter_tag_names(text):
            if not self._registry.has(name):
                logger.debug("Unknown tag %r in %s", name, preview(text))
                raise UnknownTagError(name)

    def _pass(self, text: str) -> tuple[str, int]:
        """Run one pass over every registered tag name.

        Rewrites of a single name within the pass are capped at
        max_iterations plus the number of brackets the pass started with,
        so a handler that keeps re-emitting its own tag stops there.
        """
        ceiling = self._context.max_iterations + text.count("[")
        rewrites = 0
        for name, handler in self._unprotected:
            name_rewrites = 0
            position = 0
            span = find_tag(text, name, position)
            while span is not None:
                html = handler.render(span, self._context)
                if html == span.raw:
                    position = span.start + 1
                else:
                    name_rewrites += 1
                    if name_rewrites > ceiling:
                        raise IterationLimitError(self._context.max_iterations, name)
                    text = text[: span.start] + html + text[span.end :]
                    position = 0
                span = find_tag(text, name, position)
            rewrites += name_rewrites
        return text, rewrites
