"""Inline formatting tags.

Provides:
- b, i, u, s: strong, em, u, s elements
- highlight, high: mark element
- h2, h3, pre, minicode: plain element wrappers
- color, font: styled spans (attribute required)
- size: font-size span on a seven step scale (attribute required)
- hr: content between two horizontal rules

Example:
[b]bold[/b] [color=red]red[/color] [size=+1]bigger[/size]

"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, ClassVar

from corchete.handlers.contracts import require_attribute

if TYPE_CHECKING:
    from corchete.config import RenderContext
    from corchete.nodes import TagSpan


class InlineTag:
    """Handler for tags that wrap content in a single HTML element.

    Thread Safety:
        Stateless handler. Safe for concurrent use.

    """

    ELEMENTS: ClassVar[dict[str, str]] = {
        "b": "strong",
        "i": "em",
        "u": "u",
        "s": "s",
        "highlight": "mark",
        "high": "mark",
        "h2": "h2",
        "h3": "h3",
        "pre": "pre",
        "minicode": "code",
    }
    names: ClassVar[tuple[str, ...]] = tuple(ELEMENTS)

    def render(self, tag: TagSpan, context: RenderContext) -> str:
        element = self.ELEMENTS[tag.name]
        return f"<{element}>{tag.content}</{element}>"


class ColorTag:
    """Handler for [color=X]text[/color]."""

    names: ClassVar[tuple[str, ...]] = ("color",)

    def render(self, tag: TagSpan, context: RenderContext) -> str:
        color = require_attribute(tag)
        return f'<span style="color: {color};">{tag.content}</span>'


class FontTag:
    """Handler for [font=Family]text[/font]."""

    names: ClassVar[tuple[str, ...]] = ("font",)

    def render(self, tag: TagSpan, context: RenderContext) -> str:
        family = require_attribute(tag)
        return f'<span style="font-family: {family};">{tag.content}</span>'


class SizeTag:
    """Handler for [size=N]text[/size].

    Absolute sizes 1-7 map onto SCALE directly. Relative sizes (+N, -N)
    are offsets from the middle step (size 4). Anything else, including
    out of range numbers, is used verbatim as the CSS value.

    See http://style.cleverchimp.com/font_size_intervals/altintervals.html#bbs

    """

    names: ClassVar[tuple[str, ...]] = ("size",)

    SCALE: ClassVar[tuple[int, ...]] = (60, 89, 100, 120, 150, 200, 300)
    MIDDLE: ClassVar[int] = 3

    _NUMBER: ClassVar[re.Pattern[str]] = re.compile(r"[+-]?\d+")

    def font_size(self, value: str) -> str:
        """Map a size attribute to a CSS font-size value."""
        stripped = value.strip()
        if self._NUMBER.fullmatch(stripped):
            position = int(stripped) - 1
            if stripped[0] in "+-":
                position += self.MIDDLE
            if 0 <= position < len(self.SCALE):
                return f"{self.SCALE[position]}%"
        return value

    def render(self, tag: TagSpan, context: RenderContext) -> str:
        size = self.font_size(require_attribute(tag))
        return f'<span style="font-size: {size};">{tag.content}</span>'


class HrTag:
    """Handler for [hr]text[/hr]."""

    names: ClassVar[tuple[str, ...]] = ("hr",)

    def render(self, tag: TagSpan, context: RenderContext) -> str:
        return f"<hr />{tag.content}<hr />"
