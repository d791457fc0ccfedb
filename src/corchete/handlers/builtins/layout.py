"""Block layout tags: alignment, floats and indentation.

Example:
[center]title[/center]
[align=right]signature[/align]
[floatright]aside[/floatright]

"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from corchete.handlers.contracts import optional_attribute

if TYPE_CHECKING:
    from corchete.config import RenderContext
    from corchete.nodes import TagSpan


def _aligned(position: str, content: str) -> str:
    return f'<div style="text-align: {position};">{content}</div>'


class AlignTag:
    """Handler for left, center, right and align.

    ``[align=POS]`` takes the position from its attribute. Without one the
    span is left untouched rather than treated as an error.

    Thread Safety:
        Stateless handler. Safe for concurrent use.

    """

    POSITIONS: ClassVar[dict[str, str]] = {
        "left": "left",
        "center": "center",
        "right": "right",
    }
    names: ClassVar[tuple[str, ...]] = (*POSITIONS, "align")

    def render(self, tag: TagSpan, context: RenderContext) -> str:
        position = self.POSITIONS.get(tag.name)
        if position is None:
            position = optional_attribute(tag)
            if position is None:
                return tag.raw
        return _aligned(position.strip(), tag.content)


class FloatTag:
    """Handler for floatright, rft and lft."""

    SIDES: ClassVar[dict[str, str]] = {
        "floatright": "right",
        "rft": "right",
        "lft": "left",
    }
    names: ClassVar[tuple[str, ...]] = tuple(SIDES)

    def render(self, tag: TagSpan, context: RenderContext) -> str:
        return f'<div style="float: {self.SIDES[tag.name]};">{tag.content}</div>'


class IndentTag:
    """Handler for [indent]text[/indent]."""

    names: ClassVar[tuple[str, ...]] = ("indent",)

    def render(self, tag: TagSpan, context: RenderContext) -> str:
        return f"<blockquote><div>{tag.content}</div></blockquote>"
