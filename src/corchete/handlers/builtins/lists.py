"""List rendering for [list] tags.

Items are introduced by ``[*]``:

    [list]
    [*] first
    [*] second
    [/list]

Without an attribute the list is unordered. Any attribute selects an
ordered list whose ``type`` is the attribute (``[list=1]``, ``[list=a]``,
``[list=I]``...).

Same-named lists cannot nest; see corchete.extractor.

"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from corchete.handlers.contracts import optional_attribute
from corchete.stringbuilder import StringBuilder

if TYPE_CHECKING:
    from corchete.config import RenderContext
    from corchete.nodes import TagSpan

ITEM_MARKER = "[*]"


class BulletList:
    """Renders ``[*]`` items as an unordered list."""

    element: ClassVar[str] = "ul"

    def opening_tag(self) -> str:
        return f"<{self.element}>"

    def render(self, text: str) -> str:
        """Render list content to HTML.

        Blank items are dropped. Text before the first marker is kept
        in front of the list.
        """
        lead, *items = text.split(ITEM_MARKER)
        sb = StringBuilder()
        sb.append(lead.strip())
        sb.append(self.opening_tag())
        sb.extend(f"<li>{item.strip()}</li>" for item in items if item.strip())
        sb.append(f"</{self.element}>")
        return sb.build()


class OrderedList(BulletList):
    """Renders ``[*]`` items as an ordered list of the given type."""

    element: ClassVar[str] = "ol"

    def __init__(self, list_type: str) -> None:
        self.list_type = list_type

    def opening_tag(self) -> str:
        return f'<{self.element} type="{self.list_type}">'


class ListTag:
    """Handler for [list] and [list=type]."""

    names: ClassVar[tuple[str, ...]] = ("list",)

    def render(self, tag: TagSpan, context: RenderContext) -> str:
        list_type = optional_attribute(tag)
        renderer = OrderedList(list_type.strip()) if list_type else BulletList()
        return renderer.render(tag.content)
