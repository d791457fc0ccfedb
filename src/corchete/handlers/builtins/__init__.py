"""Built-in tag handlers.

Provides the vBulletin-style tag set out of the box:
- Formatting: b, i, u, s, color, size, font, highlight, high, h2, h3, hr, pre, minicode
- Layout: left, center, right, align, indent, floatright, lft, rft
- Images: img, imglft, imgrft
- Links: url, email, a, thread, post, attach, jira, name
- Lists: list with [*] items
- Blocks: code, php, html, quote, note, warning, process, noparse

See http://www.vbulletin.org/forum/misc.php?do=bbcode

"""

from __future__ import annotations

from corchete.handlers.builtins.blocks import (
    AlertTag,
    CodeTag,
    NoparseTag,
    ProcessTag,
    QuoteTag,
)
from corchete.handlers.builtins.formatting import (
    ColorTag,
    FontTag,
    HrTag,
    InlineTag,
    SizeTag,
)
from corchete.handlers.builtins.layout import (
    AlignTag,
    FloatTag,
    IndentTag,
)
from corchete.handlers.builtins.links import (
    AnchorTag,
    EmailTag,
    ImageTag,
    JiraTag,
    ObjectLinkTag,
    UrlTag,
    UserTag,
)
from corchete.handlers.builtins.lists import (
    BulletList,
    ListTag,
    OrderedList,
)

# Registration order is the order tags are tried in every render pass
BUILTIN_HANDLERS: tuple[type, ...] = (
    InlineTag,
    ColorTag,
    SizeTag,
    FontTag,
    HrTag,
    AlignTag,
    FloatTag,
    IndentTag,
    ImageTag,
    EmailTag,
    UrlTag,
    AnchorTag,
    ObjectLinkTag,
    JiraTag,
    UserTag,
    ListTag,
    CodeTag,
    QuoteTag,
    AlertTag,
    ProcessTag,
    NoparseTag,
)

__all__ = [
    "BUILTIN_HANDLERS",
    "AlertTag",
    "AlignTag",
    "AnchorTag",
    "BulletList",
    "CodeTag",
    "ColorTag",
    "EmailTag",
    "FloatTag",
    "FontTag",
    "HrTag",
    "ImageTag",
    "IndentTag",
    "InlineTag",
    "JiraTag",
    "ListTag",
    "NoparseTag",
    "ObjectLinkTag",
    "OrderedList",
    "ProcessTag",
    "QuoteTag",
    "SizeTag",
    "UrlTag",
    "UserTag",
]
