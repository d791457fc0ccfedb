"""Block content tags: code, quotes, callouts, breadcrumbs and noparse.

Provides:
- code, php, html: content in a code/pre block, no highlighting
- quote: blockquote with optional attribution, linked to the quoted post
  when given as ``[quote=Name;post_id]``
- note, warning: alert boxes
- process: breadcrumb trail from ``Step > Step > Current``
- noparse: content passed through untouched

"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, ClassVar

from corchete.stringbuilder import StringBuilder

if TYPE_CHECKING:
    from corchete.config import RenderContext
    from corchete.nodes import TagSpan

_QUOTE_TEMPLATE = """<blockquote>
    <p>{content}</p>
    <footer>{footer}</footer>
</blockquote>"""


class CodeTag:
    """Handler for code, php and html blocks.

    Content is wrapped verbatim; tags inside it are still rendered.
    Use noparse to show BBCode literally.
    """

    names: ClassVar[tuple[str, ...]] = ("code", "php", "html")

    def render(self, tag: TagSpan, context: RenderContext) -> str:
        return f"<code><pre>{tag.content}</pre></code>"


class QuoteTag:
    """Handler for [quote], [quote=Name] and [quote=Name;post_id].

    Thread Safety:
        Stateless handler. Safe for concurrent use.

    """

    names: ClassVar[tuple[str, ...]] = ("quote",)

    def footer(self, attribution: str, context: RenderContext) -> str:
        """Build the attribution, linking to the post when an id is given."""
        author, _, post_id = attribution.partition(";")
        post_id = post_id.strip()
        if not post_id:
            return attribution
        url = context.url_for("post_url", post_id, "quote")
        return f'<a href="{url}">{author.strip()}</a>'

    def render(self, tag: TagSpan, context: RenderContext) -> str:
        attribution = tag.attributes.get(tag.name) or ""
        return _QUOTE_TEMPLATE.format(
            content=tag.content,
            footer=self.footer(attribution, context) if attribution else "",
        )


class AlertTag:
    """Handler for note and warning boxes."""

    LEVELS: ClassVar[dict[str, str]] = {
        "note": "info",
        "warning": "warning",
    }
    names: ClassVar[tuple[str, ...]] = tuple(LEVELS)

    def render(self, tag: TagSpan, context: RenderContext) -> str:
        return f'<div class="alert alert-{self.LEVELS[tag.name]}">{tag.content}</div>'


class ProcessTag:
    """Handler for [process]A > B > C[/process].

    Steps are separated by ``>``; the last step is the active one. A ``>``
    closing an HTML tag already rendered inside a step does not separate.
    """

    names: ClassVar[tuple[str, ...]] = ("process",)

    # One step: whole HTML tags and any characters other than >
    _STEP: ClassVar[re.Pattern[str]] = re.compile(r"(?:<[^<>]*>|[^>])+")

    def steps(self, content: str) -> list[str]:
        """Split breadcrumb content into stripped, non-blank steps."""
        return [step.strip() for step in self._STEP.findall(content) if step.strip()]

    def render(self, tag: TagSpan, context: RenderContext) -> str:
        *steps, current = self.steps(tag.content) or [""]
        sb = StringBuilder()
        sb.append('<ol class="breadcrumb">')
        sb.extend(f"<li><a>{step}</a></li>" for step in steps)
        sb.append(f'<li class="active">{current}</li>')
        sb.append("</ol>")
        return sb.build()


class NoparseTag:
    """Handler for [noparse]text[/noparse].

    The parser renders these spans before anything else and never looks at
    their output again, so BBCode inside stays literal.
    """

    names: ClassVar[tuple[str, ...]] = ("noparse",)
    protects_content: ClassVar[bool] = True

    def render(self, tag: TagSpan, context: RenderContext) -> str:
        return tag.content
