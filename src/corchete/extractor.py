"""Tag extraction: locating ``[name ...]...[/name]`` spans in text.

Matching is leftmost-open, nearest-close: the first opening tag for a name
is paired with the first closing tag after it, across newlines. This keeps
the grammar regular; nested tags are handled by the parser re-scanning the
buffer after each substitution.

Known limitation:
    ``[b][b]x[/b][/b]`` first matches ``[b][b]x[/b]`` (content ``[b]x``).
    Repeated substitution still yields correctly nested inline output, but
    structures that interpret their content (lists) cannot nest under the
    same name.

Names are matched case-insensitively and must be followed by ``]``, ``=``
or whitespace, so ``[b]`` never matches ``[br]``.

"""

from __future__ import annotations

import re
from collections.abc import Iterator

from corchete.nodes import TagSpan

_TAG_NAME_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9_-]*")

# Characters allowed directly after a tag name in an opening tag
_NAME_BOUNDARY = frozenset("]= \t\r\n")


def is_valid_tag_name(name: str) -> bool:
    """Check whether name can be used as a tag name."""
    return _TAG_NAME_PATTERN.fullmatch(name) is not None


def _is_opening_at(text: str, name: str, pos: int) -> bool:
    after = pos + 1 + len(name)
    return (
        after < len(text)
        and text[after] in _NAME_BOUNDARY
        and text[pos + 1 : after].lower() == name
    )


def _find_closing(text: str, name: str, start: int) -> int:
    """Offset of the first ``[/name]`` at or after start, or -1."""
    pos = text.find("[/", start)
    while pos != -1:
        after = pos + 2 + len(name)
        if text[after : after + 1] == "]" and text[pos + 2 : after].lower() == name:
            return pos
        pos = text.find("[/", pos + 2)
    return -1


def find_tag(text: str, name: str, start: int = 0) -> TagSpan | None:
    """Find the first complete tag pair for name at or after start.

    Args:
        text: Buffer to search
        name: Tag name (matched case-insensitively)
        start: Offset to start searching from

    Returns:
        TagSpan for the match, or None if no complete pair exists

    Example:
        >>> span = find_tag("a [color=red]b[/color]", "color")
        >>> span.attributes_raw, span.content, span.start
        ('=red', 'b', 2)
    """
    name = name.lower()
    pos = text.find("[", start)
    while pos != -1:
        if _is_opening_at(text, name, pos):
            after_name = pos + 1 + len(name)
            open_end = text.find("]", after_name)
            if open_end == -1:
                return None
            close = _find_closing(text, name, open_end + 1)
            if close == -1:
                # No later opening tag can have a closing tag either
                return None
            end = close + len(name) + 3
            return TagSpan(
                raw=text[pos:end],
                name=name,
                attributes_raw=text[after_name:open_end],
                content=text[open_end + 1 : close],
                start=pos,
                end=end,
            )
        pos = text.find("[", pos + 1)
    return None


def iter_tag_names(text: str) -> Iterator[str]:
    """Yield the names of all complete tag pairs in text.

    Names are lower-cased and yielded once each, in order of their first
    closing tag. A closing tag with no matching opening tag is ignored.
    """
    seen: set[str] = set()
    pos = text.find("[/")
    while pos != -1:
        close = text.find("]", pos + 2)
        if close == -1:
            return
        candidate = text[pos + 2 : close].lower()
        if (
            candidate not in seen
            and is_valid_tag_name(candidate)
            and find_tag(text, candidate) is not None
        ):
            seen.add(candidate)
            yield candidate
        pos = text.find("[/", pos + 2)


__all__ = [
    "find_tag",
    "is_valid_tag_name",
    "iter_tag_names",
]
