"""Attribute parsing for opening tags.

Decodes the text between a tag's name and the closing ``]`` of its opening
tag into an ordered, read-only mapping.

Two forms are recognized:

- positional: ``[color=red]`` or ``[font=Times New Roman]``. The value is
  stored under the tag's own name and is always the first entry.
- named: ``[jgrossi repo="foo" other=bar]``. Keys are case-insensitive and
  stored lower-cased; values are either double-quoted (quotes stripped) or
  a run of non-space, non-``]`` characters.

Parsing never raises. Malformed quoting degrades to a best-effort bare
value; it is up to handlers to validate what they need.

Example:
    >>> attrs = parse_attributes('=red', "color")
    >>> attrs.first()
    'red'
    >>> attrs = parse_attributes(' Repo="foo"')
    >>> attrs["repo"]
    'foo'

"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping

_PAIR_PATTERN = re.compile(r'([\w-]+)=(?:"([^"]*)"|([^\s\]]+))')
# A positional value runs until the first whitespace-separated "key=" pair
_NEXT_PAIR_PATTERN = re.compile(r"\s+[\w-]+=")


class Attributes(Mapping[str, str]):
    """Read-only ordered mapping of tag attributes.

    Lookups are case-insensitive. The positional value, when present, is the
    first entry and is returned by first() regardless of its key.

    Thread Safety:
        Immutable after creation. Safe to share.

    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = {k.lower(): v for k, v in (values or {}).items()}

    def __getitem__(self, key: str) -> str:
        return self._values[key.lower()]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def first(self, default: str | None = None) -> str | None:
        """Get the first attribute value (the positional one, if given).

        Args:
            default: Value returned when there are no attributes

        Returns:
            First value in discovery order, or default
        """
        return next(iter(self._values.values()), default)

    def __repr__(self) -> str:
        return f"Attributes({self._values!r})"


def parse_attributes(text: str, name: str = "") -> Attributes:
    """Parse the raw attribute text of an opening tag.

    Args:
        text: Text between the tag name and ``]`` (e.g. ``=red``)
        name: Tag name; the positional value is stored under it

    Returns:
        Attributes in discovery order (empty if text is empty)
    """
    values: dict[str, str] = {}
    if not text:
        return Attributes(values)

    rest = text.lstrip()
    if rest.startswith("="):
        body = rest[1:].lstrip()
        close = body.find('"', 1) if body.startswith('"') else -1
        if close != -1:
            value = body[1:close]
            rest = body[close + 1 :]
        else:
            match = _NEXT_PAIR_PATTERN.search(body)
            if match:
                value = body[: match.start()].strip()
                rest = body[match.start() :]
            else:
                value = body.strip()
                rest = ""
        values[name.lower()] = value

    for match in _PAIR_PATTERN.finditer(rest):
        key = match.group(1).lower()
        quoted = match.group(2)
        values[key] = quoted if quoted is not None else match.group(3)

    return Attributes(values)


__all__ = [
    "Attributes",
    "parse_attributes",
]
