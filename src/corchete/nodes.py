"""Value types produced by tag extraction.

TagSpan is a transient, immutable record of one matched tag occurrence.
It has no identity beyond a single extraction: offsets refer to the buffer
the span was found in and go stale once that buffer is rewritten.

"""

from __future__ import annotations

from dataclasses import dataclass

from corchete.attributes import Attributes, parse_attributes


@dataclass(frozen=True, slots=True)
class TagSpan:
    """One ``[name attrs]content[/name]`` occurrence.

    Attributes:
        raw: The literal matched text, brackets included
        name: Registry name of the tag (lower-cased)
        attributes_raw: Unparsed text between the name and the first ``]``
        content: Text between the opening and closing tags
        start: Offset of raw in the searched buffer
        end: Offset just past raw in the searched buffer

    """

    raw: str
    name: str
    attributes_raw: str
    content: str
    start: int = 0
    end: int = 0

    @property
    def attributes(self) -> Attributes:
        """Parsed attributes; the positional value is stored under name."""
        return parse_attributes(self.attributes_raw, self.name)
