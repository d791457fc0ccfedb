"""StringBuilder for O(n) string accumulation.

Handlers that assemble output from many fragments (lists, breadcrumbs)
append to a list and join once at the end instead of concatenating
repeatedly.

Thread Safety:
StringBuilder instances are local to each render() call.
No shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterable


class StringBuilder:
    """Efficient string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("<ul>")
            >>> sb.extend(["<li>a</li>", "<li>b</li>"])
            >>> sb.append("</ul>")
            >>> sb.build()
            '<ul><li>a</li><li>b</li></ul>'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def extend(self, strings: Iterable[str]) -> StringBuilder:
        """Append multiple strings at once.

        Args:
            strings: Strings to append

        Returns:
            self for method chaining
        """
        self._parts.extend(s for s in strings if s)
        return self

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        """Return True if any parts have been appended."""
        return bool(self._parts)
