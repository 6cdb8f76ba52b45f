"""StringBuilder for O(n) string accumulation.

Appends to a list and joins once at the end. Used by the editor to combine
rendered fragments and by BufferedVisitor as its internal buffer.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> _ = sb.append_line("<h1>Hi</h1>").append_line("<p>Body</p>")
            >>> sb.build()
            '<h1>Hi</h1>\\n<p>Body</p>\\n'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string (empty strings are skipped).

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def append_line(self, s: str = "", terminator: str = "\n") -> StringBuilder:
        """Append a string followed by a line terminator.

        Args:
            s: String to append (empty = just the terminator)
            terminator: Line terminator to write after ``s``

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        self._parts.append(terminator)
        return self

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)

    def clear(self) -> StringBuilder:
        """Clear all accumulated parts."""
        self._parts.clear()
        return self

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)
