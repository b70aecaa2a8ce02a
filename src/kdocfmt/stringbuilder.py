"""StringBuilder for O(n) comment output accumulation.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation.

Thread Safety:
StringBuilder instances are local to each writer.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Append-only string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("/**").append_line().append_spaces(1).append("*/")
            >>> sb.build()
            '/**\\n */'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string (empty strings are skipped).

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def append_line(self, s: str = "") -> StringBuilder:
        """Append a string followed by newline.

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        self._parts.append("\n")
        return self

    def append_spaces(self, count: int) -> StringBuilder:
        """Append ``count`` spaces (nothing for zero or less).

        Returns:
            self for method chaining
        """
        if count > 0:
            self._parts.append(" " * count)
        return self

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)
