"""StringBuilder for O(n) string accumulation.

Used by the endnote renderer: appends to a list, joins once at the end,
O(n) total vs O(n²) for repeated string concatenation.

Thread Safety:
StringBuilder instances are local to each render_footnotes() call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.
    
    Appends to a list, joins once at the end.
    
    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("<ol>")
            >>> sb.append("<li>1</li>")
            >>> sb.append("</ol>")
            >>> sb.build()
            '<ol><li>1</li></ol>'
    
    Thread Safety:
        Instance is local to each render call.
        No shared mutable state.
        
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

    def build(self) -> str:
        """Join all parts into final string.

        Returns:
            Concatenated string of all appended parts
        """
        return "".join(self._parts)

