"""Token and TokenCategory definitions for the kdocfmt writer.

The classifier produces a sequence of Token objects that the render driver
consumes exactly once. Each Token pairs a category with its literal text.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenCategory and WhitespaceRequest are enums (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, IntEnum, auto


class TokenCategory(Enum):
    """Categories of normalized comment tokens.

    Every token that needs special handling from the writer (extra line
    breaks, indentation, forcing or forbidding whitespace) gets its own
    category. Everything else is a LITERAL.

    """

    # Comment delimiters
    BEGIN_MARKER = auto()  # /**
    END_MARKER = auto()  # */

    # Structure pinned to the start of a line
    LIST_ITEM_OPEN = auto()
    HEADER_OPEN = auto()
    PARAGRAPH_OPEN = auto()

    # Verbatim regions
    PRE_OPEN = auto()
    PRE_CLOSE = auto()
    CODE_OPEN = auto()
    CODE_CLOSE = auto()
    TABLE_OPEN = auto()
    TABLE_CLOSE = auto()

    # Whitespace
    BLANK_LINE = auto()
    WHITESPACE_REQUEST = auto()
    FORCED_NEWLINE = auto()

    # Words, tag names, links, code lines
    LITERAL = auto()


class WhitespaceRequest(IntEnum):
    """The strongest separator pending between two committed tokens.

    Order is significant, lowest priority first. If the previous token
    requests BLANK_LINE after it and the next one only NEWLINE before it,
    BLANK_LINE wins. Requests combine with the builtin ``max``.

    """

    NONE = 0
    WHITESPACE = 1  # one space
    NEWLINE = 2  # break to the next line
    BLANK_LINE = 3  # a whole empty line between two lines of content


# Tokens that never leave the writer "mid-line": the next token is pinned
# to them (``- foo``, never ``-\nfoo``).
START_OF_LINE_CATEGORIES = frozenset(
    {
        TokenCategory.LIST_ITEM_OPEN,
        TokenCategory.PARAGRAPH_OPEN,
        TokenCategory.HEADER_OPEN,
    }
)


@dataclass(frozen=True, slots=True)
class Token:
    """A normalized comment token.

    Attributes:
        category: The token category (from TokenCategory enum)
        text: Literal text written to the output, possibly empty

    """

    category: TokenCategory
    text: str = ""

    @property
    def length(self) -> int:
        """Character count of the text (display width is not modeled)."""
        return len(self.text)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.text
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.category.name}, {val!r})"
