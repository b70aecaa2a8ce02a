"""Raw token definitions for the comment lexer.

Raw tokens are what a KDoc/Javadoc lexer hands to the classifier. They carry
no layout decisions; the classifier turns them into writer tokens.

Thread Safety:
RawToken is frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass
from enum import Enum, auto


class RawTokenKind(Enum):
    """Raw lexical token kinds produced by the comment lexer."""

    START = auto()  # /**
    END = auto()  # */
    LEADING_ASTERISK = auto()  # per-line decoration marker
    TEXT = auto()  # prose run, spaces included
    TAG_NAME = auto()  # @param, @return, ...
    CODE_BLOCK_TEXT = auto()  # one line inside a ``` fence
    MARKDOWN_INLINE_LINK = auto()  # [label](target)
    MARKDOWN_LINK = auto()  # [label] or [label][ref]
    WHITE_SPACE = auto()  # newline plus indentation between lines


@dataclass(frozen=True, slots=True)
class RawToken:
    """A token produced by the comment lexer.

    Attributes:
        kind: The raw token kind. Classifiers must reject kinds they do
            not know, so this is typed loosely to let foreign lexers plug in.
        text: The raw source text of the token

    """

    kind: RawTokenKind
    text: str

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.text
        if len(val) > 20:
            val = val[:17] + "..."
        name = self.kind.name if isinstance(self.kind, Enum) else self.kind
        return f"RawToken({name}, {val!r})"
