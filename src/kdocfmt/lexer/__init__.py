"""Line-oriented lexer for ``/** ... */`` documentation comments.

This package turns raw comment text into the raw token vocabulary the
classifier understands. Any other lexer yielding RawToken objects can be
used in its place.

Architecture:
lexer/
├── __init__.py          # Re-exports CommentLexer, RawToken, RawTokenKind
├── core.py              # CommentLexer (mixin composition + navigation)
├── modes.py             # LexerMode enum, delimiter constants
├── raw.py               # RawToken, RawTokenKind
└── classifiers/         # Line content classification mixins
    ├── fence.py         # ``` fenced code
    └── inline.py        # Tags, markdown links, text

Usage:
    >>> from kdocfmt.lexer import CommentLexer
    >>> [t.kind.name for t in CommentLexer("/** Hi */").tokenize()]
    ['START', 'TEXT', 'END']

"""

from kdocfmt.lexer.core import CommentLexer
from kdocfmt.lexer.modes import LexerMode
from kdocfmt.lexer.raw import RawToken, RawTokenKind

__all__ = ["CommentLexer", "LexerMode", "RawToken", "RawTokenKind"]
