"""Line-oriented comment lexer.

Implements a window-based approach: find the end of a line, classify its
content, then commit position. Every step moves forward; the lexer never
rewinds.

No regex in the hot path.

Thread Safety:
Lexer instances are single-use. Create one per comment.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from kdocfmt.lexer.classifiers import FenceClassifierMixin, InlineClassifierMixin
from kdocfmt.lexer.modes import (
    CLOSE_DELIMITER,
    DECORATION_MARKER,
    OPEN_DELIMITER,
    LexerMode,
)
from kdocfmt.lexer.raw import RawToken, RawTokenKind


class CommentLexer(
    InlineClassifierMixin,
    FenceClassifierMixin,
):
    """Lexer turning a ``/** ... */`` comment into raw tokens.

    Usage:
            >>> for token in CommentLexer("/**\\n * Hello @see\\n */").tokenize():
            ...     print(token)
        RawToken(START, '/**')
        RawToken(WHITE_SPACE, '\\n ')
        RawToken(LEADING_ASTERISK, '*')
        RawToken(TEXT, ' Hello @see')
        RawToken(WHITE_SPACE, '\\n ')
        RawToken(END, '*/')

    The delimiters are a precondition, not validated: a missing ``/**``
    yields no START token, and the stream always ends with END.

    """

    __slots__ = (
        "_source",
        "_body_start",
        "_body_end",
        "_pos",
        "_mode",
        "_pending_whitespace",  # Newlines and indentation not yet emitted
    )

    def __init__(self, source: str) -> None:
        """Initialize lexer with the raw comment text.

        Args:
            source: Comment text including its delimiters
        """
        self._source = source
        self._body_start = len(OPEN_DELIMITER) if source.startswith(OPEN_DELIMITER) else 0
        if source.endswith(CLOSE_DELIMITER) and len(source) - len(CLOSE_DELIMITER) >= self._body_start:
            self._body_end = len(source) - len(CLOSE_DELIMITER)
        else:
            self._body_end = len(source)
        self._pos = self._body_start
        self._mode = LexerMode.PROSE
        self._pending_whitespace = ""

    def tokenize(self) -> Iterator[RawToken]:
        """Tokenize the comment into a raw token stream.

        Yields:
            RawToken objects one at a time

        Complexity: O(n) where n = len(source)
        """
        if self._body_start:
            yield RawToken(RawTokenKind.START, OPEN_DELIMITER)

        first = True
        while True:
            line_end = self._find_line_end()
            last = line_end >= self._body_end
            yield from self._scan_line(self._source[self._pos : line_end], first, last)
            if last:
                break
            first = False
            self._pos = line_end + 1

        yield from self._flush_whitespace()
        yield RawToken(RawTokenKind.END, CLOSE_DELIMITER)

    # =========================================================================
    # Window navigation helpers
    # =========================================================================

    def _find_line_end(self) -> int:
        """Find the end of the current line (position of \\n or end of body)."""
        idx = self._source.find("\n", self._pos, self._body_end)
        return idx if idx != -1 else self._body_end

    def _flush_whitespace(self) -> Iterator[RawToken]:
        if self._pending_whitespace:
            yield RawToken(RawTokenKind.WHITE_SPACE, self._pending_whitespace)
            self._pending_whitespace = ""

    # =========================================================================
    # Line scanning
    # =========================================================================

    def _scan_line(self, line: str, first: bool, last: bool) -> Iterator[RawToken]:
        """Classify one line of the comment body.

        Args:
            line: Line text without its newline
            first: Line shares the opening delimiter's line
            last: Line shares the closing delimiter's line
        """
        decorated = False
        if first:
            content = line
        else:
            stripped = line.lstrip(" \t")
            self._pending_whitespace += "\n" + line[: len(line) - len(stripped)]
            decorated = stripped.startswith(DECORATION_MARKER)
            if not decorated and not stripped and (self._mode is LexerMode.PROSE or last):
                # Empty undecorated line: keep accumulating whitespace
                return
            yield from self._flush_whitespace()
            if decorated:
                yield RawToken(RawTokenKind.LEADING_ASTERISK, DECORATION_MARKER)
                content = stripped[len(DECORATION_MARKER) :]
            else:
                content = stripped

        if self._is_fence_line(content):
            if self._mode is LexerMode.PROSE:
                self._mode = LexerMode.CODE_FENCE
            else:
                self._mode = LexerMode.PROSE
            yield RawToken(RawTokenKind.TEXT, content)
        elif self._mode is LexerMode.CODE_FENCE:
            yield from self._scan_code_line(content, decorated)
        else:
            yield from self._scan_prose(content)
