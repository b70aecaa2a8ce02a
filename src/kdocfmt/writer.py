"""Stateful comment writer.

Accepts "requests" and "writes" and produces the formatted comment. There is
no parse tree, only a stream of tokens, so the writer itself keeps track of
questions like "how many levels of list are we inside?".

Whitespace is never written eagerly. Requests accumulate until the next
token is committed, the strongest one wins, and the width check runs once
per committed token. That single pass is a greedy line fill.

Thread Safety:
Writer instances are single-use. Create one per comment.

"""

from __future__ import annotations

from kdocfmt.config import MAX_LINE_LENGTH
from kdocfmt.counter import NestingCounter
from kdocfmt.lexer.modes import DECORATION_MARKER
from kdocfmt.stringbuilder import StringBuilder
from kdocfmt.tokens import START_OF_LINE_CATEGORIES, Token, WhitespaceRequest

# Width of the "* " prefix plus the column before it, beyond block indent.
_CONTINUATION_PREFIX_WIDTH = 3


class KDocWriter:
    """Renders writer tokens into a ``/** ... */`` block.

    Usage:
            >>> writer = KDocWriter(block_indent=0)
            >>> writer.write_begin_marker("/**")
            >>> writer.write_literal(Token(TokenCategory.LITERAL, "Hello."))
            >>> writer.write_end_marker("*/")
            >>> writer.build()
            '/**\\n * Hello.\\n */'

    """

    __slots__ = (
        "_block_indent",
        "_max_line_length",
        "_output",
        # Inside a list item, excluding the case where the item contains a
        # nested list we are also inside (unless inside an item of that list)
        "_continuing_list_item_of_innermost_list",
        "_continuing_list_item_count",
        "_continuing_list_count",
        "_remaining_on_line",
        "_at_start_of_line",
        "_requested_whitespace",
    )

    def __init__(self, block_indent: int, max_line_length: int = MAX_LINE_LENGTH) -> None:
        """Initialize writer for one comment.

        Args:
            block_indent: Column of the owning declaration
            max_line_length: Width budget for every rendered line
        """
        self._block_indent = block_indent
        self._max_line_length = max_line_length
        self._output = StringBuilder()
        self._continuing_list_item_of_innermost_list = False
        self._continuing_list_item_count = NestingCounter()
        self._continuing_list_count = NestingCounter()
        self._remaining_on_line = 0
        self._at_start_of_line = False
        self._requested_whitespace = WhitespaceRequest.NONE

    # =========================================================================
    # Requests
    # =========================================================================

    def request_whitespace(self, kind: WhitespaceRequest = WhitespaceRequest.WHITESPACE) -> None:
        """Request whitespace between the previous and the next written token.

        The request may be honored, or overridden by a request for more
        significant whitespace, like a newline.
        """
        self._requested_whitespace = max(self._requested_whitespace, kind)

    def request_newline(self) -> None:
        self.request_whitespace(WhitespaceRequest.NEWLINE)

    def request_blank_line(self) -> None:
        self.request_whitespace(WhitespaceRequest.BLANK_LINE)

    @property
    def requested_whitespace(self) -> WhitespaceRequest:
        return self._requested_whitespace

    # =========================================================================
    # Writes
    # =========================================================================

    def write_begin_marker(self, text: str) -> None:
        # The enclosing formatter indents the first line.
        self._output.append(text)

    def write_end_marker(self, text: str) -> None:
        self._output.append_line()
        self._output.append_spaces(self._block_indent + 1)
        self._output.append(text)

    def write_list_item_open(self, token: Token) -> None:
        self.request_newline()

        if self._continuing_list_item_of_innermost_list:
            self._continuing_list_item_of_innermost_list = False
            self._continuing_list_item_count.decrement_if_positive()
        self._write_token(token)
        self._continuing_list_item_of_innermost_list = True
        self._continuing_list_item_count.increment()

    def write_header_open(self, token: Token) -> None:
        self.request_newline()
        self._write_token(token)

    def write_paragraph_open(self, token: Token) -> None:
        self.request_newline()
        self._write_token(token)

    def write_blockquote_open_or_close(self, token: Token) -> None:
        self.request_blank_line()
        self._write_token(token)
        self.request_blank_line()

    def write_pre_open(self, token: Token) -> None:
        self.request_blank_line()
        self._write_token(token)

    def write_pre_close(self, token: Token) -> None:
        self._write_token(token)
        self.request_blank_line()

    def write_code_open(self, token: Token) -> None:
        self._write_token(token)

    def write_code_close(self, token: Token) -> None:
        self._write_token(token)

    def write_table_open(self, token: Token) -> None:
        self.request_blank_line()
        self._write_token(token)

    def write_table_close(self, token: Token) -> None:
        self._write_token(token)
        self.request_blank_line()

    def write_literal(self, token: Token) -> None:
        self._write_token(token)

    def write_forced_newline(self) -> None:
        """Break the line without the auto-indent that list depth adds."""
        self._write_newline(auto_indent=False)

    def build(self) -> str:
        return self._output.build()

    # =========================================================================
    # Line filling
    # =========================================================================

    def _write_token(self, token: Token) -> None:
        if self._requested_whitespace is WhitespaceRequest.BLANK_LINE:
            # A blank line terminates all lists
            if self._continuing_list_item_count.is_positive:
                self._continuing_list_count.reset()
                self._continuing_list_item_count.reset()
            self._write_blank_line()
            self._requested_whitespace = WhitespaceRequest.NONE
        elif self._requested_whitespace is WhitespaceRequest.NEWLINE:
            self._write_newline()
            self._requested_whitespace = WhitespaceRequest.NONE
        need_whitespace = self._requested_whitespace is WhitespaceRequest.WHITESPACE

        # At the start of a line a newline would not help, or would only
        # separate "- " from a very long word.
        if not self._at_start_of_line and token.length + need_whitespace > self._remaining_on_line:
            self._write_newline()
        if not self._at_start_of_line and need_whitespace:
            self._output.append(" ")
            self._remaining_on_line -= 1

        self._output.append(token.text)

        if token.category not in START_OF_LINE_CATEGORIES:
            self._at_start_of_line = False

        self._remaining_on_line -= token.length
        self._requested_whitespace = WhitespaceRequest.NONE

    def _write_blank_line(self) -> None:
        self._output.append_line()
        self._output.append_spaces(self._block_indent + 1)
        self._output.append(DECORATION_MARKER)
        self._write_newline()

    def _write_newline(self, auto_indent: bool = True) -> None:
        self._output.append_line()
        self._output.append_spaces(self._block_indent + 1)
        self._output.append(DECORATION_MARKER)
        self._output.append_spaces(1)
        self._remaining_on_line = self._max_line_length - self._block_indent - _CONTINUATION_PREFIX_WIDTH
        if auto_indent:
            inner_indent = self._inner_indent()
            self._output.append_spaces(inner_indent)
            self._remaining_on_line -= inner_indent
        self._at_start_of_line = True

    def _inner_indent(self) -> int:
        return self._continuing_list_item_count.value * 4 + self._continuing_list_count.value * 2
