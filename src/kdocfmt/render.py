"""Render driver: feeds a token sequence to a KDocWriter.

The category → writer-operation table is built once at module load and
checked against TokenCategory, so adding a category without a handler fails
at import rather than being skipped at render time.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeAlias

from kdocfmt.config import MAX_LINE_LENGTH
from kdocfmt.errors import MissingEndMarkerError
from kdocfmt.tokens import Token, TokenCategory, WhitespaceRequest
from kdocfmt.writer import KDocWriter

WriteFn: TypeAlias = Callable[[KDocWriter, Token], None]

_DISPATCH: dict[TokenCategory, WriteFn] = {
    TokenCategory.BEGIN_MARKER: lambda w, t: w.write_begin_marker(t.text),
    TokenCategory.END_MARKER: lambda w, t: w.write_end_marker(t.text),
    TokenCategory.LIST_ITEM_OPEN: KDocWriter.write_list_item_open,
    TokenCategory.HEADER_OPEN: KDocWriter.write_header_open,
    TokenCategory.PARAGRAPH_OPEN: KDocWriter.write_paragraph_open,
    TokenCategory.PRE_OPEN: KDocWriter.write_pre_open,
    TokenCategory.PRE_CLOSE: KDocWriter.write_pre_close,
    TokenCategory.CODE_OPEN: KDocWriter.write_code_open,
    TokenCategory.CODE_CLOSE: KDocWriter.write_code_close,
    TokenCategory.TABLE_OPEN: KDocWriter.write_table_open,
    TokenCategory.TABLE_CLOSE: KDocWriter.write_table_close,
    TokenCategory.BLANK_LINE: lambda w, t: w.request_blank_line(),
    TokenCategory.WHITESPACE_REQUEST: lambda w, t: w.request_whitespace(WhitespaceRequest.WHITESPACE),
    TokenCategory.FORCED_NEWLINE: lambda w, t: w.write_forced_newline(),
    TokenCategory.LITERAL: KDocWriter.write_literal,
}

_missing = set(TokenCategory) - _DISPATCH.keys()
if _missing:
    raise RuntimeError(f"No writer operation for token categories: {sorted(c.name for c in _missing)}")


def render(tokens: Iterable[Token], block_indent: int, max_line_length: int = MAX_LINE_LENGTH) -> str:
    """Render a token sequence into a comment block.

    Args:
        tokens: Classified tokens, beginning with BEGIN_MARKER
        block_indent: Column of the owning declaration
        max_line_length: Width budget for every rendered line

    Returns:
        The rendered multi-line comment. Tokens after END_MARKER are
        never examined.

    Raises:
        MissingEndMarkerError: The sequence ran out before an END_MARKER.
    """
    writer = KDocWriter(block_indent, max_line_length)
    count = 0
    for token in tokens:
        count += 1
        _DISPATCH[token.category](writer, token)
        if token.category is TokenCategory.END_MARKER:
            return writer.build()
    raise MissingEndMarkerError(count)
