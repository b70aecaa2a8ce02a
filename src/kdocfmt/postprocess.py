"""Postprocessing of rendered comments.

Only whitespace layout changes here; words are never touched.
"""

from __future__ import annotations

import re

from kdocfmt.config import MAX_LINE_LENGTH

# "/**", at most one "* content" line, then "*/". The content line may be
# missing or empty.
_ONE_CONTENT_LINE_PATTERN = re.compile(r" */\*\*(?:\n *\*(?: (.*))?)?\n *\*/")

EMPTY_COMMENT = "/** */"

# Length of "/**  */": delimiters plus the spaces around one-line content.
ONE_LINER_DELIMITER_WIDTH = len("/**  */")


def strip_trailing_whitespace(text: str) -> str:
    """Remove trailing spaces from every line (blank lines render as `` *``)."""
    return "\n".join(line.rstrip() for line in text.split("\n"))


def make_single_line_if_possible(
    block_indent: int, text: str, max_line_length: int = MAX_LINE_LENGTH
) -> str:
    """Collapse a rendered comment to one line when it fits.

    Args:
        block_indent: Column of the owning declaration
        text: Rendered multi-line comment
        max_line_length: Width budget

    Returns:
        ``/** */`` for an empty comment, ``/** content */`` if the single
        content line fits, otherwise the input unchanged.

    Example:
        >>> make_single_line_if_possible(2, "/**\\n   * Foo.\\n   */")
        '/** Foo. */'
    """
    match = _ONE_CONTENT_LINE_PATTERN.fullmatch(text)
    if match is None:
        return text
    content = match.group(1) or ""
    if not content:
        return EMPTY_COMMENT
    if len(content) <= max_line_length - ONE_LINER_DELIMITER_WIDTH - block_indent:
        return f"/** {content} */"
    return text


def postprocess(block_indent: int, text: str, max_line_length: int = MAX_LINE_LENGTH) -> str:
    """Apply trailing-whitespace cleanup then the one-line collapse."""
    return make_single_line_if_possible(block_indent, strip_trailing_whitespace(text), max_line_length)
