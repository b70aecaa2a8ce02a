"""
kdocfmt: Width-bounded formatter for KDoc/Javadoc comments

Reformats ``/** ... */`` documentation comments into a canonical layout:
one ``*`` per continuation line, greedy wrapping at a fixed width, list
items indented, code fences kept verbatim, and short comments collapsed to
one line. Words, tags, links and code are never changed.

Quick Start:
    >>> from kdocfmt import format_comment
    >>> format_comment("/**\\n   *   Returns the   answer.\\n   */", 2)
    '/** Returns the answer. */'

    >>> # Bind a configuration once
    >>> from kdocfmt import CommentFormatter, FormatConfig
    >>> fmt = CommentFormatter(FormatConfig(max_line_length=80))
    >>> fmt("/** Hello */", 4)
    '/** Hello */'

Pipeline:
    raw text → CommentLexer → Classifier → render() / KDocWriter → postprocess()
"""

from kdocfmt.classifier import Classifier, classify
from kdocfmt.config import (
    MAX_LINE_LENGTH,
    DecorationPolicy,
    FormatConfig,
    format_config_context,
    get_format_config,
    reset_format_config,
    set_format_config,
)
from kdocfmt.counter import NestingCounter
from kdocfmt.errors import KdocfmtError, MissingEndMarkerError, UnexpectedTokenKindError
from kdocfmt.formatter import CommentFormatter, format_comment, tokenize_comment
from kdocfmt.lexer import CommentLexer, RawToken, RawTokenKind
from kdocfmt.postprocess import make_single_line_if_possible, postprocess
from kdocfmt.render import render
from kdocfmt.tokens import Token, TokenCategory, WhitespaceRequest
from kdocfmt.writer import KDocWriter

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "format_comment",
    "tokenize_comment",
    "CommentFormatter",
    # Configuration
    "MAX_LINE_LENGTH",
    "DecorationPolicy",
    "FormatConfig",
    "format_config_context",
    "get_format_config",
    "reset_format_config",
    "set_format_config",
    # Pipeline stages
    "CommentLexer",
    "Classifier",
    "classify",
    "KDocWriter",
    "render",
    "postprocess",
    "make_single_line_if_possible",
    # Data model
    "NestingCounter",
    "RawToken",
    "RawTokenKind",
    "Token",
    "TokenCategory",
    "WhitespaceRequest",
    # Errors
    "KdocfmtError",
    "MissingEndMarkerError",
    "UnexpectedTokenKindError",
]
