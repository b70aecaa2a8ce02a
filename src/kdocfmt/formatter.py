"""Formatting entry points.

``format_comment`` is a pure function: every call builds its own lexer,
classifier and writer, so nothing is shared between calls.
"""

from __future__ import annotations

from kdocfmt.classifier import Classifier
from kdocfmt.config import FormatConfig, format_config_context, get_format_config
from kdocfmt.errors import KdocfmtError
from kdocfmt.lexer import CommentLexer
from kdocfmt.postprocess import postprocess
from kdocfmt.render import render
from kdocfmt.tokens import Token
from kdocfmt.utils.logger import get_logger

logger = get_logger(__name__)


def tokenize_comment(raw_text: str, *, config: FormatConfig | None = None) -> list[Token]:
    """Lex and classify a comment without rendering it.

    Args:
        raw_text: Comment text starting with ``/**`` and ending with ``*/``
        config: Format configuration (active context config if None)

    Returns:
        Normalized token list.
    """
    return Classifier(config).classify(CommentLexer(raw_text).tokenize())


def format_comment(raw_text: str, block_indent: int, *, config: FormatConfig | None = None) -> str:
    """Format a documentation comment.

    Args:
        raw_text: Comment text starting with ``/**`` and ending with ``*/``
        block_indent: Column of the owning declaration (>= 0)
        config: Format configuration (active context config if None)

    Returns:
        The formatted comment, starting with ``/**`` and ending with ``*/``.

    Raises:
        ValueError: block_indent is negative.
        UnexpectedTokenKindError: The lexer produced an unknown token kind.
        MissingEndMarkerError: The token stream had no end marker.

    Example:
        >>> format_comment("/**  Foo.   */", 2)
        '/** Foo. */'
    """
    if block_indent < 0:
        raise ValueError(f"block_indent must be >= 0, got {block_indent}")
    config = config or get_format_config()

    tokens = tokenize_comment(raw_text, config=config)
    rendered = render(tokens, block_indent, config.max_line_length)
    result = postprocess(block_indent, rendered, config.max_line_length)
    if "\n" in rendered and "\n" not in result:
        logger.debug("Collapsed comment to a single line (%d chars)", len(result))
    return result


class CommentFormatter:
    """Reusable formatter bound to one configuration.

    Usage:
        >>> fmt = CommentFormatter(FormatConfig(max_line_length=80))
        >>> fmt("/** Hello */", 4)
        '/** Hello */'

    Thread Safety:
        Holds only an immutable config. Safe to share between threads.

    """

    __slots__ = ("_config",)

    def __init__(self, config: FormatConfig | None = None) -> None:
        self._config = config or get_format_config()

    @property
    def config(self) -> FormatConfig:
        return self._config

    def __call__(self, raw_text: str, block_indent: int) -> str:
        return self.format(raw_text, block_indent)

    def format(self, raw_text: str, block_indent: int) -> str:
        """Format one comment with this formatter's config."""
        with format_config_context(self._config):
            return format_comment(raw_text, block_indent, config=self._config)

    def format_or_original(self, raw_text: str, block_indent: int) -> str:
        """Format one comment, returning it unchanged if formatting fails.

        For hosts that would rather keep a comment as written than abort
        the whole file. Failures are logged at WARNING.
        """
        try:
            return self.format(raw_text, block_indent)
        except KdocfmtError as e:
            logger.warning("Leaving comment unformatted: %s", e)
            return raw_text
