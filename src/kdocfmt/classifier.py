"""Raw token classifier.

Normalizes the lexer's raw token stream into the writer's fixed token
vocabulary. Words are split apart here so that the writer can wrap between
any two of them; tag names, links and code lines stay whole.

Thread Safety:
Classifier instances are single-use. Create one per comment.

"""

from __future__ import annotations

from collections.abc import Iterable

from kdocfmt.config import DecorationPolicy, FormatConfig, get_format_config
from kdocfmt.errors import UnexpectedTokenKindError
from kdocfmt.lexer.modes import FENCE_MARKER
from kdocfmt.lexer.raw import RawToken, RawTokenKind
from kdocfmt.tokens import Token, TokenCategory
from kdocfmt.utils.logger import get_logger

logger = get_logger(__name__)

LIST_ITEM_BULLET = "-"

_WHITESPACE_TOKEN = Token(TokenCategory.WHITESPACE_REQUEST, " ")
_BLANK_LINE_TOKEN = Token(TokenCategory.BLANK_LINE, "")
_FORCED_NEWLINE_TOKEN = Token(TokenCategory.FORCED_NEWLINE, "")

# Tokens after which the next line break is already taken care of.
_BREAKING_CATEGORIES = frozenset(
    {
        TokenCategory.BEGIN_MARKER,
        TokenCategory.BLANK_LINE,
        TokenCategory.FORCED_NEWLINE,
        TokenCategory.PRE_CLOSE,
    }
)

# Tokens after which the writer already holds a blank line request.
_BLANK_LINE_PENDING_CATEGORIES = frozenset(
    {
        TokenCategory.BLANK_LINE,
        TokenCategory.PRE_CLOSE,
    }
)

# Raw kinds after which a TEXT run starts a new line of the comment.
_LINE_START_KINDS = frozenset(
    {
        None,
        RawTokenKind.START,
        RawTokenKind.LEADING_ASTERISK,
        RawTokenKind.WHITE_SPACE,
    }
)


class Classifier:
    """Turns raw lexer tokens into writer tokens.

    Usage:
            >>> from kdocfmt.lexer import CommentLexer
            >>> tokens = Classifier().classify(CommentLexer("/**  Foo.   */").tokenize())
            >>> [t.category.name for t in tokens]
            ['BEGIN_MARKER', 'LITERAL', 'WHITESPACE_REQUEST', 'END_MARKER']

    """

    __slots__ = (
        "_config",
        "_tokens",
        "_previous_kind",
        "_pending_markers",  # Decoration markers since the last content token
        "_in_code",
    )

    def __init__(self, config: FormatConfig | None = None) -> None:
        self._config = config or get_format_config()
        self._tokens: list[Token] = []
        self._previous_kind: RawTokenKind | None = None
        self._pending_markers = 0
        self._in_code = False

    def classify(self, raw_tokens: Iterable[RawToken]) -> list[Token]:
        """Classify a raw token stream.

        Stops after the first END raw token; anything after it is ignored.

        Args:
            raw_tokens: Raw tokens from a comment lexer

        Returns:
            Normalized token list ending with the END_MARKER token (if the
            stream contained one).

        Raises:
            UnexpectedTokenKindError: A raw token kind outside the vocabulary.
        """
        for raw in raw_tokens:
            self._process(raw)
            if raw.kind is RawTokenKind.END:
                break
            self._previous_kind = raw.kind

        logger.debug("Classified comment into %d tokens", len(self._tokens))
        return self._tokens

    # =========================================================================
    # Dispatch
    # =========================================================================

    def _process(self, raw: RawToken) -> None:
        kind = raw.kind
        if kind is RawTokenKind.START:
            self._emit(TokenCategory.BEGIN_MARKER, raw.text)
        elif kind is RawTokenKind.END:
            self._emit(TokenCategory.END_MARKER, raw.text)
        elif kind is RawTokenKind.LEADING_ASTERISK:
            if self._config.decoration_policy is DecorationPolicy.PARAGRAPH_BREAK and not self._in_code:
                self._pending_markers += 1
        elif kind is RawTokenKind.WHITE_SPACE:
            self._process_whitespace(raw.text)
        elif kind is RawTokenKind.TEXT:
            self._process_text(raw.text)
        elif kind is RawTokenKind.TAG_NAME:
            self._process_tag(raw.text)
        elif kind is RawTokenKind.CODE_BLOCK_TEXT:
            self._process_code_line(raw.text)
        elif kind in (RawTokenKind.MARKDOWN_INLINE_LINK, RawTokenKind.MARKDOWN_LINK):
            self._flush_markers(TokenCategory.LITERAL)
            self._emit(TokenCategory.LITERAL, raw.text)
        else:
            raise UnexpectedTokenKindError(kind, raw.text)

    def _process_whitespace(self, text: str) -> None:
        if self._in_code:
            return
        marker_policy = self._config.decoration_policy is DecorationPolicy.PARAGRAPH_BREAK
        separates_paragraphs = text.count("\n") >= 2 or (
            not marker_policy and self._previous_kind is RawTokenKind.LEADING_ASTERISK
        )
        if separates_paragraphs:
            self._tokens.append(_BLANK_LINE_TOKEN)
        else:
            self._tokens.append(_WHITESPACE_TOKEN)

    def _process_text(self, text: str) -> None:
        starts_line = self._previous_kind in _LINE_START_KINDS
        stripped = text.strip()
        if starts_line and stripped.startswith(FENCE_MARKER):
            self._process_fence(stripped)
            return

        # Space between a tag or link and whatever follows it
        if text[:1].isspace() and self._last_category() is TokenCategory.LITERAL:
            self._tokens.append(_WHITESPACE_TOKEN)

        words = text.split()
        if not words:
            return

        if starts_line and words[0] == LIST_ITEM_BULLET:
            self._flush_markers(TokenCategory.LIST_ITEM_OPEN)
            self._emit(TokenCategory.LIST_ITEM_OPEN, "")
        else:
            self._flush_markers(TokenCategory.LITERAL)

        for i, word in enumerate(words):
            if i:
                self._tokens.append(_WHITESPACE_TOKEN)
            self._emit(TokenCategory.LITERAL, word)
        # A word glued to a following link stays glued
        if text[-1].isspace():
            self._tokens.append(_WHITESPACE_TOKEN)

    def _process_fence(self, fence: str) -> None:
        if self._in_code:
            self._tokens.append(_FORCED_NEWLINE_TOKEN)
            self._emit(TokenCategory.PRE_CLOSE, fence)
        else:
            self._flush_markers(TokenCategory.PRE_OPEN)
            self._emit(TokenCategory.PRE_OPEN, fence)
        self._in_code = not self._in_code

    def _process_tag(self, text: str) -> None:
        self._flush_markers(TokenCategory.LITERAL)
        if self._config.break_before_tags and self._last_category() not in _BREAKING_CATEGORIES:
            self._tokens.append(_FORCED_NEWLINE_TOKEN)
        self._emit(TokenCategory.LITERAL, text)

    def _process_code_line(self, text: str) -> None:
        self._tokens.append(_FORCED_NEWLINE_TOKEN)
        if text:
            self._emit(TokenCategory.LITERAL, text)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _emit(self, category: TokenCategory, text: str) -> None:
        self._tokens.append(Token(category, text))

    def _last_category(self) -> TokenCategory | None:
        """Category of the last token that is not a plain whitespace request."""
        for token in reversed(self._tokens):
            if token.category is not TokenCategory.WHITESPACE_REQUEST:
                return token.category
        return None

    def _flush_markers(self, next_category: TokenCategory) -> None:
        """Turn a run of decoration markers into forced paragraph breaks.

        Two forced newlines precede ordinary content. A list item requests
        its own line, so one suffices; a code fence requests its own blank
        line, so none is needed. Nor is any needed when a blank line is
        already on its way.
        """
        if self._pending_markers >= 2 and self._last_category() not in _BLANK_LINE_PENDING_CATEGORIES:
            if next_category is TokenCategory.LIST_ITEM_OPEN:
                count = 1
            elif next_category is TokenCategory.PRE_OPEN:
                count = 0
            else:
                count = 2
            self._tokens.extend([_FORCED_NEWLINE_TOKEN] * count)
        self._pending_markers = 0


def classify(raw_tokens: Iterable[RawToken], config: FormatConfig | None = None) -> list[Token]:
    """Classify raw tokens with a fresh Classifier.

    Args:
        raw_tokens: Raw tokens from a comment lexer
        config: Format configuration (active context config if None)

    Returns:
        Normalized token list.
    """
    return Classifier(config).classify(raw_tokens)
