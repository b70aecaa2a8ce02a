"""Tests for the raw token classifier."""

from enum import Enum

import pytest

from kdocfmt.classifier import Classifier, classify
from kdocfmt.config import DecorationPolicy, FormatConfig
from kdocfmt.errors import UnexpectedTokenKindError
from kdocfmt.lexer import CommentLexer, RawToken, RawTokenKind
from kdocfmt.tokens import Token, TokenCategory

C = TokenCategory

START = RawToken(RawTokenKind.START, "/**")
END = RawToken(RawTokenKind.END, "*/")
AST = RawToken(RawTokenKind.LEADING_ASTERISK, "*")
NL = RawToken(RawTokenKind.WHITE_SPACE, "\n ")


def text(value: str) -> RawToken:
    return RawToken(RawTokenKind.TEXT, value)


def categories(tokens: list[Token]) -> list[TokenCategory]:
    return [t.category for t in tokens]


def literals(tokens: list[Token]) -> list[str]:
    return [t.text for t in tokens if t.category is C.LITERAL]


class TestMarkers:
    """Begin and end markers."""

    def test_minimal(self) -> None:
        assert categories(classify([START, END])) == [C.BEGIN_MARKER, C.END_MARKER]

    def test_marker_text_preserved(self) -> None:
        tokens = classify([START, END])
        assert tokens[0].text == "/**"
        assert tokens[-1].text == "*/"

    def test_instance_matches_function(self) -> None:
        raw = [START, text(" a b "), END]
        assert Classifier(FormatConfig()).classify(raw) == classify(raw)

    def test_stops_after_end(self) -> None:
        tokens = classify([START, END, text(" late")])
        assert categories(tokens) == [C.BEGIN_MARKER, C.END_MARKER]


class TestWords:
    """Prose splits into literals separated by whitespace requests."""

    def test_split_on_whitespace(self) -> None:
        tokens = classify([START, text(" Hello   big world "), END])
        assert categories(tokens) == [
            C.BEGIN_MARKER,
            C.LITERAL,
            C.WHITESPACE_REQUEST,
            C.LITERAL,
            C.WHITESPACE_REQUEST,
            C.LITERAL,
            C.WHITESPACE_REQUEST,
            C.END_MARKER,
        ]
        assert literals(tokens) == ["Hello", "big", "world"]

    def test_whitespace_only_text_yields_nothing(self) -> None:
        assert categories(classify([START, text("   "), END])) == [C.BEGIN_MARKER, C.END_MARKER]

    def test_line_break_is_soft(self) -> None:
        tokens = classify([START, NL, AST, text(" a"), NL, AST, text(" b"), NL, END])
        assert C.BLANK_LINE not in categories(tokens)
        assert literals(tokens) == ["a", "b"]

    def test_words_preserved_verbatim(self) -> None:
        tokens = classify([START, text(" x<T>, y!? `z`"), END])
        assert literals(tokens) == ["x<T>,", "y!?", "`z`"]


class TestBlankLines:
    """Paragraph separation."""

    def test_decorated_empty_line(self) -> None:
        raw = [START, NL, AST, text(" Foo"), NL, AST, NL, AST, text(" Bar"), NL, END]
        tokens = classify(raw)
        assert categories(tokens).count(C.BLANK_LINE) == 1
        assert literals(tokens) == ["Foo", "Bar"]

    def test_undecorated_empty_line(self) -> None:
        raw = [START, NL, text(" Foo"), RawToken(RawTokenKind.WHITE_SPACE, "\n\n "), text(" Bar"), NL, END]
        assert categories(classify(raw)).count(C.BLANK_LINE) == 1

    def test_from_lexer(self) -> None:
        raw = CommentLexer("/**\n * Foo\n *\n * Bar\n */").tokenize()
        assert categories(classify(raw)).count(C.BLANK_LINE) == 1


class TestLists:
    """Bullet detection."""

    def test_bullet_at_line_start(self) -> None:
        tokens = classify([START, NL, AST, text(" - one"), NL, END])
        cats = categories(tokens)
        item = cats.index(C.LIST_ITEM_OPEN)
        assert tokens[item].text == ""
        assert tokens[item + 1] == Token(C.LITERAL, "-")

    def test_dash_mid_line_is_literal(self) -> None:
        tokens = classify([START, text(" a - b"), END])
        assert C.LIST_ITEM_OPEN not in categories(tokens)
        assert literals(tokens) == ["a", "-", "b"]

    def test_dash_after_link_is_literal(self) -> None:
        raw = [START, NL, AST, RawToken(RawTokenKind.MARKDOWN_LINK, "[Foo]"), text(" - bar"), END]
        assert C.LIST_ITEM_OPEN not in categories(classify(raw))

    def test_dash_glued_to_word_is_literal(self) -> None:
        tokens = classify([START, NL, AST, text(" -flag"), END])
        assert C.LIST_ITEM_OPEN not in categories(tokens)


class TestTags:
    """Block tags start their own line."""

    def test_tag_after_prose_forces_newline(self) -> None:
        raw = [START, NL, AST, text(" Does it."), NL, AST, RawToken(RawTokenKind.TAG_NAME, "@return"), text(" y"), END]
        cats = categories(classify(raw))
        tag = literals(classify(raw)).index("@return")
        assert C.FORCED_NEWLINE in cats
        assert tag == 2

    def test_tag_right_after_begin_not_forced(self) -> None:
        raw = [START, RawToken(RawTokenKind.TAG_NAME, "@return"), text(" the value "), END]
        assert C.FORCED_NEWLINE not in categories(classify(raw))

    def test_break_before_tags_disabled(self) -> None:
        config = FormatConfig(break_before_tags=False)
        raw = [START, text(" a"), NL, AST, RawToken(RawTokenKind.TAG_NAME, "@see"), END]
        assert C.FORCED_NEWLINE not in categories(classify(raw, config))

    def test_tag_text_is_single_literal(self) -> None:
        raw = [START, RawToken(RawTokenKind.TAG_NAME, "@param"), text(" x"), END]
        assert literals(classify(raw)) == ["@param", "x"]


class TestLinks:
    """Markdown links stay whole."""

    def test_inline_link_single_literal(self) -> None:
        raw = [START, text(" see "), RawToken(RawTokenKind.MARKDOWN_INLINE_LINK, "[a b](http://x)"), END]
        assert literals(classify(raw)) == ["see", "[a b](http://x)"]

    def test_punctuation_after_link_stays_tight(self) -> None:
        raw = [START, RawToken(RawTokenKind.MARKDOWN_LINK, "[Bar]"), text(". next"), END]
        tokens = classify(raw)
        link = tokens.index(Token(C.LITERAL, "[Bar]"))
        assert tokens[link + 1] == Token(C.LITERAL, ".")

    def test_space_after_link_kept(self) -> None:
        raw = [START, RawToken(RawTokenKind.MARKDOWN_LINK, "[Bar]"), text(" next"), END]
        tokens = classify(raw)
        link = tokens.index(Token(C.LITERAL, "[Bar]"))
        assert tokens[link + 1].category is C.WHITESPACE_REQUEST

    def test_space_between_tag_and_link_kept(self) -> None:
        raw = [START, RawToken(RawTokenKind.TAG_NAME, "@see"), text(" "), RawToken(RawTokenKind.MARKDOWN_LINK, "[Foo]"), END]
        assert categories(classify(raw)) == [
            C.BEGIN_MARKER,
            C.LITERAL,
            C.WHITESPACE_REQUEST,
            C.LITERAL,
            C.END_MARKER,
        ]

    def test_space_between_links_kept(self) -> None:
        raw = [
            START,
            RawToken(RawTokenKind.MARKDOWN_LINK, "[Foo]"),
            text(" "),
            RawToken(RawTokenKind.MARKDOWN_LINK, "[Bar]"),
            END,
        ]
        assert categories(classify(raw)) == [
            C.BEGIN_MARKER,
            C.LITERAL,
            C.WHITESPACE_REQUEST,
            C.LITERAL,
            C.END_MARKER,
        ]

    def test_word_glued_to_link_stays_glued(self) -> None:
        raw = [START, text(" x"), RawToken(RawTokenKind.MARKDOWN_LINK, "[Foo]"), END]
        tokens = classify(raw)
        assert categories(tokens) == [C.BEGIN_MARKER, C.LITERAL, C.LITERAL, C.END_MARKER]


class TestCodeFences:
    """Fenced code passes through verbatim."""

    def test_fence_categories(self) -> None:
        raw = CommentLexer("/**\n * ```\n * code()\n * ```\n */").tokenize()
        assert categories(classify(raw)) == [
            C.BEGIN_MARKER,
            C.WHITESPACE_REQUEST,
            C.PRE_OPEN,
            C.FORCED_NEWLINE,
            C.LITERAL,
            C.FORCED_NEWLINE,
            C.PRE_CLOSE,
            C.WHITESPACE_REQUEST,
            C.END_MARKER,
        ]

    def test_code_line_not_split(self) -> None:
        raw = CommentLexer("/**\n * ```\n *   if (a  &&  b) {}\n * ```\n */").tokenize()
        assert "  if (a  &&  b) {}" in literals(classify(raw))

    def test_empty_code_line_is_bare_newline(self) -> None:
        code = RawToken(RawTokenKind.CODE_BLOCK_TEXT, "")
        raw = [START, text("```"), NL, code, NL, text("```"), END]
        cats = categories(classify(raw))
        assert cats == [
            C.BEGIN_MARKER,
            C.PRE_OPEN,
            C.FORCED_NEWLINE,
            C.FORCED_NEWLINE,
            C.PRE_CLOSE,
            C.END_MARKER,
        ]

    def test_fence_info_string_kept(self) -> None:
        raw = [START, NL, AST, text(" ```kotlin"), END]
        assert Token(C.PRE_OPEN, "```kotlin") in classify(raw)


class TestDecorationPolicy:
    """Runs of bare decoration markers."""

    def test_drop_policy_is_default(self) -> None:
        assert FormatConfig().decoration_policy is DecorationPolicy.DROP

    def test_paragraph_break_policy_emits_forced_newlines(self) -> None:
        config = FormatConfig(decoration_policy=DecorationPolicy.PARAGRAPH_BREAK)
        raw = CommentLexer("/**\n * Foo\n *\n * Bar\n */").tokenize()
        cats = categories(classify(raw, config))
        assert C.BLANK_LINE not in cats
        assert cats.count(C.FORCED_NEWLINE) == 2

    def test_paragraph_break_single_marker_is_soft(self) -> None:
        config = FormatConfig(decoration_policy=DecorationPolicy.PARAGRAPH_BREAK)
        raw = CommentLexer("/**\n * Foo\n * Bar\n */").tokenize()
        assert C.FORCED_NEWLINE not in categories(classify(raw, config))

    def test_paragraph_break_after_undecorated_blank_line(self) -> None:
        config = FormatConfig(decoration_policy=DecorationPolicy.PARAGRAPH_BREAK)
        raw = CommentLexer("/**\n * Foo\n\n *\n * Bar\n */").tokenize()
        cats = categories(classify(raw, config))
        assert cats.count(C.BLANK_LINE) == 1
        assert C.FORCED_NEWLINE not in cats

    def test_paragraph_break_after_fence(self) -> None:
        config = FormatConfig(decoration_policy=DecorationPolicy.PARAGRAPH_BREAK)
        raw = CommentLexer("/**\n * ```\n * x\n * ```\n *\n * Bar\n */").tokenize()
        cats = categories(classify(raw, config))
        assert C.FORCED_NEWLINE not in cats[cats.index(C.PRE_CLOSE) :]

    def test_paragraph_break_before_list_item(self) -> None:
        config = FormatConfig(decoration_policy=DecorationPolicy.PARAGRAPH_BREAK)
        raw = CommentLexer("/**\n * Foo\n *\n * - bar\n */").tokenize()
        cats = categories(classify(raw, config))
        assert cats.count(C.FORCED_NEWLINE) == 1
        assert cats.index(C.FORCED_NEWLINE) < cats.index(C.LIST_ITEM_OPEN)


class TestUnexpectedKind:
    """Unknown raw kinds abort classification."""

    def test_foreign_kind_raises(self) -> None:
        class Foreign(Enum):
            BOGUS = 1

        raw = [START, RawToken(Foreign.BOGUS, "??"), END]  # type: ignore[arg-type]
        with pytest.raises(UnexpectedTokenKindError) as exc_info:
            classify(raw)
        assert exc_info.value.kind is Foreign.BOGUS
        assert exc_info.value.text == "??"
