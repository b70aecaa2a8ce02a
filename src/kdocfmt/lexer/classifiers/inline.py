"""Prose classifier mixin: block tags, markdown links and plain text."""

from __future__ import annotations

from collections.abc import Iterator

from kdocfmt.lexer.raw import RawToken, RawTokenKind


class InlineClassifierMixin:
    """Mixin providing prose line classification."""

    def _scan_prose(self, content: str) -> Iterator[RawToken]:
        """Yield raw tokens for one line of prose.

        A block tag is only recognized at the start of the line's content.
        Whitespace-only content yields nothing.

        Args:
            content: Line content after the decoration marker
        """
        stripped = content.lstrip()
        if not stripped:
            return

        tag_len = self._tag_name_length(stripped)
        if tag_len:
            yield RawToken(RawTokenKind.TAG_NAME, stripped[:tag_len])
            content = stripped[tag_len:]

        yield from self._scan_links(content)

    def _tag_name_length(self, content: str) -> int:
        """Length of a leading ``@tag`` in content, or 0 if there is none."""
        if len(content) < 2 or content[0] != "@" or not content[1].isalpha():
            return 0
        end = 2
        while end < len(content) and (content[end].isalnum() or content[end] == "_"):
            end += 1
        return end

    def _scan_links(self, content: str) -> Iterator[RawToken]:
        """Split content into TEXT runs and markdown link tokens.

        ``[label](target)`` is an inline link; ``[label]`` and
        ``[label][ref]`` are reference links. An unclosed bracket is text.
        """
        pos = 0
        text_start = 0
        content_len = len(content)
        while pos < content_len:
            if content[pos] != "[":
                pos += 1
                continue
            link_end, kind = self._match_link(content, pos)
            if link_end == -1:
                pos += 1
                continue
            if text_start < pos:
                yield RawToken(RawTokenKind.TEXT, content[text_start:pos])
            yield RawToken(kind, content[pos:link_end])
            pos = text_start = link_end

        if text_start < content_len:
            yield RawToken(RawTokenKind.TEXT, content[text_start:])

    def _match_link(self, content: str, start: int) -> tuple[int, RawTokenKind]:
        """Find the end of a link starting at ``content[start] == "["``.

        Returns:
            (end position, kind), or (-1, TEXT) when no link starts here.
        """
        label_end = content.find("]", start + 1)
        if label_end == -1 or label_end == start + 1:
            return -1, RawTokenKind.TEXT

        after = label_end + 1
        if after < len(content) and content[after] == "(":
            target_end = content.find(")", after + 1)
            if target_end != -1:
                return target_end + 1, RawTokenKind.MARKDOWN_INLINE_LINK
        if after < len(content) and content[after] == "[":
            ref_end = content.find("]", after + 1)
            if ref_end != -1:
                return ref_end + 1, RawTokenKind.MARKDOWN_LINK
        return after, RawTokenKind.MARKDOWN_LINK
