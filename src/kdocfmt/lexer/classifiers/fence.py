"""Fenced code classifier mixin."""

from __future__ import annotations

from collections.abc import Iterator

from kdocfmt.lexer.modes import FENCE_MARKER
from kdocfmt.lexer.raw import RawToken, RawTokenKind


class FenceClassifierMixin:
    """Mixin providing fenced code block classification."""

    def _is_fence_line(self, content: str) -> bool:
        """Check whether a line's content opens or closes a code fence.

        Args:
            content: Line content after the decoration marker

        Returns:
            True if the stripped content starts with three backticks.
        """
        return content.lstrip().startswith(FENCE_MARKER)

    def _scan_code_line(self, content: str, decorated: bool) -> Iterator[RawToken]:
        """Yield the verbatim code token for a line inside a fence.

        The conventional single space after ``*`` is not part of the code;
        any further indentation is. Empty lines still yield a token so
        blank lines inside code survive.

        Args:
            content: Line content after the decoration marker
            decorated: Whether the line carried a decoration marker
        """
        if decorated and content.startswith(" "):
            content = content[1:]
        yield RawToken(RawTokenKind.CODE_BLOCK_TEXT, content.rstrip())
