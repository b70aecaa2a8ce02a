"""Exception classes for kdocfmt.

Both concrete errors signal a contract violation by the upstream lexer or an
internal bug, never a problem with the comment's own markup. Malformed
markup is rendered as-is.
"""

from __future__ import annotations


class KdocfmtError(Exception):
    """Base exception for all kdocfmt errors.

    Subclass this for specific error categories.
    """

    pass


class UnexpectedTokenKindError(KdocfmtError):
    """The classifier received a raw token outside its vocabulary.

    Formatting of the current comment is aborted.
    """

    def __init__(self, kind: object, text: str = "") -> None:
        """Initialize with the offending raw token.

        Args:
            kind: The raw token kind that was not recognized
            text: The raw token text (shortened in the message)
        """
        self.kind = kind
        self.text = text

        shown = text if len(text) <= 20 else text[:17] + "..."
        super().__init__(f"Unexpected raw token kind {kind!r} ({shown!r})")


class MissingEndMarkerError(KdocfmtError):
    """The render driver ran out of tokens before writing the end marker.

    Indicates the classifier broke its output invariant.
    """

    def __init__(self, token_count: int) -> None:
        """Initialize missing end marker error.

        Args:
            token_count: Number of tokens dispatched before exhaustion
        """
        self.token_count = token_count
        super().__init__(f"Token sequence ended without an end marker after {token_count} tokens")
