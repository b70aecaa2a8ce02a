"""Lexer operating modes and delimiter constants."""

from __future__ import annotations

from enum import Enum, auto


class LexerMode(Enum):
    """Lexer operating modes.

    The lexer switches between modes based on context:
    - PROSE: Ordinary comment text, scanned for tags and links
    - CODE_FENCE: Inside a ``` fenced code block, lines are verbatim

    """

    PROSE = auto()
    CODE_FENCE = auto()


OPEN_DELIMITER = "/**"
CLOSE_DELIMITER = "*/"
DECORATION_MARKER = "*"
FENCE_MARKER = "```"
