"""Zero-floored nesting counter used by the writer for list depth."""

from __future__ import annotations


class NestingCounter:
    """Saturating counter that never drops below zero.

    Under-closed markup (more closes than opens) degrades indentation
    gracefully instead of producing negative indents.

    Usage:
            >>> depth = NestingCounter()
            >>> depth.decrement_if_positive()
            >>> depth.value
            0
            >>> depth.increment()
            >>> depth.is_positive
            True

    """

    __slots__ = ("_value",)

    def __init__(self) -> None:
        self._value = 0

    def increment(self) -> None:
        self._value += 1

    def decrement_if_positive(self) -> None:
        if self._value > 0:
            self._value -= 1

    def reset(self) -> None:
        self._value = 0

    @property
    def value(self) -> int:
        return self._value

    @property
    def is_positive(self) -> bool:
        return self._value > 0

    def __repr__(self) -> str:
        return f"NestingCounter({self._value})"
