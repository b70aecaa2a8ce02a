"""ContextVar-based format configuration for kdocfmt.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per CommentFormatter call and read by the classifier,
writer and postprocessor in that context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    # Through the facade
    text = format_comment(raw, 4, config=FormatConfig(max_line_length=80))

    # Or scope a config for several calls
    with format_config_context(FormatConfig(decoration_policy=DecorationPolicy.PARAGRAPH_BREAK)):
        text = format_comment(raw, 4)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from enum import Enum

# Column budget for every rendered line.
MAX_LINE_LENGTH = 100


class DecorationPolicy(Enum):
    """What leading ``*`` decoration markers contribute to the token stream.

    - DROP: markers are discarded; empty lines are detected from the
      whitespace that follows a lone marker.
    - PARAGRAPH_BREAK: markers are counted; two or more in a row with no
      content between them force a paragraph break.

    """

    DROP = "drop"
    PARAGRAPH_BREAK = "paragraph_break"


@dataclass(frozen=True, slots=True)
class FormatConfig:
    """Immutable format configuration.

    Note: block_indent is intentionally excluded. It is per-comment state
    supplied by the enclosing formatter, not configuration.

    Attributes:
        max_line_length: Width budget for rendered lines
        decoration_policy: How leading decoration markers are treated
        break_before_tags: Start every block tag (``@param``...) on its own line

    """

    max_line_length: int = MAX_LINE_LENGTH
    decoration_policy: DecorationPolicy = DecorationPolicy.DROP
    break_before_tags: bool = True

    def __post_init__(self) -> None:
        # Narrower budgets leave no room for "/**  */" plus a word.
        if self.max_line_length < 8:
            raise ValueError(f"max_line_length must be at least 8, got {self.max_line_length}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "FormatConfig":
        """Create FormatConfig from dictionary.

        Useful for host integration where settings come from an external
        source (editorconfig, TOML, JSON). Unknown keys are silently
        ignored; ``decoration_policy`` may be given by value or by name.

        Args:
            config_dict: Dictionary with config values. Keys should match
                FormatConfig attribute names.

        Returns:
            New FormatConfig instance with values from dict.

        Example:
            >>> config = FormatConfig.from_dict({
            ...     "max_line_length": 80,
            ...     "decoration_policy": "paragraph_break",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.decoration_policy
            <DecorationPolicy.PARAGRAPH_BREAK: 'paragraph_break'>

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        policy = filtered.get("decoration_policy")
        if isinstance(policy, str):
            try:
                filtered["decoration_policy"] = DecorationPolicy(policy.lower())
            except ValueError:
                filtered["decoration_policy"] = DecorationPolicy[policy.upper()]
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: FormatConfig = FormatConfig()

_format_config: ContextVar[FormatConfig] = ContextVar(
    "format_config",
    default=_DEFAULT_CONFIG,
)


def get_format_config() -> FormatConfig:
    """Get current format configuration (thread-local).

    Returns:
        The active FormatConfig for this thread/context.

    """
    return _format_config.get()


def set_format_config(config: FormatConfig) -> None:
    """Set format configuration for current context.

    Args:
        config: FormatConfig instance to use for this context.

    """
    _format_config.set(config)


def reset_format_config() -> None:
    """Reset to the default configuration singleton."""
    _format_config.set(_DEFAULT_CONFIG)


@contextmanager
def format_config_context(config: FormatConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: FormatConfig to use within the context.

    Yields:
        None

    Example:
        >>> with format_config_context(FormatConfig(max_line_length=80)):
        ...     text = format_comment(raw, 0)
        >>> # Previous config restored here

    Thread Safety:
        Only affects the current thread's context. Properly restores the
        previous config even if an exception is raised.

    """
    previous = _format_config.get()
    _format_config.set(config)
    try:
        yield
    finally:
        _format_config.set(previous)


__all__ = [
    "MAX_LINE_LENGTH",
    "DecorationPolicy",
    "FormatConfig",
    "get_format_config",
    "set_format_config",
    "reset_format_config",
    "format_config_context",
]
