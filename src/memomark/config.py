"""ContextVar-based parse configuration for memomark.

Provides context-local configuration using Python's ContextVars (PEP 567).
The block scanner reads the active config at construction time, so callers
never thread options through every function.

Thread Safety:
    Each thread and asyncio task has its own ContextVar storage,
    so concurrent parses with different settings never interfere.

Usage:
    from memomark.config import ParseConfig, parse_config_context

    with parse_config_context(ParseConfig(task_lists_enabled=False)):
        doc = parse_document("- [x] stays a bullet")

    # Or for a single call
    doc = parse_document(text, config=ParseConfig(preserve_blank_lines=False))

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Attributes:
        task_lists_enabled: Recognise ``- [ ]`` / ``- [x]`` lines as task items.
            When disabled they parse as plain bullets with the checkbox kept
            in the item text.
        preserve_blank_lines: Emit a top-level LineBreak for every blank line
            so the serializer can restore paragraph spacing. When disabled,
            blank lines only end the current paragraph.

    """

    task_lists_enabled: bool = True
    preserve_blank_lines: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "ParseConfig":
        """Create ParseConfig from a dictionary.

        Unknown keys are ignored so workspace settings can carry extra
        entries.

        Example:
            >>> ParseConfig.from_dict({"task_lists_enabled": False, "x": 1})
            ParseConfig(task_lists_enabled=False, preserve_blank_lines=True)

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "memomark_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get the parse configuration active in this context."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set the parse configuration for the current context."""
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset the current context to the default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if the body raises.

    Example:
        >>> with parse_config_context(ParseConfig(task_lists_enabled=False)):
        ...     get_parse_config().task_lists_enabled
        False

    """
    token = _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.reset(token)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
]
