"""ContextVar-based parse configuration for Rivit.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per parse call (or once per Rivit instance for batches)
and read by the parser in that context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and parallel parses on disjoint inputs never
    observe each other's configuration.

Usage:
    from rivit.config import ParseConfig, parse_config_context
    from rivit.parser import Parser

    with parse_config_context(ParseConfig(list_nesting="depth")):
        lines = Parser(source).parse()

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Literal

from rivit.errors import ConfigError

ListNesting = Literal["compat", "depth"]

LIST_NESTING_MODES: frozenset[str] = frozenset({"compat", "depth"})


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Attributes:
        list_nesting: How list items with three or more dashes are attached.
            "compat" appends them to the current item's sublist without
            moving the current item; "depth" attaches every item to the
            nearest preceding item with a smaller level.
        normalize_newlines: Convert CRLF and lone CR line endings to LF
            before splitting the source into lines.

    """

    list_nesting: ListNesting = "compat"
    normalize_newlines: bool = False

    def __post_init__(self) -> None:
        if self.list_nesting not in LIST_NESTING_MODES:
            raise ConfigError(
                "list_nesting",
                self.list_nesting,
                f"expected one of {sorted(LIST_NESTING_MODES)}",
            )

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "list_nesting": "depth",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.list_nesting
            'depth'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "rivit_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Args:
        config: ParseConfig instance to use for this context.

    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config on exit, even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(list_nesting="depth")):
        ...     lines = Parser("- a\\n--- b").parse()

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "LIST_NESTING_MODES",
    "ListNesting",
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
