"""ContextVar-based parse configuration for Templar.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The lexer reads the raw-text tag set and the parser reads the void tag set
from the active config whenever the caller does not pass them explicitly.

Thread Safety:
    ContextVars are thread-local. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from templar.config import ParseConfig, parse_config_context

    with parse_config_context(ParseConfig(raw_text_elements=frozenset({"pre"}))):
        root = parse_template(["<pre><b>raw</b></pre>"])

"""

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any

from templar.elements import RAW_TEXT_ELEMENTS, VOID_ELEMENTS


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Attributes:
        raw_text_elements: Tags whose body is captured verbatim
        void_elements: Tags that never have children
        source_name: Template name used to prefix error messages

    """

    raw_text_elements: frozenset[str] = field(default=RAW_TEXT_ELEMENTS)
    void_elements: frozenset[str] = field(default=VOID_ELEMENTS)
    source_name: str | None = None

    def __post_init__(self) -> None:
        # Accept any collection of names; store frozensets so configs hash
        object.__setattr__(self, "raw_text_elements", _tag_set(self.raw_text_elements))
        object.__setattr__(self, "void_elements", _tag_set(self.void_elements))

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored. Tag collections (lists, sets, tuples) are
        converted to frozensets.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "void_elements": ["br", "hr"],
            ...     "unknown_key": "ignored",
            ... })
            >>> sorted(config.void_elements)
            ['br', 'hr']

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


def _tag_set(tags: Iterable[str] | str) -> frozenset[str]:
    if isinstance(tags, str):
        raise TypeError("Tag sets must be collections of names, not a string")
    return frozenset(tags)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "templar_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(void_elements=frozenset())):
        ...     root = parse_template(["<br></br>"])
        >>> # Automatically reset to previous config

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
]
