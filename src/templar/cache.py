"""Content-addressed parse cache for Templar.

Provides (content_hash, config_hash) -> Root caching so that a template
rendered many times (the common case for tagged templates) is tokenized and
parsed once.

Thread Safety:
    DictParseCache is not thread-safe. For parallel parsing, use a cache
    implementation with internal locking (e.g. threading.Lock around get/put).

Example:
    >>> from templar import parse_template, DictParseCache
    >>> cache = DictParseCache()
    >>> root1 = parse_template(["<p>", "</p>"], cache=cache)
    >>> root2 = parse_template(["<p>", "</p>"], cache=cache)  # Cache hit
    >>> root1 is root2
    True
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol

from templar.utils.hashing import hash_parts

if TYPE_CHECKING:
    from templar.config import ParseConfig
    from templar.nodes import Root


class ParseCache(Protocol):
    """Protocol for content-addressed parse caches.

    Cache key is (content_hash, config_hash). Cached value is Root (AST).
    Root is immutable, safe to share across threads.
    """

    def get(self, content_hash: str, config_hash: str) -> Root | None:
        """Return cached Root if present, else None."""
        ...

    def put(self, content_hash: str, config_hash: str, root: Root) -> None:
        """Store Root in cache."""
        ...


class DictParseCache:
    """In-memory parse cache using a dict.

    Not thread-safe. For parallel parsing, wrap with a lock or use a
    thread-safe implementation.
    """

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data: dict[tuple[str, str], Root] = {}

    def __len__(self) -> int:
        return len(self._data)

    def get(self, content_hash: str, config_hash: str) -> Root | None:
        """Return cached Root if present, else None."""
        return self._data.get((content_hash, config_hash))

    def put(self, content_hash: str, config_hash: str, root: Root) -> None:
        """Store Root in cache."""
        self._data[(content_hash, config_hash)] = root

    def clear(self) -> None:
        self._data.clear()


def hash_content(chunks: Iterable[str]) -> str:
    """Compute SHA256 hash of template chunks for cache key.

    Chunk boundaries are part of the key: ``["<p>", "</p>"]`` (one hole)
    and ``["<p></p>"]`` (no holes) hash differently.

    Args:
        chunks: Literal chunks of the template

    Returns:
        Hex digest of SHA256 hash
    """
    return hash_parts(chunks)


def hash_config(config: ParseConfig) -> str:
    """Compute hash of ParseConfig for cache key.

    Only the tag sets affect the tree. ``source_name`` appears in error
    messages alone and is left out so renamed sources share entries.

    Args:
        config: ParseConfig to hash

    Returns:
        Hex digest of config hash
    """
    parts = (
        ",".join(sorted(config.raw_text_elements)),
        ",".join(sorted(config.void_elements)),
    )
    return hash_parts(parts)


__all__ = [
    "DictParseCache",
    "ParseCache",
    "hash_config",
    "hash_content",
]
