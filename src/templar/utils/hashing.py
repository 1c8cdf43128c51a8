"""Hashing utilities for Templar cache keys.

Example:
    >>> from templar.utils.hashing import hash_parts
    >>> hash_parts(["<p>", "</p>"], truncate=16) != hash_parts(["<p></p>"], truncate=16)
    True
"""

import hashlib
from collections.abc import Iterable


def hash_parts(
    parts: Iterable[str],
    truncate: int | None = None,
    algorithm: str = "sha256",
) -> str:
    """Hash a sequence of strings so that part boundaries affect the digest.

    Each part is prefixed with its length, so ``["ab", "c"]`` and
    ``["a", "bc"]`` hash differently.

    Args:
        parts: Strings to hash, in order
        truncate: Truncate result to N characters (None = full hash)
        algorithm: Hash algorithm ('sha256', 'md5')

    Returns:
        Hex digest of hash, optionally truncated

    Examples:
        >>> len(hash_parts(["a"]))
        64
        >>> len(hash_parts(["a"], truncate=16))
        16
    """
    hasher = hashlib.new(algorithm)
    count = 0
    for part in parts:
        encoded = part.encode("utf-8")
        hasher.update(f"{len(encoded)}:".encode("ascii"))
        hasher.update(encoded)
        count += 1
    hasher.update(f"#{count}".encode("ascii"))
    digest = hasher.hexdigest()
    return digest[:truncate] if truncate is not None else digest
