"""Utility modules for Templar.

Provides:
- hashing: hash_parts for cache keys
- logger: get_logger for logging
"""

from templar.utils.hashing import hash_parts
from templar.utils.logger import get_logger

__all__ = [
    "get_logger",
    "hash_parts",
]
