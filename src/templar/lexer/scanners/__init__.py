"""Mode-specific scanners for the Templar lexer.

Each scanner is a mixin that provides scanning logic for one lexer mode
(TEXT, TAG, ATTRIBUTE_VALUE, RAW_TEXT, COMMENT).
"""

from __future__ import annotations

from templar.lexer.scanners.attribute import AttributeScannerMixin
from templar.lexer.scanners.comment import CommentScannerMixin
from templar.lexer.scanners.raw_text import RawTextScannerMixin
from templar.lexer.scanners.tag import TagScannerMixin
from templar.lexer.scanners.text import TextScannerMixin

__all__ = [
    "AttributeScannerMixin",
    "CommentScannerMixin",
    "RawTextScannerMixin",
    "TagScannerMixin",
    "TextScannerMixin",
]
