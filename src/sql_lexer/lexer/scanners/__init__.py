"""Token scanners for the SQL lexer.

Each scanner is a mixin that consumes one family of tokens starting at
the current scan position and returns the finished Token.
"""

from __future__ import annotations

from sql_lexer.lexer.scanners.comment import CommentScannerMixin
from sql_lexer.lexer.scanners.numeric import NumericScannerMixin
from sql_lexer.lexer.scanners.quoted import QuotedScannerMixin
from sql_lexer.lexer.scanners.symbol import SymbolScannerMixin
from sql_lexer.lexer.scanners.word import WordScannerMixin

__all__ = [
    "CommentScannerMixin",
    "NumericScannerMixin",
    "QuotedScannerMixin",
    "SymbolScannerMixin",
    "WordScannerMixin",
]
