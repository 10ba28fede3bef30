"""Utility modules for sql_lexer.

Provides:
- logger: get_logger for namespaced logging
"""

from sql_lexer.utils.logger import get_logger

__all__ = ["get_logger"]
