"""Source location tracking for diagnostics and debugging.

Provides SourceLocation dataclass for tracking positions in SQL text.
Used by tokens (lazily) and by log messages about malformed input.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location of a token.

    Line and column are 1-indexed; offsets are 0-indexed character
    offsets into the original input.

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column offset (1-indexed)
        offset: Absolute start offset in the input
        end_offset: Absolute end offset in the input (exclusive)
        end_lineno: Ending line number (optional)
        end_col_offset: Ending column offset (optional)

    Examples:
            >>> loc = SourceLocation(lineno=2, col_offset=7, offset=20, end_offset=25)
            >>> str(loc)
            '2:7'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    end_lineno: int | None = None
    end_col_offset: int | None = None

    def __str__(self) -> str:
        """Format location for log messages.

        Returns:
            Formatted string like "10:5"
        """
        return f"{self.lineno}:{self.col_offset}"

    @property
    def length(self) -> int:
        """Number of characters covered."""
        return self.end_offset - self.offset

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Create an unknown/placeholder location.

        Use for tokens created synthetically or when location is unavailable.
        """
        return cls(lineno=0, col_offset=0)
