from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic

from .errors import InvalidRange
from .position import P, TextPosition
from .row_column import Utf16Position


@dataclass(frozen=True, slots=True, order=True)
class TextRange(Generic[P]):
    """Half-open range [start, end) between two positions of the same type.

    Invariant: ``start <= end``. Building an inverted range raises
    ``InvalidRange`` instead of swapping the positions.
    """

    start: P
    end: P

    def __post_init__(self) -> None:
        if type(self.start) is not type(self.end):
            raise TypeError(
                f"range positions must share a type, got {type(self.start).__name__} "
                f"and {type(self.end).__name__}"
            )
        if not isinstance(self.start, TextPosition):
            raise TypeError(f"{type(self.start).__name__} is not a text position")
        if self.end < self.start:
            raise InvalidRange(
                message=f"range start {self.start} is after end {self.end}",
                hint="swap the positions, or use cover() to join them",
            )

    @classmethod
    def zero(cls, kind: type[P]) -> TextRange[P]:
        """Create an empty range at the origin of ``kind``."""
        zero = getattr(kind, "ZERO", None)
        if not isinstance(zero, kind):
            raise TypeError(f"{kind.__name__} has no ZERO position")
        return cls(zero, zero)

    @classmethod
    def empty(cls, position: P) -> TextRange[P]:
        """Create an empty range pointing to a position."""
        return cls(position, position)

    @classmethod
    def up_to(cls, end: P) -> TextRange[P]:
        """Create a range from the origin to ``end``."""
        return cls(type(end).ZERO, end)

    def len(self) -> P:
        return self.end.saturating_sub(self.start)

    def is_empty(self) -> bool:
        return self.start == self.end

    def start_point(self) -> TextRange[P]:
        return TextRange(self.start, self.start)

    def end_point(self) -> TextRange[P]:
        return TextRange(self.end, self.end)

    def contains(self, position: P) -> bool:
        """Whether ``position`` lies in [start, end)."""
        return self.start <= position < self.end

    def contains_inclusive(self, position: P) -> bool:
        """Whether ``position`` lies in [start, end]; true at ``end``."""
        return self.start <= position <= self.end

    def covers(self, other: TextRange[P]) -> bool:
        """Whether ``other`` lies entirely inside this range."""
        return self.start <= other.start and other.end <= self.end

    def overlaps(self, other: TextRange[P]) -> bool:
        """Whether the ranges share at least one position.

        Touching ranges do not overlap, and neither does an empty range.
        """
        if self.is_empty() or other.is_empty():
            return False
        return self.start < other.end and other.start < self.end

    def intersect(self, other: TextRange[P]) -> TextRange[P] | None:
        """Common part of both ranges, or None if they are disjoint.

        Ranges that only touch intersect in an empty range.
        """
        start = max(self.start, other.start)
        end = min(self.end, other.end)
        if end < start:
            return None
        return TextRange(start, end)

    def cover(self, other: TextRange[P]) -> TextRange[P]:
        """Smallest range containing both ranges."""
        return TextRange(min(self.start, other.start), max(self.end, other.end))

    def cover_position(self, position: P) -> TextRange[P]:
        return self.cover(TextRange.empty(position))

    @classmethod
    def from_lsp(cls, lsp_range: dict[str, Any]) -> TextRange[Utf16Position]:
        """Create a UTF-16 range from an LSP ``{"start", "end"}`` dict."""
        return cls(
            Utf16Position.from_lsp(lsp_range["start"]),
            Utf16Position.from_lsp(lsp_range["end"]),
        )

    def to_lsp(self) -> dict[str, Any]:
        if not isinstance(self.start, Utf16Position):
            raise TypeError(
                f"LSP ranges use UTF-16 positions, got {type(self.start).__name__}"
            )
        return {"start": self.start.to_lsp(), "end": self.end.to_lsp()}

    def __str__(self) -> str:
        # Positions with rows use GNU error-message style: line.column-line.column
        if hasattr(self.start, "gnu_row_column"):
            sr, sc = self.start.gnu_row_column()
            er, ec = self.end.gnu_row_column()
            return f"{sr + 1}.{sc + 1}-{er + 1}.{ec + 1}"
        return f"{self.start}..{self.end}"
