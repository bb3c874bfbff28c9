from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Self

from .position import check_field, checked_add, require_same_kind


@dataclass(frozen=True, slots=True, order=True)
class RowColumnPosition:
    """Text position as a (row, column) pair, both starting from 0.

    ``row`` counts line terminators (``\\r\\n`` counts once, as only ``\\n``
    ends a line). ``column`` is the length of the last line, measured in the
    code units of the concrete subclass. A position is the end of a canonical
    text made of ``row`` newlines followed by ``column`` units, and arithmetic
    concatenates or strips such texts.

    Use ``Utf8Position`` or ``Utf16Position``; the base class only carries the
    shared arithmetic. Instances of different subclasses never compare equal.
    """

    row: int = 0
    column: int = 0

    ZERO: ClassVar[Any]

    def __post_init__(self) -> None:
        if type(self) is RowColumnPosition:
            raise TypeError("RowColumnPosition is abstract, use Utf8Position or Utf16Position")
        check_field("row", self.row)
        check_field("column", self.column)

    def add(self, other: Self) -> Self:
        require_same_kind(self, other)
        if other.row == 0:
            return type(self)(self.row, checked_add("column", self.column, other.column))
        return type(self)(checked_add("row", self.row, other.row), other.column)

    def saturating_sub(self, other: Self) -> Self:
        require_same_kind(self, other)
        if self.row < other.row:
            return type(self).ZERO
        if self.row == other.row:
            return type(self)(0, max(self.column - other.column, 0))
        # The tail after the reference keeps its full last line.
        return type(self)(self.row - other.row, self.column)

    def as_tuple(self) -> tuple[int, int]:
        return (self.row, self.column)

    def gnu_row_column(self) -> tuple[int, int]:
        """0-based (row, column) used in range messages."""
        return (self.row, self.column)

    def __add__(self, other: object) -> Self:
        if type(other) is not type(self):
            return NotImplemented
        return self.add(other)  # type: ignore[arg-type]

    def __str__(self) -> str:
        return f"{self.row + 1}:{self.column + 1}"


@dataclass(frozen=True, slots=True, order=True)
class Utf8Position(RowColumnPosition):
    """Row/column position whose column counts UTF-8 code units (bytes)."""

    ZERO: ClassVar[Utf8Position]


@dataclass(frozen=True, slots=True, order=True)
class Utf16Position(RowColumnPosition):
    """Row/column position whose column counts UTF-16 code units.

    This is the convention of LSP ``Position`` objects.
    """

    ZERO: ClassVar[Utf16Position]

    @classmethod
    def from_lsp(cls, lsp_position: dict[str, Any]) -> Utf16Position:
        """Create a position from an LSP ``{"line", "character"}`` dict."""
        return cls(row=lsp_position["line"], column=lsp_position["character"])

    def to_lsp(self) -> dict[str, Any]:
        return {"line": self.row, "character": self.column}


Utf8Position.ZERO = Utf8Position(0, 0)
Utf16Position.ZERO = Utf16Position(0, 0)
