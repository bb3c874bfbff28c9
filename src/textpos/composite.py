"""Composite text position.

A ``CompositePosition`` carries the same location in three measures at once:

- ``index``: UTF-8 byte offset from the start of the document
- ``utf8``: row and column, column in UTF-8 bytes
- ``utf16``: row and column, column in UTF-16 code units

Nothing in the values themselves proves the three agree, so a composite can
optionally check them at runtime. When ``checked`` is true, construction,
``add``/``saturating_sub`` results and comparisons validate the sub-positions
and raise ``ConsistencyViolation`` on a mismatch. When false, arithmetic is
componentwise with no validation and keeping the measures in sync is up to
the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import total_ordering
from typing import ClassVar

from . import config
from .byte_index import ByteIndex
from .errors import ConsistencyViolation
from .logging_config import get_logger
from .position import require_same_kind
from .row_column import Utf8Position, Utf16Position


logger = get_logger("composite")


def _default_checked() -> bool:
    return config.get_config().checked


def _sign(a: object, b: object) -> int:
    return (a > b) - (a < b)  # type: ignore[operator]


def _violation(message: str, hint: str | None = None) -> ConsistencyViolation:
    logger.debug("consistency violation: %s", message)
    return ConsistencyViolation(message=message, hint=hint)


@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class CompositePosition:
    index: ByteIndex = ByteIndex.ZERO
    utf8: Utf8Position = Utf8Position.ZERO
    utf16: Utf16Position = Utf16Position.ZERO
    checked: bool | None = field(default=None, repr=False)

    ZERO: ClassVar[CompositePosition]

    def __post_init__(self) -> None:
        if not isinstance(self.index, ByteIndex):
            raise TypeError(f"index must be ByteIndex, got {type(self.index).__name__}")
        if not isinstance(self.utf8, Utf8Position):
            raise TypeError(f"utf8 must be Utf8Position, got {type(self.utf8).__name__}")
        if not isinstance(self.utf16, Utf16Position):
            raise TypeError(f"utf16 must be Utf16Position, got {type(self.utf16).__name__}")
        if self.checked is None:
            object.__setattr__(self, "checked", _default_checked())
        elif not isinstance(self.checked, bool):
            raise TypeError(f"checked must be a bool or None, got {type(self.checked).__name__}")
        if self.checked:
            self.check_consistency()

    @classmethod
    def new(
        cls,
        index: int,
        row: int,
        column8: int,
        column16: int,
        *,
        checked: bool | None = None,
    ) -> CompositePosition:
        """Build a composite from flat fields; ``row`` is shared by both row/column measures."""
        return cls(
            ByteIndex(index),
            Utf8Position(row, column8),
            Utf16Position(row, column16),
            checked=checked,
        )

    @property
    def row(self) -> int:
        return self.utf8.row

    @property
    def column8(self) -> int:
        return self.utf8.column

    @property
    def column16(self) -> int:
        return self.utf16.column

    def with_checked(self, checked: bool) -> CompositePosition:
        return CompositePosition(self.index, self.utf8, self.utf16, checked=checked)

    def check_consistency(self) -> None:
        """Raise ``ConsistencyViolation`` unless the three measures can describe one location.

        - both row/column measures are on the same row
        - each UTF-16 unit takes 1 to 3 UTF-8 bytes (a surrogate pair is 2 units for 4 bytes)
        - the byte offset covers at least one byte per line terminator plus the last line,
          and equals the column exactly on the first line
        """
        if self.utf8.row != self.utf16.row:
            raise _violation(
                f"UTF-8 row {self.utf8.row} differs from UTF-16 row {self.utf16.row}",
                hint="both row/column measures must count the same line terminators",
            )
        c8, c16 = self.utf8.column, self.utf16.column
        if not c16 <= c8 <= 3 * c16:
            raise _violation(
                f"UTF-8 column {c8} cannot encode UTF-16 column {c16}",
                hint="each UTF-16 code unit encodes to 1..3 UTF-8 bytes",
            )
        if self.index.index < self.utf8.row + c8:
            raise _violation(
                f"byte index {self.index} is before UTF-8 position {self.utf8.row}:{c8} (0-based)",
                hint="the byte index must count every line terminator and the last line",
            )
        if self.utf8.row == 0 and self.index.index != c8:
            raise _violation(
                f"byte index {self.index} differs from UTF-8 column {c8} on the first line",
                hint="before the first line terminator the byte index is the column",
            )

    def check_comparable(self, other: CompositePosition) -> None:
        """Raise ``ConsistencyViolation`` unless all three measures order ``self`` and ``other`` alike."""
        by_index = _sign(self.index, other.index)
        if _sign(self.utf8, other.utf8) != by_index or _sign(self.utf16, other.utf16) != by_index:
            raise _violation(
                f"measures disagree on the order of {self!r} and {other!r}",
                hint="compare positions taken from the same document",
            )

    def add(self, other: CompositePosition) -> CompositePosition:
        require_same_kind(self, other)
        return CompositePosition(
            self.index.add(other.index),
            self.utf8.add(other.utf8),
            self.utf16.add(other.utf16),
            checked=self.checked or other.checked,
        )

    def saturating_sub(self, other: CompositePosition) -> CompositePosition:
        require_same_kind(self, other)
        checked = self.checked or other.checked
        if checked:
            self.check_comparable(other)
        return CompositePosition(
            self.index.saturating_sub(other.index),
            self.utf8.saturating_sub(other.utf8),
            self.utf16.saturating_sub(other.utf16),
            checked=checked,
        )

    def gnu_row_column(self) -> tuple[int, int]:
        return self.utf8.gnu_row_column()

    def _key(self) -> tuple[ByteIndex, Utf8Position, Utf16Position]:
        return (self.index, self.utf8, self.utf16)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompositePosition):
            return NotImplemented
        if self.checked or other.checked:
            self.check_comparable(other)
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CompositePosition):
            return NotImplemented
        if self.checked or other.checked:
            self.check_comparable(other)
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __add__(self, other: object) -> CompositePosition:
        if not isinstance(other, CompositePosition):
            return NotImplemented
        return self.add(other)

    def __str__(self) -> str:
        return str(self.utf8)


CompositePosition.ZERO = CompositePosition(checked=False)
