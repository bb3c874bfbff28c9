from __future__ import annotations

from .byte_index import ByteIndex
from .composite import CompositePosition
from .errors import (
    ConsistencyViolation,
    InvalidPosition,
    InvalidRange,
    PositionOverflow,
    TextPosError,
)
from .position import MAX_VALUE, TextPosition
from .ranges import TextRange
from .row_column import RowColumnPosition, Utf8Position, Utf16Position

__all__ = [
    "MAX_VALUE",
    "ByteIndex",
    "CompositePosition",
    "ConsistencyViolation",
    "InvalidPosition",
    "InvalidRange",
    "PositionOverflow",
    "RowColumnPosition",
    "TextPosError",
    "TextPosition",
    "TextRange",
    "Utf16Position",
    "Utf8Position",
]
