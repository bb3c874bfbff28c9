from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .position import check_field, checked_add, require_same_kind


@dataclass(frozen=True, slots=True, order=True)
class ByteIndex:
    """Offset into a document as a number of UTF-8 bytes, starting from 0."""

    index: int = 0

    ZERO: ClassVar[ByteIndex]

    def __post_init__(self) -> None:
        check_field("index", self.index)

    @staticmethod
    def of(index: int) -> ByteIndex:
        return ByteIndex(index)

    def add(self, other: ByteIndex) -> ByteIndex:
        require_same_kind(self, other)
        return ByteIndex(checked_add("index", self.index, other.index))

    def saturating_sub(self, other: ByteIndex) -> ByteIndex:
        require_same_kind(self, other)
        return ByteIndex(max(self.index - other.index, 0))

    def __add__(self, other: object) -> ByteIndex:
        if not isinstance(other, ByteIndex):
            return NotImplemented
        return self.add(other)

    def __int__(self) -> int:
        return self.index

    def __str__(self) -> str:
        return str(self.index)


ByteIndex.ZERO = ByteIndex(0)
