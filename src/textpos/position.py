from __future__ import annotations

from typing import Any, ClassVar, Final, Protocol, TypeVar, runtime_checkable

from .errors import InvalidPosition, PositionOverflow


MAX_VALUE: Final[int] = 2**32 - 1
"""Largest value any position field may hold (unsigned 32-bit)."""


P = TypeVar("P", bound="TextPosition")


@runtime_checkable
class TextPosition(Protocol):
    """Some representation of a location in text.

    Implementations are immutable values forming a monoid under ``add`` with
    ``ZERO`` as identity:

    - ``a.add(ZERO) == a == ZERO.add(a)``
    - ``a.add(b).add(c) == a.add(b.add(c))``
    - ``a.saturating_sub(b) == ZERO`` whenever ``a <= b``
    - ``b.add(a.saturating_sub(b)) == a`` whenever ``a >= b``

    ``add`` reads as "advance by the text that follows", ``saturating_sub`` as
    "how far past the reference position", clamped at ``ZERO``.
    """

    ZERO: ClassVar[Any]

    def add(self: P, other: P) -> P: ...

    def saturating_sub(self: P, other: P) -> P: ...

    def __lt__(self, other: Any) -> bool: ...

    def __le__(self, other: Any) -> bool: ...


def check_field(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidPosition(message=f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise InvalidPosition(message=f"{name} cannot be negative, got {value}")
    if value > MAX_VALUE:
        raise PositionOverflow(
            message=f"{name} {value} exceeds {MAX_VALUE}",
            hint="positions are limited to unsigned 32-bit fields",
        )
    return value


def checked_add(name: str, a: int, b: int) -> int:
    total = a + b
    if total > MAX_VALUE:
        raise PositionOverflow(
            message=f"{name} overflow: {a} + {b} exceeds {MAX_VALUE}",
            hint="positions are limited to unsigned 32-bit fields",
        )
    return total


def require_same_kind(a: object, b: object) -> None:
    if type(a) is not type(b):
        raise TypeError(f"cannot combine {type(a).__name__} with {type(b).__name__}")
