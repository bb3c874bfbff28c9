from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class TextPosError(Exception):
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message}\nhint: {self.hint}"
        return self.message


class InvalidPosition(TextPosError, ValueError):
    """A position field is negative or not an integer."""


class PositionOverflow(TextPosError, OverflowError):
    """A position field would exceed ``MAX_VALUE``."""


class ConsistencyViolation(TextPosError, ValueError):
    """The sub-positions of a checked composite describe different locations."""


class InvalidRange(TextPosError, ValueError):
    """A range was built with its start after its end."""
