"""Match values of table keys."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .encoding import to_bytes

__all__ = ["MatchKind", "MatchValue"]


class MatchKind(enum.Enum):
    """The kind of match a key performs."""

    EXACT = "exact"
    RANGE = "range"
    LPM = "lpm"
    TERNARY = "ternary"


@dataclass(frozen=True)
class MatchValue:
    """A match value.

    ``value`` holds the exact bytes, the lower range bound, the LPM prefix or
    the ternary value; ``extra`` holds the upper range bound or the ternary mask.
    """

    kind: MatchKind
    value: bytes
    extra: bytes = b""
    prefix_length: int = 0

    @classmethod
    def exact(cls, value) -> MatchValue:
        """Create an exact match."""
        return cls(MatchKind.EXACT, to_bytes(value))

    @classmethod
    def range(cls, lower, higher) -> MatchValue:
        """Create a range match."""
        return cls(MatchKind.RANGE, to_bytes(lower), to_bytes(higher))

    @classmethod
    def lpm(cls, value, prefix_length: int) -> MatchValue:
        """Create a longest-prefix match."""
        return cls(MatchKind.LPM, to_bytes(value), prefix_length=prefix_length)

    @classmethod
    def ternary(cls, value, mask) -> MatchValue:
        """Create a ternary match."""
        return cls(MatchKind.TERNARY, to_bytes(value), to_bytes(mask))

    @property
    def mask(self) -> bytes:
        """The mask of a ternary match."""
        if self.kind is not MatchKind.TERNARY:
            raise ValueError("No ternary match value.")
        return self.extra

    def exact_value(self) -> bytes:
        """Return the bytes of an exact match."""
        if self.kind is not MatchKind.EXACT:
            raise ValueError("No exact match value.")
        return self.value

    def range_value(self) -> tuple[bytes, bytes]:
        """Return the lower and upper bounds of a range match."""
        if self.kind is not MatchKind.RANGE:
            raise ValueError("No range match value.")
        return self.value, self.extra