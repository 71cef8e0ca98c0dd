"""Data passed to table actions."""

from __future__ import annotations

from dataclasses import dataclass

from .encoding import to_bytes, to_u32, to_u64, to_u128

__all__ = ["ActionData", "ActionDataRepeated"]


@dataclass(frozen=True)
class ActionData:
    """A single named action parameter and its bytes."""

    key: str
    data: bytes

    @classmethod
    def of(cls, key: str, value) -> ActionData:
        """Create action data from any encodable value."""
        return cls(key, to_bytes(value))

    def as_u32(self) -> int:
        """The data as an unsigned 32-bit integer."""
        return to_u32(self.data)

    def as_u64(self) -> int:
        """The data as an unsigned 64-bit integer."""
        return to_u64(self.data)

    def as_u128(self) -> int:
        """The data as an unsigned 128-bit integer."""
        return to_u128(self.data)


@dataclass(frozen=True)
class ActionDataRepeated:
    """A named action parameter holding a list of values."""

    key: str
    data: tuple[bytes, ...]

    @classmethod
    def of(cls, key: str, values) -> ActionDataRepeated:
        """Create repeated action data, encoding each value."""
        return cls(key, tuple(to_bytes(value) for value in values))