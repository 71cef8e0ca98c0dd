"""Registers and the requests that set them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from .encoding import to_bytes, to_u32
from .table import TableEntry

__all__ = ["Register", "RegisterEntry", "RegisterRequest"]

_INDEX_KEY = "$REGISTER_INDEX"
_U32_LIMIT = 1 << 32


def _check_index(index: int) -> int:
    if not 0 <= index < _U32_LIMIT:
        raise ValueError(f"register index must be an unsigned 32-bit integer, not {index}")
    return index


@dataclass
class RegisterEntry:
    """The value of a register at one index; each field holds one value per pipe."""

    index: int
    data: dict[str, list[bytes]] = field(default_factory=dict)

    def get(self, name: str) -> list[bytes] | None:
        """Return the per-pipe values of field ``name``, or None."""
        return self.data.get(name)


@dataclass
class Register:
    """A register with its entries by index."""

    name: str
    entries: dict[int, RegisterEntry] = field(default_factory=dict)

    def get(self, index: int) -> RegisterEntry | None:
        """Return the entry at ``index``, or None."""
        return self.entries.get(index)

    @classmethod
    def from_table_entries(cls, entries: Iterable[TableEntry], name: str) -> Register:
        """Build a register from the table entries read for it."""
        register_entries: dict[int, RegisterEntry] = {}
        for entry in entries:
            index = to_u32(entry.get_key(_INDEX_KEY).exact_value())
            data: dict[str, list[bytes]] = {}
            for action_data in entry.action_data:
                # A field repeats once for every pipe.
                data.setdefault(action_data.key, []).append(action_data.data)
            register_entries[index] = RegisterEntry(index, data)
        return cls(name, register_entries)


@dataclass
class RegisterRequest:
    """A request to read or write a register.

    The builder methods return a new request and leave this one unchanged.
    """

    name: str
    register_index: int | None = None
    values: dict[str, bytes] = field(default_factory=dict)

    def index(self, index: int) -> RegisterRequest:
        """Set the index the request is for."""
        return replace(self, register_index=_check_index(index), values=dict(self.values))

    def data(self, name: str, value) -> RegisterRequest:
        """Set the value of field ``name``, encoding it to bytes."""
        values = dict(self.values)
        values[name] = to_bytes(value)
        return replace(self, values=values)