"""Table entries and the requests that read or change them."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace

from .action_data import ActionData, ActionDataRepeated
from .errors import UnknownActionNameError, UnknownKeyNameError
from .match_value import MatchValue

__all__ = [
    "ActionData",
    "ActionDataRepeated",
    "MatchValue",
    "Request",
    "RequestType",
    "TableEntry",
    "TableOperation",
]

_U32_LIMIT = 1 << 32


@dataclass
class TableEntry:
    """An entry read from a table of the switch."""

    table_id: int
    table_name: str
    match_keys: dict[str, MatchValue] = field(default_factory=dict)
    default_entry: bool = False
    action: str = ""
    action_data: list[ActionData] = field(default_factory=list)

    def get_key(self, name: str) -> MatchValue:
        """Return the match value of the key ``name``."""
        try:
            return self.match_keys[name]
        except KeyError:
            raise UnknownKeyNameError(name, self.table_name) from None

    def has_key(self, name: str) -> bool:
        """Return whether a match key ``name`` is present."""
        return name in self.match_keys

    def get_action_data(self, name: str) -> ActionData:
        """Return the first action data whose key is ``name``."""
        for data in self.action_data:
            if data.key == name:
                return data
        raise UnknownActionNameError(name)

    def has_action_data(self, name: str) -> bool:
        """Return whether action data with key ``name`` is present."""
        return any(data.key == name for data in self.action_data)


class RequestType(enum.Enum):
    """What a request does to the table."""

    READ = "read"
    WRITE = "write"
    UPDATE = "update"
    OPERATION = "operation"
    DELETE = "delete"


class TableOperation(enum.Enum):
    """Operations that can be run on a whole table; the value is the wire name."""

    NONE = ""
    SYNC_COUNTERS = "SyncCounters"
    SYNC_REGISTER = "SyncRegisters"


@dataclass
class Request:
    """A request to read, write, update or delete entries of a table.

    The builder methods return a new request and leave this one unchanged.
    """

    table_name: str
    keys: dict[str, MatchValue] = field(default_factory=dict)
    action_name: str | None = None
    data: list[ActionData] = field(default_factory=list)
    repeated_data: list[ActionDataRepeated] = field(default_factory=list)
    kind: RequestType = RequestType.READ
    table_operation: TableOperation = TableOperation.NONE
    is_default: bool = False
    pipe_id: int | None = None

    @property
    def has_action(self) -> bool:
        """Whether an action is set."""
        return self.action_name is not None

    def _copy(self, **changes) -> Request:
        changes.setdefault("keys", dict(self.keys))
        changes.setdefault("data", list(self.data))
        changes.setdefault("repeated_data", list(self.repeated_data))
        return replace(self, **changes)

    def match_key(self, name: str, match_value: MatchValue) -> Request:
        """Add or replace the match key ``name``."""
        keys = dict(self.keys)
        keys[name] = match_value
        return self._copy(keys=keys)

    def match_keys(self, match_keys: Mapping[str, MatchValue]) -> Request:
        """Replace all match keys."""
        return self._copy(keys=dict(match_keys))

    def action(self, action: str) -> Request:
        """Set the action name."""
        return self._copy(action_name=action)

    def pipe(self, pipe: int) -> Request:
        """Set the pipe the request is for."""
        if not 0 <= pipe < _U32_LIMIT:
            raise ValueError(f"pipe must be an unsigned 32-bit integer, not {pipe}")
        return self._copy(pipe_id=pipe)

    def default(self, is_default: bool) -> Request:
        """Set whether the entry is the table's default entry."""
        return self._copy(is_default=is_default)

    def action_data(self, name: str, data) -> Request:
        """Append an action parameter, encoding ``data`` to bytes."""
        return self._copy(data=[*self.data, ActionData.of(name, data)])

    def action_data_repeated(self, name: str, data: Iterable) -> Request:
        """Append a repeated action parameter, encoding each value."""
        return self._copy(repeated_data=[*self.repeated_data, ActionDataRepeated.of(name, data)])

    def operation(self, operation: TableOperation) -> Request:
        """Set the table operation."""
        return self._copy(table_operation=operation)

    def request_type(self, request_type: RequestType) -> Request:
        """Set the request type."""
        return self._copy(kind=request_type)