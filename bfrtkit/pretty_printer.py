"""Text rendering of table entries."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass, replace

from tabulate import tabulate

from .encoding import to_int_array, to_u32, to_u64, to_u128
from .match_value import MatchKind, MatchValue
from .table import TableEntry

__all__ = ["PrettyPrinter"]

_ACTION_COLUMN = "Action"
_PARAMETERS_COLUMN = "Action parameters"
_KIND_PREFIX = {
    MatchKind.EXACT: "EXT:",
    MatchKind.LPM: "LPM:",
    MatchKind.RANGE: "RNG:",
    MatchKind.TERNARY: "TER:",
}
_PREFIX_LENGTH = 4


@dataclass(frozen=True)
class PrettyPrinter:
    """Renders table entries as text tables.

    With ``infer_address_flag`` set, data whose column name mentions an
    address is shown as a MAC address (6 bytes) or IPv4 address (4 bytes).
    """

    infer_address_flag: bool = True

    def infer_address_type(self, flag: bool) -> PrettyPrinter:
        """Return a printer with address inference switched on or off."""
        return replace(self, infer_address_flag=flag)

    def format_data(self, key: str, data: bytes) -> str:
        """Render the bytes of column ``key`` as text."""
        data = bytes(data)
        length = len(data)
        if length <= 4:
            text = str(to_u32(data))
        elif length <= 8:
            text = str(to_u64(data))
        elif length <= 16:
            text = str(to_u128(data))
        elif length % 4 == 0:
            text = str(to_int_array(data))
        else:
            text = str(list(data))

        if self.infer_address_flag and "addr" in key:
            if length == 6:
                text = ":".join(format(byte, "x") for byte in data)
            elif length == 4:
                text = ".".join(str(byte) for byte in data)
        return text

    def _header(self, entries: list[TableEntry]) -> list[str]:
        columns = {_ACTION_COLUMN, _PARAMETERS_COLUMN}
        if entries:
            columns.update(
                _KIND_PREFIX[value.kind] + name for name, value in entries[0].match_keys.items()
            )
        return sorted(columns)

    def _format_match(self, key: str, value: MatchValue) -> str:
        if value.kind is MatchKind.EXACT:
            return self.format_data(key, value.value)
        if value.kind is MatchKind.LPM:
            return f"{self.format_data(key, value.value)} / {value.prefix_length}"
        if value.kind is MatchKind.RANGE:
            lower, upper = value.range_value()
            return f"[{self.format_data(key, lower)}, {self.format_data(key, upper)})"
        return f"{self.format_data(key, value.value)} &\n{self.format_data(key, value.mask)}"

    def _parameters(self, entry: TableEntry) -> str:
        if not entry.action_data:
            return "-"
        headers = [data.key for data in entry.action_data]
        row = [self.format_data(data.key, data.data) for data in entry.action_data]
        return tabulate([row], headers=headers, tablefmt="simple", disable_numparse=True)

    def _row(self, entry: TableEntry, header: list[str]) -> list[str]:
        row = []
        for column in header:
            if column == _ACTION_COLUMN:
                row.append(entry.action)
            elif column == _PARAMETERS_COLUMN:
                row.append(self._parameters(entry))
            else:
                key = column[_PREFIX_LENGTH:]
                value = entry.match_keys.get(key)
                row.append("" if value is None else self._format_match(key, value))
        return row

    def render_table(self, entries: Iterable[TableEntry]) -> str:
        """Render the entries as one table per table name."""
        grouped: dict[str, list[TableEntry]] = {}
        for entry in entries:
            grouped.setdefault(entry.table_name, []).append(entry)

        blocks = []
        for table_name, table_entries in grouped.items():
            header = self._header(table_entries)
            rows = [self._row(entry, header) for entry in table_entries]
            table = tabulate(rows, headers=header, tablefmt="grid", disable_numparse=True)
            blocks.append(f"{json.dumps(table_name)}:\n{table}\n\n")
        return "".join(blocks)

    def print_table(self, entries: Iterable[TableEntry]) -> None:
        """Print the entries as one table per table name."""
        print(self.render_table(entries), end="")