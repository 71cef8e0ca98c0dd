"""Exceptions raised by the package."""

from __future__ import annotations


class RbfrtError(Exception):
    """Base class of every error raised by the package."""


class UnknownKeyNameError(RbfrtError, KeyError):
    """A table entry has no match key of the requested name."""

    def __init__(self, name: str, table_name: str) -> None:
        self.name = name
        self.table_name = table_name
        super().__init__(name, table_name)

    def __str__(self) -> str:
        return f"Unknown key name {self.name!r} in table {self.table_name!r}."


class UnknownActionNameError(RbfrtError, KeyError):
    """A table entry has no action data of the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown action data name {self.name!r}."


class ByteConversionError(RbfrtError, ValueError):
    """A byte string could not be converted to the requested type."""

    def __init__(self, target: str, reason: str) -> None:
        self.target = target
        self.reason = reason
        super().__init__(target, reason)

    def __str__(self) -> str:
        return f"Could not convert bytes to {self.target}: {self.reason}"


class PortNotFoundError(RbfrtError, LookupError):
    """No port is known under the requested name or device port."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Port {self.name!r} not found."