"""Digests sent from the switch to the controller."""

from __future__ import annotations

import json
from dataclasses import dataclass, field

__all__ = ["Digest"]


@dataclass
class Digest:
    """A digest: its instance name and the packed fields with their bytes."""

    name: str
    data: dict[str, bytes] = field(default_factory=dict)

    def to_json(self) -> str:
        """Serialise to JSON, with each value as a list of byte values."""
        return json.dumps({"name": self.name, "data": {key: list(value) for key, value in self.data.items()}})

    @classmethod
    def from_json(cls, text: str) -> Digest:
        """Parse a digest from the form written by :meth:`to_json`."""
        document = json.loads(text)
        if not isinstance(document, dict):
            raise ValueError("digest must be a JSON object")
        name = document.get("name")
        data = document.get("data")
        if not isinstance(name, str):
            raise ValueError("digest name must be a string")
        if not isinstance(data, dict):
            raise ValueError("digest data must be an object")
        decoded = {}
        for key, values in data.items():
            if not isinstance(values, list) or not all(
                isinstance(item, int) and not isinstance(item, bool) for item in values
            ):
                raise ValueError(f"digest field {key!r} must be a list of byte values")
            decoded[key] = bytes(values)
        return cls(name, decoded)