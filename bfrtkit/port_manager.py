"""Front-panel ports of the switch and the table requests that configure them."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, replace

from .encoding import to_bool, to_text, to_u32
from .errors import ByteConversionError, PortNotFoundError
from .match_value import MatchValue
from .table import Request, RequestType, TableEntry

__all__ = [
    "AutoNegotiation",
    "FEC",
    "Loopback",
    "Port",
    "PortManager",
    "Speed",
    "PORT_TABLE",
    "PORT_STR_INFO_TABLE",
]

PORT_TABLE = "$PORT"
PORT_STR_INFO_TABLE = "$PORT_STR_INFO"

_U32_LIMIT = 1 << 32
_U8_LIMIT = 1 << 8


class _NamedEnum(str, enum.Enum):
    """An enum whose value and string form are the switch's name for it."""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str):
        """Return the member named ``text``."""
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"{text!r} is not a valid {cls.__name__}") from None


class Speed(_NamedEnum):
    """Port speeds."""

    BF_SPEED_1G = "BF_SPEED_1G"
    BF_SPEED_10G = "BF_SPEED_10G"
    BF_SPEED_20G = "BF_SPEED_20G"
    BF_SPEED_25G = "BF_SPEED_25G"
    BF_SPEED_40G = "BF_SPEED_40G"
    BF_SPEED_50G = "BF_SPEED_50G"
    BF_SPEED_100G = "BF_SPEED_100G"
    BF_SPEED_400G = "BF_SPEED_400G"

    def to_u32(self) -> int:
        """The speed in Gb/s."""
        return _SPEED_GBPS[self]


_SPEED_GBPS = {
    Speed.BF_SPEED_1G: 1,
    Speed.BF_SPEED_10G: 10,
    Speed.BF_SPEED_20G: 20,
    Speed.BF_SPEED_25G: 25,
    Speed.BF_SPEED_40G: 40,
    Speed.BF_SPEED_50G: 50,
    Speed.BF_SPEED_100G: 100,
    Speed.BF_SPEED_400G: 400,
}


class AutoNegotiation(_NamedEnum):
    """Auto-negotiation options."""

    PM_AN_DEFAULT = "PM_AN_DEFAULT"
    PM_AN_FORCE_ENABLE = "PM_AN_FORCE_ENABLE"
    PM_AN_FORCE_DISABLE = "PM_AN_FORCE_DISABLE"


class FEC(_NamedEnum):
    """Forward error correction options."""

    BF_FEC_TYP_NONE = "BF_FEC_TYP_NONE"
    BF_FEC_TYP_FC = "BF_FEC_TYP_FC"
    BF_FEC_TYP_REED_SOLOMON = "BF_FEC_TYP_REED_SOLOMON"


class Loopback(_NamedEnum):
    """Loopback options."""

    BF_LPBK_NONE = "BF_LPBK_NONE"
    """No loopback."""
    BF_LPBK_MAC_NEAR = "BF_LPBK_MAC_NEAR"
    """Loopback from egress to ingress of the same port."""
    BF_LPBK_MAC_FAR = "BF_LPBK_MAC_FAR"
    """Loopback from ingress to egress of the same port."""


@dataclass(frozen=True)
class Port:
    """A front-panel port and its configuration.

    The builder methods return a new port and leave this one unchanged.
    """

    port: int
    channel: int
    dev_port: int | None = None
    link_speed: Speed = Speed.BF_SPEED_1G
    auto_neg: AutoNegotiation = AutoNegotiation.PM_AN_DEFAULT
    fec_mode: FEC = FEC.BF_FEC_TYP_NONE
    loopback_mode: Loopback = Loopback.BF_LPBK_NONE
    enabled: bool = True
    up: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.port < _U32_LIMIT:
            raise ValueError(f"port must be an unsigned 32-bit integer, not {self.port}")
        if not 0 <= self.channel < _U8_LIMIT:
            raise ValueError(f"channel must be an unsigned 8-bit integer, not {self.channel}")

    def speed(self, speed: Speed) -> Port:
        """Set the speed."""
        return replace(self, link_speed=Speed(speed))

    def loopback(self, loopback: Loopback) -> Port:
        """Set the loopback mode."""
        return replace(self, loopback_mode=Loopback(loopback))

    def enable(self) -> Port:
        """Enable the port."""
        return replace(self, enabled=True)

    def disable(self) -> Port:
        """Disable the port."""
        return replace(self, enabled=False)

    def auto_negotiation(self, auto_neg: AutoNegotiation) -> Port:
        """Set the auto negotiation."""
        return replace(self, auto_neg=AutoNegotiation(auto_neg))

    def fec(self, fec: FEC) -> Port:
        """Set the forward error correction."""
        return replace(self, fec_mode=FEC(fec))

    def frontpanel_port(self) -> tuple[int, int]:
        """Return ``(port, channel)``."""
        return self.port, self.channel


def _clean(text: str) -> str:
    # The switch pads some strings with stray control characters.
    return "".join(char for char in text if "!" <= char <= "~").strip()


def _parse_port_name(name: str) -> tuple[int, int] | None:
    parts = name.split("/")
    if len(parts) != 2:
        return None
    port, channel = int(parts[0]), int(parts[1])
    if not 0 <= port < _U32_LIMIT or port < 0:
        raise ValueError(f"invalid front-panel port in {name!r}")
    if not 0 <= channel < _U8_LIMIT:
        raise ValueError(f"invalid channel in {name!r}")
    return port, channel


class PortManager:
    """Maps front-panel ports to device ports and builds the port table requests."""

    def __init__(self, name_to_dev: dict[str, int] | None = None) -> None:
        self._name_to_dev: dict[str, int] = {}
        self._dev_to_name: dict[int, tuple[int, int]] = {}
        for name, dev_port in (name_to_dev or {}).items():
            parsed = _parse_port_name(name)
            if parsed is not None:
                self._name_to_dev[name] = dev_port
                self._dev_to_name[dev_port] = parsed

    @classmethod
    def from_entries(cls, entries: Iterable[TableEntry]) -> PortManager:
        """Build the mapping from the entries of the port string-info table."""
        mapping: dict[str, int] = {}
        for entry in entries:
            raw = entry.get_action_data("$DEV_PORT").data
            if len(raw) < 4:
                raise ByteConversionError("u32", f"expected at least 4 bytes, got {len(raw)}")
            dev_port = int.from_bytes(raw[:4], "big")
            name = to_text(entry.get_key("$PORT_NAME").exact_value())
            if _parse_port_name(name) is not None:
                mapping[name] = dev_port
        return cls(mapping)

    def dev_port(self, port: int, channel: int) -> int:
        """Return the device port of a front-panel port."""
        name = f"{port}/{channel}"
        try:
            return self._name_to_dev[name]
        except KeyError:
            raise PortNotFoundError(name) from None

    def frontpanel_port(self, dev_port: int) -> tuple[int, int]:
        """Return ``(front-panel port, channel)`` of a device port."""
        try:
            return self._dev_to_name[dev_port]
        except KeyError:
            raise PortNotFoundError(str(dev_port)) from None

    def parse_ports(self, entries: Iterable[TableEntry]) -> list[Port]:
        """Turn entries read from the port table into ports."""
        ports = []
        for entry in entries:
            dev_port = to_u32(entry.get_key("$DEV_PORT").exact_value())
            front, channel = self.frontpanel_port(dev_port)

            def text(name: str) -> str:
                return _clean(to_text(entry.get_action_data(name).data))

            ports.append(
                Port(
                    port=front,
                    channel=channel,
                    dev_port=dev_port,
                    link_speed=Speed.parse(text("$SPEED")),
                    auto_neg=AutoNegotiation.parse(text("$AUTO_NEGOTIATION")),
                    fec_mode=FEC.parse(text("$FEC")),
                    loopback_mode=Loopback.parse(text("$LOOPBACK_MODE")),
                    enabled=to_bool(entry.get_action_data("$PORT_ENABLE").data),
                    up=to_bool(entry.get_action_data("$PORT_UP").data),
                )
            )
        return ports

    def _keyed(self, port: Port) -> Request:
        dev_port = self.dev_port(port.port, port.channel)
        return Request(PORT_TABLE).match_key("$DEV_PORT", MatchValue.exact(dev_port))

    def port_request(self, port: Port) -> Request:
        """Return the write request that adds ``port``."""
        return (
            self._keyed(port)
            .action_data("$SPEED", str(port.link_speed))
            .action_data("$FEC", str(port.fec_mode))
            .action_data("$PORT_ENABLE", port.enabled)
            .action_data("$AUTO_NEGOTIATION", str(port.auto_neg))
            .action_data("$LOOPBACK_MODE", str(port.loopback_mode))
            .request_type(RequestType.WRITE)
        )

    def port_requests(self, ports: Iterable[Port]) -> list[Request]:
        """Return the write requests that add all ``ports``."""
        return [self.port_request(port) for port in ports]

    def delete_request(self, port: Port) -> Request:
        """Return the request that deletes ``port``."""
        return self._keyed(port).request_type(RequestType.DELETE)

    def enable_request(self, port: Port) -> Request:
        """Return the update request that enables ``port``."""
        return self._keyed(port).action_data("$PORT_ENABLE", True).request_type(RequestType.UPDATE)

    def disable_request(self, port: Port) -> Request:
        """Return the update request that disables ``port``."""
        return self._keyed(port).action_data("$PORT_ENABLE", False).request_type(RequestType.UPDATE)