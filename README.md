# bfrtkit

This package provides building blocks for the runtime tables of a programmable switch. It covers:

- requests for table entries,
- match values,
- action data,
- registers,
- port configuration,
- readable text tables of entries.

## What it does not do

bfrtkit is a data model only. It builds `Request` objects and interprets `TableEntry` objects that were read back. It does not:

- connect to a switch,
- send requests,
- read entries,
- receive digests.

You pass requests to your own transport and hand the entries it returns back to these classes.

## Installation

```
pip install .
```

To run the test suite, install the test extra:

```
pip install ".[test]"
pytest
```

## Encoding values (`bfrtkit.encoding`)

Values go onto the wire as big-endian bytes.

- `to_bytes(value, width=32)` encodes a value:
  - An integer is written in `width` bits. `width` must be a positive multiple of 8. A negative integer is written in two's complement.
  - A boolean becomes a single byte.
  - A string is encoded as UTF-8.
  - `bytes` are passed through unchanged.
  - An `ipaddress` address becomes its packed form.
  - A list or tuple of integers becomes an array of u32.
- `to_u32`, `to_u64` and `to_u128` decode unsigned integers.
- `to_text` decodes UTF-8.
- `to_bool` is true when any byte is non-zero.
- `to_ipv4` and `to_ipv6` decode addresses.
- `to_int_array` decodes consecutive u32 values.

```python
from bfrtkit.encoding import to_bytes, to_u32, to_ipv4

to_bytes(10, 16)                 # b"\x00\x0a"
to_bytes(10)                     # b"\x00\x00\x00\x0a"
to_u32(b"\x00\x01")              # 1
to_ipv4(bytes([192, 168, 0, 1])) # IPv4Address('192.168.0.1')
```

Conversions that cannot succeed raise `bfrtkit.errors.ByteConversionError`, a `ValueError`. Examples:

- a value too wide for the integer type,
- an address of the wrong length,
- invalid UTF-8,
- an array length that is not a multiple of 4.

## Match values and action data

`bfrtkit.match_value.MatchValue` has four constructors: `exact`, `range`, `lpm` and `ternary`. Its `kind` is a `MatchKind`. The following accessors raise `ValueError` when called on a match of another kind:

- `exact_value()`,
- `range_value()`,
- the `mask` property.

`bfrtkit.action_data.ActionData.of(key, value)` encodes one named parameter. It offers `as_u32`, `as_u64` and `as_u128`. `ActionDataRepeated.of(key, values)` encodes a list of values.

## Building table requests (`bfrtkit.table`)

```python
from bfrtkit.match_value import MatchValue
from bfrtkit.table import Request, RequestType

req = (
    Request("ingress.p4tg.frame_type.frame_type_monitor")
    .match_key("hdr.ipv4.dst_addr", MatchValue.lpm(bytes([10, 0, 0, 2]), 32))
    .match_key("ig_intr_md.ingress_port", MatchValue.exact(0))
    .action("ingress.p4tg.frame_type.set")
    .action_data("type", 1)
    .request_type(RequestType.WRITE)
)
```

Each builder method returns a new `Request` and leaves the original unchanged. The builder methods are:

- `match_key`, `match_keys`,
- `action`,
- `pipe`,
- `default`,
- `action_data`, `action_data_repeated`,
- `operation`,
- `request_type`.

Table-wide operations are chosen with `TableOperation`: `NONE`, `SYNC_COUNTERS` or `SYNC_REGISTER`.

A `TableEntry` that was read back gives you:

- its keys through `get_key` and `has_key`,
- its parameters through `get_action_data` and `has_action_data`.

When the name is not there, `get_key` raises `UnknownKeyNameError` and `get_action_data` raises `UnknownActionNameError`. Both are `KeyError` subclasses.

## Registers (`bfrtkit.register`)

`Register.from_table_entries(entries, name)` builds a `Register` from the entries read from a register table. It indexes each entry by its `$REGISTER_INDEX` key. Use `get(index)` to look up a `RegisterEntry`; it returns `None` when the index is absent. Each field of a `RegisterEntry` holds one value per pipe.

`RegisterRequest` describes a register access:

```python
from bfrtkit.register import RegisterRequest

req = RegisterRequest("ingress.counter").index(3).data("ingress.counter.f1", 42)
```

## Ports (`bfrtkit.port_manager`)

`PortManager.from_entries(entries)` maps front-panel `port/channel` names to device ports. It takes the entries of the `$PORT_STR_INFO` table. The manager then offers:

- `dev_port(port, channel)` and `frontpanel_port(dev_port)` to translate in each direction. Both raise `PortNotFoundError` for unknown ports.
- `parse_ports(entries)` to turn `$PORT` table entries into `Port` objects.
- `port_request` and `port_requests` to build `$PORT` write requests.
- `delete_request` to build a delete request.
- `enable_request` and `disable_request` to build update requests.

```python
from bfrtkit.port_manager import Port, Speed, FEC, Loopback

port = (
    Port(1, 0)
    .speed(Speed.BF_SPEED_100G)
    .fec(FEC.BF_FEC_TYP_NONE)
    .loopback(Loopback.BF_LPBK_MAC_NEAR)
)
```

`Speed`, `AutoNegotiation`, `FEC` and `Loopback` are string enums holding the switch's names. `Speed.to_u32()` gives the speed in Gb/s.

## Digests (`bfrtkit.digest`)

`Digest` holds a message from the data plane: a name and a mapping of field names to bytes. `to_json` writes each value as a list of byte values. `from_json` reads that form back.

## Printing tables (`bfrtkit.pretty_printer`)

```python
from bfrtkit.pretty_printer import PrettyPrinter

printer = PrettyPrinter()
text = printer.render_table(entries)
printer.print_table(entries)
```

Entries are grouped by table name. Each table gets a column per match key, prefixed `EXT:`, `LPM:`, `RNG:` or `TER:`. It also gets an `Action` column and an `Action parameters` column. The columns are sorted by name.

Data of up to 16 bytes is shown as a number. Longer data whose column name contains `addr` is shown differently when its length fits:

- 6 bytes are shown as a MAC address,
- 4 bytes are shown as an IPv4 address.

To turn this off, use `printer.infer_address_type(False)`.