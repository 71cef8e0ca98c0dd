import pytest

from bfrtkit.action_data import ActionData, ActionDataRepeated
from bfrtkit.encoding import to_bytes, to_u32
from bfrtkit.errors import UnknownActionNameError, UnknownKeyNameError
from bfrtkit.match_value import MatchValue
from bfrtkit.table import Request, RequestType, TableEntry, TableOperation


@pytest.fixture
def entry():
    return TableEntry(
        table_id=1,
        table_name="ingress.forward",
        match_keys={"hdr.ipv4.dst_addr": MatchValue.lpm(bytes([10, 0, 0, 2]), 32)},
        action="ingress.set_port",
        action_data=[ActionData.of("port", 5), ActionData.of("port", 9), ActionData.of("vlan", 3)],
    )


def test_get_key_returns_match_value(entry):
    value = entry.get_key("hdr.ipv4.dst_addr")
    assert value == MatchValue.lpm(bytes([10, 0, 0, 2]), 32)


def test_get_key_missing_raises(entry):
    with pytest.raises(UnknownKeyNameError) as info:
        entry.get_key("missing")
    assert info.value.name == "missing"
    assert info.value.table_name == "ingress.forward"


def test_has_key(entry):
    assert entry.has_key("hdr.ipv4.dst_addr")
    assert not entry.has_key("missing")


def test_get_action_data_returns_first_match(entry):
    data = entry.get_action_data("port")
    assert to_u32(data.data) == 5


def test_get_action_data_missing_raises(entry):
    with pytest.raises(UnknownActionNameError) as info:
        entry.get_action_data("missing")
    assert info.value.name == "missing"


def test_has_action_data(entry):
    assert entry.has_action_data("vlan")
    assert not entry.has_action_data("missing")


@pytest.mark.parametrize(
    "operation, wire",
    [
        (TableOperation.NONE, ""),
        (TableOperation.SYNC_COUNTERS, "SyncCounters"),
        (TableOperation.SYNC_REGISTER, "SyncRegisters"),
    ],
)
def test_table_operation_wire_names(operation, wire):
    assert operation.value == wire


def test_request_defaults():
    req = Request("ingress.forward")
    assert req.table_name == "ingress.forward"
    assert req.keys == {}
    assert req.action_name is None
    assert not req.has_action
    assert req.data == []
    assert req.repeated_data == []
    assert req.kind is RequestType.READ
    assert req.table_operation is TableOperation.NONE
    assert req.is_default is False
    assert req.pipe_id is None


def test_match_key_adds_and_leaves_original():
    base = Request("t")
    req = base.match_key("port", MatchValue.exact(0))
    assert req.keys == {"port": MatchValue.exact(0)}
    assert base.keys == {}


def test_match_key_replaces_same_name():
    req = Request("t").match_key("port", MatchValue.exact(0)).match_key("port", MatchValue.exact(1))
    assert req.keys == {"port": MatchValue.exact(1)}


def test_match_keys_replaces_all():
    req = Request("t").match_key("a", MatchValue.exact(1)).match_keys({"b": MatchValue.range(20, 30)})
    assert list(req.keys) == ["b"]
    assert req.keys["b"].range_value() == (to_bytes(20), to_bytes(30))


def test_action_sets_name():
    req = Request("t").action("ingress.drop")
    assert req.action_name == "ingress.drop"
    assert req.has_action


def test_action_data_appends_encoded():
    req = Request("t").action_data("port", 5).action_data("enable", True)
    assert req.data == [ActionData.of("port", 5), ActionData.of("enable", True)]


def test_action_data_repeated_appends_encoded():
    req = Request("t").action_data_repeated("ports", [1, 2])
    assert req.repeated_data == [ActionDataRepeated.of("ports", [1, 2])]
    assert [to_u32(item) for item in req.repeated_data[0].data] == [1, 2]


def test_pipe_and_default():
    req = Request("t").pipe(2).default(True)
    assert req.pipe_id == 2
    assert req.is_default is True


def test_pipe_out_of_range_raises():
    with pytest.raises(ValueError):
        Request("t").pipe(-1)


def test_operation_and_request_type():
    req = Request("t").operation(TableOperation.SYNC_COUNTERS).request_type(RequestType.OPERATION)
    assert req.table_operation is TableOperation.SYNC_COUNTERS
    assert req.kind is RequestType.OPERATION


def test_builder_does_not_share_lists():
    base = Request("t").action_data("a", 1)
    derived = base.action_data("b", 2)
    assert len(base.data) == 1
    assert len(derived.data) == 2