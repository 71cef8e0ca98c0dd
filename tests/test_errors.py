import pytest

from bfrtkit.errors import (
    ByteConversionError,
    PortNotFoundError,
    RbfrtError,
    UnknownActionNameError,
    UnknownKeyNameError,
)


def test_unknown_key_name_carries_names():
    error = UnknownKeyNameError("$DEV_PORT", "$PORT")
    assert isinstance(error, RbfrtError)
    assert error.name == "$DEV_PORT"
    assert error.table_name == "$PORT"
    message = str(error)
    assert "$DEV_PORT" in message
    assert "$PORT" in message


def test_unknown_action_name_message():
    error = UnknownActionNameError("$SPEED")
    assert isinstance(error, KeyError)
    assert isinstance(error, RbfrtError)
    assert error.name == "$SPEED"
    assert "$SPEED" in str(error)


def test_byte_conversion_error_is_value_error():
    error = ByteConversionError("Ipv4Addr", "wrong length")
    assert isinstance(error, ValueError)
    assert isinstance(error, RbfrtError)
    assert error.target == "Ipv4Addr"
    message = str(error)
    assert "Ipv4Addr" in message
    assert "wrong length" in message


def test_port_not_found_caught_as_base():
    error = PortNotFoundError("1/0")
    assert isinstance(error, RbfrtError)
    assert error.name == "1/0"
    assert "1/0" in str(error)


@pytest.mark.parametrize(
    "error",
    [
        UnknownKeyNameError("$PORT_NAME", "$PORT_STR_INFO"),
        UnknownActionNameError("$FEC"),
        ByteConversionError("Ipv6Addr", "wrong length"),
        PortNotFoundError("7/2"),
    ],
)
def test_errors_are_raisable_and_caught_by_base(error):
    with pytest.raises(RbfrtError) as info:
        raise error
    assert info.value is error
    assert str(info.value) == str(error)