from __future__ import annotations

import pytest

from uvt.data import Args
from uvt.data import Operation
from uvt.data import OperationAction
from uvt.data import OperationTarget
from uvt.data import OptionType
from uvt.data import Value
from uvt.errors import SizeMismatchError


def test_value_is_little_endian() -> None:
    value = Value.fromInt(0x01020304, 4)
    assert value.data == b"\x04\x03\x02\x01"
    assert value.toInt() == 0x01020304
    assert value == b"\x04\x03\x02\x01"


def test_value_is_masked_to_size() -> None:
    assert Value.fromInt(0x1FF, 1).data == b"\xff"


def test_value_string_is_zero_padded() -> None:
    assert Value(b"\x01").toString() == "0x01"
    assert Value(b"\x01\x00").toString() == "0x0001"
    assert Value.fromInt(0xAB, 8).toString() == "0x00000000000000ab"


def test_target_string() -> None:
    assert OperationTarget("Lang", 0, 1).toString() == "Lang:0x0000"
    assert OperationTarget("Lang", 0x20, 2, 1).toString() == "Lang(1):0x0020(2)"


def test_operation_string_can_be_read_back_as_input() -> None:
    op = Operation(OperationTarget("Setup", 0x1AB), OperationAction.read())
    assert op.toString(Value(b"\x05")) == "Setup:0x01ab=0x05"


def test_validate_accepts_largest_value_for_size() -> None:
    for size in range(1, 9):
        Operation(OperationTarget("V", 0, size), OperationAction.write((1 << (size * 8)) - 1)).validate()


def test_validate_rejects_one_past_largest_value() -> None:
    op = Operation(OperationTarget("V", 0, 1), OperationAction.write(0x100))
    with pytest.raises(SizeMismatchError):
        op.validate()


def test_args_set_option() -> None:
    args = Args()
    for option in OptionType:
        args.setOption(option)

    assert args.force and args.restart and args.simulate and args.usage
