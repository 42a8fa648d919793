from __future__ import annotations

import pytest

from uvt.data import Operation
from uvt.data import OperationAction
from uvt.data import OperationTarget
from uvt.data import Value
from uvt.errors import AssignmentError
from uvt.errors import DecimalFormatError
from uvt.errors import HexFormatError
from uvt.errors import NameBracketCloseError
from uvt.errors import NameBracketOpenError
from uvt.errors import OffsetBracketCloseError
from uvt.errors import OffsetBracketOpenError
from uvt.errors import ParseError
from uvt.errors import PositionError
from uvt.errors import PrematureEndError
from uvt.errors import SizeMismatchError
from uvt.oplang.parser import parseMultiple
from uvt.oplang.parser import parseOperation


def test_read_with_defaults() -> None:
    op = parseOperation("Lang:0x00")
    assert op.target == OperationTarget("Lang", 0, 1)
    assert op.target.id is None
    assert op.action == OperationAction.read()


def test_write_with_size() -> None:
    op = parseOperation("Lang:0x00(4)=0x01020304")
    assert op.target == OperationTarget("Lang", 0, 4)
    assert op.action == OperationAction.write(0x01020304)
    op.validate()


def test_id_in_brackets() -> None:
    op = parseOperation("Lang(2):0x00")
    assert op.target.id == 2
    assert op.target.name == "Lang"

    assert parseOperation("Lang(0x1F):0x00").target.id == 0x1F


def test_decimal_everywhere() -> None:
    op = parseOperation("Setup:16(2)=300")
    assert op.target == OperationTarget("Setup", 16, 2)
    assert op.action.value == 300


def test_size_mismatch_is_a_validation_error() -> None:
    op = parseOperation("Foo:0x00(1)=0x0100")
    with pytest.raises(SizeMismatchError) as excinfo:
        op.validate()

    assert excinfo.value.value == 0x100
    assert excinfo.value.size == 1


@pytest.mark.parametrize("s", ["Lang", "Lang:0:1", ":0x00", "Lang:"])
def test_position_errors(s: str) -> None:
    with pytest.raises(PositionError):
        parseOperation(s)


@pytest.mark.parametrize(
    "s, error_type",
    [
        ("La(1)(2):0", NameBracketOpenError),
        ("Lang(1:0", NameBracketCloseError),
        ("Lang:0(1)(2)", OffsetBracketOpenError),
        ("Lang:0(1", OffsetBracketCloseError),
        ("Lang:0=1=2", AssignmentError),
        ("Lang:0=", AssignmentError),
    ],
)
def test_grammar_errors(s: str, error_type: type) -> None:
    with pytest.raises(error_type):
        parseOperation(s)


def test_offset_falls_back_to_decimal_error() -> None:
    # Hex is tried first, the decimal error is the one reported
    with pytest.raises(DecimalFormatError):
        parseOperation("Lang:zz")


def test_id_falls_back_to_hex_error() -> None:
    with pytest.raises(HexFormatError):
        parseOperation("Lang(0xZZ):0")


def test_empty_size_is_premature_end() -> None:
    with pytest.raises(PrematureEndError):
        parseOperation("Lang:0()")


def test_formatted_write_parses_back() -> None:
    op = Operation(OperationTarget("Lang", 0x12, 4, 3), OperationAction.write(0x01020304))
    line = op.toString(Value.fromInt(op.action.value, op.target.size))

    assert line == "Lang(3):0x0012(4)=0x01020304"
    assert parseOperation(line) == op


def test_parse_multiple_returns_first_success() -> None:
    calls = []

    def failing(s: str) -> int:
        calls.append("failing")
        raise PositionError(s)

    def succeeding(s: str) -> int:
        calls.append("succeeding")
        return 1

    def unreached(s: str) -> int:
        calls.append("unreached")
        return 2

    assert parseMultiple("x", failing, succeeding, unreached) == 1
    assert calls == ["failing", "succeeding"]


def test_parse_multiple_keeps_last_error() -> None:
    def first(s: str) -> int:
        raise PositionError(s)

    def last(s: str) -> int:
        raise AssignmentError(s)

    with pytest.raises(AssignmentError):
        parseMultiple("x", first, last)


def test_parse_multiple_does_not_swallow_other_errors() -> None:
    def broken(s: str) -> int:
        raise KeyError(s)

    def fine(s: str) -> int:
        return 0

    with pytest.raises(KeyError):
        parseMultiple("x", broken, fine)

    assert issubclass(AssignmentError, ParseError)
