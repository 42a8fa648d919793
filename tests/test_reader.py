from __future__ import annotations

import codecs
import io
from pathlib import Path

import pytest

from uvt.errors import InputDecodeError
from uvt.oplang.reader import decode
from uvt.oplang.reader import readFile
from uvt.oplang.reader import readStream


SCRIPT = "!simulate\r\nLanguage,Lang:0x00(4)\r\n@Language=0x01020304\r\n"
EXPECTED = "!simulate\nLanguage,Lang:0x00(4)\n@Language=0x01020304\n"


class FakeStdin(io.TextIOWrapper):
    def isatty(self) -> bool:
        return False


class FakeTty(io.StringIO):
    def isatty(self) -> bool:
        return True


def test_decode_utf16_le_with_bom() -> None:
    assert decode(codecs.BOM_UTF16_LE + SCRIPT.encode("utf-16-le")) == EXPECTED


def test_decode_utf16_le_without_bom() -> None:
    assert decode(SCRIPT.encode("utf-16-le")) == EXPECTED


def test_decode_utf16_be_with_bom() -> None:
    assert decode(codecs.BOM_UTF16_BE + SCRIPT.encode("utf-16-be")) == EXPECTED


def test_decode_utf8() -> None:
    assert decode(SCRIPT.encode("utf-8")) == EXPECTED
    assert decode(codecs.BOM_UTF8 + SCRIPT.encode("utf-8")) == EXPECTED


def test_read_file(tmp_path: Path) -> None:
    p = tmp_path / "script.txt"
    p.write_bytes(codecs.BOM_UTF16_LE + SCRIPT.encode("utf-16-le"))
    assert readFile(str(p)) == EXPECTED


def test_read_stream_uses_binary_buffer() -> None:
    stream = FakeStdin(io.BytesIO(SCRIPT.encode("utf-16-le")))
    assert readStream(stream) == EXPECTED


def test_read_stream_from_terminal_is_empty() -> None:
    assert readStream(FakeTty("Lang:0")) == ""


@pytest.mark.parametrize(
    "data, encoding",
    [
        (b"Lang:0x00 # caf\xe9\n", "utf-8"),
        (codecs.BOM_UTF16_LE + "Lang:0".encode("utf-16-le") + b"\x00", "utf-16-le"),
    ],
)
def test_undecodable_input(data: bytes, encoding: str) -> None:
    with pytest.raises(InputDecodeError) as excinfo:
        decode(data)

    assert excinfo.value.encoding == encoding
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
