#!/usr/bin/env python3
# -*- coding: utf-8 -*-


import codecs
import sys

from .. import common
from ..errors import InputDecodeError


def looksLikeUtf16Le(data):
    # ASCII text encoded as UTF-16 LE has a NUL in every odd position
    odd = data[1::2]
    return len(data) >= 2 and len(data) % 2 == 0 and odd.count(0) * 2 >= len(odd)


def decode(data):
    """
    Decodes a script: UTF-16 when marked so by a byte order mark
    or detected as UTF-16 LE, UTF-8 otherwise.
    Byte order marks and carriage returns are dropped.
    """

    if data.startswith(codecs.BOM_UTF16_LE):
        encoding = "utf-16-le"

    elif data.startswith(codecs.BOM_UTF16_BE):
        encoding = "utf-16-be"

    elif looksLikeUtf16Le(data):
        encoding = "utf-16-le"

    else:
        encoding = "utf-8"

    try:
        text = data.decode(encoding)

    except UnicodeDecodeError as e:
        raise InputDecodeError(encoding, e.reason) from e

    return ''.join(c for c in text if c not in (common.CHAR_CTL_BOM, common.CHAR_CTL_CR))


def readStream(stream=None):
    if stream is None:
        stream = sys.stdin

    # Nothing is piped in
    if stream is None or stream.isatty():
        return ''

    buffer = getattr(stream, "buffer", None)
    if buffer is not None:
        data = buffer.read()

    else:
        data = stream.read()
        if isinstance(data, str):
            data = data.encode("utf-8")

    return decode(data)


def readFile(path):
    with open(path, "rb") as inf:
        return decode(inf.read())
