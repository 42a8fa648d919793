#!/usr/bin/env python3
# -*- coding: utf-8 -*-


from .. import common
from ..errors import DecimalFormatError
from ..errors import HexFormatError
from ..errors import HexPrefixError
from ..errors import PrematureEndError
from ..errors import SizeLimitError


DEC_DIGITS = "0123456789"
HEX_DIGITS = "0123456789ABCDEFabcdef"


def nextChar(it, s):
    c = next(it, None)
    if c is None:
        raise PrematureEndError(s)

    return c


def parseDecimal(s):
    if not s:
        raise PrematureEndError(s)

    is_digit_c = lambda c: c in DEC_DIGITS

    if not all(is_digit_c(c) for c in s):
        raise DecimalFormatError(s)

    value = 0
    for c in s:
        value = value * 10 + (ord(c) - ord('0'))

    return value


def parseHex(s):
    it = iter(s)

    c0 = nextChar(it, s)
    c1 = nextChar(it, s)

    if c0 != '0' or c1 not in ('x', 'X'):
        raise HexPrefixError(s)

    if len(s) > common.HEX_LITERAL_MAX_LEN:
        raise SizeLimitError(s)

    digits = list(it)
    if not digits:
        raise PrematureEndError(s)

    is_hex_digit = lambda c: c in HEX_DIGITS

    if not all(is_hex_digit(c) for c in digits):
        raise HexFormatError(s)

    length = len(digits)

    value = 0
    for i, c in enumerate(digits):
        value += int(c, 16) << (4 * (length - i - 1))

    return value
