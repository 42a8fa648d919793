#!/usr/bin/env python3
# -*- coding: utf-8 -*-


from .. import common
from ..data import Operation
from ..data import OperationAction
from ..data import OperationTarget
from ..errors import AssignmentError
from ..errors import NameBracketCloseError
from ..errors import NameBracketOpenError
from ..errors import OffsetBracketCloseError
from ..errors import OffsetBracketOpenError
from ..errors import ParseError
from ..errors import PositionError
from .number import parseDecimal
from .number import parseHex
from .text import contains
from .text import splitOn
from .text import stripTrailing


def parseMultiple(s, *parsers):
    """
    Tries each parser on `s` in order and returns the first result.
    If none of them matched, re-raises the error of the last one.
    """

    assert parsers

    for parser in parsers[:-1]:
        try:
            return parser(s)

        except ParseError:
            continue

    return parsers[-1](s)


def parseDecOrHex(s):
    return parseMultiple(s, parseDecimal, parseHex)


def parseHexOrDec(s):
    return parseMultiple(s, parseHex, parseDecimal)


def splitBracket(s, open_error_type, close_error_type):
    """
    Splits "a(b)" into ("a", "b").
    """

    parts = splitOn(s, common.CHAR_ARG_BKT_L)

    # At most a single opening bracket
    if len(parts) != 2:
        raise open_error_type(s)

    inner = stripTrailing(parts[1], common.CHAR_ARG_BKT_R)
    if inner is None:
        raise close_error_type(s)

    return parts[0], inner


def parseOperationType(s):
    """
    Returns (offset_text, action) for the part on the right of the offset
    indicator.
    """

    if not contains(s, common.CHAR_ARG_ASS):
        return s, OperationAction.read()

    parts = splitOn(s, common.CHAR_ARG_ASS)

    # A single assignment operator followed by a value
    if len(parts) != 2:
        raise AssignmentError(s)

    offset, value = parts
    return offset, OperationAction.write(parseHexOrDec(value))


def parseOperation(s):
    parts = splitOn(s, common.CHAR_ARG_POS)

    # Exactly one offset indicator
    if len(parts) != 2:
        raise PositionError(s)

    name, offset = parts

    id_ = None
    if contains(name, common.CHAR_ARG_BKT_L):
        name, id_string = splitBracket(name, NameBracketOpenError, NameBracketCloseError)
        id_ = parseDecOrHex(id_string)

    if not name:
        raise PositionError(s)

    offset, action = parseOperationType(offset)

    size = 1
    if contains(offset, common.CHAR_ARG_BKT_L):
        offset, size_string = splitBracket(offset, OffsetBracketOpenError, OffsetBracketCloseError)
        size = parseDecOrHex(size_string)

    offset = parseHexOrDec(offset)

    return Operation(OperationTarget(name, offset, size, id_), action)
