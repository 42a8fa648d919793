#!/usr/bin/env python3
# -*- coding: utf-8 -*-


from .. import common
from ..data import Args
from ..data import EntryType
from ..data import InputEntry
from ..data import OptionType
from ..errors import ArgumentError
from ..errors import ArgumentNoneError
from ..errors import OptionError
from ..errors import ParseError
from .parser import parseMultiple
from .parser import parseOperation
from .text import contains
from .text import splitOn
from .text import startsWith


ARG_OPTIONS = (
    (common.OPT_ARG_FORCE,      OptionType.Force),
    (common.OPT_ARG_RESTART,    OptionType.Restart),
    (common.OPT_ARG_SIMULATE,   OptionType.Simulate),
    (common.OPT_ARG_USAGE,      OptionType.Usage)
)


def loadOptions(argv):
    """
    Splits raw arguments into tokens, keeping only those that look like an
    option (leading '-') or an operation (containing ':').
    Anything else, e.g. fragments of the executable path, is dropped.
    """

    tokens = []

    for arg in argv:
        for token in splitOn(arg, common.CHAR_ARG_SEP):
            if startsWith(token, common.CHAR_ARG_OPT) or contains(token, common.CHAR_ARG_POS):
                tokens.append(token)

    return tokens


def parseArgOption(s):
    for keys, option in ARG_OPTIONS:
        if s in keys:
            return InputEntry.fromOption(option)

    raise OptionError(s)


def parseArgOperation(s):
    return InputEntry.fromOperation(parseOperation(s))


def parseArgs(tokens):
    if not tokens:
        raise ArgumentNoneError()

    entries = []

    for token in tokens:
        # Without an offset indicator the token can only be an option,
        # so the option parser goes last to have its error reported
        if contains(token, common.CHAR_ARG_POS):
            parsers = (parseArgOption, parseArgOperation)
        else:
            parsers = (parseArgOperation, parseArgOption)

        try:
            entries.append(parseMultiple(token, *parsers))

        except ParseError as e:
            raise ArgumentError(token, e) from e

    args = Args()

    for entry in entries:
        if entry.type == EntryType.Option:
            args.setOption(entry.option)

        else:
            args.operations.append(entry.asOperation())

    args.validate()

    return args
