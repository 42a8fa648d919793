#!/usr/bin/env python3
# -*- coding: utf-8 -*-


from .. import common
from ..data import Args
from ..data import EntryType
from ..data import InputEntry
from ..data import Operation
from ..data import OptionType
from ..errors import DefinitionValueError
from ..errors import InputDefinitionError
from ..errors import InputError
from ..errors import InputNoneError
from ..errors import InputOptionError
from ..errors import InputReferenceError
from ..errors import ParseError
from ..errors import ReferenceNotFoundError
from .parser import parseMultiple
from .parser import parseOperation
from .parser import parseOperationType
from .text import findFirst
from .text import splitOn
from .text import splitOnce
from .text import stripLeading
from .text import trim


INPUT_OPTIONS = {
    common.OPT_INPUT_FORCE:     OptionType.Force,
    common.OPT_INPUT_RESTART:   OptionType.Restart,
    common.OPT_INPUT_SIMULATE:  OptionType.Simulate
}


def readLines(text):
    """
    Yields (line_number, line) for every line that is left
    non-empty once comments and surrounding blanks are removed.
    """

    for i, line in enumerate(splitOn(text, common.CHAR_CTL_LF), 1):
        comment_start = findFirst(line, common.CHAR_INPUT_COMMENT)
        if comment_start == 0:
            continue

        if comment_start is not None:
            line = line[:comment_start]

        line = trim(line)
        if not line:
            continue

        yield i, line


def parseInputOption(s):
    name = stripLeading(s, common.CHAR_INPUT_OPT)
    if name is None or name not in INPUT_OPTIONS:
        raise InputOptionError(s)

    return InputEntry.fromOption(INPUT_OPTIONS[name])


def parseTargetDef(s):
    parts = splitOnce(s, common.CHAR_INPUT_DEF)
    if parts is None or not parts[0]:
        raise InputDefinitionError(s)

    alias, target = parts

    operation = parseOperation(target)
    if operation.action.isWrite():
        raise DefinitionValueError(alias)

    return InputEntry.fromDefinition(alias, operation.target)


def parseInputOperation(s):
    return InputEntry.fromOperation(parseOperation(s))


def parseTargetRef(s):
    ref = stripLeading(s, common.CHAR_INPUT_REF)
    if ref is None:
        raise InputReferenceError(s)

    ass = findFirst(ref, common.CHAR_ARG_ASS)
    if ass is None:
        alias = trim(ref)
        action = None

    else:
        alias = trim(ref[:ass])

        # The operator stays with the value, as parseOperationType() expects it
        _, action = parseOperationType(common.CHAR_ARG_ASS + trim(ref[ass + 1:]))

    if not alias:
        raise InputReferenceError(s)

    return InputEntry.fromReference(alias, action)


def parseEntries(text):
    entries = []

    for line_number, line in readLines(text):
        try:
            entry = parseMultiple(line, parseInputOption, parseTargetDef, parseInputOperation, parseTargetRef)

        except ParseError as e:
            raise InputError(line_number, line, e) from e

        entries.append(entry)

    return entries


def resolveEntries(entries):
    # Duplicate aliases: the last definition wins
    targets = dict(entry.asDefinition() for entry in entries if entry.type == EntryType.TargetDefinition)

    operations = [entry.asOperation() for entry in entries if entry.type == EntryType.Operation]

    for entry in entries:
        if entry.type != EntryType.TargetReference:
            continue

        if entry.alias not in targets:
            raise ReferenceNotFoundError(entry.alias)

        operations.append(Operation(targets[entry.alias], entry.action))

    return operations


def parseInput(text):
    if not text:
        raise InputNoneError()

    entries = parseEntries(text)

    args = Args(resolveEntries(entries))
    for entry in entries:
        if entry.type == EntryType.Option:
            args.setOption(entry.option)

    args.validate()

    return args
