#!/usr/bin/env python3
# -*- coding: utf-8 -*-


from enum import IntEnum

from . import common
from .errors import SizeMismatchError
from .errors import SizeRangeError


class OperationTarget:
    """
    Identifies a value inside a variable: name (and an optional id telling
    namesakes apart), offset within the variable and value size in bytes.
    """

    def __init__(self, name, offset=0, size=1, id_=None):
        self.id = id_
        self.name = name
        self.offset = offset
        self.size = size

    def __eq__(self, other):
        if not isinstance(other, OperationTarget):
            return NotImplemented

        return (self.id, self.name, self.offset, self.size) == \
               (other.id, other.name, other.offset, other.size)

    def __repr__(self):
        return "OperationTarget(name=%r, offset=%#x, size=%d, id=%r)" % (self.name, self.offset, self.size, self.id)

    def toString(self):
        id_string = '' if self.id is None else "%s%d%s" % (common.CHAR_ARG_BKT_L, self.id, common.CHAR_ARG_BKT_R)
        size_string = '' if self.size == 1 else "%s%d%s" % (common.CHAR_ARG_BKT_L, self.size, common.CHAR_ARG_BKT_R)

        return "%s%s%s%#06x%s" % (self.name, id_string, common.CHAR_ARG_POS, self.offset, size_string)


class ActionType(IntEnum):
    Read    = 0
    Write   = 1


class OperationAction:
    def __init__(self, type_=ActionType.Read, value=None):
        assert (type_ == ActionType.Read) == (value is None)

        self.type = type_
        self.value = value

    @staticmethod
    def read():
        return OperationAction()

    @staticmethod
    def write(value):
        return OperationAction(ActionType.Write, value)

    def isWrite(self):
        return self.type == ActionType.Write

    def __eq__(self, other):
        if not isinstance(other, OperationAction):
            return NotImplemented

        return self.type == other.type and self.value == other.value

    def __repr__(self):
        if self.isWrite():
            return "OperationAction.write(%#x)" % self.value

        return "OperationAction.read()"


class Operation:
    def __init__(self, target, action=None):
        self.target = target
        self.action = OperationAction() if action is None else action

    def __eq__(self, other):
        if not isinstance(other, Operation):
            return NotImplemented

        return self.target == other.target and self.action == other.action

    def __repr__(self):
        return "Operation(%r, %r)" % (self.target, self.action)

    def validate(self):
        size = self.target.size
        if not (1 <= size <= common.VALUE_MAX_SIZE):
            raise SizeRangeError(size, self.target.toString())

        if self.action.isWrite():
            value = self.action.value
            if value >= 1 << (size * 8):
                raise SizeMismatchError(value, size, self.target.toString())

    def toString(self, value):
        """
        Formats the operation together with a value, as a line that can be
        read back as script input.
        """

        return "%s%s%s" % (self.target.toString(), common.CHAR_ARG_ASS, value.toString(self.target.size))


class OptionType(IntEnum):
    Force       = 0
    Restart     = 1
    Simulate    = 2
    Usage       = 3


class Args:
    def __init__(self, operations=None, force=False, restart=False, simulate=False, usage=False):
        self.operations = [] if operations is None else operations

        self.force = force
        self.restart = restart
        self.simulate = simulate
        self.usage = usage

    def setOption(self, option):
        if option == OptionType.Force:
            self.force = True

        elif option == OptionType.Restart:
            self.restart = True

        elif option == OptionType.Simulate:
            self.simulate = True

        else:  # if option == OptionType.Usage
            self.usage = True

    def validate(self):
        # Nothing else runs when showing usage
        if self.usage:
            return

        for operation in self.operations:
            operation.validate()


class EntryType(IntEnum):
    Operation           = 0
    Option              = 1
    TargetDefinition    = 2
    TargetReference     = 3


class InputEntry:
    def __init__(self, type_, operation=None, option=None, alias=None, target=None, action=None):
        self.type = type_
        self.operation = operation
        self.option = option
        self.alias = alias
        self.target = target
        self.action = action

    @staticmethod
    def fromOperation(operation):
        return InputEntry(EntryType.Operation, operation=operation)

    @staticmethod
    def fromOption(option):
        return InputEntry(EntryType.Option, option=option)

    @staticmethod
    def fromDefinition(alias, target):
        return InputEntry(EntryType.TargetDefinition, alias=alias, target=target)

    @staticmethod
    def fromReference(alias, action):
        return InputEntry(EntryType.TargetReference, alias=alias, action=action)

    def asDefinition(self):
        if self.type != EntryType.TargetDefinition:
            raise RuntimeError(common.ERR_INT_DEF)

        return self.alias, self.target

    def asOperation(self):
        if self.type != EntryType.Operation:
            raise RuntimeError(common.ERR_INT_OP)

        return self.operation

    def __repr__(self):
        return "InputEntry(%s)" % self.type.name


class Value:
    """
    A little-endian byte array at a given offset within a variable.
    """

    def __init__(self, data=b''):
        self.data = bytes(data)

    @staticmethod
    def fromInt(value, size):
        value &= (1 << (size * 8)) - 1
        return Value(value.to_bytes(size, "little"))

    def toInt(self):
        return int.from_bytes(self.data, "little")

    def toString(self, size=None):
        if size is None:
            size = len(self.data)

        return "%#0*x" % (2 + size * 2, self.toInt())

    def __eq__(self, other):
        if isinstance(other, Value):
            return self.data == other.data

        if isinstance(other, (bytes, bytearray)):
            return self.data == bytes(other)

        return NotImplemented

    def __len__(self):
        return len(self.data)

    def __repr__(self):
        return "Value(%s)" % self.toString()


class Variable:
    def __init__(self, name, vendor, attributes, content):
        self.name = name
        self.vendor = vendor
        self.attributes = attributes
        self.content = bytearray(content)
