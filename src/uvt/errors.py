#!/usr/bin/env python3
# -*- coding: utf-8 -*-


from . import common


class UvtError(Exception):
    pass


### Parse errors ###
# A parse error means "this alternative did not match"; parseMultiple()
# moves on to the next parser when one is raised.

class ParseError(UvtError, ValueError):
    message = common.ERR_ARG

    def __init__(self, text=None):
        self.text = text
        if text is None:
            super().__init__(self.message)
        else:
            super().__init__("%s \"%s\"" % (self.message, text))


class PositionError(ParseError):
    message = common.ERR_ARG_POS


class NameBracketOpenError(ParseError):
    message = common.ERR_ARG_VAR_BKT_L


class NameBracketCloseError(ParseError):
    message = common.ERR_ARG_VAR_BKT_R


class OffsetBracketOpenError(ParseError):
    message = common.ERR_ARG_POS_BKT_L


class OffsetBracketCloseError(ParseError):
    message = common.ERR_ARG_POS_BKT_R


class AssignmentError(ParseError):
    message = common.ERR_ARG_ASS


class DecimalFormatError(ParseError):
    message = common.ERR_ARG_NUM_DEC


class HexFormatError(ParseError):
    message = common.ERR_ARG_NUM_HEX


class HexPrefixError(ParseError):
    message = common.ERR_ARG_NUM_HEX_PREFIX


class PrematureEndError(ParseError):
    message = common.ERR_ARG_MORE


class SizeLimitError(ParseError):
    def __init__(self, text):
        self.text = text
        UvtError.__init__(self, common.ERR_ARG_SIZE_LIMIT % text)


class OptionError(ParseError):
    message = common.ERR_ARG_OPT


class InputOptionError(ParseError):
    message = common.ERR_INPUT_OPT


class InputDefinitionError(ParseError):
    message = common.ERR_INPUT_DEF


class InputReferenceError(ParseError):
    message = common.ERR_INPUT_REF


### Validation errors ###

class ValidationError(UvtError, ValueError):
    pass


class SizeMismatchError(ValidationError):
    def __init__(self, value, size, target=None):
        self.value = value
        self.size = size
        self.target = target

        message = common.ERR_ARG_SIZE_MISMATCH % (value, size)
        if target is not None:
            message = "%s: \"%s\"" % (message, target)

        super().__init__(message)


class SizeRangeError(ValidationError):
    def __init__(self, size, target=None):
        self.size = size
        self.target = target

        message = common.ERR_ARG_SIZE_RANGE % size
        if target is not None:
            message = "%s: \"%s\"" % (message, target)

        super().__init__(message)


class DefinitionValueError(ValidationError):
    def __init__(self, target):
        self.target = target
        super().__init__(common.ERR_INPUT_DEF_SET % target)


class ReferenceNotFoundError(ValidationError, LookupError):
    def __init__(self, alias):
        self.alias = alias
        super().__init__("%s \"%s\"" % (common.ERR_INPUT_REF_NONE, alias))


### Context wrappers ###

class ArgumentError(UvtError, ValueError):
    def __init__(self, token, cause):
        self.token = token
        self.cause = cause
        super().__init__("%s: \"%s\" - %s" % (common.ERR_ARG, token, cause))


class InputError(UvtError, ValueError):
    def __init__(self, line_number, line, cause):
        self.lineNumber = line_number
        self.line = line
        self.cause = cause
        super().__init__("%s: \"%s\" - %s" % (common.ERR_INPUT % line_number, line, cause))


### Control conditions ###

class ArgumentNoneError(UvtError):
    def __init__(self):
        super().__init__('')


class InputNoneError(UvtError):
    def __init__(self):
        super().__init__(common.ERR_INPUT_NONE)


### Input decoding ###

class InputDecodeError(UvtError, ValueError):
    def __init__(self, encoding, reason):
        self.encoding = encoding
        self.reason = reason
        super().__init__("%s (%s): %s" % (common.ERR_INPUT_DECODE, encoding, reason))


### Firmware ###

class FirmwareError(UvtError):
    pass


class VariableNotFoundError(FirmwareError, LookupError):
    def __init__(self, name):
        self.name = name
        super().__init__("%s: \"%s\"" % (common.ERR_VAR_GET_NONE, name))


class VariableAmbiguousError(FirmwareError, LookupError):
    def __init__(self, name, candidates):
        self.name = name
        self.candidates = candidates
        super().__init__(common.ERR_VAR_GET_MANY)


class VariableSizeError(FirmwareError, IndexError):
    def __init__(self, offset, size, length):
        self.offset = offset
        self.size = size
        self.length = length
        super().__init__(common.ERR_VAR_SIZE % (length, offset, size))


class VariableReadError(FirmwareError):
    def __init__(self, name, reason):
        self.name = name
        self.reason = reason
        super().__init__("%s: \"%s\" (%s)" % (common.ERR_VAR_GET, name, reason))


class VariableWriteError(FirmwareError):
    def __init__(self, name, reason):
        self.name = name
        self.reason = reason
        super().__init__("%s: \"%s\" (%s)" % (common.ERR_VAR_SET, name, reason))


