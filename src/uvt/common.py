#!/usr/bin/env python3
# -*- coding: utf-8 -*-


import os
import pathlib
import struct


TOOL_NAME       = "UVT"
TOOL_TITLE      = "UEFI Variable Tool"
TOOL_VERSION    = "2.0.0"


# Character definitions
CHAR_ARG_ASS        = '='       # Assignment operator
CHAR_ARG_BKT_L      = '('       # Opening bracket for variable identifier or size
CHAR_ARG_BKT_R      = ')'       # Closing bracket for variable identifier or size
CHAR_ARG_OPT        = '-'       # Option prefix
CHAR_ARG_POS        = ':'       # Offset indicator
CHAR_ARG_SEP        = ' '       # Argument separator
CHAR_BLANK_SPACE    = ' '
CHAR_BLANK_TAB      = '\t'
CHAR_INPUT_COMMENT  = '#'       # Rest of the line is ignored
CHAR_INPUT_DEF      = ','       # Definition separator
CHAR_INPUT_OPT      = '!'       # Input option prefix
CHAR_INPUT_REF      = '@'       # Reference prefix
CHAR_CTL_BOM        = '\ufeff'
CHAR_CTL_CR         = '\r'
CHAR_CTL_LF         = '\n'


# Command-line options
OPT_ARG_FORCE           = ("-f", "--force")
OPT_ARG_RESTART         = ("-r", "--restart")
OPT_ARG_SIMULATE        = ("-s", "--simulate")
OPT_ARG_USAGE           = ("-h", "--help")

# Input options (prefixed with CHAR_INPUT_OPT)
OPT_INPUT_FORCE         = "force"
OPT_INPUT_RESTART       = "restart"
OPT_INPUT_SIMULATE      = "simulate"


# Hexadecimal literals are limited by length, prefix included
HEX_LITERAL_MAX_LEN     = 2 * (18 + 1)

VALUE_MAX_SIZE          = 8


STRUCT_U32  = struct.Struct("<I")

PACK_U32    = STRUCT_U32.pack
UNPACK_U32  = STRUCT_U32.unpack_from


# Error message prefixes
ERR_PREFIX_ARG      = "Argument error"
ERR_PREFIX_CONFIG   = "Configuration error"
ERR_PREFIX_INPUT    = "Input error"
ERR_PREFIX_OP_GET   = "Get variable error"
ERR_PREFIX_OP_SET   = "Set variable error"

# Error messages
ERR_ARG                 = "Failed to parse"
ERR_ARG_ASS             = "Must have at most a single assignment operator (%s) followed by a value" % CHAR_ARG_ASS
ERR_ARG_MORE            = "Premature end of string"
ERR_ARG_NUM_DEC         = "Only digits 0-9 should appear in decimal value"
ERR_ARG_NUM_HEX         = "Only digits 0-9, a-f or A-F should appear in hexadecimal value"
ERR_ARG_NUM_HEX_PREFIX  = "Use prefix \"0x\" or \"0X\" for hexadecimal value"
ERR_ARG_OPT             = "Unrecognized option"
ERR_ARG_POS             = "Must have exactly one offset indicator (%s) preceded by a name and followed by a value" % CHAR_ARG_POS
ERR_ARG_POS_BKT_L       = "Surplus opening bracket in offset identifier"
ERR_ARG_POS_BKT_R       = "Missing closing bracket in offset identifier"
ERR_ARG_SIZE_LIMIT      = "Number %s is too large (64 bits or 8 bytes maximum)"
ERR_ARG_SIZE_MISMATCH   = "Value %#x too large to fit into %d bytes"
ERR_ARG_SIZE_RANGE      = "Size %%d out of range: must be from 1 to %d bytes" % VALUE_MAX_SIZE
ERR_ARG_VAR_BKT_L       = "Surplus opening bracket in variable identifier"
ERR_ARG_VAR_BKT_R       = "Missing closing bracket in variable identifier"
ERR_INPUT               = "Parse error in input at line %d"
ERR_INPUT_DEF           = "Malformed definition"
ERR_INPUT_DEF_SET       = "Definition for \"%s\" must not specify new value to set"
ERR_INPUT_DECODE        = "Unable to decode input"
ERR_INPUT_NONE          = "No command-line arguments or standard input: use -h or --help for usage information"
ERR_INPUT_OPT           = "Unrecognized input option"
ERR_INPUT_REF           = "Malformed reference"
ERR_INPUT_REF_NONE      = "Failed to resolve reference"
ERR_INT_DEF             = "Internal parser error: definition retrieval attempted on wrong entry type"
ERR_INT_OP              = "Internal parser error: operation retrieval attempted on wrong entry type"
ERR_VAR_GET             = "Failed to get variable"
ERR_VAR_GET_MANY        = "Use one of the above identifiers"
ERR_VAR_GET_MANY_HEAD   = "Which one do you mean?"
ERR_VAR_GET_MANY_ITEM   = " # Size: "
ERR_VAR_GET_NONE        = "No such variable"
ERR_VAR_SET             = "Failed to set variable"
ERR_VAR_SIZE            = "Variable size %#06x less than offset %#06x and value size %d"

# Operations
OP_SKIPPED              = " # Already"


USAGE = """Usage: %(name)s [<Options>] <Op1> [<Op2> [... [<OpN>]]
- or - %(name)s < <InputFile>
Where:
<Options>: Optional global-scope application settings
  -f --force     Force-write values even if already set as requested
  -h --help      Show usage information (precludes other operations)
  -r --restart   Upon succesful completion, perform a system restart
  -s --simulate  Do not write, only simulate actions (will still read)
<Op#>: Operation(s) to perform, can be multiple, each in the format:
  <VarName>[(<VarId>)]:<Offset>[(<Size>)][=<Value>]
Arg Overview:
  <VarName>      UEFI variable name to read or write to, case-sensitive
  <VarId>        If two variables share a name, will prompt to use this
  <Offset>       Data starting position within the given UEFI variable
  <Size>         Optional, a byte (1) by default if omitted; little-endian
  <Value>        Value to write, 8 bytes (64 bits) maximum; read if absent
  <InputFile>    Script to run, same base format as arguments + see below
File Overview:
  #                                   Comment, ignored until end of line
  !<force|restart|simulate>           Set options, same as above arguments
  <Def>,<VarName>:<Offset>[(<Size>)]  Define a variable to reference later
  @<Def>[=<Value>]                    Assign to a referenced variable
Example Command Line:
  %(name)s -s Lang:0x00 Lang:0x00(4)=0x01020304 Lang:0x00(4)
  Read byte at offset 0, simulate-set the dword (4 bytes), then read again
Example Input File:
  !simulate              # Simulate only, do not perform actual writes
  Language,Lang:0x00(4)  # Define a reference under the alias "Language"
  @Language=0x01020304   # Write to the target referred to by "Language"

<Offset>, <Size> and <Value> can be decimal or hexadecimal: use prefix "0x"
File should be a UTF-16 LE (or UTF-8) text
Output saved to a file can be re-used as input again: format is the same"""


def NormalizePath(path):
    return pathlib.Path(os.path.normcase(os.path.normpath(path))).resolve()
