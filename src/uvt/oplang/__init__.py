#!/usr/bin/env python3
# -*- coding: utf-8 -*-


# Operation (command-line arguments and script lines):
#
# operation     name_part ':' offset_part
#
# name_part     name [ '(' integer_literal ')' ]
#
# offset_part   integer_literal [ '(' integer_literal ')' ] [ '=' integer_literal ]
#
# integer_literal   decimal_literal | hex_literal
#
# decimal_literal   { DIGIT }+
#
# hex_literal       ('0x' | '0X') { HEX_DIGIT }+


# Command line:
#
# start         { option | operation }*
#
# option        '-f' | '--force' | '-r' | '--restart' | '-s' | '--simulate' | '-h' | '--help'


# Script (one entry per line, '#' starts a comment):
#
# start         { line }* EOF
#
# line          input_option | definition | operation | reference
#
# input_option  '!' ('force' | 'restart' | 'simulate')
#
# definition    alias ',' name_part ':' integer_literal [ '(' integer_literal ')' ]
#
# reference     '@' alias [ '=' integer_literal ]


from . import args
from . import number
from . import parser
from . import reader
from . import script
from . import text


__all__ = [
    "args",
    "number",
    "parser",
    "reader",
    "script",
    "text"
]
