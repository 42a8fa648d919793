#!/usr/bin/env python3
# -*- coding: utf-8 -*-


from .common import TOOL_NAME
from .common import TOOL_TITLE
from .common import TOOL_VERSION

from .data import Args
from .data import Operation
from .data import OperationAction
from .data import OperationTarget
from .data import Value

from .oplang.args import parseArgs
from .oplang.script import parseInput


__all__ = [
    "TOOL_NAME", "TOOL_TITLE", "TOOL_VERSION",
    "Args",
    "Operation",
    "OperationAction",
    "OperationTarget",
    "Value",
    "parseArgs",
    "parseInput"
]
