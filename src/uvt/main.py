#!/usr/bin/env python3
# -*- coding: utf-8 -*-


from enum import IntEnum
import os
import platform
import sys

from . import common
from .config import Config
from .data import Args
from .data import Value
from .errors import ArgumentNoneError
from .errors import FirmwareError
from .errors import InputNoneError
from .errors import UvtError
from .firmware import openStore
from .firmware import restartSystem
from .oplang.args import loadOptions
from .oplang.args import parseArgs
from .oplang.reader import readStream
from .oplang.script import parseInput


class Status(IntEnum):
    Success             = 0
    Aborted             = 1
    InvalidParameter    = 2


def getImageName(argv0=None):
    if argv0 is None:
        argv0 = sys.argv[0] if sys.argv and sys.argv[0] else ''

    name = os.path.splitext(os.path.basename(argv0))[0]
    if not name or name == "__main__":
        return common.TOOL_NAME.lower()

    return name


def showHeader(out=print):
    out("# %s (%s) Version %s @ %s %s Python %s" % (
        common.TOOL_TITLE, common.TOOL_NAME, common.TOOL_VERSION,
        platform.system(), platform.release(), platform.python_version()
    ))


def showUsage(out=print):
    out(common.USAGE % {"name": getImageName()})


def processOperation(store, operation, force, simulate, out=print):
    target = operation.target
    action = operation.action

    if not action.isWrite():
        try:
            value = store.getValue(target.name, target.id, target.offset, target.size)

        except FirmwareError as e:
            out("%s: %s" % (common.ERR_PREFIX_OP_GET, e))
            return Status.Aborted

        out(operation.toString(value))

    else:
        value = Value.fromInt(action.value, target.size)

        try:
            written = store.setValue(target.name, target.id, target.offset, target.size, value, force, simulate)

        except FirmwareError as e:
            out("%s: %s" % (common.ERR_PREFIX_OP_SET, e))
            return Status.Aborted

        out("%s%s" % (operation.toString(value), '' if written else common.OP_SKIPPED))

    return Status.Success


def loadArgs(argv, stdin=None, out=print):
    """
    Returns (args, status); args is None when there is nothing to do.
    """

    try:
        return parseArgs(loadOptions(argv)), Status.Success

    except ArgumentNoneError:
        pass

    except UvtError as e:
        out("%s: %s" % (common.ERR_PREFIX_ARG, e))
        return Args(usage=True), Status.InvalidParameter

    # No arguments, read a script from standard input instead
    try:
        return parseInput(readStream(stdin)), Status.Success

    except InputNoneError as e:
        out(str(e))
        return None, Status.Success

    except UvtError as e:
        out("%s: %s" % (common.ERR_PREFIX_INPUT, e))
        return Args(usage=True), Status.InvalidParameter


def main(argv=None, stdin=None, out=print, store=None):
    if argv is None:
        argv = sys.argv[1:]

    def error(*args, **kargs):
        out("%s: %s" % (common.ERR_PREFIX_CONFIG, ' '.join(map(str, args))), **kargs)

    showHeader(out)

    config = Config.fromEnvironment(error)
    if config is None:
        return Status.InvalidParameter

    args, status = loadArgs(argv, stdin, out)
    if args is None:
        return status

    if args.usage:
        showUsage(out)
        return status

    force = args.force or config.force
    simulate = args.simulate or config.simulate

    if store is None:
        store = openStore(config, out)

    for operation in args.operations:
        status = processOperation(store, operation, force, simulate, out)
        if status != Status.Success:
            return status

    if args.restart:
        restartSystem(config.restartCommand)

    return Status.Success


def run():
    sys.exit(int(main()))


if __name__ == "__main__":
    run()
