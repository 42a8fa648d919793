#!/usr/bin/env python3
# -*- coding: utf-8 -*-


# Built-in
import errno
import fcntl
import os
import subprocess
import uuid


# Local
from . import common
from .common import PACK_U32
from .common import UNPACK_U32
from .config import DEFAULT_EFIVARS_DIR
from .config import StoreType
from .data import Value
from .data import Variable
from .errors import VariableAmbiguousError
from .errors import VariableNotFoundError
from .errors import VariableReadError
from .errors import VariableSizeError
from .errors import VariableWriteError


# External
import yaml


FS_IOC_GETFLAGS = 0x80086601
FS_IOC_SETFLAGS = 0x40086602
FS_IMMUTABLE_FL = 0x00000010

# EFI_VARIABLE_NON_VOLATILE | EFI_VARIABLE_BOOTSERVICE_ACCESS | EFI_VARIABLE_RUNTIME_ACCESS
DEFAULT_ATTRIBUTES = 0x00000007

GUID_LEN = 36


def vendorSortKey(vendor):
    # Order of the GUID as laid out in memory
    return uuid.UUID(vendor).bytes_le


class VariableStore:
    """
    Base class for a source of variables.

    Subclasses provide listVariables(), loadVariable() and saveVariable().
    """

    def __init__(self, out=print):
        self.out = out

    def listVariables(self):
        raise NotImplementedError

    def loadVariable(self, name, vendor):
        raise NotImplementedError

    def saveVariable(self, variable):
        raise NotImplementedError

    def getVariable(self, name, id_=None):
        keys = sorted((key for key in self.listVariables() if key[0] == name), key=lambda key: vendorSortKey(key[1]))

        if not keys:
            raise VariableNotFoundError(name)

        if len(keys) > 1 and id_ is None:
            self.listAmbiguous(keys)
            raise VariableAmbiguousError(name, keys)

        if len(keys) == 1:
            key = keys[0]

        elif id_ < len(keys):
            key = keys[id_]

        else:
            raise VariableNotFoundError("%s%s%d%s" % (name, common.CHAR_ARG_BKT_L, id_, common.CHAR_ARG_BKT_R))

        return self.loadVariable(*key)

    def listAmbiguous(self, keys):
        out = self.out

        out(common.ERR_VAR_GET_MANY_HEAD)
        for i, (name, vendor) in enumerate(keys):
            size = len(self.loadVariable(name, vendor).content)
            out("%s(%#04x)%s%#06x" % (name, i, common.ERR_VAR_GET_MANY_ITEM, size))

    @staticmethod
    def checkRange(variable, offset, size):
        length = len(variable.content)
        if offset + size > length:
            raise VariableSizeError(offset, size, length)

    def getValue(self, name, id_, offset, size):
        variable = self.getVariable(name, id_)
        self.checkRange(variable, offset, size)

        return Value(variable.content[offset:offset + size])

    def setValue(self, name, id_, offset, size, value, force=False, simulate=False):
        """
        Returns True if the value was (or, when simulating, would have been)
        written, False if it was already as requested.
        """

        variable = self.getVariable(name, id_)
        self.checkRange(variable, offset, size)

        if not force and value == variable.content[offset:offset + size]:
            return False

        variable.content[offset:offset + size] = value.data

        if not simulate:
            self.saveVariable(variable)

        return True


class EfivarsStore(VariableStore):
    """
    Variables exposed by the Linux efivarfs file system, one file per
    variable named "<Name>-<VendorGuid>" holding the attributes (32-bit,
    little-endian) followed by the data.
    """

    def __init__(self, path=DEFAULT_EFIVARS_DIR, out=print):
        super().__init__(out)
        self.path = str(path)

    def variablePath(self, name, vendor):
        return os.path.join(self.path, "%s-%s" % (name, vendor))

    def listVariables(self):
        try:
            filenames = os.listdir(self.path)

        except OSError as e:
            raise VariableReadError(self.path, e.strerror) from e

        keys = []

        for filename in filenames:
            if len(filename) < GUID_LEN + 2 or filename[-GUID_LEN - 1] != '-':
                continue

            vendor = filename[-GUID_LEN:]
            try:
                uuid.UUID(vendor)
            except ValueError:
                continue

            keys.append((filename[:-GUID_LEN - 1], vendor))

        return keys

    def loadVariable(self, name, vendor):
        try:
            with open(self.variablePath(name, vendor), "rb") as inf:
                data = inf.read()

        except OSError as e:
            raise VariableReadError(name, e.strerror) from e

        if len(data) < 4:
            raise VariableReadError(name, "missing attributes")

        return Variable(name, vendor, UNPACK_U32(data)[0], data[4:])

    @staticmethod
    def clearImmutable(path):
        fd = os.open(path, os.O_RDONLY)
        try:
            buf = bytearray(4)
            try:
                fcntl.ioctl(fd, FS_IOC_GETFLAGS, buf)

            except OSError as e:
                # Flags are not supported on every file system
                if e.errno in (errno.ENOTTY, errno.EOPNOTSUPP, errno.EINVAL):
                    return

                raise

            flags = UNPACK_U32(buf)[0]
            if flags & FS_IMMUTABLE_FL:
                fcntl.ioctl(fd, FS_IOC_SETFLAGS, PACK_U32(flags & ~FS_IMMUTABLE_FL))

        finally:
            os.close(fd)

    def saveVariable(self, variable):
        path = self.variablePath(variable.name, variable.vendor)

        try:
            self.clearImmutable(path)

            # The whole variable must go in a single write
            fd = os.open(path, os.O_WRONLY)
            try:
                os.write(fd, PACK_U32(variable.attributes) + bytes(variable.content))
            finally:
                os.close(fd)

        except OSError as e:
            raise VariableWriteError(variable.name, e.strerror) from e


class YamlStore(VariableStore):
    """
    Variables kept in a YAML file:

    Variables:
      - Name: Lang
        Vendor: 8be4df61-93ca-11d2-aa0d-00e098032b8c
        Attributes: 7
        Data: 65 6e 67
    """

    def __init__(self, path, out=print):
        super().__init__(out)
        self.path = str(path)

    def loadDocument(self):
        try:
            with open(self.path, encoding="utf8") as inf:
                obj = yaml.safe_load(inf)

        except (OSError, yaml.YAMLError) as e:
            raise VariableReadError(self.path, e) from e

        if obj is None:
            obj = {}

        entries = obj.get("Variables") if isinstance(obj, dict) else None
        if entries is None:
            entries = []

        if not (isinstance(entries, list) and all(isinstance(entry, dict) for entry in entries)):
            raise VariableReadError(self.path, "expected \"Variables\" to be a list of mappings")

        return obj, entries

    @staticmethod
    def entryToVariable(entry, path):
        name = entry.get("Name")
        vendor = str(entry.get("Vendor", ''))
        attributes = entry.get("Attributes", DEFAULT_ATTRIBUTES)
        data = entry.get("Data", '')

        if not (name and isinstance(name, str)):
            raise VariableReadError(path, "invalid variable name: %r" % name)

        try:
            uuid.UUID(vendor)
        except ValueError as e:
            raise VariableReadError(name, "invalid vendor: %r" % vendor) from e

        if not (isinstance(attributes, int) and 0 <= attributes <= 0xFFFFFFFF):
            raise VariableReadError(name, "invalid attributes: %r" % attributes)

        if not isinstance(data, str):
            raise VariableReadError(name, "invalid data: %r" % data)

        try:
            content = bytes.fromhex(data)
        except ValueError as e:
            raise VariableReadError(name, "invalid data: %r" % data) from e

        return Variable(name, vendor.lower(), attributes, content)

    def listVariables(self):
        _, entries = self.loadDocument()
        return [(variable.name, variable.vendor) for variable in (self.entryToVariable(entry, self.path) for entry in entries)]

    def findEntry(self, entries, name, vendor):
        for entry in entries:
            variable = self.entryToVariable(entry, self.path)
            if variable.name == name and variable.vendor == vendor:
                return entry, variable

        raise VariableNotFoundError(name)

    def loadVariable(self, name, vendor):
        _, entries = self.loadDocument()
        return self.findEntry(entries, name, vendor)[1]

    def saveVariable(self, variable):
        obj, entries = self.loadDocument()
        entry, _ = self.findEntry(entries, variable.name, variable.vendor)

        entry["Attributes"] = variable.attributes
        entry["Data"] = bytes(variable.content).hex(' ')

        try:
            with open(self.path, 'w', encoding="utf8") as outf:
                yaml.safe_dump(obj, outf, default_flow_style=False, sort_keys=False)

        except OSError as e:
            raise VariableWriteError(variable.name, e.strerror) from e


def openStore(config, out=print):
    if config.store == StoreType.Yaml:
        return YamlStore(config.variablesFile, out)

    return EfivarsStore(config.efivarsDir, out)


def restartSystem(command):
    return subprocess.call(command)
