#!/usr/bin/env python3
# -*- coding: utf-8 -*-


# Built-in
import os


# Local
from .common import NormalizePath


# External
import yaml


CONFIG_ENV_VAR = "UVT_CONFIG"

DEFAULT_EFIVARS_DIR = "/sys/firmware/efi/efivars"
DEFAULT_RESTART_COMMAND = ("systemctl", "reboot")


class StoreType:
    Efivarfs    = "efivarfs"
    Yaml        = "yaml"


class Config:
    def __init__(self, path=None):
        self.path = path

        self.store = StoreType.Efivarfs
        self.efivarsDir = DEFAULT_EFIVARS_DIR
        self.variablesFile = None
        self.restartCommand = list(DEFAULT_RESTART_COMMAND)

        self.force = False
        self.simulate = False

    def resolvePath(self, s):
        s = os.path.expanduser(s)
        if self.path is not None and not os.path.isabs(s):
            s = os.path.join(self.path, s)

        return str(NormalizePath(s))

    @staticmethod
    def fromEnvironment(error=print):
        file_path = os.environ.get(CONFIG_ENV_VAR)
        if not file_path:
            return Config()

        return Config.fromYaml(file_path, error)

    @staticmethod
    def fromYaml(file_path, error=print):
        ### File Loading ###

        if not os.path.isfile(file_path):
            error("File does not exist: %r" % file_path)
            return None

        with open(file_path, encoding="utf8") as inf:
            try:
                obj = yaml.safe_load(inf)

            except yaml.YAMLError as e:
                error("Unable to parse file: %r\n%s" % (file_path, e))
                return None

        if obj is None:
            obj = {}

        if not isinstance(obj, dict):
            error("Unexpected file format for file: %r" % file_path)
            return None

        ### Selected Options Sanity Check ###

        available_options = (
            "Store",
            "EfivarsDir",
            "VariablesFile",
            "RestartCommand",
            "Force",
            "Simulate"
        )

        for k in obj:
            if k not in available_options:
                error("Unrecognized option: %r" % k)
                return None

        ### Config Initialization ###

        config = Config(os.path.dirname(os.path.abspath(file_path)))

        is_non_null_str = lambda s: s and isinstance(s, str)

        ### Store Reading ###

        if "Store" in obj:
            store = obj["Store"]
            if store not in (StoreType.Efivarfs, StoreType.Yaml):
                error("Invalid value for \"Store\": %r" % store)
                return None

            config.store = store

        if "EfivarsDir" in obj:
            efivars_dir = obj["EfivarsDir"]
            if not is_non_null_str(efivars_dir):
                error("\"EfivarsDir\" is invalid")
                return None

            config.efivarsDir = config.resolvePath(efivars_dir)

        if "VariablesFile" in obj:
            variables_file = obj["VariablesFile"]
            if not is_non_null_str(variables_file):
                error("\"VariablesFile\" is invalid")
                return None

            config.variablesFile = config.resolvePath(variables_file)

        if config.store == StoreType.Yaml and config.variablesFile is None:
            error("\"VariablesFile\" not specified, but required by \"Store\": %r" % StoreType.Yaml)
            return None

        ### Restart Command Reading ###

        if "RestartCommand" in obj:
            command = obj["RestartCommand"]
            if isinstance(command, str):
                command = command.split()

            if not (isinstance(command, list) and command and all(is_non_null_str(arg) for arg in command)):
                error("Expected \"RestartCommand\" to be a non-empty list of strings")
                return None

            config.restartCommand = command

        ### Default Options Reading ###

        for key, attr in (("Force", "force"), ("Simulate", "simulate")):
            if key in obj:
                value = obj[key]
                if not isinstance(value, bool):
                    error("Expected \"%s\" to be a boolean" % key)
                    return None

                setattr(config, attr, value)

        return config
