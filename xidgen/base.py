import logging
import os
import os.path
from collections import OrderedDict

import yaml

from . import log


class XidgenException(Exception):
    pass


class UserException(XidgenException):
    pass


class UsageError(UserException):
    pass


class ConfigError(UserException):
    pass


class GenerationError(XidgenException):
    pass


class ParseError(UserException):
    def __init__(self, lineno, line, reason):
        super().__init__("Line %d: %s: %r" % (lineno, reason, line))
        self.lineno = lineno
        self.line = line
        self.reason = reason


log.monkey_patch_trace_logging()


def get_logger(path):
    return logging.getLogger(os.path.basename(os.path.splitext(path)[0]))


log.enable_pretty_logging(
    fmt="%(color)s[%(levelname)1.1s %(module)s:%(lineno)d]%(end_color)s" + " %(message)s"
)

logger = logging.getLogger()

# Highest code point covered by the generated tables.
DOMAIN_MAX = 0x3134A


class Config:
    def __init__(self, tree):
        self._tree = tree

    @property
    def separator(self):
        return str(self._tree["separator"])

    @property
    def range_marker(self):
        return str(self._tree["rangeMarker"])

    @property
    def encoding(self):
        return self._tree.get("encoding", "utf-8")

    @property
    def input_dir(self):
        return self._tree.get("inputDir", ".")

    @property
    def classifications(self):
        return tuple(self._tree["classifications"])

    def input_path(self, classification, input_dir=None):
        if input_dir is None:
            input_dir = self.input_dir
        return os.path.join(input_dir, "%s.txt" % classification)

    def classification(self, arg):
        """Resolves a command line argument to a known classification.

        Spaces are ignored, so `"XID_ START"` selects `XID_START`.
        """
        if arg is None:
            raise UsageError(
                "missing argument. Please specify either %s."
                % " or ".join(self.classifications)
            )
        name = "".join(arg.split(" "))
        if name not in self.classifications:
            raise UsageError(
                "unrecognised option '%s'. Please specify %s."
                % (arg, " or ".join(self.classifications))
            )
        return name


class ConfigParser:
    REQUIRED_KEYS = ["separator", "rangeMarker", "classifications"]

    def _overrides(self, tree, cfg_pairs):
        def resolve_path(path, v):
            chunks = path.split(".")

            last = chunks.pop()
            node = tree

            for chunk in chunks:
                if node.get(chunk, None) is None:
                    node[chunk] = OrderedDict()
                node = node[chunk]
            node[last] = v

        for path, v in cfg_pairs:
            resolve_path(path, v)

    def _parse_cfg_pairs(self, str_list):
        pairs = []
        for x in str_list:
            if "=" not in x:
                raise ConfigError("invalid key-value pair provided: %r" % x)
            pairs.append(x.split("=", 1))
        return pairs

    def _parse_global(self, cfg_file=None):
        if cfg_file is None:
            with open(
                os.path.join(os.path.dirname(__file__), "global.yaml"), encoding="utf-8"
            ) as f:
                return yaml.safe_load(f)
        return yaml.safe_load(cfg_file)

    def parse(self, cfg_file=None, cfg_pairs=None):
        try:
            tree = self._parse_global(cfg_file)
        except yaml.YAMLError as e:
            raise ConfigError("Error parsing configuration: %s" % e)

        if not isinstance(tree, dict):
            raise ConfigError("Configuration must be a mapping.")

        if cfg_pairs is not None:
            self._overrides(tree, self._parse_cfg_pairs(cfg_pairs))

        for key in self.REQUIRED_KEYS:
            if key not in tree:
                raise ConfigError("%s key missing from configuration." % key)

        if not str(tree["separator"]):
            raise ConfigError("separator must not be empty.")
        if not str(tree["rangeMarker"]):
            raise ConfigError("rangeMarker must not be empty.")

        logger.trace("Configuration: %r" % tree)
        return Config(tree)
