# LogFormatter taken straight from
# https://github.com/tornadoweb/tornado/blob/dcd1ef81df68ba928e6bbeb1cf194f1ff694ec49/tornado/log.py
# Other bits mangled to support Python 3 only and remove deps.
#
# Copyright 2012 Facebook
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may
# not use this file except in compliance with the License. You may obtain
# a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations
# under the License.
#

"""Logging support for xidgen.

Every module asks for its own logger through ``xidgen.base.get_logger``;
all of them propagate to the root logger, which gets a single colourised
stream handler from :func:`enable_pretty_logging`.

An extra ``TRACE`` level sits below ``DEBUG`` for per-line parser chatter.
"""

import logging
import sys

try:
    import curses
except ImportError:
    curses = None

LEVELS = {
    "critical": 50,
    "error": 40,
    "warning": 30,
    "info": 20,
    "debug": 10,
    "trace": 5,
}


def _stderr_supports_color():
    color = False
    if curses and hasattr(sys.stderr, "isatty") and sys.stderr.isatty():
        try:
            curses.setupterm()
            if curses.tigetnum("colors") > 0:
                color = True
        except Exception:
            pass
    return color


class LogFormatter(logging.Formatter):
    """Log formatter used in xidgen.

    * Color support when logging to a terminal that supports it.
    * Module and line number on every log line.
    * Multi-line messages and tracebacks are indented under the prefix.
    """

    DEFAULT_FORMAT = "%(color)s[%(levelname)1.1s %(module)s:%(lineno)d]%(end_color)s %(message)s"  # noqa
    DEFAULT_DATE_FORMAT = "%y%m%d %H:%M:%S"
    DEFAULT_COLORS = {
        logging.DEBUG: 4,  # Blue
        logging.INFO: 2,  # Green
        logging.WARNING: 3,  # Yellow
        logging.ERROR: 1,  # Red
        logging.CRITICAL: 1,  # Red
    }

    def __init__(
        self,
        color=True,
        fmt=DEFAULT_FORMAT,
        datefmt=DEFAULT_DATE_FORMAT,
        colors=DEFAULT_COLORS,
    ):
        r"""
        :arg bool color: Enables color support.
        :arg string fmt: Log message format.
          The text between ``%(color)s`` and ``%(end_color)s`` will be
          colored depending on the level if color support is on.
        :arg dict colors: color mappings from logging level to terminal color
          code
        :arg string datefmt: Datetime format for ``%(asctime)s``.
        """
        logging.Formatter.__init__(self, datefmt=datefmt)
        self._fmt = fmt

        self._colors = {}
        if color and _stderr_supports_color():
            fg_color = curses.tigetstr("setaf") or curses.tigetstr("setf") or b""
            for levelno, code in colors.items():
                self._colors[levelno] = str(curses.tparm(fg_color, code), "ascii")
            self._normal = str(curses.tigetstr("sgr0"), "ascii")
        else:
            self._normal = ""

    def format(self, record):
        try:
            record.message = record.getMessage()
        except Exception as e:
            record.message = "Bad message (%r): %r" % (e, record.__dict__)

        record.asctime = self.formatTime(record, self.datefmt)

        if record.levelno in self._colors:
            record.color = self._colors[record.levelno]
            record.end_color = self._normal
        else:
            record.color = record.end_color = ""

        formatted = self._fmt % record.__dict__

        if record.exc_info:
            if not record.exc_text:
                record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            lines = [formatted.rstrip()]
            lines.extend(record.exc_text.split("\n"))
            formatted = "\n".join(lines)
        return formatted.replace("\n", "\n    ")


def enable_pretty_logging(logger=None, fmt=None):
    """Turns on formatted logging output as configured."""
    if logger is None:
        logger = logging.getLogger()

    channel = logging.StreamHandler()
    if fmt is None:
        channel.setFormatter(LogFormatter())
    else:
        channel.setFormatter(LogFormatter(fmt=fmt))
    logger.addHandler(channel)


def monkey_patch_trace_logging():
    if hasattr(logging, "TRACE"):
        return

    setattr(logging, "TRACE", LEVELS["trace"])
    logging.addLevelName(logging.TRACE, "TRACE")

    def trace(self, msg, *args, **kwargs):
        if self.isEnabledFor(logging.TRACE):
            self._log(logging.TRACE, msg, args, **kwargs)

    logging.Logger.trace = trace

    LogFormatter.DEFAULT_COLORS[logging.TRACE] = 5
