# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2026/10/12 21:05:16

import logging
from enum import IntEnum, IntFlag


class Flags(IntFlag):
    NONE = 0
    # let set_value() create a missing section.
    AUTOCREATE_SECTIONS = 1 << 1
    # let set_value() create a missing key.
    AUTOCREATE_KEYS = 1 << 2


DEFAULT_FLAGS = Flags.AUTOCREATE_SECTIONS | Flags.AUTOCREATE_KEYS


class DebugLevel(IntEnum):
    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4
    CRITICAL = 5  # stop processing after this one.

    @property
    def logging_level(self) -> int:
        return _LOGGING_LEVELS[self]


_LOGGING_LEVELS = {
    DebugLevel.DEBUG: logging.DEBUG,
    DebugLevel.INFO: logging.INFO,
    DebugLevel.WARN: logging.WARNING,
    DebugLevel.ERROR: logging.ERROR,
    DebugLevel.FATAL: logging.CRITICAL,
    DebugLevel.CRITICAL: logging.CRITICAL,
}

# first char of each is the one used when writing.
COMMENT_INDICATORS = ';#'
EQUAL_INDICATORS = '=:'
WHITESPACE = ' \t\n\r'
