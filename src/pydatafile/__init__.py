# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/12 20:01:52

import logging

from .consts import (
    COMMENT_INDICATORS,
    EQUAL_INDICATORS,
    DebugLevel,
    Flags
)
from .datafile import DataFile, DataFileError, NoFileNameError
from .model import Key, Section, SectionList
from .parser import DataFileParser, comment_str
from .report import Reporter, report

AUTOCREATE_SECTIONS = Flags.AUTOCREATE_SECTIONS
AUTOCREATE_KEYS = Flags.AUTOCREATE_KEYS

__all__ = [
    'DataFile', 'DataFileError', 'NoFileNameError',
    'DataFileParser', 'comment_str',
    'Key', 'Section', 'SectionList',
    'Flags', 'AUTOCREATE_SECTIONS', 'AUTOCREATE_KEYS',
    'DebugLevel', 'Reporter', 'report',
    'COMMENT_INDICATORS', 'EQUAL_INDICATORS'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
