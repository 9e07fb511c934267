# -*- encoding: utf-8 -*-
# @File   : report.py
# @Time   : 2026/10/12 21:31:40

"""Leveled message sink used by `DataFile` for diagnostics.

Anything matching `Reporter` may replace it, a no-op lambda included.
"""

import logging
from typing import Callable

from .consts import DebugLevel

Reporter = Callable[[DebugLevel, str], None]

logger = logging.getLogger('pydatafile')


def report(level: DebugLevel, message: str) -> None:
    logger.log(level.logging_level, message)
