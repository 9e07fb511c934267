"""Pytest configuration.

Ensures `src/` is on sys.path so tests can import `pydatafile`
from a plain checkout.
"""

import sys
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).resolve().parent.parent / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

SAMPLE = """\
; global setting
Debug=1

[Server]
; listen port
Port=8080
"""


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "sample.ini"
    path.write_text(SAMPLE, encoding="utf-8")
    return path
