"""Pytest config for Python tests.

We keep helper data alongside tests and make `python/` importable so the
suite also runs from a plain checkout (without `pip install -e .`).
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

THIS_DIR = Path(__file__).resolve().parent
SRC_DIR = THIS_DIR.parents[1] / "python"
for p in (THIS_DIR, SRC_DIR):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

import lanegrid  # noqa: E402


@pytest.fixture()
def pushed() -> lanegrid.Matrix:
    """The 2-lane, 3-row matrix built by the push scenario."""
    m = lanegrid.Matrix()
    m.push_column([2.0, 34.2])
    m.push_column([4.6, 6.4])
    m.push_row([5.7, 9.5])
    return m


@pytest.fixture()
def restore_logging():
    yield
    lanegrid.config.reset_logging()
