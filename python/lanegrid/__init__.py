"""lanegrid Python package.

A small dense matrix container stored column by column ("lanes"), with
push/pop growth along both axes and matrix multiplication.
"""

from __future__ import annotations

import logging

from .errors import LaneIndexError, ShapeError
from ._shape import ShapeCheck, validate_rectangular
from .matrix import Lane, Matrix
from .numeric import dot, inner_product
from .arrays import from_numpy, to_numpy
from .sampling import random_fill, seed_source

from . import config as config  # noqa: E402
from . import sampling as sampling  # noqa: E402

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Matrix",
    "Lane",
    "ShapeError",
    "LaneIndexError",
    "ShapeCheck",
    "validate_rectangular",
    "inner_product",
    "dot",
    "to_numpy",
    "from_numpy",
    "random_fill",
    "seed_source",
    "config",
    "sampling",
]
