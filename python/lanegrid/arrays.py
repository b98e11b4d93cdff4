"""NumPy interop.

Arrays use the conventional ``(rows, columns)`` orientation: element
``array[j, i]`` is row `j` of lane `i`.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from .errors import ShapeError
from .matrix import Matrix

logger = logging.getLogger(__name__)


def to_numpy(matrix: Matrix, dtype: Any = None) -> np.ndarray:
    if not isinstance(matrix, Matrix):
        raise TypeError("to_numpy expects a Matrix")
    if matrix.columns == 0:
        return np.empty((0, 0), dtype=dtype if dtype is not None else np.float64)
    out = np.asarray(matrix.as_grid(), dtype=dtype).T
    logger.debug("to_numpy: shape=%s dtype=%s", out.shape, out.dtype)
    return out


def from_numpy(array: Any) -> Matrix:
    arr = np.asarray(array)
    if arr.ndim != 2:
        raise ShapeError(
            f"expected a 2D array, got {arr.ndim}D",
            expected=2,
            actual=int(arr.ndim),
            what="array ndim",
        )
    rows, columns = arr.shape
    logger.debug("from_numpy: shape=(%d, %d) dtype=%s", rows, columns, arr.dtype)
    if columns == 0:
        return Matrix.empty()
    return Matrix.from_values(arr.T.tolist())
