"""Matrix multiplication over the lane layout.

Elements only need `*` and `+`. Sums start from the first product rather than
from ``0`` so types like `Fraction`, `Decimal` or numpy scalars keep their type.
"""

from __future__ import annotations

import logging
from typing import Any, List, Sequence

from .errors import ShapeError
from .matrix import Matrix

logger = logging.getLogger(__name__)


def inner_product(a: Sequence[Any], b: Sequence[Any]) -> Any:
    """Return ``sum(a[k] * b[k])``; empty inputs give ``0``."""
    if len(a) != len(b):
        raise ShapeError(
            f"inner product needs equal lengths (given {len(a)} and {len(b)})",
            expected=len(a),
            actual=len(b),
            what="vector length",
        )
    if len(a) == 0:
        return 0
    it = zip(a, b)
    x, y = next(it)
    total = x * y
    for x, y in it:
        total = total + x * y
    return total


def dot(a: Matrix, b: Matrix) -> Matrix:
    """Multiply `a` by `b`.

    Requires ``a.columns == b.rows``. The result has ``a.rows`` rows and
    ``b.columns`` lanes; lane `i`, row `j` holds the inner product of lane `i`
    of `b` with row `j` of `a`.
    """
    if not isinstance(a, Matrix) or not isinstance(b, Matrix):
        raise TypeError("dot expects two Matrix operands")
    if a.columns != b.rows:
        raise ShapeError(
            "mismatched rows and columns, cannot perform dot product: the columns of the "
            "first matrix and the rows of the second must be the same size "
            f"(given first columns {a.columns}, given second rows {b.rows})",
            expected=a.columns,
            actual=b.rows,
            what="inner dimension",
        )
    logger.debug("dot: (%d x %d) . (%d x %d)", a.rows, a.columns, b.rows, b.columns)

    if b.columns == 0:
        return Matrix.empty()

    rows = [a.row(j) for j in range(a.rows)]
    lanes: List[list] = []
    for i in range(b.columns):
        col = b.column(i)
        lanes.append([inner_product(col, r) for r in rows])
    return Matrix._from_lanes(lanes, a.rows)
