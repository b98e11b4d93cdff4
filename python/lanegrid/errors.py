"""Exception types raised by `lanegrid`."""

from __future__ import annotations

from typing import Optional


class ShapeError(ValueError):
    """Raised when input dimensions do not fit a matrix's shape.

    `expected` and `actual` are the sizes being compared; `what` names the
    dimension (e.g. ``"row length"``) and is used in the default message.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        expected: Optional[int] = None,
        actual: Optional[int] = None,
        what: str = "size",
    ):
        if message is None:
            message = f"{what} mismatch: expected {expected}, given {actual}"
        super().__init__(message)
        self.expected = expected
        self.actual = actual
        self.what = what


class LaneIndexError(IndexError):
    """Raised on out-of-bounds lane (column) or row access."""

    def __init__(self, index: int, bound: int, *, axis: str = "column"):
        super().__init__(f"{axis} index {index} out of range [0, {bound})")
        self.index = index
        self.bound = bound
        self.axis = axis
