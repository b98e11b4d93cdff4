"""Rectangularity checks for lane grids."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Optional, Sequence

from .errors import ShapeError

ShapeStatus = Literal["ok", "indeterminate", "mismatch"]


@dataclass(frozen=True)
class ShapeCheck:
    """Outcome of `validate_rectangular`.

    `rows` is the common lane length when `status == "ok"`. On a mismatch,
    `lane_index` / `lane_length` describe the first offending lane.
    """

    status: ShapeStatus
    rows: Optional[int] = None
    lane_index: Optional[int] = None
    lane_length: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    def raise_for_status(self) -> int:
        """Return `rows`, or raise `ShapeError` describing why there is none."""
        if self.status == "ok":
            assert self.rows is not None
            return self.rows
        if self.status == "indeterminate":
            raise ShapeError("cannot determine a row count from a grid with no lanes")
        raise ShapeError(
            f"all lanes must have the same length: lane {self.lane_index} has "
            f"{self.lane_length}, expected {self.rows}",
            expected=self.rows,
            actual=self.lane_length,
            what="lane length",
        )


def _tolist(x: Any) -> Any:
    """Best-effort conversion for numpy arrays without importing numpy."""

    tolist = getattr(x, "tolist", None)
    if callable(tolist):
        return tolist()
    return x


def _is_sequence(x: Any) -> bool:
    return isinstance(x, Sequence) and not isinstance(x, (bytes, str))


def validate_rectangular(grid: Sequence[Sequence[Any]]) -> ShapeCheck:
    """Return the common lane length of `grid` without raising on bad shapes.

    A grid with no lanes is ``"indeterminate"``; a grid whose lanes differ in
    length is a ``"mismatch"`` (with `rows` set to the first lane's length).
    """
    grid = _tolist(grid)
    if not _is_sequence(grid):
        raise TypeError("grid must be a sequence of lanes")
    if len(grid) == 0:
        return ShapeCheck(status="indeterminate")

    lengths: list[int] = []
    for i, lane in enumerate(grid):
        lane = _tolist(lane)
        if not _is_sequence(lane):
            raise TypeError(f"lane {i} must be a sequence")
        lengths.append(len(lane))

    rows = lengths[0]
    for i, n in enumerate(lengths):
        if n != rows:
            return ShapeCheck(status="mismatch", rows=rows, lane_index=i, lane_length=n)
    return ShapeCheck(status="ok", rows=rows)
