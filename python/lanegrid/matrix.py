"""Column-major matrix container.

Storage is a list of *lanes*, one lane per column, each lane holding one entry
per row. The outer list length always equals `columns` and every lane length
equals `rows`; all mutators keep both counters in step with the storage.

Element types are unconstrained here. Only `dot` (see `lanegrid.numeric`)
needs `*` and `+` on the elements.
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Sequence as _SequenceABC
from typing import Any, Callable, Iterator, List, Optional, Sequence, Tuple, TypeVar, Union

from ._shape import _tolist, validate_rectangular
from .errors import LaneIndexError, ShapeError

logger = logging.getLogger(__name__)

S = TypeVar("S")


def _check_index(index: Any, bound: int, axis: str) -> int:
    try:
        i = operator.index(index)
    except TypeError:
        raise TypeError(f"{axis} index must be an integer, not {type(index).__name__}") from None
    if i < 0 or i >= bound:
        raise LaneIndexError(i, bound, axis=axis)
    return i


def _check_size(name: str, n: Any) -> int:
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"{name} must be >= 0")
    return n


def _as_list(name: str, values: Any) -> list:
    values = _tolist(values)
    if not isinstance(values, _SequenceABC) or isinstance(values, (bytes, str)):
        raise TypeError(f"{name} must be a sequence")
    return list(values)


class Lane(_SequenceABC):
    """Fixed-length view of one matrix column.

    Elements can be read and assigned in place; the lane can never grow or
    shrink through the view, which keeps the owning matrix rectangular.
    """

    __slots__ = ("_data", "_column")

    def __init__(self, data: list, column: int):
        self._data = data
        self._column = column

    @property
    def column(self) -> int:
        return self._column

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._data[index]
        return self._data[_check_index(index, len(self._data), "row")]

    def __setitem__(self, index: int, value: Any) -> None:
        self._data[_check_index(index, len(self._data), "row")] = value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Lane):
            return self._data == other._data
        if isinstance(other, _SequenceABC) and not isinstance(other, (bytes, str)):
            return self._data == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def tolist(self) -> list:
        return list(self._data)

    def __repr__(self) -> str:
        return f"Lane(column={self._column}, {self._data!r})"


class Matrix:
    """Dense 2D grid stored as a list of column lanes.

    ``Matrix()`` is the empty matrix. Use `from_values`, `zeros`, `zeros_with`
    or `random` to build populated ones.
    """

    __slots__ = ("_lanes", "_rows", "_columns")

    def __init__(self) -> None:
        self._lanes: List[list] = []
        self._rows = 0
        self._columns = 0

    # -- construction -------------------------------------------------------

    @classmethod
    def _from_lanes(cls, lanes: List[list], rows: int) -> "Matrix":
        # Caller guarantees `lanes` is rectangular with lane length `rows`.
        m = cls()
        if lanes:
            m._lanes = lanes
            m._rows = rows
            m._columns = len(lanes)
        return m

    @classmethod
    def empty(cls) -> "Matrix":
        return cls()

    validate_rectangular = staticmethod(validate_rectangular)

    @classmethod
    def from_values(cls, grid: Sequence[Sequence[Any]]) -> "Matrix":
        """Build a matrix from a sequence of lanes (columns).

        Lanes are copied. Raises `ShapeError` when the lanes differ in length
        or when `grid` has no lanes at all (the row count is then unknown).
        A grid of empty lanes gives a matrix with zero rows.
        """
        grid = _tolist(grid)
        rows = validate_rectangular(grid).raise_for_status()
        return cls._from_lanes([_as_list(f"lane {i}", lane) for i, lane in enumerate(grid)], rows)

    @classmethod
    def zeros(cls, rows: int, columns: int, *, fill: Any = 0) -> "Matrix":
        """`columns` lanes of `rows` elements, all set to `fill`."""
        rows = _check_size("rows", rows)
        columns = _check_size("columns", columns)
        return cls._from_lanes([[fill] * rows for _ in range(columns)], rows)

    @classmethod
    def zeros_with(cls, rows: int, columns: int, factory: Callable[[], Any]) -> "Matrix":
        """Like `zeros`, but every element is a fresh `factory()` result.

        Use this for mutable element types, where `zeros` would share one
        object across the whole grid.
        """
        rows = _check_size("rows", rows)
        columns = _check_size("columns", columns)
        return cls._from_lanes([[factory() for _ in range(rows)] for _ in range(columns)], rows)

    @classmethod
    def random(
        cls,
        rows: int,
        columns: int,
        generator: Callable[[S], Any],
        seed_source: Callable[[], S],
    ) -> "Matrix":
        """Fill a `rows` x `columns` matrix with ``generator(seed_source())``.

        Elements are produced lane by lane, top to bottom within each lane, so
        a deterministic `seed_source` gives a reproducible matrix.
        """
        m = cls.zeros(rows, columns)
        for lane in m._lanes:
            for j in range(len(lane)):
                lane[j] = generator(seed_source())
        logger.debug("random fill: rows=%d columns=%d", m._rows, m._columns)
        return m

    @classmethod
    def from_numpy(cls, array: Any) -> "Matrix":
        from .arrays import from_numpy

        return from_numpy(array)

    # -- shape ------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def shape(self) -> Tuple[int, int]:
        return (self._rows, self._columns)

    def __len__(self) -> int:
        return self._columns

    # -- element / lane access ----------------------------------------------

    def __getitem__(self, key: Union[int, Tuple[int, int]]) -> Any:
        if isinstance(key, tuple):
            i, j = key
            lane = self._lanes[_check_index(i, self._columns, "column")]
            return lane[_check_index(j, self._rows, "row")]
        i = _check_index(key, self._columns, "column")
        return Lane(self._lanes[i], i)

    def __setitem__(self, key: Union[int, Tuple[int, int]], value: Any) -> None:
        if isinstance(key, tuple):
            i, j = key
            lane = self._lanes[_check_index(i, self._columns, "column")]
            lane[_check_index(j, self._rows, "row")] = value
            return
        i = _check_index(key, self._columns, "column")
        new_lane = _as_list("lane", value)
        if len(new_lane) != self._rows:
            raise ShapeError(expected=self._rows, actual=len(new_lane), what="lane length")
        self._lanes[i] = new_lane

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._columns != other._columns or self._rows != other._rows:
            return False
        for a, b in zip(self._lanes, other._lanes):
            for x, y in zip(a, b):
                if x != y:
                    return False
        return True

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[Lane]:
        for i, lane in enumerate(self._lanes):
            yield Lane(lane, i)

    def lanes(self) -> Iterator[Tuple[Any, ...]]:
        """Yield read-only snapshots of each lane, in lane order."""
        for lane in self._lanes:
            yield tuple(lane)

    def into_lanes(self) -> Iterator[list]:
        """Hand the lane lists over to the caller and leave this matrix empty."""
        lanes = self._lanes
        self._lanes = []
        self._rows = 0
        self._columns = 0
        return iter(lanes)

    def row(self, index: int) -> list:
        """Return row `index` as a new list, one element per lane."""
        j = _check_index(index, self._rows, "row")
        return [lane[j] for lane in self._lanes]

    def column(self, index: int) -> list:
        """Return a copy of lane `index`."""
        return list(self._lanes[_check_index(index, self._columns, "column")])

    # -- growth / shrink ----------------------------------------------------

    def push_row(self, row: Sequence[Any]) -> None:
        """Append one element to the end of every lane."""
        values = _as_list("row", row)
        if self._columns == 0:
            raise ShapeError(
                "cannot push a row into a matrix with no columns",
                expected=0,
                actual=len(values),
                what="row length",
            )
        if len(values) != self._columns:
            raise ShapeError(
                f"row length must match Matrix.columns (given {len(values)}, columns {self._columns})",
                expected=self._columns,
                actual=len(values),
                what="row length",
            )
        for lane, v in zip(self._lanes, values):
            lane.append(v)
        self._rows += 1

    def push_column(self, column: Sequence[Any]) -> None:
        """Append a new lane. On an empty matrix its length sets `rows`."""
        values = _as_list("column", column)
        if self._columns == 0:
            self._rows = len(values)
        elif len(values) != self._rows:
            raise ShapeError(
                f"column length must match Matrix.rows (given {len(values)}, rows {self._rows})",
                expected=self._rows,
                actual=len(values),
                what="column length",
            )
        self._lanes.append(values)
        self._columns += 1

    def pop_row(self) -> Optional[list]:
        """Remove the last element of every lane; `None` when there are no rows."""
        if self._rows == 0:
            return None
        out = [lane.pop() for lane in self._lanes]
        self._rows -= 1
        return out

    def pop_column(self) -> Optional[list]:
        """Remove and return the last lane; `None` when there are no columns."""
        if self._columns == 0:
            return None
        out = self._lanes.pop()
        self._columns -= 1
        if self._columns == 0:
            self._rows = 0
        return out

    # -- views / copies -----------------------------------------------------

    def as_grid(self) -> List[list]:
        return [list(lane) for lane in self._lanes]

    @property
    def grid(self) -> Tuple[Tuple[Any, ...], ...]:
        return tuple(tuple(lane) for lane in self._lanes)

    def copy(self) -> "Matrix":
        return Matrix._from_lanes(self.as_grid(), self._rows)

    def to_numpy(self, dtype: Any = None):
        from .arrays import to_numpy

        return to_numpy(self, dtype=dtype)

    # -- numeric ------------------------------------------------------------

    def dot(self, other: "Matrix") -> "Matrix":
        from .numeric import dot

        return dot(self, other)

    def __matmul__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.dot(other)

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, columns={self._columns})"
