"""LabelRaster — 2-D integer grid over an owned contiguous numpy buffer.

Cell values:
    BACKGROUND (0)    not part of any component
    FOREGROUND (255)  foreground pixel not yet labeled
    1..N              final component label
"""

from __future__ import annotations

from collections.abc import Iterator

import numpy as np
from numpy.typing import NDArray

BACKGROUND = 0
FOREGROUND = 255

_CELL_DTYPE = np.int32


class LabelRaster:
    """Row-major grid addressed as (row, col) with bounds-checked access."""

    def __init__(self, cells: NDArray[np.integer]) -> None:
        if cells.ndim != 2:
            raise ValueError(f"LabelRaster needs a 2-D array, got {cells.ndim}-D")
        # Always owns its buffer; callers keep theirs
        self._cells = np.array(cells, dtype=_CELL_DTYPE, order="C")

    @classmethod
    def empty(cls, height: int, width: int) -> LabelRaster:
        return cls(np.full((height, width), BACKGROUND, dtype=_CELL_DTYPE))

    @property
    def height(self) -> int:
        return int(self._cells.shape[0])

    @property
    def width(self) -> int:
        return int(self._cells.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        return (self.height, self.width)

    @property
    def cells(self) -> NDArray[np.int32]:
        """Read-only view of the backing buffer."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def frozen(self) -> bool:
        return not self._cells.flags.writeable

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def get(self, row: int, col: int) -> int:
        self._check(row, col)
        return int(self._cells[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        self._check(row, col)
        if self.frozen:
            raise ValueError("LabelRaster is frozen")
        self._cells[row, col] = value

    def copy(self) -> LabelRaster:
        """Writable copy, regardless of whether this raster is frozen."""
        return LabelRaster(self._cells)

    def freeze(self) -> None:
        self._cells.flags.writeable = False

    def rows(self) -> Iterator[NDArray[np.int32]]:
        yield from self.cells

    def _check(self, row: int, col: int) -> None:
        # numpy would silently wrap negative indices
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) outside {self.height}x{self.width} raster")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LabelRaster):
            return NotImplemented
        return np.array_equal(self._cells, other._cells)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"LabelRaster({self.height}x{self.width}, frozen={self.frozen})"
