"""Tests for the LabelRaster grid."""

from __future__ import annotations

import numpy as np
import pytest

from pbmlabel.engine.grid import BACKGROUND, LabelRaster


def test_empty_raster():
    raster = LabelRaster.empty(3, 5)
    assert raster.shape == (3, 5)
    assert raster.height == 3
    assert raster.width == 5
    assert np.all(raster.cells == BACKGROUND)


def test_get_set_row_col_convention():
    raster = LabelRaster.empty(2, 4)
    raster.set(1, 3, 7)
    assert raster.get(1, 3) == 7
    assert raster.cells[1, 3] == 7
    assert raster.get(0, 3) == 0


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (2, 0), (0, 4), (4, 2)])
def test_out_of_bounds(row: int, col: int):
    raster = LabelRaster.empty(2, 4)
    assert not raster.in_bounds(row, col)
    with pytest.raises(IndexError):
        raster.get(row, col)
    with pytest.raises(IndexError):
        raster.set(row, col, 1)


def test_raster_owns_its_buffer():
    source = np.zeros((2, 2), dtype=np.int32)
    raster = LabelRaster(source)
    source[0, 0] = 9
    assert raster.get(0, 0) == 0


def test_cells_view_is_read_only():
    raster = LabelRaster.empty(2, 2)
    with pytest.raises(ValueError):
        raster.cells[0, 0] = 1


def test_freeze_and_copy():
    raster = LabelRaster.empty(2, 2)
    raster.freeze()
    assert raster.frozen
    with pytest.raises(ValueError):
        raster.set(0, 0, 1)

    clone = raster.copy()
    assert not clone.frozen
    clone.set(0, 0, 1)
    assert raster.get(0, 0) == 0
    assert clone != raster


def test_rejects_non_2d():
    with pytest.raises(ValueError):
        LabelRaster(np.zeros(4))
