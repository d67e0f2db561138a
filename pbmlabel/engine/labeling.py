"""Connected-component labeling, 8-connectivity, single depth-first pass.

Cells are scanned in row-major order. Each foreground cell that is still
unlabeled seeds the next label (1, 2, ...) and the whole component reachable
from it is flooded before the scan moves on, so labels follow first-encounter
order. The flood uses an explicit stack of pending (row, col) cells; depth is
bounded by memory, not by the interpreter's recursion limit.

Expansion stops at a cell that is background, out of bounds, or already
labeled. "Already labeled" is tracked with a pending mask rather than by cell
value, since label 255 is numerically equal to the FOREGROUND sentinel.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from pbmlabel.engine.grid import FOREGROUND, LabelRaster

logger = logging.getLogger(__name__)

# (d_row, d_col) for the 8 neighbours, self excluded
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


@dataclass(frozen=True)
class LabelingResult:
    """Labeled raster (frozen), component count and pixels per label."""

    raster: LabelRaster
    count: int
    # sizes[k] = pixels carrying label k; sizes[0] is unused and always 0
    sizes: tuple[int, ...] = (0,)

    @property
    def labels(self) -> NDArray[np.int32]:
        return self.raster.cells


class ComponentLabeler:
    """Assigns labels 1..N to the 8-connected foreground groups of a raster."""

    def label(self, raster: LabelRaster) -> LabelingResult:
        """Label a copy of ``raster``; the input is left untouched."""
        labeled = raster.copy()
        pending = labeled.cells == FOREGROUND
        sizes = [0]

        # argwhere walks the mask in row-major order
        for row, col in np.argwhere(pending):
            if not pending[row, col]:
                continue
            label = len(sizes)
            sizes.append(self._flood_fill(labeled, pending, int(row), int(col), label))

        labeled.freeze()
        count = len(sizes) - 1
        logger.debug("Labeled %d components in %dx%d raster", count, raster.height, raster.width)
        return LabelingResult(raster=labeled, count=count, sizes=tuple(sizes))

    @staticmethod
    def _flood_fill(
        raster: LabelRaster,
        pending: NDArray[np.bool_],
        row: int,
        col: int,
        label: int,
    ) -> int:
        """Mark every pending cell reachable from (row, col); return how many."""
        filled = 0
        stack = [(row, col)]
        while stack:
            r, c = stack.pop()
            if not raster.in_bounds(r, c) or not pending[r, c]:
                continue
            pending[r, c] = False
            raster.set(r, c, label)
            filled += 1
            for dr, dc in NEIGHBOR_OFFSETS:
                stack.append((r + dr, c + dc))
        return filled


def label_components(raster: LabelRaster) -> LabelingResult:
    return ComponentLabeler().label(raster)

