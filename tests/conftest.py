"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from pbmlabel.engine.grid import FOREGROUND, LabelRaster


# Sample P4 images, written out byte by byte

# 8x4, three blobs:
#   XX....XX
#   X......X
#   ...XX...
#   ...X....
BLOBS_PBM = b"P4\n# three blobs\n8 4\n\xc3\x81\x18\x10"

# 10x2 (row_bytes = 2), padding bits in the second byte set to 1 on purpose:
#   X........X   -> 0x80, 0x40 | padding 0x3f
#   .X......X.   -> 0x40, 0x80 | padding 0x3f
PADDED_PBM = b"P4 10 2\n\x80\x7f\x40\xbf"

# 3x3 ring: every cell but the centre
RING_PBM = b"P4\n3 3\n\xe0\xa0\xe0"

# 2x2 diagonal pair (0,0) and (1,1)
DIAGONAL_PBM = b"P4\n2 2\n\x80\x40"

# Masks used to build images through the writer

BLOBS_MASK = np.array(
    [
        [1, 1, 0, 0, 0, 0, 1, 1],
        [1, 0, 0, 0, 0, 0, 0, 1],
        [0, 0, 0, 1, 1, 0, 0, 0],
        [0, 0, 0, 1, 0, 0, 0, 0],
    ],
    dtype=np.uint8,
)

BLOBS_LABELS = np.array(
    [
        [1, 1, 0, 0, 0, 0, 2, 2],
        [1, 0, 0, 0, 0, 0, 0, 2],
        [0, 0, 0, 3, 3, 0, 0, 0],
        [0, 0, 0, 3, 0, 0, 0, 0],
    ]
)

BLOBS_REPORT = (
    "Input file: 8 (W) X 4 (H)\n"
    "Color used: 3\n"
    " 1 1 . . . . 2 2\n"
    " 1 . . . . . . 2\n"
    " . . . 3 3 . . .\n"
    " . . . 3 . . . ."
)


def raster_from_mask(mask) -> LabelRaster:
    """Build an unlabeled raster (FOREGROUND / BACKGROUND) from a 0/1 mask."""
    return LabelRaster(np.where(np.asarray(mask) != 0, FOREGROUND, 0))


@pytest.fixture
def blobs_pbm() -> bytes:
    return BLOBS_PBM


@pytest.fixture
def blobs_file(tmp_path: Path) -> Path:
    path = tmp_path / "blobs.pbm"
    path.write_bytes(BLOBS_PBM)
    return path


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(20181229)
