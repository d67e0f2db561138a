"""BitRaster — packed P4 payload → one cell per pixel.

Pixel (row, col) lives in byte ``row * row_bytes + col // 8`` at bit
``7 - col % 8``; bit 7 is the leftmost column. Padding bits at the end of a
row are never read.
"""

from __future__ import annotations

import numpy as np

from pbmlabel.engine.grid import BACKGROUND, FOREGROUND, LabelRaster
from pbmlabel.engine.image import ImageDimensions, PackedBitmap


class BitRaster:
    """Read-only view over a PackedBitmap."""

    def __init__(self, bitmap: PackedBitmap) -> None:
        self._bitmap = bitmap

    @property
    def dimensions(self) -> ImageDimensions:
        return self._bitmap.dimensions

    def is_set(self, row: int, col: int) -> bool:
        dims = self.dimensions
        if not (0 <= row < dims.height and 0 <= col < dims.width):
            raise IndexError(f"Pixel ({row}, {col}) outside {dims.height}x{dims.width} image")
        byte = self._bitmap.data[row * dims.row_bytes + col // 8]
        return bool((byte >> (7 - col % 8)) & 1)

    def unpack(self) -> LabelRaster:
        """Expand to a LabelRaster of FOREGROUND / BACKGROUND cells."""
        dims = self.dimensions
        packed = np.frombuffer(self._bitmap.data, dtype=np.uint8).reshape(
            dims.height, dims.row_bytes
        )
        bits = np.unpackbits(packed, axis=1, bitorder="big")[:, : dims.width]
        return LabelRaster(np.where(bits == 1, FOREGROUND, BACKGROUND))


def unpack_bitmap(bitmap: PackedBitmap) -> LabelRaster:
    return BitRaster(bitmap).unpack()
