"""Phase values passed between the pipeline stages.

ImageDimensions → produced by the header parser
PackedBitmap    → produced by the reader, consumed once by BitRaster
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ImageDimensions:
    """Width and height parsed from the P4 header."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Dimensions must be positive, got {self.width}x{self.height}")

    @property
    def row_bytes(self) -> int:
        # Rows are byte-aligned: ceil(width / 8)
        return (self.width + 7) // 8

    @property
    def data_size(self) -> int:
        return self.row_bytes * self.height

    @property
    def pixel_count(self) -> int:
        return self.width * self.height


@dataclass(frozen=True)
class PackedBitmap:
    """Raw P4 pixel payload: one bit per pixel, MSB first, rows byte-aligned."""

    dimensions: ImageDimensions
    data: bytes

    def __post_init__(self) -> None:
        expected = self.dimensions.data_size
        if len(self.data) != expected:
            raise ValueError(f"Packed data is {len(self.data)} bytes, expected {expected}")

    @property
    def width(self) -> int:
        return self.dimensions.width

    @property
    def height(self) -> int:
        return self.dimensions.height
