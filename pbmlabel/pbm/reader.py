"""P4 reader — header + packed pixel payload → PackedBitmap."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import BinaryIO

from pbmlabel.engine.image import ImageDimensions, PackedBitmap
from pbmlabel.errors import IoError, ResourceError
from pbmlabel.pbm.header import parse_header

logger = logging.getLogger(__name__)


def read_pbm(stream: BinaryIO, max_pixels: int | None = None) -> PackedBitmap:
    """Read a complete P4 image from ``stream``.

    Raises FormatError for a bad header, ResourceError when the raster would
    exceed ``max_pixels``, and IoError when the payload is short. Bytes after
    the payload are ignored.
    """
    dims = parse_header(stream)
    _check_capacity(dims, max_pixels)

    data = stream.read(dims.data_size)
    if len(data) < dims.data_size:
        raise IoError(
            f"Data read is less than the expected data size "
            f"({len(data)} of {dims.data_size} bytes)"
        )
    return PackedBitmap(dimensions=dims, data=data)


def parse_pbm(payload: bytes, max_pixels: int | None = None) -> PackedBitmap:
    """Read a P4 image held in memory."""
    return read_pbm(io.BytesIO(payload), max_pixels=max_pixels)


def load_pbm(path: str | Path, max_pixels: int | None = None) -> PackedBitmap:
    """Open ``path`` and read it as a P4 image."""
    try:
        fh = open(path, "rb")
    except OSError as e:
        raise IoError(f"File cannot be opened! ({e.strerror or e})") from e

    with fh:
        bitmap = read_pbm(fh, max_pixels=max_pixels)
    logger.info("Loaded %s: %dx%d", path, bitmap.width, bitmap.height)
    return bitmap


def _check_capacity(dims: ImageDimensions, max_pixels: int | None) -> None:
    if max_pixels is not None and dims.pixel_count > max_pixels:
        raise ResourceError(
            f"Image {dims.width}x{dims.height} exceeds the {max_pixels}-pixel limit"
        )
