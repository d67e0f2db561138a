"""Labeling engine: phase values, raster grid, unpacking and component labeling."""

from pbmlabel.engine.bitraster import BitRaster, unpack_bitmap
from pbmlabel.engine.grid import BACKGROUND, FOREGROUND, LabelRaster
from pbmlabel.engine.image import ImageDimensions, PackedBitmap
from pbmlabel.engine.labeling import ComponentLabeler, LabelingResult, label_components

__all__ = [
    "BACKGROUND",
    "FOREGROUND",
    "ImageDimensions",
    "PackedBitmap",
    "LabelRaster",
    "BitRaster",
    "unpack_bitmap",
    "ComponentLabeler",
    "LabelingResult",
    "label_components",
]
