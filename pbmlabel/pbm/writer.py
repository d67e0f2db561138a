"""P4 writer — pack a 2-D foreground mask into PBM bytes."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np
from numpy.typing import ArrayLike

from pbmlabel.pbm.header import SIGNATURE


def encode_pbm(pixels: ArrayLike, comments: Iterable[str] = ()) -> bytes:
    """Encode a 2-D mask (nonzero = foreground) as a P4 image.

    Each comment becomes a ``# ...`` line between the signature and the
    dimensions. Row padding bits are written as zero.
    """
    mask = np.asarray(pixels)
    if mask.ndim != 2 or mask.shape[0] == 0 or mask.shape[1] == 0:
        raise ValueError(f"Expected a non-empty 2-D mask, got shape {mask.shape}")
    height, width = mask.shape

    header = bytearray(SIGNATURE + b"\n")
    for comment in comments:
        header += b"# " + comment.encode("ascii") + b"\n"
    header += f"{width} {height}\n".encode("ascii")

    packed = np.packbits(mask != 0, axis=1, bitorder="big")
    return bytes(header) + packed.tobytes()
