"""P4 header parser — signature, then width and height with comment skipping.

The tokenizer is a three-state machine over single bytes:

    SEEK_TOKEN         skip whitespace, dispatch on '#' or a digit
    ACCUMULATE_DIGITS  collect digits until whitespace, '#' or EOF
    SKIP_COMMENT       discard bytes through the next newline

Parsing stops right after the whitespace byte that terminates the height, so
the stream is left at the first byte of packed pixel data.
"""

from __future__ import annotations

import enum
import logging
from typing import BinaryIO

from pbmlabel.engine.image import ImageDimensions
from pbmlabel.errors import FormatError

logger = logging.getLogger(__name__)

SIGNATURE = b"P4"

_WHITESPACE = frozenset(b" \t\n\r\v\f")
_DIGITS = frozenset(b"0123456789")
_COMMENT = ord("#")
_NEWLINE = ord("\n")

# Ten digits already exceed any raster the pixel cap admits
_MAX_DIGITS = 10


class _State(enum.Enum):
    SEEK_TOKEN = "seek"
    ACCUMULATE_DIGITS = "digits"
    SKIP_COMMENT = "comment"


def parse_header(stream: BinaryIO) -> ImageDimensions:
    """Parse a P4 header from ``stream`` positioned at offset 0."""
    signature = stream.read(len(SIGNATURE))
    if signature != SIGNATURE:
        raise FormatError(f"File is not in P4 format (signature {signature!r})")

    width, height = _read_integers(stream, count=2)
    if width == 0 or height == 0:
        raise FormatError(f"Image dimensions must be positive, got {width}x{height}")

    logger.debug("Parsed P4 header: %dx%d", width, height)
    return ImageDimensions(width=width, height=height)


def _read_integers(stream: BinaryIO, count: int) -> list[int]:
    values: list[int] = []
    digits = bytearray()
    state = _State.SEEK_TOKEN

    while len(values) < count:
        chunk = stream.read(1)
        if not chunk:
            if state is _State.ACCUMULATE_DIGITS:
                values.append(int(digits))
            break
        ch = chunk[0]

        if state is _State.SKIP_COMMENT:
            if ch == _NEWLINE:
                state = _State.SEEK_TOKEN
            continue

        if ch == _COMMENT:
            if state is _State.ACCUMULATE_DIGITS:
                values.append(int(digits))
                digits.clear()
            state = _State.SKIP_COMMENT
        elif ch in _WHITESPACE:
            if state is _State.ACCUMULATE_DIGITS:
                values.append(int(digits))
                digits.clear()
                state = _State.SEEK_TOKEN
        elif ch in _DIGITS:
            if len(digits) >= _MAX_DIGITS:
                raise FormatError(f"Malformed P4 header: integer longer than {_MAX_DIGITS} digits")
            digits.append(ch)
            state = _State.ACCUMULATE_DIGITS
        else:
            raise FormatError(f"Malformed P4 header: unexpected byte {chunk!r}")

    if len(values) < count:
        raise FormatError(
            f"Malformed P4 header: expected {count} integers, found {len(values)}"
        )

    # A comment glued to the last integer runs to end of line; pixel data follows it
    if state is _State.SKIP_COMMENT:
        _skip_comment(stream)
    return values


def _skip_comment(stream: BinaryIO) -> None:
    while True:
        chunk = stream.read(1)
        if not chunk or chunk[0] == _NEWLINE:
            return
