"""PBM (P4) codec."""

from pbmlabel.pbm.header import parse_header
from pbmlabel.pbm.reader import load_pbm, parse_pbm, read_pbm
from pbmlabel.pbm.writer import encode_pbm

__all__ = [
    "parse_header",
    "read_pbm",
    "parse_pbm",
    "load_pbm",
    "encode_pbm",
]
