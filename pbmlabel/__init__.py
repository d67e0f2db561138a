"""pbm-label — connected-component labeling for P4 bitmaps."""

__version__ = "0.1.0"
