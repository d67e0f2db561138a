"""Command-line entry point: pbm-label FILE."""

from __future__ import annotations

import argparse
import logging
import sys

from pbmlabel.config import settings
from pbmlabel.engine.config import PipelineConfig
from pbmlabel.engine.pipeline import create_pipeline
from pbmlabel.errors import PBMLabelError, UsageError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pbm-label",
        description="Label 8-connected components of a P4 (binary PBM) image",
    )
    # Optional here so a missing path is reported as a UsageError, not an argparse exit
    parser.add_argument("path", nargs="?", help="P4 image to label")
    parser.add_argument("--background", default=".", help="Marker for background cells")
    parser.add_argument("--cell-width", type=int, default=2, help="Characters per cell")
    parser.add_argument(
        "--log-level",
        default=settings.pbmlabel_log_level,
        help="Logging level (written to stderr)",
    )
    return parser


def run(argv: list[str] | None = None) -> str:
    """Parse ``argv``, run the pipeline and return the report text."""
    args = build_parser().parse_args(argv)
    _configure_logging(args.log_level)

    if not args.path:
        raise UsageError("USAGE: pbm-label (filename.pbm)")
    if args.cell_width < 1:
        raise UsageError(f"--cell-width must be at least 1, got {args.cell_width}")

    pipeline = create_pipeline(
        PipelineConfig(
            max_pixels=settings.pbmlabel_max_pixels,
            background_marker=args.background,
            cell_width=args.cell_width,
        )
    )
    output = pipeline.run_file(args.path)
    return pipeline.report(output)


def main(argv: list[str] | None = None) -> int:
    try:
        report = run(argv)
    except PBMLabelError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    print(report)
    return 0


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )
