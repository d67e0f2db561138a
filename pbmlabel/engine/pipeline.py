"""Pipeline orchestrator — load → unpack → label, each phase handing an immutable value to the next.

Failures propagate out of run(); nothing is recorded-and-skipped, and a header
or I/O failure aborts before any labeling work.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path

from pbmlabel.engine.bitraster import BitRaster
from pbmlabel.engine.config import PipelineConfig
from pbmlabel.engine.image import ImageDimensions, PackedBitmap
from pbmlabel.engine.labeling import ComponentLabeler, LabelingResult
from pbmlabel.pbm.reader import load_pbm, parse_pbm
from pbmlabel.utils.render import format_report, render_labels

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineOutput:
    dimensions: ImageDimensions
    result: LabelingResult
    elapsed_ms: float = 0.0

    @property
    def count(self) -> int:
        return self.result.count


class Pipeline:
    """Runs the labeling phases in order."""

    def __init__(
        self,
        config: PipelineConfig | None = None,
        labeler: ComponentLabeler | None = None,
    ) -> None:
        self.config = config or PipelineConfig()
        self.labeler = labeler or ComponentLabeler()

    def run(self, bitmap: PackedBitmap) -> PipelineOutput:
        """Unpack and label an already-loaded bitmap."""
        start = time.perf_counter()

        t0 = time.perf_counter()
        raster = BitRaster(bitmap).unpack()
        logger.debug("  unpack completed in %.1fms", (time.perf_counter() - t0) * 1000)

        t0 = time.perf_counter()
        result = self.labeler.label(raster)
        logger.debug("  label completed in %.1fms", (time.perf_counter() - t0) * 1000)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %dx%d image, %d components in %.0fms",
            bitmap.width,
            bitmap.height,
            result.count,
            total,
        )
        return PipelineOutput(dimensions=bitmap.dimensions, result=result, elapsed_ms=total)

    def run_file(self, path: str | Path) -> PipelineOutput:
        return self.run(load_pbm(path, max_pixels=self.config.max_pixels))

    def run_bytes(self, payload: bytes) -> PipelineOutput:
        return self.run(parse_pbm(payload, max_pixels=self.config.max_pixels))

    def render(self, output: PipelineOutput) -> str:
        return render_labels(
            output.result.raster,
            background=self.config.background_marker,
            cell_width=self.config.cell_width,
        )

    def report(self, output: PipelineOutput) -> str:
        return format_report(
            output.dimensions,
            output.result.raster,
            output.count,
            background=self.config.background_marker,
            cell_width=self.config.cell_width,
        )


def create_pipeline(config: PipelineConfig | None = None) -> Pipeline:
    """Factory function; the pixel cap defaults to the environment setting."""
    if config is None:
        from pbmlabel.config import settings

        config = PipelineConfig(max_pixels=settings.pbmlabel_max_pixels)
    return Pipeline(config=config)
