"""Pipeline configuration — resource cap and rendering knobs."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PipelineConfig:
    """Controls resource limits and how the labeled raster is rendered."""

    # Reject images whose raster exceeds this many cells
    max_pixels: int = 64 * 1024 * 1024

    # Text rendering
    background_marker: str = "."
    cell_width: int = 2  # labels are right-justified in this many characters

    def __post_init__(self) -> None:
        if self.cell_width < 1:
            raise ValueError(f"cell_width must be at least 1, got {self.cell_width}")
        if self.max_pixels < 1:
            raise ValueError(f"max_pixels must be at least 1, got {self.max_pixels}")
