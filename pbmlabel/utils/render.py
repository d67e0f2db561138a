"""Text rendering of a labeled raster."""

from __future__ import annotations

from pbmlabel.engine.grid import BACKGROUND, LabelRaster
from pbmlabel.engine.image import ImageDimensions


def render_labels(
    raster: LabelRaster,
    background: str = ".",
    cell_width: int = 2,
) -> str:
    """One line per row; each cell right-justified in ``cell_width`` characters.

    Labels wider than the field are printed in full, widening that cell.
    """
    lines = []
    for row in raster.rows():
        lines.append(
            "".join(
                f"{background if cell == BACKGROUND else int(cell):>{cell_width}}"
                for cell in row
            )
        )
    return "\n".join(lines)


def format_report(
    dimensions: ImageDimensions,
    raster: LabelRaster,
    count: int,
    background: str = ".",
    cell_width: int = 2,
) -> str:
    """Dimensions line, component-count line, then the label grid."""
    header = [
        f"Input file: {dimensions.width} (W) X {dimensions.height} (H)",
        f"Color used: {count}",
    ]
    return "\n".join(header + [render_labels(raster, background, cell_width)])
