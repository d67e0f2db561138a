"""POST /api/label — label a P4 image sent as the raw request body."""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from pbmlabel.config import Settings
from pbmlabel.dependencies import get_settings
from pbmlabel.engine.config import PipelineConfig
from pbmlabel.engine.pipeline import Pipeline
from pbmlabel.errors import FormatError, IoError, ResourceError
from pbmlabel.models.responses import LabelResponse

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/label", response_model=LabelResponse)
async def label(
    request: Request,
    background: str = ".",
    settings: Settings = Depends(get_settings),
) -> LabelResponse:
    payload = await request.body()
    pipeline = Pipeline(
        PipelineConfig(max_pixels=settings.pbmlabel_max_pixels, background_marker=background)
    )

    try:
        # Unpack and flood fill are CPU-bound; keep them off the event loop
        loop = asyncio.get_running_loop()
        output = await loop.run_in_executor(None, pipeline.run_bytes, payload)
    except ResourceError as e:
        raise HTTPException(status_code=413, detail=str(e)) from e
    except (FormatError, IoError) as e:
        logger.info("Rejected upload: %s", e)
        raise HTTPException(status_code=400, detail=str(e)) from e

    rendered = await loop.run_in_executor(None, pipeline.render, output)

    return LabelResponse(
        width=output.dimensions.width,
        height=output.dimensions.height,
        components=output.count,
        component_sizes=list(output.result.sizes[1:]),
        labels=output.result.labels.tolist(),
        rendered=rendered,
        processing_time_ms=round(output.elapsed_ms, 1),
    )
