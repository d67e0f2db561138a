"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str


class LabelResponse(BaseModel):
    width: int
    height: int
    components: int = 0
    # component_sizes[k - 1] = pixels carrying label k
    component_sizes: list[int] = Field(default_factory=list)
    labels: list[list[int]] = Field(default_factory=list)
    rendered: str = ""
    processing_time_ms: float = 0.0
