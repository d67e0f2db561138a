"""Tests for the HTTP endpoints."""

from __future__ import annotations

import asyncio

import pytest
from fastapi.testclient import TestClient

from pbmlabel import __version__
from pbmlabel.config import Settings
from pbmlabel.dependencies import get_settings
from pbmlabel.main import app, create_app
from pbmlabel.models.responses import HealthResponse
from tests.conftest import BLOBS_LABELS, BLOBS_PBM


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == __version__


def test_label_blobs():
    response = client.post("/api/label", content=BLOBS_PBM)
    assert response.status_code == 200
    data = response.json()
    assert data["width"] == 8
    assert data["height"] == 4
    assert data["components"] == 3
    assert data["component_sizes"] == [3, 3, 3]
    assert data["labels"] == BLOBS_LABELS.tolist()
    assert data["rendered"].splitlines()[0] == " 1 1 . . . . 2 2"


def test_label_background_query():
    response = client.post("/api/label", params={"background": "_"}, content=BLOBS_PBM)
    assert response.status_code == 200
    assert response.json()["rendered"].splitlines()[3] == " _ _ _ 3 _ _ _ _"


def test_label_bad_signature():
    response = client.post("/api/label", content=b"P6\n1 1\n255\n\x00\x00\x00")
    assert response.status_code == 400
    assert "P4" in response.json()["detail"]


def test_label_short_payload():
    response = client.post("/api/label", content=b"P4\n8 4\n\x00")
    assert response.status_code == 400


def test_label_too_large():
    capped = create_app()
    capped.dependency_overrides[get_settings] = lambda: Settings(pbmlabel_max_pixels=8)
    response = TestClient(capped).post("/api/label", content=BLOBS_PBM)
    assert response.status_code == 413


def test_label_runs_pipeline_off_the_event_loop(monkeypatch: pytest.MonkeyPatch):
    from pbmlabel.engine.pipeline import Pipeline

    on_loop = []
    original = Pipeline.run_bytes

    def run_bytes(self, payload):
        try:
            asyncio.get_running_loop()
            on_loop.append(True)
        except RuntimeError:
            on_loop.append(False)
        return original(self, payload)

    monkeypatch.setattr(Pipeline, "run_bytes", run_bytes)
    response = client.post("/api/label", content=BLOBS_PBM)
    assert response.status_code == 200
    assert on_loop == [False]


def test_health_version_has_no_literal_default():
    assert "version" in HealthResponse.model_fields
    assert HealthResponse.model_fields["version"].is_required()


def test_settings_fields():
    assert set(Settings.model_fields) == {"pbmlabel_log_level", "pbmlabel_max_pixels", "cors_origins"}
