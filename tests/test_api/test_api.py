"""Tests for API endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

import pathmorph.api.interpolate as interpolate_api
from pathmorph.config import Settings
from pathmorph.dependencies import get_settings
from pathmorph.main import app
from tests.conftest import LINE, STRAIGHT, STRAIGHT_CUBIC


client = TestClient(app)


@pytest.fixture
def small_limits():
    app.dependency_overrides[get_settings] = lambda: Settings(max_frames=2, default_frames=2)
    yield
    app.dependency_overrides.pop(get_settings, None)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == "0.1.0"


def test_interpolate_frames():
    response = client.post("/api/interpolate", json={"a": STRAIGHT, "b": STRAIGHT_CUBIC, "frames": 3})
    assert response.status_code == 200
    data = response.json()
    assert data["start"] == "M0,0C10,0,10,0,10,0"
    assert data["end"] == STRAIGHT_CUBIC
    assert [f["t"] for f in data["frames"]] == [0.0, 0.5, 1.0]
    assert [f["d"] for f in data["frames"]] == [
        "M0,0C10,0,10,0,10,0",
        "M0,0C10,0,15,0,20,0",
        STRAIGHT_CUBIC,
    ]


def test_interpolate_explicit_t():
    response = client.post("/api/interpolate", json={"a": LINE, "b": "M0,0L20,20", "t": [0.25, 2]})
    assert response.status_code == 200
    assert [f["d"] for f in response.json()["frames"]] == ["M0,0L12.5,12.5", "M0,0L30,30"]


def test_interpolate_default_frame_count():
    response = client.post("/api/interpolate", json={"a": LINE, "b": LINE})
    assert response.status_code == 200
    assert len(response.json()["frames"]) == 11


def test_interpolate_nothing():
    response = client.post("/api/interpolate", json={"a": None, "b": None, "frames": 2})
    assert response.status_code == 200
    data = response.json()
    assert data["start"] is None
    assert [f["d"] for f in data["frames"]] == [None, None]


def test_interpolate_malformed_path():
    response = client.post("/api/interpolate", json={"a": "B1,1", "b": LINE, "frames": 2})
    assert response.status_code == 422
    assert "Unrecognized command type" in response.json()["detail"]


def test_interpolate_t_and_frames_conflict():
    response = client.post("/api/interpolate", json={"a": LINE, "b": LINE, "t": [0.5], "frames": 3})
    assert response.status_code == 422


def test_interpolate_too_few_frames():
    response = client.post("/api/interpolate", json={"a": LINE, "b": LINE, "frames": 1})
    assert response.status_code == 422


def test_interpolate_too_many_frames():
    response = client.post("/api/interpolate", json={"a": LINE, "b": LINE, "frames": 5000})
    assert response.status_code == 422
    assert "Too many samples" in response.json()["detail"]


def test_interpolate_respects_settings(small_limits):
    response = client.post("/api/interpolate", json={"a": LINE, "b": LINE})
    assert response.status_code == 200
    assert len(response.json()["frames"]) == 2

    response = client.post("/api/interpolate", json={"a": LINE, "b": LINE, "frames": 3})
    assert response.status_code == 422


@pytest.fixture
def no_sampling(monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("sample points built for a rejected request")

    monkeypatch.setattr(interpolate_api, "_sample_points", fail)


def test_interpolate_huge_frame_count_rejected_before_sampling(no_sampling):
    response = client.post("/api/interpolate", json={"a": LINE, "b": LINE, "frames": 10**12})
    assert response.status_code == 422
    assert "Too many samples" in response.json()["detail"]


def test_interpolate_too_many_t_values(small_limits, no_sampling):
    response = client.post("/api/interpolate", json={"a": LINE, "b": LINE, "t": [0, 0.5, 1]})
    assert response.status_code == 422
    assert "Too many samples: 3 > 2" in response.json()["detail"]


@pytest.mark.parametrize("default_frames", [0, 1])
def test_settings_reject_degenerate_default_frames(default_frames):
    with pytest.raises(ValidationError):
        Settings(default_frames=default_frames)


def test_settings_reject_zero_max_frames():
    with pytest.raises(ValidationError):
        Settings(max_frames=0)
