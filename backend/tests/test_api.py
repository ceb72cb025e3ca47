"""Tests for the FastAPI application."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from canteiro.api.app import create_app
from canteiro.config import Settings
from canteiro.exceptions import EstimationError
from canteiro.factory import create_default_pipeline
from canteiro.services.pipeline import EstimatePipeline

# ---------------------------------------------------------------------------
# Fixtures / helpers
# ---------------------------------------------------------------------------

_ESTIMATE_BODY = {
    "city_key": "sao_jose",
    "land_status": "no",
    "topography": "slope_light",
    "areas": {"ground": 90, "upper": 70, "subfloor": 0, "outdoor": 20},
    "deadline_months": 10,
}


def _create_test_client(pipeline: EstimatePipeline | None = None) -> TestClient:
    app = create_app(pipeline=pipeline, settings=Settings())
    return TestClient(app)


def _make_failing_pipeline() -> MagicMock:
    mock = MagicMock(spec=EstimatePipeline)
    mock.run.side_effect = EstimationError("Estimate failed: boom")
    return mock


@pytest.fixture()
def client() -> TestClient:
    return _create_test_client(create_default_pipeline())


# ---------------------------------------------------------------------------
# Health / scenarios
# ---------------------------------------------------------------------------


class TestHealth:
    def test_health_returns_200(self) -> None:
        response = _create_test_client().get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["version"] == "0.1.0"


class TestScenarios:
    def test_lists_catalog(self, client: TestClient) -> None:
        response = client.get("/api/scenarios")

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 6
        assert data[0]["id"] == "flat_no_subfloor"
        assert data[0]["risk"]["level"] == "baixo"

    def test_lazily_builds_default_pipeline(self) -> None:
        response = _create_test_client().get("/api/scenarios")
        assert response.status_code == 200
        assert len(response.json()) == 6


# ---------------------------------------------------------------------------
# POST /api/estimate
# ---------------------------------------------------------------------------


class TestEstimate:
    def test_returns_full_payload(self, client: TestClient) -> None:
        response = client.post("/api/estimate", json=_ESTIMATE_BODY)

        assert response.status_code == 200
        data = response.json()
        for key in (
            "breakdown",
            "summary_dict",
            "schedule",
            "timeline",
            "macro_phases",
            "processing_time_seconds",
        ):
            assert key in data

    def test_scenario_and_deadline(self, client: TestClient) -> None:
        data = client.post("/api/estimate", json=_ESTIMATE_BODY).json()

        assert data["breakdown"]["scenario"]["id"] == "slope_up_no_subfloor"
        # ceil(10 × 1.3)
        assert data["breakdown"]["adjusted_deadline_months"] == 13
        assert len(data["timeline"]) == 13
        assert data["summary_dict"]["scenario_label"] == data["breakdown"]["scenario"]["label"]

    def test_itbi_for_land_to_buy(self, client: TestClient) -> None:
        data = client.post("/api/estimate", json=_ESTIMATE_BODY).json()
        names = [item["name"] for item in data["breakdown"]["tax_details"]]
        assert any(name.startswith("ITBI") for name in names)

    def test_enum_values_serialized_as_strings(self, client: TestClient) -> None:
        data = client.post("/api/estimate", json=_ESTIMATE_BODY).json()
        assert {p["type"] for p in data["schedule"]} == {"pre", "construction", "post", "admin"}

    def test_invalid_enum_returns_422(self, client: TestClient) -> None:
        body = {**_ESTIMATE_BODY, "topography": "mountain"}
        response = client.post("/api/estimate", json=body)
        assert response.status_code == 422

    def test_pipeline_error_returns_500(self) -> None:
        client = _create_test_client(_make_failing_pipeline())
        response = client.post("/api/estimate", json=_ESTIMATE_BODY)

        assert response.status_code == 500
        assert "boom" in response.json()["detail"]


# ---------------------------------------------------------------------------
# GET /api/sample-estimate
# ---------------------------------------------------------------------------


class TestSampleEstimate:
    def test_returns_200(self, client: TestClient) -> None:
        response = client.get("/api/sample-estimate")

        assert response.status_code == 200
        data = response.json()
        assert data["project"]["city_key"] == "florianopolis"
        assert data["project"]["has_land"] is True
        assert data["breakdown"]["scenario"]["id"] == "flat_no_subfloor"
        assert len(data["timeline"]) == 12

    def test_pipeline_error_returns_500(self) -> None:
        client = _create_test_client(_make_failing_pipeline())
        response = client.get("/api/sample-estimate")
        assert response.status_code == 500
