"""FastAPI application: create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

# Load .env from project root (backend/../.env or backend/.env)
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from canteiro.config import load_settings
from canteiro.engine import ENGINE_VERSION
from canteiro.exceptions import CanteiroError
from canteiro.models.enums import (
    ConstructionMethod,
    FinishStandard,
    LandStatus,
    Topography,
)
from canteiro.models.project import AreaBreakdown, ProjectData  # noqa: TCH001 (FastAPI resolves at runtime)

if TYPE_CHECKING:
    from canteiro.config import Settings
    from canteiro.services.pipeline import EstimatePipeline, EstimateResult

logger = logging.getLogger(__name__)


def _result_payload(result: EstimateResult) -> dict[str, Any]:
    breakdown = result.breakdown
    return {
        "breakdown": breakdown.model_dump(mode="json"),
        "summary_dict": breakdown.to_summary_dict(),
        "schedule": [p.model_dump(mode="json") for p in result.schedule],
        "timeline": [t.model_dump(mode="json") for t in result.timeline],
        "macro_phases": [m.model_dump(mode="json") for m in result.macro_phases],
        "processing_time_seconds": result.processing_time_seconds,
    }


def create_app(
    *,
    pipeline: EstimatePipeline | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    pipeline
        Optional pre-built pipeline for dependency injection (e.g. tests).
        If not provided, one is created via create_default_pipeline on
        first request.
    settings
        Optional settings; read from the environment when omitted.
    """
    settings = settings or load_settings()
    app = FastAPI(title="Canteiro", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject mocks
    app.state.pipeline = pipeline

    def _get_pipeline() -> EstimatePipeline:
        pl: EstimatePipeline | None = app.state.pipeline
        if pl is not None:
            return pl
        from canteiro.factory import create_default_pipeline

        pl = create_default_pipeline(settings)
        app.state.pipeline = pl
        return pl

    def _run(project: ProjectData) -> dict[str, Any]:
        try:
            result = _get_pipeline().run(project)
        except CanteiroError as exc:
            logger.exception("Pipeline error during estimate")
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        return _result_payload(result)

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": ENGINE_VERSION}

    # ------------------------------------------------------------------
    # GET /api/scenarios
    # ------------------------------------------------------------------

    @app.get("/api/scenarios")
    def scenarios() -> list[dict[str, Any]]:
        repository = _get_pipeline().repository
        return [s.model_dump(mode="json") for s in repository.list_scenarios()]

    # ------------------------------------------------------------------
    # POST /api/estimate
    # ------------------------------------------------------------------

    @app.post("/api/estimate")
    def estimate(project: ProjectData) -> dict[str, Any]:
        return _run(project)

    # ------------------------------------------------------------------
    # GET /api/sample-estimate
    # ------------------------------------------------------------------

    @app.get("/api/sample-estimate")
    def sample_estimate() -> dict[str, Any]:
        sample_project = ProjectData(
            user_name="Exemplo",
            city_key="florianopolis",
            land_status=LandStatus.OWNED,
            topography=Topography.FLAT,
            construction_method=ConstructionMethod.MASONRY,
            standard=FinishStandard.NORMAL,
            areas=AreaBreakdown(ground=120.0, upper=80.0, subfloor=0.0, outdoor=30.0),
            deadline_months=12,
        )
        payload = _run(sample_project)
        payload["project"] = sample_project.model_dump(mode="json")
        return payload

    return app
