"""Factory functions for creating pre-configured engines and pipelines."""

from __future__ import annotations

from typing import TYPE_CHECKING

from canteiro.data.repository import ReferenceDataRepository
from canteiro.engine import CostEngine
from canteiro.services.pipeline import EstimatePipeline

if TYPE_CHECKING:
    from canteiro.config import Settings


def create_default_engine() -> CostEngine:
    """Create a CostEngine wired up with the built-in reference data.

    This is the recommended way to create a CostEngine for typical usage.
    It wires up a ReferenceDataRepository with the Santa Catarina tables
    (CUB, city taxes, scenario catalog) so callers don't need to
    understand the internal wiring.

    Example::

        from canteiro import ProjectData, create_default_engine

        engine = create_default_engine()
        breakdown = engine.calculate(ProjectData(areas={"ground": 120}))
    """
    return CostEngine(ReferenceDataRepository())


def create_default_pipeline(settings: Settings | None = None) -> EstimatePipeline:
    """Create an EstimatePipeline around the default engine.

    *settings* may override the monthly inflation rate used by the scheduler.
    """
    monthly_inflation = settings.monthly_inflation if settings is not None else None
    return EstimatePipeline(create_default_engine(), monthly_inflation=monthly_inflation)
