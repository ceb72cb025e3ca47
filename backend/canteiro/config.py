"""Runtime settings read from the environment.

``.env`` files are loaded by the API entry point; this module only reads
``os.environ``.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from canteiro.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = ("http://localhost:3000",)


@dataclass(frozen=True)
class Settings:
    """Process-wide settings.

    Attributes:
        cors_origins: Origins allowed by the API's CORS middleware.
        monthly_inflation: Override for the regional INCC monthly rate used
            by the scheduler. ``None`` keeps the reference-data rate.
    """

    cors_origins: tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)
    monthly_inflation: float | None = None


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """Build Settings from ``CANTEIRO_*`` environment variables.

    Raises:
        ConfigurationError: If ``CANTEIRO_MONTHLY_INFLATION`` is not a number.
    """
    env = os.environ if environ is None else environ

    raw_origins = env.get("CANTEIRO_CORS_ORIGINS", "")
    origins = tuple(o.strip() for o in raw_origins.split(",") if o.strip())

    monthly_inflation = None
    raw_inflation = env.get("CANTEIRO_MONTHLY_INFLATION", "").strip()
    if raw_inflation:
        try:
            monthly_inflation = float(raw_inflation)
        except ValueError as exc:
            msg = f"CANTEIRO_MONTHLY_INFLATION must be a number, got {raw_inflation!r}"
            raise ConfigurationError(msg) from exc
        logger.info("Using monthly inflation override: %s", monthly_inflation)

    return Settings(
        cors_origins=origins or DEFAULT_CORS_ORIGINS,
        monthly_inflation=monthly_inflation,
    )
