"""Custom exception hierarchy for Canteiro."""

from __future__ import annotations


class CanteiroError(Exception):
    """Base exception for all Canteiro errors."""


class EstimationError(CanteiroError):
    """Raised when an estimate cannot be produced from a project."""


class ConfigurationError(CanteiroError):
    """Raised when an environment setting cannot be parsed."""
