"""Partial-fill estimation."""

from .partial_fill import PartialFillEstimator, PartialFillSession

__all__ = ["PartialFillEstimator", "PartialFillSession"]
