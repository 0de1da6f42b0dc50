"""High-level engine facade."""

from .engine import MarketStatsEngine

__all__ = ["MarketStatsEngine"]
