"""Core components."""

from .config import StatsConfig
from .decimal_engine import DEFAULT_ENGINE, DecimalEngine, DecimalLike, to_decimal
from .enums import BookSide, MarketTab
from .exceptions import (
    ConfigError,
    DivisionByZero,
    FeedError,
    InvalidDecimal,
    StatsError,
)

__all__ = [
    "StatsConfig",
    "DecimalEngine",
    "DecimalLike",
    "DEFAULT_ENGINE",
    "to_decimal",
    "BookSide",
    "MarketTab",
    "StatsError",
    "InvalidDecimal",
    "DivisionByZero",
    "FeedError",
    "ConfigError",
]
