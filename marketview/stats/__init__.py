"""Marketview Stats - market-statistics engine for order book depth and trade tapes."""

from .aggregation import DepthAggregator, TradeTapeAggregator
from .api import MarketStatsEngine
from .core import (
    DEFAULT_ENGINE,
    BookSide,
    ConfigError,
    DecimalEngine,
    DivisionByZero,
    FeedError,
    InvalidDecimal,
    MarketTab,
    StatsConfig,
    StatsError,
    to_decimal,
)
from .estimation import PartialFillEstimator, PartialFillSession
from .feed import FeedSource, RestFeed
from .formatting import DisplayFormatter
from .models import (
    Currency,
    DepthStats,
    FillEstimate,
    Market,
    MarketQuote,
    Order,
    Trade,
    TradeTapeStats,
)
from .utils import Debouncer

__all__ = [
    # Engine
    "MarketStatsEngine",
    "StatsConfig",
    "DecimalEngine",
    "DEFAULT_ENGINE",
    "to_decimal",
    # Components
    "DepthAggregator",
    "TradeTapeAggregator",
    "PartialFillEstimator",
    "PartialFillSession",
    "DisplayFormatter",
    "Debouncer",
    # Feed
    "FeedSource",
    "RestFeed",
    # Enums
    "BookSide",
    "MarketTab",
    # Models
    "Currency",
    "Market",
    "Order",
    "Trade",
    "DepthStats",
    "TradeTapeStats",
    "FillEstimate",
    "MarketQuote",
    # Exceptions
    "StatsError",
    "InvalidDecimal",
    "DivisionByZero",
    "FeedError",
    "ConfigError",
]
