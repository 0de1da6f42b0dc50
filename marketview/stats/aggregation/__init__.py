"""Order book and trade tape aggregators."""

from .depth import (
    DepthAggregator,
    top_n,
    total_remain,
    total_value,
    weighted_average_price,
)
from .trades import TradeTapeAggregator, total_amount, trades_weighted_average_price

__all__ = [
    "DepthAggregator",
    "TradeTapeAggregator",
    "top_n",
    "total_remain",
    "total_value",
    "weighted_average_price",
    "total_amount",
    "trades_weighted_average_price",
]
