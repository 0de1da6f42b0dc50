"""Data models for market data and derived statistics.

Architecture:
    All models are Pydantic v2 models with ``frozen=True``: a feed snapshot
    is validated once and then only read by the aggregators. Monetary fields
    are ``Decimal`` values parsed by the round-toward-zero decimal engine.

Model Categories:
    - Feed data: Currency, Market, Order, Trade
    - Derived: DepthStats, TradeTapeStats, FillEstimate, MarketQuote
"""

from .currency import Currency
from .market import Market
from .order import Order
from .stats import DepthStats, FillEstimate, MarketQuote, TradeTapeStats
from .trade import Trade
from .types import DecimalValue

__all__ = [
    "Currency",
    "DecimalValue",
    "DepthStats",
    "FillEstimate",
    "Market",
    "MarketQuote",
    "Order",
    "Trade",
    "TradeTapeStats",
]
