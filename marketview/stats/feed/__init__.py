"""Feed source interface, REST client and response adapters."""

from .adapters import MarketsAdapter, OrdersAdapter, ResponseAdapter, TradesAdapter
from .client import FeedSource, RestFeed

__all__ = [
    "FeedSource",
    "RestFeed",
    "ResponseAdapter",
    "MarketsAdapter",
    "OrdersAdapter",
    "TradesAdapter",
]
