"""Feed source interface and its REST implementation.

The engine itself never fetches; callers hand it snapshots. RestFeed is a
thin convenience over HTTPClient for callers that have no feed of their
own. It does no caching or retrying.
"""

from __future__ import annotations

import logging
from typing import Protocol

from ..core.config import StatsConfig
from ..core.enums import BookSide
from ..models import Market, Order, Trade
from ..utils.http import HTTPClient
from .adapters import MarketsAdapter, OrdersAdapter, TradesAdapter

logger = logging.getLogger(__name__)

MARKETS_PATH = "/v1/mkt/markets/"
ORDERS_PATH = "/v2/mth/actives/{market_id}/"
TRADES_PATH = "/v1/mth/matches/{market_id}/"


class FeedSource(Protocol):
    """Anything that can supply market snapshots."""

    async def get_markets(self) -> list[Market]:
        ...

    async def get_orders(self, market_id: int, side: BookSide) -> list[Order]:
        ...

    async def get_trades(self, market_id: int) -> list[Trade]:
        ...


class RestFeed:
    """FeedSource backed by the exchange REST API."""

    def __init__(
        self,
        http: HTTPClient | None = None,
        *,
        config: StatsConfig | None = None,
    ) -> None:
        config = config or StatsConfig()
        self._http = http or HTTPClient(config.feed_base_url, timeout=config.request_timeout)
        self._markets = MarketsAdapter()
        self._orders = OrdersAdapter()
        self._trades = TradesAdapter()

    async def get_markets(self) -> list[Market]:
        """Fetch every listed market."""
        response = await self._http.get(MARKETS_PATH)
        markets = self._markets.parse(response)
        logger.debug("markets_fetched", extra={"count": len(markets)})
        return markets

    async def get_orders(self, market_id: int, side: BookSide) -> list[Order]:
        """Fetch one side of the active order book."""
        side = BookSide(side)
        params = {"market_id": market_id, "side": side.value}
        response = await self._http.get(
            ORDERS_PATH.format(market_id=market_id), params={"type": side.value}
        )
        orders = self._orders.parse(response, params)
        logger.debug("orders_fetched", extra={**params, "count": len(orders)})
        return orders

    async def get_trades(self, market_id: int) -> list[Trade]:
        """Fetch recent matches."""
        params = {"market_id": market_id}
        response = await self._http.get(TRADES_PATH.format(market_id=market_id))
        trades = self._trades.parse(response, params)
        logger.debug("trades_fetched", extra={**params, "count": len(trades)})
        return trades

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> "RestFeed":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
