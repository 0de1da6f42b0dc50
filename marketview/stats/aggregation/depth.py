"""Order book depth statistics over the top-N window.

The feed delivers each book side already sorted by matching priority (best
price first). The aggregator only truncates: it never re-sorts or filters,
so the window is exactly what is immediately fillable. Levels beyond the
window never affect any statistic.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from decimal import Decimal
from typing import Optional, TypeVar

from ..core.config import DEFAULT_DEPTH_SIZE
from ..core.decimal_engine import DEFAULT_ENGINE, DecimalEngine
from ..models import DepthStats, Order

logger = logging.getLogger(__name__)

T = TypeVar("T")


def top_n(items: Sequence[T], n: int = DEFAULT_DEPTH_SIZE) -> tuple[T, ...]:
    """Return the first ``min(len(items), n)`` entries in feed order."""
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    return tuple(items[:n])


def total_remain(
    orders: Sequence[Order], engine: DecimalEngine = DEFAULT_ENGINE
) -> Optional[Decimal]:
    """Exact sum of ``remain``. None for an empty window."""
    if not orders:
        return None
    return engine.sum(order.remain for order in orders)


def total_value(
    orders: Sequence[Order], engine: DecimalEngine = DEFAULT_ENGINE
) -> Optional[Decimal]:
    """Exact sum of the feed-supplied ``value``. None for an empty window."""
    if not orders:
        return None
    return engine.sum(order.value for order in orders)


def weighted_average_price(
    orders: Sequence[Order], engine: DecimalEngine = DEFAULT_ENGINE
) -> Optional[Decimal]:
    """Volume-weighted average price ``sum(remain * price) / sum(remain)``.

    None when the window is empty or the remain sum is zero; the zero
    denominator is checked here so the engine's division never fails.
    """
    remain = total_remain(orders, engine)
    if remain is None or remain.is_zero():
        return None
    notional = engine.sum(engine.mul(order.remain, order.price) for order in orders)
    return engine.div(notional, remain)


class DepthAggregator:
    """Summarizes one side of an order book.

    Args:
        engine: Decimal engine used for every sum and division
        depth_size: Number of leading levels considered (default 10)
    """

    def __init__(
        self,
        engine: DecimalEngine = DEFAULT_ENGINE,
        depth_size: int = DEFAULT_DEPTH_SIZE,
    ) -> None:
        if depth_size < 0:
            raise ValueError(f"depth_size must be >= 0, got {depth_size}")
        self._engine = engine
        self._depth_size = depth_size

    @property
    def depth_size(self) -> int:
        return self._depth_size

    def top_n(self, orders: Sequence[Order], n: int | None = None) -> tuple[Order, ...]:
        return top_n(orders, self._depth_size if n is None else n)

    def total_remain(self, orders: Sequence[Order]) -> Optional[Decimal]:
        return total_remain(orders, self._engine)

    def total_value(self, orders: Sequence[Order]) -> Optional[Decimal]:
        return total_value(orders, self._engine)

    def weighted_average_price(self, orders: Sequence[Order]) -> Optional[Decimal]:
        return weighted_average_price(orders, self._engine)

    def summarize(self, orders: Sequence[Order]) -> DepthStats:
        """Truncate to the window and compute all depth statistics."""
        window = self.top_n(orders)
        stats = DepthStats(
            orders=window,
            total_remain=self.total_remain(window),
            total_value=self.total_value(window),
            weighted_average_price=self.weighted_average_price(window),
        )
        logger.debug(
            "depth_summarized",
            extra={
                "levels_in": len(orders),
                "levels_used": len(window),
                "total_remain": stats.total_remain,
                "weighted_average_price": stats.weighted_average_price,
            },
        )
        return stats
