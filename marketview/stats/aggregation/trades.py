"""Trade tape statistics over the most recent N trades."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from decimal import Decimal
from typing import Optional

from ..core.config import DEFAULT_TAPE_SIZE
from ..core.decimal_engine import DEFAULT_ENGINE, DecimalEngine
from ..models import Trade, TradeTapeStats
from .depth import top_n

logger = logging.getLogger(__name__)


def total_amount(
    trades: Sequence[Trade], engine: DecimalEngine = DEFAULT_ENGINE
) -> Optional[Decimal]:
    """Sum of ``match_amount``. None for an empty window."""
    if not trades:
        return None
    return engine.sum(trade.match_amount for trade in trades)


def total_value(
    trades: Sequence[Trade], engine: DecimalEngine = DEFAULT_ENGINE
) -> Optional[Decimal]:
    """Sum of the feed-supplied ``value``. None for an empty window."""
    if not trades:
        return None
    return engine.sum(trade.value for trade in trades)


def trades_weighted_average_price(
    trades: Sequence[Trade], engine: DecimalEngine = DEFAULT_ENGINE
) -> Optional[Decimal]:
    """``sum(match_amount * price) / sum(match_amount)``.

    None when the window is empty or the amount sum is zero.
    """
    amount = total_amount(trades, engine)
    if amount is None or amount.is_zero():
        return None
    notional = engine.sum(engine.mul(trade.match_amount, trade.price) for trade in trades)
    return engine.div(notional, amount)


class TradeTapeAggregator:
    """Summarizes the trade tape (most recent first, as the feed sends it).

    Independent of the order book: nothing here looks at depth state.
    """

    def __init__(
        self,
        engine: DecimalEngine = DEFAULT_ENGINE,
        tape_size: int = DEFAULT_TAPE_SIZE,
    ) -> None:
        if tape_size < 0:
            raise ValueError(f"tape_size must be >= 0, got {tape_size}")
        self._engine = engine
        self._tape_size = tape_size

    @property
    def tape_size(self) -> int:
        return self._tape_size

    def top_n(self, trades: Sequence[Trade], n: int | None = None) -> tuple[Trade, ...]:
        return top_n(trades, self._tape_size if n is None else n)

    def weighted_average_price(self, trades: Sequence[Trade]) -> Optional[Decimal]:
        return trades_weighted_average_price(trades, self._engine)

    def summarize(self, trades: Sequence[Trade]) -> TradeTapeStats:
        """Truncate to the window and compute tape statistics."""
        window = self.top_n(trades)
        stats = TradeTapeStats(
            trades=window,
            total_amount=total_amount(window, self._engine),
            total_value=total_value(window, self._engine),
            weighted_average_price=self.weighted_average_price(window),
        )
        logger.debug(
            "trade_tape_summarized",
            extra={
                "trades_in": len(trades),
                "trades_used": len(window),
                "weighted_average_price": stats.weighted_average_price,
            },
        )
        return stats
