"""MarketStatsEngine facade.

Architecture:
    The facade builds one DecimalEngine from the configuration and shares it
    with every component, so the rounding policy is fixed once per engine
    instead of globally. Components stay usable on their own; the facade
    only wires them together.

Design Decisions:
    - Config injection: one StatsConfig drives sizes, places and debounce
    - Pure calls: every method except ``new_session`` is a function of its
      arguments and may be called from any number of screens
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from decimal import Decimal
from typing import Optional

from ..aggregation import DepthAggregator, TradeTapeAggregator
from ..core.config import StatsConfig
from ..core.decimal_engine import DecimalEngine, DecimalLike
from ..core.enums import MarketTab
from ..estimation import PartialFillEstimator, PartialFillSession
from ..estimation.partial_fill import EstimateCallback, Percentage
from ..formatting import DisplayFormatter
from ..models import DepthStats, FillEstimate, Market, MarketQuote, Order, Trade, TradeTapeStats


class MarketStatsEngine:
    """Entry point bundling the aggregators, estimator and formatter."""

    def __init__(self, config: StatsConfig | None = None) -> None:
        self._config = config or StatsConfig()
        self._engine = DecimalEngine(precision=self._config.precision)
        self._depth = DepthAggregator(self._engine, self._config.depth_size)
        self._tape = TradeTapeAggregator(self._engine, self._config.tape_size)
        self._estimator = PartialFillEstimator(self._engine)
        self._formatter = DisplayFormatter(self._engine, self._config)

    @property
    def config(self) -> StatsConfig:
        return self._config

    @property
    def decimal(self) -> DecimalEngine:
        return self._engine

    @property
    def formatter(self) -> DisplayFormatter:
        return self._formatter

    def summarize_depth(self, orders: Sequence[Order]) -> DepthStats:
        """Depth statistics over the configured top-N levels."""
        return self._depth.summarize(orders)

    def summarize_trades(self, trades: Sequence[Trade]) -> TradeTapeStats:
        """Trade tape statistics over the configured top-N trades."""
        return self._tape.summarize(trades)

    def estimate(self, percentage: Percentage, depth: Optional[DepthStats]) -> FillEstimate:
        """Partial-fill estimate for ``percentage`` of ``depth``."""
        return self._estimator.estimate(percentage, depth)

    def new_session(
        self,
        *,
        tab: MarketTab = MarketTab.BUY,
        on_estimate: EstimateCallback | None = None,
    ) -> PartialFillSession:
        """Debounced estimator session using the configured quiet period."""
        return PartialFillSession(
            self._estimator,
            tab=tab,
            delay=self._config.debounce_delay,
            on_estimate=on_estimate,
        )

    def format_price(self, price: DecimalLike, quote_code: str | None) -> str:
        return self._formatter.round_price(price, quote_code)

    def format_price_change(self, change: Optional[DecimalLike]) -> str:
        return self._formatter.format_price_change(change)

    def select_markets(self, markets: Iterable[Market], quote_code: str) -> list[MarketQuote]:
        return self._formatter.select_markets(markets, quote_code)

    def to_plain(self, value: Optional[Decimal]) -> Optional[str]:
        """Plain decimal string, or None for an undefined statistic."""
        if value is None:
            return None
        return self._engine.to_plain(value)
