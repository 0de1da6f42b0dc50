"""Partial-fill estimate for a percentage of the visible depth.

The estimator turns a user-entered percentage ``P`` and the depth
statistics of the active book side into:

    estimated_remain  = (P / 100) * total_remain
    estimated_payable = (P / 100) * weighted_average_price

``estimated_payable`` is deliberately NOT ``estimated_remain *
weighted_average_price``; the two only agree when ``total_remain`` is 100.
The literal formula is kept until product confirms which figure is meant.

PartialFillSession is the stateful wrapper a screen drives: it debounces
the percentage input and clears it whenever the active tab changes.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from decimal import Decimal
from typing import Optional, Union

from ..core.config import DEFAULT_DEBOUNCE_DELAY
from ..core.decimal_engine import DEFAULT_ENGINE, DecimalEngine
from ..core.enums import MarketTab
from ..core.exceptions import InvalidDecimal
from ..models import DepthStats, FillEstimate
from ..utils.debounce import Debouncer

logger = logging.getLogger(__name__)

Percentage = Union[str, Decimal, int, None]
EstimateCallback = Callable[[FillEstimate], Awaitable[None]] | Callable[[FillEstimate], None]

_HUNDRED = Decimal(100)


class PartialFillEstimator:
    """Pure estimator; every method is a function of its arguments."""

    def __init__(self, engine: DecimalEngine = DEFAULT_ENGINE) -> None:
        self._engine = engine

    def parse_percentage(self, percentage: Percentage) -> Optional[Decimal]:
        """Parse user input. Empty or unparseable text means "no value yet".

        The value is not clamped: negative or >100 percentages pass through.
        """
        if percentage is None:
            return None
        if isinstance(percentage, str) and not percentage.strip():
            return None
        try:
            return self._engine.parse(percentage)
        except InvalidDecimal:
            logger.debug("percentage_unparseable", extra={"percentage": percentage})
            return None

    def _fraction(self, percentage: Percentage) -> Optional[Decimal]:
        parsed = self.parse_percentage(percentage)
        if parsed is None:
            return None
        return self._engine.div(parsed, _HUNDRED)

    def estimated_remain(
        self, percentage: Percentage, total_remain: Optional[Decimal]
    ) -> Optional[Decimal]:
        """``(P / 100) * total_remain``. None without depth or percentage."""
        if total_remain is None:
            return None
        fraction = self._fraction(percentage)
        if fraction is None:
            return None
        return self._engine.mul(fraction, total_remain)

    def estimated_payable(
        self, percentage: Percentage, weighted_average_price: Optional[Decimal]
    ) -> Optional[Decimal]:
        """``(P / 100) * weighted_average_price``. None without price or percentage."""
        if weighted_average_price is None:
            return None
        fraction = self._fraction(percentage)
        if fraction is None:
            return None
        return self._engine.mul(fraction, weighted_average_price)

    def estimate(self, percentage: Percentage, depth: Optional[DepthStats]) -> FillEstimate:
        """Both figures for one depth snapshot.

        Payable is only reported together with a defined remain.
        """
        if depth is None or depth.is_empty:
            return FillEstimate(percentage=self.parse_percentage(percentage))
        remain = self.estimated_remain(percentage, depth.total_remain)
        payable = None
        if remain is not None:
            payable = self.estimated_payable(percentage, depth.weighted_average_price)
        return FillEstimate(
            percentage=self.parse_percentage(percentage),
            estimated_remain=remain,
            estimated_payable=payable,
        )


class PartialFillSession:
    """Estimator state for one market screen.

    Tracks the active tab, the raw percentage as typed, the debounced
    percentage actually used, and the latest depth of the active side.
    """

    def __init__(
        self,
        estimator: PartialFillEstimator | None = None,
        *,
        tab: MarketTab = MarketTab.BUY,
        delay: float = DEFAULT_DEBOUNCE_DELAY,
        on_estimate: EstimateCallback | None = None,
    ) -> None:
        self._estimator = estimator or PartialFillEstimator()
        self._tab = tab
        self._on_estimate = on_estimate
        self._raw_percentage = ""
        self._percentage = ""
        self._depth: DepthStats | None = None
        self._debouncer: Debouncer[str] = Debouncer(self._apply_percentage, delay)

    @property
    def tab(self) -> MarketTab:
        return self._tab

    @property
    def raw_percentage(self) -> str:
        """Percentage as last typed (what the input field shows)."""
        return self._raw_percentage

    @property
    def percentage(self) -> str:
        """Debounced percentage used for estimates."""
        return self._percentage

    @property
    def depth(self) -> DepthStats | None:
        return self._depth

    @property
    def pending(self) -> bool:
        """Whether a percentage is waiting out the quiet period."""
        return self._debouncer.pending

    def update_depth(self, stats: DepthStats | None) -> None:
        """Replace the depth snapshot of the active side."""
        if self._tab.side is None:
            logger.debug("depth_ignored_on_trades_tab")
            return
        self._depth = stats

    def set_percentage(self, raw: str) -> None:
        """Record typed input and schedule it for the estimator."""
        self._raw_percentage = raw
        self._debouncer.submit(raw)

    def switch_tab(self, tab: MarketTab) -> bool:
        """Activate ``tab``. Changing tabs clears the percentage and the depth.

        Returns:
            True if the tab changed.
        """
        if tab == self._tab:
            return False
        self._debouncer.cancel()
        self._tab = tab
        self._raw_percentage = ""
        self._percentage = ""
        self._depth = None
        logger.debug("estimator_reset", extra={"tab": tab.value})
        return True

    def estimate(self) -> FillEstimate:
        """Estimate for the current debounced percentage and depth."""
        return self._estimator.estimate(self._percentage, self._depth)

    async def flush(self) -> bool:
        """Apply a pending percentage immediately."""
        return await self._debouncer.flush()

    def close(self) -> None:
        """Drop any pending percentage."""
        self._debouncer.cancel()

    async def _apply_percentage(self, value: str) -> None:
        self._percentage = value
        estimate = self.estimate()
        logger.debug(
            "estimate_recomputed",
            extra={
                "tab": self._tab.value,
                "percentage": value,
                "estimated_remain": estimate.estimated_remain,
                "estimated_payable": estimate.estimated_payable,
            },
        )
        if self._on_estimate is not None:
            result = self._on_estimate(estimate)
            if inspect.isawaitable(result):
                await result
