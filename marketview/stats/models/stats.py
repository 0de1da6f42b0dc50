"""Derived statistics produced by the aggregators and the estimator.

Every statistic is ``Optional[Decimal]``. ``None`` means "no data yet"
(empty book, empty percentage) and is distinct from ``Decimal("0")``.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .order import Order
from .trade import Trade


class DepthStats(BaseModel):
    """Aggregate figures for the top-N window of one book side."""

    orders: tuple[Order, ...] = ()
    total_remain: Optional[Decimal] = None
    total_value: Optional[Decimal] = None
    weighted_average_price: Optional[Decimal] = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_empty(self) -> bool:
        """Whether the window holds no levels."""
        return not self.orders


class TradeTapeStats(BaseModel):
    """Aggregate figures for the most recent N trades."""

    trades: tuple[Trade, ...] = ()
    total_amount: Optional[Decimal] = None
    total_value: Optional[Decimal] = None
    weighted_average_price: Optional[Decimal] = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_empty(self) -> bool:
        """Whether the window holds no trades."""
        return not self.trades


class FillEstimate(BaseModel):
    """Estimated fill for a percentage of the visible depth."""

    percentage: Optional[Decimal] = None
    estimated_remain: Optional[Decimal] = None
    estimated_payable: Optional[Decimal] = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_defined(self) -> bool:
        """Whether both figures are available."""
        return self.estimated_remain is not None and self.estimated_payable is not None


class MarketQuote(BaseModel):
    """Display row for a market listing."""

    market_id: int
    display_code: str
    quote_code: str
    price: str
    price_change: str

    model_config = ConfigDict(frozen=True)
