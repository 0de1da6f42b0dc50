"""Display formatting for prices, price changes and grouped numbers.

Prices are truncated (never rounded up) to a number of fractional digits
chosen by the market's quote currency. Price changes are always shown with
two fractional digits and a sign marker.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal
from typing import Optional

from ..core.config import StatsConfig
from ..core.decimal_engine import DEFAULT_ENGINE, DecimalEngine, DecimalLike
from ..models import Market, MarketQuote


class DisplayFormatter:
    """Turns decimal statistics into display strings."""

    def __init__(
        self,
        engine: DecimalEngine = DEFAULT_ENGINE,
        config: StatsConfig | None = None,
    ) -> None:
        self._engine = engine
        self._config = config or StatsConfig()

    def places_for(self, quote_code: str | None) -> int:
        """Fractional digits for a quote currency (IRT 0, USDT 2, default 2)."""
        return self._config.places_for(quote_code)

    def round_price(self, price: DecimalLike, quote_code: str | None) -> str:
        """Truncate ``price`` to the quote currency's places.

        Examples:
            >>> DisplayFormatter().round_price("1234.567", "USDT")
            '1234.56'
            >>> DisplayFormatter().round_price("1234.567", "IRT")
            '1234'
        """
        rounded = self._engine.round(price, self.places_for(quote_code))
        return self._engine.to_plain(rounded)

    def round_price_change(self, change: Optional[DecimalLike]) -> Decimal:
        """Truncate a change to the configured places; None counts as zero."""
        if change is None:
            return Decimal(0)
        return self._engine.round(change, self._config.price_change_places)

    def format_price_change(self, change: Optional[DecimalLike]) -> str:
        """Signed percentage text: ``+1.23%``, ``±0%``, ``-0.5%``.

        The sign is decided after truncation, so ``-0.001`` renders as zero.
        """
        rounded = self.round_price_change(change)
        if rounded.is_zero():
            return f"{self._config.zero_change_glyph}0%"
        magnitude = self._engine.to_plain(self._engine.abs(rounded))
        sign = "+" if rounded > 0 else "-"
        return f"{sign}{magnitude}%"

    def format_number(self, value: Optional[DecimalLike]) -> str:
        """Plain string with thousands separators. None renders as ``""``."""
        if value is None:
            return ""
        plain = self._engine.to_plain(value)
        sign = ""
        if plain.startswith("-"):
            sign, plain = "-", plain[1:]
        integer, _, fraction = plain.partition(".")
        grouped = f"{int(integer):,}"
        return f"{sign}{grouped}.{fraction}" if fraction else f"{sign}{grouped}"

    def format_market(self, market: Market) -> MarketQuote:
        """Listing row for one market."""
        return MarketQuote(
            market_id=market.id,
            display_code=market.display_code,
            quote_code=market.quote_code,
            price=self.round_price(market.price, market.quote_code),
            price_change=self.format_price_change(market.price_change),
        )

    def select_markets(self, markets: Iterable[Market], quote_code: str) -> list[MarketQuote]:
        """Listing rows for markets quoted in ``quote_code``, in feed order."""
        wanted = quote_code.strip().upper()
        return [
            self.format_market(market)
            for market in markets
            if market.quote_code.upper() == wanted
        ]
