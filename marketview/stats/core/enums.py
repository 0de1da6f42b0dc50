"""Core enumerations shared by the aggregators and the estimator session.

Key Types:
    - BookSide: Buy or sell side of an order book
    - MarketTab: Active view of a market screen (book sides plus trade tape)
"""

from enum import Enum
from typing import Optional


class BookSide(str, Enum):
    """Side of the order book.

    String enum so the value can be passed straight to the feed
    (``?type=buy``).
    """

    BUY = "buy"
    SELL = "sell"

    def __str__(self) -> str:
        """String representation returns the value."""
        return self.value


class MarketTab(str, Enum):
    """Active tab of a market screen.

    The partial-fill estimate is scoped to a tab: switching tabs resets the
    percentage input. Only the book tabs carry depth.
    """

    BUY = "buy"
    SELL = "sell"
    TRADES = "trades"

    def __str__(self) -> str:
        """String representation returns the value."""
        return self.value

    @property
    def side(self) -> Optional[BookSide]:
        """Order book side shown by this tab, None for the trade tape."""
        if self == MarketTab.TRADES:
            return None
        return BookSide(self.value)

    @classmethod
    def from_str(cls, tab: str, default: "MarketTab | None" = None) -> "MarketTab":
        """Parse a tab name, falling back to ``default`` (BUY) when unknown.

        Examples:
            >>> MarketTab.from_str("sell")
            <MarketTab.SELL: 'sell'>
            >>> MarketTab.from_str("orders")
            <MarketTab.BUY: 'buy'>
        """
        try:
            return cls(tab.strip().lower())
        except (ValueError, AttributeError):
            return default if default is not None else cls.BUY
