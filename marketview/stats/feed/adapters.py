"""Response adapters for the exchange REST endpoints.

Payload shapes:
    - markets: ``{"results": [{"id", "currency1", "currency2", "code",
      "price", "price_info": {"change"}}, ...]}``
    - active orders: ``{"orders": [{"amount", "remain", "price", "value"}, ...]}``
    - matches: ``[{"time", "price", "value", "match_amount", "type",
      "match_id"}, ...]``

Malformed envelopes and rows raise FeedError. Malformed numbers raise
InvalidDecimal from the model layer and are not wrapped.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from ..core.exceptions import FeedError
from ..models import Market, Order, Trade

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class ResponseAdapter(ABC):
    """Parses a decoded JSON response into models."""

    @abstractmethod
    def parse(self, response: Any, params: dict[str, Any] | None = None) -> Any:
        """Parse ``response``; ``params`` carries the request context."""


class _RowsAdapter(ResponseAdapter, Generic[M]):
    model: type[M]
    envelope_key: str | None = None

    def _rows(self, response: Any) -> list[Any]:
        if self.envelope_key is None:
            rows = response
        else:
            if not isinstance(response, dict):
                raise FeedError(
                    f"Invalid response format: expected dict, got {type(response).__name__}"
                )
            if self.envelope_key not in response:
                raise FeedError(f"Missing '{self.envelope_key}' in response")
            rows = response[self.envelope_key]
        if not isinstance(rows, list):
            raise FeedError(f"Invalid rows format: expected list, got {type(rows).__name__}")
        return rows

    def parse(self, response: Any, params: dict[str, Any] | None = None) -> list[M]:
        out: list[M] = []
        for index, row in enumerate(self._rows(response)):
            try:
                out.append(self.model.model_validate(row))
            except ValidationError as e:
                logger.warning(
                    "feed_row_invalid",
                    extra={"model": self.model.__name__, "index": index, "params": params},
                )
                raise FeedError(f"Invalid {self.model.__name__} at index {index}: {e}") from e
        return out


class MarketsAdapter(_RowsAdapter[Market]):
    """Adapter for the markets listing."""

    model = Market
    envelope_key = "results"


class OrdersAdapter(_RowsAdapter[Order]):
    """Adapter for one side of the active order book (feed order preserved)."""

    model = Order
    envelope_key = "orders"


class TradesAdapter(_RowsAdapter[Trade]):
    """Adapter for recent matches (most recent first, as sent)."""

    model = Trade
    envelope_key = None
