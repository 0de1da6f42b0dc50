"""Market data model."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .currency import Currency
from .types import DecimalValue


class Market(BaseModel):
    """Trading pair snapshot.

    ``currency2`` is the quote currency; it decides how many fractional
    digits a price is displayed with. The feed nests the 24h change under
    ``price_info.change``; it is lifted to ``price_change`` on validation.
    """

    id: int
    currency1: Currency
    currency2: Currency
    code: str = Field(..., min_length=1)
    price: DecimalValue
    price_change: Optional[DecimalValue] = None

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @model_validator(mode="before")
    @classmethod
    def lift_price_info(cls, data: Any) -> Any:
        if isinstance(data, dict) and "price_info" in data and "price_change" not in data:
            data = dict(data)
            price_info = data.pop("price_info") or {}
            data["price_change"] = price_info.get("change") if isinstance(price_info, dict) else None
        return data

    @property
    def quote_code(self) -> str:
        """Code of the quote currency."""
        return self.currency2.code

    @property
    def base_code(self) -> str:
        """Code of the base currency."""
        return self.currency1.code

    @property
    def display_code(self) -> str:
        """Human readable pair code, ``BTC_USDT`` -> ``BTC/USDT``."""
        return self.code.replace("_", "/", 1)
