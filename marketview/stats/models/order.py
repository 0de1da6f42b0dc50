"""Order book level data model."""

from pydantic import BaseModel, ConfigDict

from .types import DecimalValue


class Order(BaseModel):
    """One level of one side of the order book.

    ``remain <= amount`` is assumed from the feed and not checked here.
    ``value`` is the feed's notional for the level and is taken as-is,
    it is never recomputed from ``remain * price``.
    """

    amount: DecimalValue
    remain: DecimalValue
    price: DecimalValue
    value: DecimalValue

    model_config = ConfigDict(frozen=True)
