"""Trade data model."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from .types import DecimalValue


class Trade(BaseModel):
    """Executed match from the trade tape."""

    time: int = Field(..., ge=0)
    price: DecimalValue
    value: DecimalValue
    match_amount: DecimalValue
    type: str
    match_id: str = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @property
    def timestamp(self) -> datetime:
        """Match time as an aware UTC datetime."""
        return datetime.fromtimestamp(self.time, tz=timezone.utc)

    @property
    def is_buy(self) -> bool:
        """Whether the taker side of the match was a buy."""
        return self.type.lower() == "buy"
