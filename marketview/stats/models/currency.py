"""Currency data model."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Currency(BaseModel):
    """Currency listed on the exchange (e.g. USDT, IRT, BTC)."""

    code: str = Field(..., min_length=1)
    id: Optional[int] = None
    image: Optional[str] = None

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Currency):
            return NotImplemented
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)
