"""Engine configuration.

The configuration surface covers truncation sizes for the
book and the tape, the quote-currency rounding table, and the debounce
quiet period used by the estimator session. Feed settings are carried here
so a single object can build a whole engine.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .exceptions import ConfigError

DEFAULT_DEPTH_SIZE = 10
DEFAULT_TAPE_SIZE = 10
DEFAULT_DEBOUNCE_DELAY = 0.5
DEFAULT_FEED_BASE_URL = "https://api.bitpin.org"

# Fractional digits shown for prices, keyed by quote currency code
ROUNDING_PLACES_BY_QUOTE = {
    "IRT": 0,
    "USDT": 2,
}


class StatsConfig(BaseModel):
    """Immutable configuration shared by all engine components."""

    depth_size: int = DEFAULT_DEPTH_SIZE
    tape_size: int = DEFAULT_TAPE_SIZE
    rounding_places_by_quote: dict[str, int] = Field(
        default_factory=lambda: dict(ROUNDING_PLACES_BY_QUOTE)
    )
    default_places: int = 2
    price_change_places: int = 2
    zero_change_glyph: str = "±"
    debounce_delay: float = DEFAULT_DEBOUNCE_DELAY
    precision: int = 28
    feed_base_url: str = DEFAULT_FEED_BASE_URL
    request_timeout: float = 30.0

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @field_validator("rounding_places_by_quote")
    @classmethod
    def normalize_quote_codes(cls, v: dict[str, int]) -> dict[str, int]:
        """Quote codes are matched case-insensitively."""
        return {code.strip().upper(): places for code, places in v.items()}

    @model_validator(mode="after")
    def check_ranges(self) -> "StatsConfig":
        if self.depth_size < 0:
            raise ConfigError(f"depth_size must be >= 0, got {self.depth_size}")
        if self.tape_size < 0:
            raise ConfigError(f"tape_size must be >= 0, got {self.tape_size}")
        if self.default_places < 0 or self.price_change_places < 0:
            raise ConfigError("rounding places must be >= 0")
        for code, places in self.rounding_places_by_quote.items():
            if places < 0:
                raise ConfigError(f"rounding places for {code} must be >= 0, got {places}")
        if self.precision <= 0:
            raise ConfigError(f"precision must be positive, got {self.precision}")
        if self.debounce_delay < 0:
            raise ConfigError(f"debounce_delay must be >= 0, got {self.debounce_delay}")
        return self

    def places_for(self, quote_code: str | None) -> int:
        """Fractional digits for prices quoted in ``quote_code``."""
        if not quote_code:
            return self.default_places
        return self.rounding_places_by_quote.get(quote_code.strip().upper(), self.default_places)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "StatsConfig":
        """Build a config from a plain mapping (e.g. parsed JSON or TOML)."""
        return cls.model_validate(dict(data))
