"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any


class StatsError(Exception):
    """Base exception for all library errors."""

    pass


class InvalidDecimal(StatsError):
    """Numeric input could not be parsed as a decimal.

    Raised for malformed strings, NaN/infinite values and unsupported types.
    A malformed number is a caller bug, so it is never coerced to zero.
    """

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class DivisionByZero(StatsError):
    """Decimal division with a divisor of exactly zero.

    Only the decimal engine raises this. Aggregators check their
    denominators first and report an undefined statistic instead.
    """

    pass


class FeedError(StatsError):
    """Malformed payload from the market data feed."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class ConfigError(StatsError):
    """Invalid engine configuration."""

    pass
