"""Arbitrary-precision decimal arithmetic with a bound rounding policy.

Architecture:
    Every figure the library produces (depth totals, weighted average prices,
    fill estimates, display prices) flows through a DecimalEngine. The engine
    owns a private ``decimal.Context`` created at construction time, so the
    rounding mode travels with the engine instead of living in the
    process-wide decimal context.

Design Decisions:
    - Addition, subtraction, multiplication and sums are exact; the context
      precision is widened to fit the operands
    - Round toward zero (ROUND_DOWN) wherever digits are dropped: division
      beyond the engine precision and display rounding
    - Private context per engine instance
    - No floats: float input is converted through its shortest string form
    - Plain rendering: results are rendered without exponent or trailing
      zeros so equal values always produce identical strings

See Also:
    - DepthAggregator / TradeTapeAggregator: sums and weighted averages
    - DisplayFormatter: truncation to quote-currency places
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import (
    ROUND_DOWN,
    Context,
    Decimal,
    DivisionByZero as _DecimalDivisionByZero,
    InvalidOperation,
    Overflow,
)
from typing import Union

from .exceptions import DivisionByZero, InvalidDecimal

DecimalLike = Union[Decimal, str, int, float]

DEFAULT_PRECISION = 28
_ZERO = Decimal(0)


class DecimalEngine:
    """Decimal parser and calculator bound to one precision and rounding mode."""

    def __init__(self, precision: int = DEFAULT_PRECISION, rounding: str = ROUND_DOWN) -> None:
        if precision <= 0:
            raise ValueError("precision must be positive")
        self._precision = precision
        self._rounding = rounding
        self._context = Context(
            prec=precision,
            rounding=rounding,
            traps=[InvalidOperation, _DecimalDivisionByZero, Overflow],
        )

    @property
    def precision(self) -> int:
        """Significant digits kept by division results."""
        return self._precision

    @property
    def rounding(self) -> str:
        """Rounding mode applied by every operation."""
        return self._rounding

    @property
    def context(self) -> Context:
        """Copy of the bound context (mutating it does not affect the engine)."""
        return self._context.copy()

    def parse(self, value: DecimalLike) -> Decimal:
        """Parse a decimal string, int, float or Decimal.

        Raises:
            InvalidDecimal: If the value is empty, non-numeric, NaN, infinite
                or of an unsupported type.
        """
        if isinstance(value, Decimal):
            result = value
        elif isinstance(value, bool):
            raise InvalidDecimal(f"Expected a number, got bool {value!r}", value=value)
        elif isinstance(value, int):
            result = Decimal(value)
        elif isinstance(value, float):
            result = self._parse_text(repr(value), value)
        elif isinstance(value, str):
            result = self._parse_text(value, value)
        else:
            raise InvalidDecimal(
                f"Expected a decimal string or number, got {type(value).__name__}",
                value=value,
            )

        if not result.is_finite():
            raise InvalidDecimal(f"Not a finite decimal: {value!r}", value=value)
        return result

    def _parse_text(self, text: str, original: DecimalLike) -> Decimal:
        text = text.strip()
        if not text:
            raise InvalidDecimal("Empty string is not a decimal", value=original)
        try:
            return Decimal(text)
        except InvalidOperation as e:
            raise InvalidDecimal(f"Invalid decimal: {original!r}", value=original) from e

    def _widened(self, digits: int) -> Context:
        """Bound context with precision raised to hold ``digits`` significant digits."""
        if digits <= self._precision:
            return self._context
        context = self._context.copy()
        context.prec = digits
        return context

    def add(self, a: DecimalLike, b: DecimalLike) -> Decimal:
        """Return the exact ``a + b``."""
        left, right = self.parse(a), self.parse(b)
        return self._widened(_sum_digits(left, right)).add(left, right)

    def sub(self, a: DecimalLike, b: DecimalLike) -> Decimal:
        """Return the exact ``a - b``."""
        left, right = self.parse(a), self.parse(b)
        return self._widened(_sum_digits(left, right)).subtract(left, right)

    def mul(self, a: DecimalLike, b: DecimalLike) -> Decimal:
        """Return the exact ``a * b``."""
        left, right = self.parse(a), self.parse(b)
        digits = len(left.as_tuple().digits) + len(right.as_tuple().digits)
        return self._widened(digits).multiply(left, right)

    def div(self, a: DecimalLike, b: DecimalLike) -> Decimal:
        """Return ``a / b`` truncated to the engine precision.

        Raises:
            DivisionByZero: If ``b`` is exactly zero.
        """
        dividend = self.parse(a)
        divisor = self.parse(b)
        if divisor.is_zero():
            raise DivisionByZero(f"Cannot divide {dividend} by zero")
        return self._context.divide(dividend, divisor)

    def sum(self, values: Iterable[DecimalLike]) -> Decimal:
        """Exact sum of a sequence of values. An empty sequence sums to zero."""
        total = _ZERO
        for value in values:
            total = self.add(total, value)
        return total

    def abs(self, value: DecimalLike) -> Decimal:
        """Return the absolute value."""
        return self.parse(value).copy_abs()

    def round(self, value: DecimalLike, places: int) -> Decimal:
        """Truncate ``value`` to ``places`` fractional digits."""
        if places < 0:
            raise ValueError("places must be non-negative")
        result = self.parse(value)
        exponent = Decimal((0, (1,), -places))
        return self._widened(result.adjusted() + places + 1).quantize(result, exponent)

    def to_plain(self, value: DecimalLike) -> str:
        """Render a value as a plain decimal string.

        No exponent, no trailing fractional zeros, negative zero as ``"0"``.
        Every digit of the value is kept.

        Examples:
            >>> DecimalEngine().to_plain(Decimal("8.0"))
            '8'
            >>> DecimalEngine().to_plain(Decimal("1.6E+3"))
            '1600'
        """
        result = self.parse(value)
        if result.is_zero():
            return "0"
        return format(self._widened(len(result.as_tuple().digits)).normalize(result), "f")


def _sum_digits(a: Decimal, b: Decimal) -> int:
    """Significant digits needed to hold ``a + b`` or ``a - b`` exactly."""
    high = max(a.adjusted(), b.adjusted())
    low = min(a.as_tuple().exponent, b.as_tuple().exponent)
    return high - low + 2


DEFAULT_ENGINE = DecimalEngine()


def to_decimal(value: DecimalLike) -> Decimal:
    """Parse a value with the default round-toward-zero engine."""
    return DEFAULT_ENGINE.parse(value)
