"""Shared field types for models."""

from decimal import Decimal
from typing import Annotated

from pydantic import BeforeValidator

from ..core.decimal_engine import to_decimal

# Decimal parsed by the round-toward-zero engine; malformed input raises
# InvalidDecimal instead of a pydantic ValidationError.
DecimalValue = Annotated[Decimal, BeforeValidator(to_decimal)]
