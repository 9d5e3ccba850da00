"""Conversion between decimal amounts and integer minor units (cents).

Text is truncated at the precision boundary, exact numeric values are rounded
half away from zero.
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

import structlog

from ..formatting.mask import format_cents
from ..models.amounts import NormalizedAmount
from ..models.locale import FormatConfig
from .number_parsing import normalize, parse_decimal_literal

logger = structlog.get_logger(__name__)

# Matches the default decimal context; longer digit runs are not an amount.
MAX_DIGITS = 28


def _signed(digits: str, sign: int) -> int:
    significant = digits.lstrip("0")
    if len(significant) > MAX_DIGITS:
        logger.warning("amount_too_long", digits=len(significant), max_digits=MAX_DIGITS)
        return 0
    magnitude = int(significant or "0")
    return -magnitude if sign < 0 else magnitude


def to_cents(amount: NormalizedAmount, precision: int) -> int:
    """Combine normalized digits into a signed minor-unit integer.

    Fraction digits beyond *precision* are dropped, missing ones are zero.
    """
    fraction = amount.fraction_digits[:precision].ljust(precision, "0")
    return _signed(amount.integer_digits + fraction, amount.sign)


def digits_to_cents(amount: NormalizedAmount) -> int:
    """Read every digit as a minor-unit digit (``"$0.001"`` → 1, ``"123456"`` → 123456)."""
    return _signed(amount.digits, amount.sign)


def from_float_value(value: int | float | Decimal, precision: int) -> int:
    """Scale an exact numeric value to minor units, rounding half away from zero.

    ``1234567.89999`` at precision 2 gives 123456790 and ``1234567.999`` at
    precision 0 gives 1234568.  Floats go through ``str`` so ``1234567.89``
    stays 123456789 instead of picking up binary noise.
    """
    try:
        exact = value if isinstance(value, Decimal) else Decimal(str(value))
        if not exact.is_finite():
            raise InvalidOperation(f"non-finite amount {value!r}")
        scaled = exact.scaleb(precision).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    except (InvalidOperation, ValueError) as e:
        logger.warning("amount_not_representable", value_type=type(value).__name__, error=str(e))
        return 0
    return int(scaled)


def cents_to_value(cents: int, precision: int) -> Decimal:
    """Return the decimal amount for *cents* (``123456`` at 2 → ``Decimal("1234.56")``)."""
    return Decimal(cents) / (Decimal(10) ** precision)


def parse_value(value: int | float | Decimal | str | None, config: FormatConfig) -> int:
    """Convert an externally supplied initial value to minor units.

    Text that is already masked for *config* reads back as the amount it
    shows, so ``"1.234\\u00a0¥"`` in de-de stays 1234.  Numbers and other
    machine-style decimal strings (``"1234567.89999"``, ``"10.01 EUR"``) are
    rounded.  Any other text is locale-formatted input and goes through the
    normalizer with truncation.
    """
    if value is None:
        return 0
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        return from_float_value(value, config.precision)

    text = value if isinstance(value, str) else str(value)
    cents = to_cents(normalize(text, config), config.precision)
    if format_cents(cents, config) == text:
        return cents
    literal = parse_decimal_literal(text, config)
    if literal is not None:
        return from_float_value(literal, config.precision)
    return cents
