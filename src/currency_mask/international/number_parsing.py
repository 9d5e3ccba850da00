"""Locale-aware stripping of currency text down to sign and digits."""
from __future__ import annotations

import re
from decimal import Decimal

from ..models.amounts import NormalizedAmount
from ..models.locale import FormatConfig

# Hyphen-minus and the Unicode minus sign both toggle the sign.
MINUS_CHARS = ("-", "\u2212")

_NON_DIGIT = re.compile(r"[^0-9]")
_ISO_CODE = re.compile(r"[A-Za-z]{3}")
_DECIMAL_LITERAL = re.compile(r"^[-\u2212]?[0-9]+(?:\.[0-9]+)?$")


def normalize(text: str | None, config: FormatConfig) -> NormalizedAmount:
    """Strip formatting from raw amount text.

    Never raises: this runs on every keystroke, so transient states such as
    ``""``, ``"-"`` or ``"$"`` have to produce an amount.

    - Sign: negative iff the text holds an odd number of minus characters,
      wherever they appear ("123-456", "--1--", "1,234.56-").
    - The currency symbol and every group separator are removed.
    - The last decimal separator splits integer from fraction digits; without
      one the whole text is the integer part.
    - Anything else that is not a digit is dropped.

    Examples (en-us / USD):
        "$1,234.56"  → sign 1,  "1234", "56"
        "1-,234.56"  → sign -1, "1234", "56"
        "-"          → sign 1,  "",     ""
    """
    if not text:
        return NormalizedAmount()
    if not isinstance(text, str):
        text = str(text)

    minus_count = sum(text.count(ch) for ch in MINUS_CHARS)
    cleaned = text
    for ch in MINUS_CHARS:
        cleaned = cleaned.replace(ch, "")
    if config.symbol:
        cleaned = cleaned.replace(config.symbol, "")
    if config.group_separator and config.group_separator != config.decimal_separator:
        cleaned = cleaned.replace(config.group_separator, "")

    if config.decimal_separator and config.decimal_separator in cleaned:
        integer_part, _, fraction_part = cleaned.rpartition(config.decimal_separator)
    else:
        integer_part, fraction_part = cleaned, ""

    integer_digits = _NON_DIGIT.sub("", integer_part)
    fraction_digits = _NON_DIGIT.sub("", fraction_part)

    sign = -1 if minus_count % 2 else 1
    if not (integer_digits + fraction_digits).strip("0"):
        sign = 1

    return NormalizedAmount(sign=sign, integer_digits=integer_digits, fraction_digits=fraction_digits)


def parse_decimal_literal(text: str | None, config: FormatConfig) -> Decimal | None:
    """Return *text* as a Decimal if it is a machine-style decimal like ``"1234.5"``.

    The currency symbol, ISO currency codes and whitespace are ignored, so
    ``"10.01 EUR"`` qualifies while ``"1,000.01"`` and ``"1.234.567,89"`` do
    not and return None.
    """
    if not text or not isinstance(text, str):
        return None
    cleaned = text
    if config.symbol:
        cleaned = cleaned.replace(config.symbol, "")
    cleaned = _ISO_CODE.sub("", cleaned)
    cleaned = "".join(cleaned.split()).replace("\u2212", "-")
    if not _DECIMAL_LITERAL.match(cleaned):
        return None
    return Decimal(cleaned)
