#!/usr/bin/env python3
"""Mask an amount for a locale/currency pair and print the result."""
import json
import sys

# Load .env file
from dotenv import load_dotenv
load_dotenv()

from currency_mask.config import Settings
from currency_mask.errors import ConfigError
from currency_mask.field import CurrencyField
from currency_mask.utils.logging import get_logger, setup_logging

USAGE = "Usage: python scripts/mask_amount.py <amount> [locale] [currency] [--typed]"


def main(argv: list[str]) -> int:
    """Mask a single amount, either as an initial value or as typed text."""
    typed = "--typed" in argv
    args = [a for a in argv if a != "--typed"]
    if not args:
        print(USAGE)
        return 1

    settings = Settings()
    setup_logging(settings.log_level, json_output=settings.log_json)
    logger = get_logger("mask_amount")

    amount = args[0]
    locale = args[1] if len(args) > 1 else settings.default_locale
    currency = args[2] if len(args) > 2 else settings.default_currency

    try:
        field = CurrencyField(locale=locale, currency=currency)
    except ConfigError as e:
        print(f"Error: {e}")
        return 1

    result = field.change(amount) if typed else field.set_value(amount)
    logger.info("amount_masked", locale=field.config.locale, currency=field.config.currency)

    print(json.dumps({
        "input": amount,
        "masked": result.masked,
        "cents": result.cents,
        "value": str(result.value),
        "caret": result.caret,
    }, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
