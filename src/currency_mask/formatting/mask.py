"""Render minor-unit amounts as locale-formatted currency text."""

from __future__ import annotations

from ..models.locale import NBSP, FormatConfig


def group_digits(digits: str, separator: str) -> str:
    """Insert *separator* every three digits from the right.

    Args:
        digits: A run of ASCII digits, e.g. ``'1234567'``.
        separator: The group separator, e.g. ``','``.

    Returns:
        The grouped digits, e.g. ``'1,234,567'``.
    """
    head = len(digits) % 3 or 3
    groups = [digits[:head]]
    groups.extend(digits[i:i + 3] for i in range(head, len(digits), 3))
    return separator.join(groups)


def format_numeral(cents: int, config: FormatConfig) -> str:
    """Format the unsigned numeral of *cents* without symbol or sign.

    Args:
        cents: Amount in minor units; only its magnitude is used.
        config: The resolved formatting parameters.

    Returns:
        Grouped integer part plus, when ``precision > 0``, the decimal
        separator and exactly ``precision`` fraction digits (``'1.234,56'``).
    """
    precision = config.precision
    digits = str(abs(cents)).rjust(precision + 1, "0")
    if precision == 0:
        return group_digits(digits, config.group_separator)
    integer_part = group_digits(digits[:-precision], config.group_separator)
    return f"{integer_part}{config.decimal_separator}{digits[-precision:]}"


def format_cents(cents: int, config: FormatConfig) -> str:
    """Format a minor-unit amount as masked display text.

    A prefix symbol comes before the sign (``$-1,234.56``), a suffix symbol
    after the numeral (``-1.234,56 €``).  Zero never carries a sign.

    Args:
        cents: Signed amount in minor units.
        config: The resolved formatting parameters.

    Returns:
        The display string, e.g. ``'$1,234.56'`` or ``'10,01\\u00a0€'``.
    """
    numeral = format_numeral(cents, config)
    if cents < 0:
        numeral = f"-{numeral}"

    if not config.symbol:
        return numeral
    if config.symbol_on_left:
        gap = NBSP if config.space_after_symbol else ""
        return f"{config.symbol}{gap}{numeral}"
    gap = NBSP if config.space_before_symbol else ""
    return f"{numeral}{gap}{config.symbol}"


def caret_end(masked: str) -> int:
    """Return the index just after the last digit of *masked*.

    Typing continues from there, so a suffix symbol stays to the right of the
    caret.  Text without digits yields ``len(masked)``.
    """
    for index in range(len(masked) - 1, -1, -1):
        if masked[index].isdigit():
            return index + 1
    return len(masked)
