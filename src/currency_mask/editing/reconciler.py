"""Per-keystroke reconciliation of raw field text with the masked amount."""
from __future__ import annotations

import structlog

from ..formatting.mask import caret_end, format_cents
from ..international.number_parsing import normalize
from ..international.rounding import cents_to_value, digits_to_cents
from ..models.amounts import EditResult
from ..models.locale import FormatConfig

logger = structlog.get_logger(__name__)


def _digit_positions(text: str) -> list[int]:
    return [i for i, ch in enumerate(text) if ch.isdigit()]


def _leading_zeros(text: str, positions: list[int]) -> int:
    count = 0
    for i in positions:
        if text[i] != "0":
            break
        count += 1
    return count


def caret_position(raw: str, caret: int | None, masked: str) -> int:
    """Map a caret in *raw* to the equivalent position in *masked*.

    Counts the significant digits (those after the run of leading zeros) to
    the left of the caret in the raw text and places the new caret after the
    same number of significant digits in the masked text.  Leading zeros are
    skipped on both sides because re-masking adds or drops them
    (``"$0.051"`` becomes ``"$0.51"``).

    Args:
        raw: The text as it was after the user's edit.
        caret: Caret index in *raw*; ``None`` means the end.  Clamped into range.
        masked: The re-masked text.

    Returns:
        Caret index in *masked*.
    """
    raw = raw or ""
    caret = len(raw) if caret is None else max(0, min(caret, len(raw)))

    raw_digits = _digit_positions(raw)
    raw_leading = _leading_zeros(raw, raw_digits)
    left = sum(1 for i in raw_digits if i < caret)
    significant_left = max(0, left - raw_leading)

    masked_digits = _digit_positions(masked)
    if not masked_digits:
        return len(masked)
    target = _leading_zeros(masked, masked_digits) + significant_left
    if target == 0:
        return masked_digits[0]
    if target >= len(masked_digits):
        return caret_end(masked)
    return masked_digits[target - 1] + 1


def reconcile(
    raw: str | None,
    caret: int | None,
    config: FormatConfig,
    previous_cents: int = 0,
    require_positive: bool = False,
    require_negative: bool = False,
) -> EditResult:
    """Re-mask the field text after a single edit.

    Every digit in *raw* is a minor-unit digit, so typing shifts digits in
    from the right (``"5"`` → ``$0.05``, ``"$0.001"`` → ``$0.01``).  An odd
    number of minus characters anywhere makes the amount negative, which lets
    typing ``-`` toggle the sign of an already masked value.

    Never raises; text without digits resolves to zero.

    Args:
        raw: The field text after the edit.
        caret: Caret index in *raw* after the edit, ``None`` for the end.
        config: The resolved formatting parameters.
        previous_cents: The amount before the edit, used for ``changed``.
        require_positive: Force the result to be non-negative.
        require_negative: Force a nonzero result to be negative.

    Returns:
        The new amount, masked text and caret.
    """
    raw = raw or ""
    amount = normalize(raw, config)
    cents = digits_to_cents(amount)
    if require_positive:
        cents = abs(cents)
    elif require_negative:
        cents = -abs(cents)

    masked = format_cents(cents, config)
    new_caret = caret_position(raw, caret, masked)
    logger.debug("edit_reconciled", raw=raw, cents=cents, masked=masked, caret=new_caret)
    return EditResult(
        cents=cents,
        masked=masked,
        value=cents_to_value(cents, config.precision),
        caret=new_caret,
        changed=cents != previous_cents,
    )
