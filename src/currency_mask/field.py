"""Stateful currency field: the surface a UI binding layer talks to."""
from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal

import structlog

from .editing.reconciler import reconcile
from .errors import ConfigError
from .formatting.mask import caret_end, format_cents
from .international.resolver import Resolver, get_resolver
from .international.rounding import cents_to_value, parse_value
from .models.amounts import EditResult, FieldState
from .models.locale import FormatConfig

logger = structlog.get_logger(__name__)

ChangeListener = Callable[["CurrencyField", EditResult], None]


class CurrencyField:
    """Keeps cents, masked text and caret of one input field consistent.

    The binding layer forwards change/focus/blur/selection events and applies
    ``masked`` and ``caret`` back to its widget.  Listeners are notified with
    every result whose masked text or amount differs from the previous one.
    """

    def __init__(
        self,
        value: int | float | Decimal | str | None = 0,
        locale: str | None = None,
        currency: str | None = None,
        precision: int | None = None,
        *,
        require_positive: bool = False,
        require_negative: bool = False,
        resolver: Resolver | None = None,
        on_change: ChangeListener | None = None,
    ):
        if require_positive and require_negative:
            raise ConfigError("require_positive and require_negative are mutually exclusive")

        self.config: FormatConfig = (resolver or get_resolver()).resolve(locale, currency, precision)
        self.require_positive = require_positive
        self.require_negative = require_negative
        self.state = FieldState.IDLE
        self._listeners: list[ChangeListener] = []
        if on_change is not None:
            self._listeners.append(on_change)

        self.cents = 0
        self.masked = format_cents(0, self.config)
        self.caret = 0
        self._initialized = False
        self.set_value(value, notify=True)

    # ── Derived values ────────────────────────────────────────────────────

    @property
    def value(self) -> Decimal:
        return cents_to_value(self.cents, self.config.precision)

    def snapshot(self, changed: bool = False) -> EditResult:
        return EditResult(
            cents=self.cents,
            masked=self.masked,
            value=self.value,
            caret=self.caret,
            changed=changed,
        )

    # ── Listeners ─────────────────────────────────────────────────────────

    def subscribe(self, listener: ChangeListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: ChangeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, result: EditResult) -> None:
        for listener in list(self._listeners):
            listener(self, result)

    # ── Events ────────────────────────────────────────────────────────────

    def set_value(self, value: int | float | Decimal | str | None, notify: bool = True) -> EditResult:
        """Replace the amount from outside the widget (initial value or prop update)."""
        cents = parse_value(value, self.config)
        if self.require_positive:
            cents = abs(cents)
        elif self.require_negative:
            cents = -abs(cents)

        masked = format_cents(cents, self.config)
        changed = masked != self.masked or cents != self.cents
        self.cents = cents
        self.masked = masked
        self.caret = min(self.caret, len(masked))
        result = self.snapshot(changed=changed)
        if notify and (changed or not self._initialized):
            self._notify(result)
        self._initialized = True
        return result

    def change(self, raw: str | None, caret: int | None = None) -> EditResult:
        """Apply a change event: *raw* is the widget text, *caret* its caret index."""
        if self.state is FieldState.IDLE:
            self.state = FieldState.EDITING
        result = reconcile(
            raw,
            caret,
            self.config,
            previous_cents=self.cents,
            require_positive=self.require_positive,
            require_negative=self.require_negative,
        )
        if result.masked != self.masked and not result.changed:
            result = result.model_copy(update={"changed": True})
        self.cents = result.cents
        self.masked = result.masked
        self.caret = result.caret
        if result.changed:
            self._notify(result)
        return result

    def focus(self) -> int:
        """Enter editing and put the caret after the last digit."""
        self.state = FieldState.EDITING
        self.caret = caret_end(self.masked)
        return self.caret

    def select(self, caret: int) -> int:
        """Clamp a caret placed by the user to the numeral part of the text."""
        digits = [i for i, ch in enumerate(self.masked) if ch.isdigit()]
        low = digits[0] if digits else 0
        if low > 0 and self.masked[low - 1] == "-":
            low -= 1
        self.caret = max(low, min(caret, caret_end(self.masked)))
        return self.caret

    def blur(self) -> None:
        self.state = FieldState.IDLE
        logger.debug("field_blurred", cents=self.cents, masked=self.masked)
