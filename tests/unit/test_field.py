"""Test the stateful currency field surface."""
from decimal import Decimal

import pytest

from currency_mask.errors import ConfigError
from currency_mask.field import CurrencyField
from currency_mask.models.amounts import FieldState
from tests.factories import NBSP


class TestDefaultField:
    def test_defaults(self):
        field = CurrencyField()
        assert field.masked == "$0.00"
        assert field.value == 0
        assert field.cents == 0
        assert field.state is FieldState.IDLE


class TestInitialValues:
    @pytest.mark.parametrize("value, masked", [
        (123456789, "$123,456,789.00"),
        (1234567.89, "$1,234,567.89"),
        (1234567.89123, "$1,234,567.89"),
        (0, "$0.00"),
        (0.00, "$0.00"),
        ("6300.00", "$6,300.00"),
        ("1234567.89", "$1,234,567.89"),
        ("1234567.89999", "$1,234,567.90"),
        (Decimal("12.5"), "$12.50"),
        (None, "$0.00"),
    ])
    def test_usd(self, value, masked):
        assert CurrencyField(value).masked == masked

    def test_jpy_rounds_up_whole_number(self):
        assert CurrencyField(1234567.999, currency="JPY").masked == "¥1,234,568"

    @pytest.mark.parametrize("value, locale, currency, masked", [
        ("1,000.01", None, None, "$1,000.01"),
        ("$10.01", None, None, "$10.01"),
        ("10.01 EUR", "de-de", "EUR", f"10,01{NBSP}€"),
        ("123.456.789,12", "de-de", None, f"123.456.789,12{NBSP}$"),
        ("1,234,567.89", None, None, "$1,234,567.89"),
        ("1.234.567,89", "de-de", None, f"1.234.567,89{NBSP}$"),
    ])
    def test_separators_and_symbols(self, value, locale, currency, masked):
        assert CurrencyField(value, locale=locale, currency=currency).masked == masked

    def test_values_stay_consistent(self):
        field = CurrencyField(1234567.89)
        assert field.cents == 123456789
        assert field.value == Decimal("1234567.89")

    def test_precision_override(self):
        assert CurrencyField(5, currency="JPY", precision=2).masked == "¥5.00"

    @pytest.mark.parametrize("locale", ["de-de", "nl-nl", "en-us"])
    def test_masked_text_set_back_keeps_amount(self, locale):
        field = CurrencyField(1234, locale=locale, currency="JPY")
        masked = field.masked
        field.set_value(masked)
        assert (field.masked, field.cents) == (masked, 1234)


class TestChange:
    def test_start_typing(self):
        field = CurrencyField()
        result = field.change("$0.001")
        assert result.cents == 1
        assert field.cents == 1
        assert field.value == Decimal("0.01")
        assert field.masked == "$0.01"
        assert field.caret == 5

    def test_switch_between_positive_and_negative(self):
        field = CurrencyField(0)
        steps = [
            ("123456", "$1,234.56"),
            ("1,234.56-", "$-1,234.56"),
            ("-1,234.56-", "$1,234.56"),
            ("1-,234.56", "$-1,234.56"),
            ("1---,234.56", "$-1,234.56"),
            ("-1,234.-56", "$1,234.56"),
        ]
        for raw, masked in steps:
            field.change(raw)
            assert field.masked == masked

    def test_change_enters_editing(self):
        field = CurrencyField()
        field.change("5")
        assert field.state is FieldState.EDITING

    def test_require_negative_from_blank(self):
        field = CurrencyField(require_negative=True)
        field.change("")
        result = field.change("9")
        assert result.masked == "$-0.09"
        assert result.caret == 6

    def test_require_positive(self):
        field = CurrencyField(0, require_positive=True)
        field.change("-123456")
        assert field.masked == "$1,234.56"
        assert CurrencyField(-5, require_positive=True).masked == "$5.00"


class TestListeners:
    def test_initial_masking_notifies(self):
        seen = []
        CurrencyField(1234567.89, on_change=lambda field, result: seen.append(result))
        assert [(r.masked, r.cents) for r in seen] == [("$1,234,567.89", 123456789)]

    def test_change_notifies(self):
        seen = []
        field = CurrencyField("0")
        field.subscribe(lambda f, result: seen.append((f, result)))
        field.change("123456789")
        assert len(seen) == 1
        source, result = seen[0]
        assert source is field
        assert result.masked == "$1,234,567.89"
        assert result.value == Decimal("1234567.89")
        assert result.cents == 123456789

    def test_set_value_with_correction_notifies(self):
        seen = []
        field = CurrencyField("$1,234,567.89")
        field.subscribe(lambda f, result: seen.append(result))
        field.set_value(2)
        assert [(r.masked, r.value, r.cents) for r in seen] == [("$2.00", Decimal(2), 200)]

    def test_set_value_to_same_amount_is_silent(self):
        seen = []
        field = CurrencyField("$1,234,567.89")
        field.subscribe(lambda f, result: seen.append(result))
        field.set_value("$1,234,567.89")
        assert seen == []

    def test_unchanged_edit_is_silent(self):
        seen = []
        field = CurrencyField("$1,234.56")
        field.subscribe(lambda f, result: seen.append(result))
        result = field.change("$1,234.56")
        assert result.changed is False
        assert seen == []

    def test_unsubscribe(self):
        seen = []

        def listener(f, result):
            seen.append(result)

        field = CurrencyField()
        field.subscribe(listener)
        field.unsubscribe(listener)
        field.change("5")
        assert seen == []


class TestFocusAndSelection:
    def test_focus_puts_caret_after_last_digit(self):
        field = CurrencyField(10.01, locale="de-de", currency="EUR")
        assert field.focus() == 5
        assert field.state is FieldState.EDITING

    def test_blur_returns_to_idle(self):
        field = CurrencyField()
        field.focus()
        field.blur()
        assert field.state is FieldState.IDLE

    def test_select_is_clamped_to_numeral(self):
        field = CurrencyField(1.23)
        assert field.select(0) == 1
        assert field.select(100) == 5
        assert field.select(3) == 3

    def test_select_allows_caret_before_minus(self):
        field = CurrencyField(-1.23)
        assert field.select(0) == 1

    def test_snapshot(self):
        field = CurrencyField(1.23)
        snapshot = field.snapshot()
        assert snapshot.masked == "$1.23"
        assert snapshot.changed is False


class TestConfigErrors:
    def test_conflicting_sign_requirements(self):
        with pytest.raises(ConfigError):
            CurrencyField(require_positive=True, require_negative=True)

    def test_invalid_precision(self):
        with pytest.raises(ConfigError):
            CurrencyField(precision=-2)

    def test_custom_resolver(self, resolver):
        field = CurrencyField(10, locale="de-de", currency="EUR", resolver=resolver)
        assert field.masked == f"10,00{NBSP}€"
