"""Locale-aware formatting types.

Provides the lookup-table records for locales and currencies and the resolved
``FormatConfig`` that the normalizer, converter and formatter all consume.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

NBSP = "\u00a0"


class LocaleConventions(BaseModel):
    """Number and symbol placement conventions of a single locale."""

    model_config = ConfigDict(frozen=True)

    decimal_separator: str = "."
    group_separator: str = ","
    symbol_on_left: bool = True
    space_before_symbol: bool = False
    space_after_symbol: bool = False


class CurrencyInfo(BaseModel):
    """Symbol and minor-unit digits of an ISO 4217 currency."""

    model_config = ConfigDict(frozen=True)

    code: str
    symbol: str
    precision: int = Field(default=2, ge=0)


class FormatConfig(BaseModel):
    """Everything needed to parse and render one (locale, currency) pair.

    ``space_before_symbol`` applies when the symbol is a suffix
    (``10,01 €``), ``space_after_symbol`` when it is a prefix (``€ 10,01``).
    Both insert a non-breaking space.
    """

    model_config = ConfigDict(frozen=True)

    decimal_separator: str = "."
    group_separator: str = ","
    precision: int = Field(default=2, ge=0)
    symbol: str = "$"
    symbol_on_left: bool = True
    space_before_symbol: bool = False
    space_after_symbol: bool = False
    locale: str = "en-us"
    currency: str = "USD"

    @classmethod
    def from_parts(
        cls,
        conventions: LocaleConventions,
        currency: CurrencyInfo,
        locale: str,
        precision: int | None = None,
    ) -> FormatConfig:
        """Combine locale conventions and currency info into a config."""
        return cls(
            decimal_separator=conventions.decimal_separator,
            group_separator=conventions.group_separator,
            precision=currency.precision if precision is None else precision,
            symbol=currency.symbol,
            symbol_on_left=conventions.symbol_on_left,
            space_before_symbol=conventions.space_before_symbol,
            space_after_symbol=conventions.space_after_symbol,
            locale=locale,
            currency=currency.code,
        )
