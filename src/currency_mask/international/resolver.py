"""Resolve locale and currency identifiers into formatting parameters."""
from __future__ import annotations

import structlog

from ..config import Settings
from ..errors import ConfigError
from ..models.locale import CurrencyInfo, FormatConfig, LocaleConventions
from .locale_tables import (
    BASE_CURRENCY,
    BASE_LOCALE,
    BuiltinLocaleTable,
    LocaleTable,
    normalize_currency,
    normalize_locale,
)

logger = structlog.get_logger(__name__)

_FALLBACK_CURRENCY = CurrencyInfo(code=BASE_CURRENCY, symbol="$", precision=2)


class Resolver:
    """Turns ``(locale, currency, precision)`` into a cached ``FormatConfig``.

    The cache is filled lazily and never invalidated.  Two lookups racing on
    the same key compute equal configs.
    """

    def __init__(self, table: LocaleTable | None = None, settings: Settings | None = None):
        settings = settings or Settings()
        self.table: LocaleTable = table or BuiltinLocaleTable()
        self.base_locale = normalize_locale(settings.default_locale) or BASE_LOCALE
        self.base_currency = normalize_currency(settings.default_currency) or BASE_CURRENCY
        self._cache: dict[tuple[str, str, int | None], FormatConfig] = {}

    def resolve(
        self,
        locale: str | None = None,
        currency: str | None = None,
        precision: int | None = None,
    ) -> FormatConfig:
        """Return the formatting parameters for a locale/currency pair.

        Args:
            locale: Locale tag such as ``"de-de"`` or ``"en_US"``.  Unknown or
                missing tags fall back to the base locale.
            currency: ISO 4217 code.  Unknown or missing codes fall back to USD.
            precision: Optional override of the currency's minor-unit digits.

        Raises:
            ConfigError: If ``precision`` is not a non-negative integer, or if
                neither the locale nor the currency table can be consulted.
        """
        if precision is not None and (
            isinstance(precision, bool) or not isinstance(precision, int) or precision < 0
        ):
            raise ConfigError(f"Precision must be a non-negative integer, got {precision!r}")

        locale_key = normalize_locale(locale) or self.base_locale
        currency_key = normalize_currency(currency) or self.base_currency
        key = (locale_key, currency_key, precision)

        config = self._cache.get(key)
        if config is None:
            config = self._build(locale_key, currency_key, precision)
            self._cache[key] = config
            logger.debug(
                "format_config_resolved",
                locale=config.locale,
                currency=config.currency,
                precision=config.precision,
            )
        return config

    def clear_cache(self) -> None:
        self._cache.clear()

    def _build(self, locale: str, currency: str, precision: int | None) -> FormatConfig:
        locale_name, conventions = self._lookup_locale(locale)
        info = self._lookup_currency(currency)

        if conventions is None and info is None:
            raise ConfigError(
                f"Cannot resolve formatting for locale={locale!r} currency={currency!r}: "
                "locale and currency tables are unavailable"
            )
        if conventions is None:
            locale_name, conventions = self.base_locale, LocaleConventions()
        if info is None:
            info = _FALLBACK_CURRENCY

        return FormatConfig.from_parts(conventions, info, locale=locale_name, precision=precision)

    def _lookup_locale(self, locale: str) -> tuple[str, LocaleConventions | None]:
        """Return ``(locale_name, conventions)``; conventions is None if the table is down."""
        try:
            conventions = self.table.locale_conventions(locale)
            if conventions is not None:
                return locale, conventions
            logger.info("locale_fallback", requested=locale, fallback=self.base_locale)
            conventions = self.table.locale_conventions(self.base_locale)
        except (LookupError, ConfigError) as e:
            logger.warning("locale_lookup_failed", locale=locale, error=str(e))
            return locale, None
        return self.base_locale, conventions or LocaleConventions()

    def _lookup_currency(self, currency: str) -> CurrencyInfo | None:
        try:
            info = self.table.currency_info(currency)
            if info is not None:
                return info
            logger.info("currency_fallback", requested=currency, fallback=self.base_currency)
            info = self.table.currency_info(self.base_currency)
        except (LookupError, ConfigError) as e:
            logger.warning("currency_lookup_failed", currency=currency, error=str(e))
            return None
        return info or _FALLBACK_CURRENCY


_default_resolver: Resolver | None = None


def get_resolver() -> Resolver:
    """Return the process-wide resolver, creating it on first use."""
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = Resolver()
    return _default_resolver


def resolve(
    locale: str | None = None,
    currency: str | None = None,
    precision: int | None = None,
) -> FormatConfig:
    """Resolve through the process-wide resolver."""
    return get_resolver().resolve(locale, currency, precision)


def clear_cache() -> None:
    """Drop the process-wide resolver and everything it cached."""
    global _default_resolver
    _default_resolver = None
