"""Built-in locale and currency lookup tables."""
from __future__ import annotations

from typing import Protocol

from ..models.locale import CurrencyInfo, LocaleConventions

BASE_LOCALE = "en-us"
BASE_CURRENCY = "USD"

_US = LocaleConventions(decimal_separator=".", group_separator=",", symbol_on_left=True)
_EU_SUFFIX = LocaleConventions(
    decimal_separator=",", group_separator=".", symbol_on_left=False, space_before_symbol=True,
)
_EU_PREFIX = LocaleConventions(
    decimal_separator=",", group_separator=".", symbol_on_left=True, space_after_symbol=True,
)
_FR = LocaleConventions(
    decimal_separator=",", group_separator="\u202f", symbol_on_left=False, space_before_symbol=True,
)
_NORDIC = LocaleConventions(
    decimal_separator=",", group_separator="\u00a0", symbol_on_left=False, space_before_symbol=True,
)

# Locale tag (lowercase, hyphenated) → conventions
LOCALE_CONVENTIONS: dict[str, LocaleConventions] = {
    'en-us': _US,
    'en-gb': _US,
    'en-au': _US,
    'en-ca': _US,
    'en-ie': _US,
    'ja-jp': _US,
    'zh-cn': _US,
    'ko-kr': _US,
    'es-mx': _US,
    'de-de': _EU_SUFFIX,
    'de-at': LocaleConventions(
        decimal_separator=",", group_separator="\u00a0", symbol_on_left=True, space_after_symbol=True,
    ),
    'de-ch': LocaleConventions(
        decimal_separator=".", group_separator="’", symbol_on_left=True, space_after_symbol=True,
    ),
    'es-es': _EU_SUFFIX,
    'it-it': _EU_SUFFIX,
    'el-gr': _EU_SUFFIX,
    'pt-pt': _FR,
    'fr-fr': _FR,
    'fi-fi': _NORDIC,
    'sv-se': _NORDIC,
    'nb-no': LocaleConventions(
        decimal_separator=",", group_separator="\u00a0", symbol_on_left=True, space_after_symbol=True,
    ),
    'da-dk': _EU_SUFFIX,
    'pl-pl': _NORDIC,
    'cs-cz': _NORDIC,
    'nl-nl': _EU_PREFIX,
    'pt-br': _EU_PREFIX,
}

# Bare language → preferred regional locale
LANGUAGE_DEFAULTS: dict[str, str] = {
    'en': 'en-us',
    'de': 'de-de',
    'fr': 'fr-fr',
    'es': 'es-es',
    'it': 'it-it',
    'nl': 'nl-nl',
    'pt': 'pt-br',
    'ja': 'ja-jp',
    'zh': 'zh-cn',
    'ko': 'ko-kr',
    'sv': 'sv-se',
    'fi': 'fi-fi',
    'da': 'da-dk',
    'nb': 'nb-no',
    'no': 'nb-no',
    'pl': 'pl-pl',
    'cs': 'cs-cz',
    'el': 'el-gr',
}

# ISO 4217 code → (symbol, minor-unit digits)
CURRENCIES: dict[str, tuple[str, int]] = {
    'USD': ('$', 2),
    'EUR': ('€', 2),
    'GBP': ('£', 2),
    'JPY': ('¥', 0),
    'KRW': ('₩', 0),
    'VND': ('₫', 0),
    'CLP': ('CLP', 0),
    'ISK': ('ISK', 0),
    'CNY': ('CN¥', 2),
    'INR': ('₹', 2),
    'BRL': ('R$', 2),
    'MXN': ('MX$', 2),
    'CAD': ('CA$', 2),
    'AUD': ('A$', 2),
    'CHF': ('CHF', 2),
    'SEK': ('kr', 2),
    'NOK': ('kr', 2),
    'DKK': ('kr', 2),
    'PLN': ('zł', 2),
    'CZK': ('Kč', 2),
    'RUB': ('₽', 2),
    'KWD': ('KWD', 3),
    'BHD': ('BHD', 3),
    'OMR': ('OMR', 3),
}


class LocaleTable(Protocol):
    """Lookup service consumed by the resolver.

    Implementations return ``None`` for an unknown key and raise
    ``LookupError`` when the whole table is unavailable.
    """

    def locale_conventions(self, locale: str) -> LocaleConventions | None: ...

    def currency_info(self, currency: str) -> CurrencyInfo | None: ...


class BuiltinLocaleTable:
    """Table backed by the module-level dictionaries above."""

    def __init__(
        self,
        locales: dict[str, LocaleConventions] | None = None,
        currencies: dict[str, tuple[str, int]] | None = None,
        languages: dict[str, str] | None = None,
    ):
        self._locales = LOCALE_CONVENTIONS if locales is None else locales
        self._currencies = CURRENCIES if currencies is None else currencies
        self._languages = LANGUAGE_DEFAULTS if languages is None else languages

    def locale_conventions(self, locale: str) -> LocaleConventions | None:
        if not self._locales:
            raise LookupError("locale table is empty")
        if locale in self._locales:
            return self._locales[locale]
        # de-li → de → de-de
        language = locale.split("-", 1)[0]
        regional = self._languages.get(language)
        if regional:
            return self._locales.get(regional)
        return None

    def currency_info(self, currency: str) -> CurrencyInfo | None:
        if not self._currencies:
            raise LookupError("currency table is empty")
        entry = self._currencies.get(currency)
        if entry is None:
            return None
        symbol, precision = entry
        return CurrencyInfo(code=currency, symbol=symbol, precision=precision)


def normalize_locale(locale: str | None) -> str:
    """Lowercase a locale tag and use hyphens (``de_DE`` → ``de-de``)."""
    if not locale:
        return ""
    return locale.strip().replace("_", "-").lower()


def normalize_currency(currency: str | None) -> str:
    if not currency:
        return ""
    return currency.strip().upper()
