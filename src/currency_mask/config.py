"""Library configuration via environment variables with CURRENCY_MASK_ prefix."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Currency mask configuration.

    All settings are read from environment variables prefixed with
    ``CURRENCY_MASK_``.  The defaults describe the base locale that unknown
    locales and currencies fall back to.
    """

    model_config = SettingsConfigDict(env_prefix="CURRENCY_MASK_")

    # ── Fallbacks ─────────────────────────────────────────────────────────
    default_locale: str = "en-us"
    default_currency: str = "USD"

    # ── Logging ───────────────────────────────────────────────────────────
    log_level: str = "INFO"
    log_json: bool = True
