"""Shared test fixtures."""
import pytest

from currency_mask.config import Settings
from currency_mask.international.resolver import Resolver, clear_cache
from tests.factories import make_config


@pytest.fixture(autouse=True)
def reset_resolver_cache():
    """Each test starts with an empty process-wide resolver."""
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def mock_settings():
    """Settings pinned to the base locale regardless of the environment."""
    return Settings(default_locale="en-us", default_currency="USD", log_level="DEBUG")


@pytest.fixture
def resolver(mock_settings):
    return Resolver(settings=mock_settings)


@pytest.fixture
def usd_config():
    return make_config()


@pytest.fixture
def eur_de_config():
    return make_config(locale="de-de", currency="EUR")


@pytest.fixture
def usd_de_config():
    return make_config(locale="de-de", currency="USD")


@pytest.fixture
def jpy_config():
    return make_config(currency="JPY")
