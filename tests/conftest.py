import pytest

from digify import NumberResolver, Registry
from digify.durations import DurationResolver
from digify.locales import DEFAULT_LOCALE, DURATION_LOCALES, NUMBER_LOCALES


@pytest.fixture
def registry():
    """A fresh registry with both built-in resolvers."""
    reg = Registry()
    reg.register("numbers", NumberResolver, DEFAULT_LOCALE, NUMBER_LOCALES)
    reg.register("durations", DurationResolver, DEFAULT_LOCALE, DURATION_LOCALES)
    return reg


@pytest.fixture
def numbers():
    return NumberResolver()


@pytest.fixture
def durations(registry):
    return registry.get("durations")
