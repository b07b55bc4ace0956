"""Translator façade: a registry of named resolvers.

A resolver declares the other resolvers it depends on in ``assistants``; the
registry runs those first on the same input and locale and hands their results
to the dependent resolver. Each name maps to one lazily created instance.
"""
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Iterable, Optional, Protocol, runtime_checkable

from .durations import DurationResolver
from .exc import UnregisteredResolver, UnsupportedLocale
from .locales import DEFAULT_LOCALE, DURATION_LOCALES, NUMBER_LOCALES
from .numbers import NumberResolver
from .tokens import ParsedResult

_LOGGER = logging.getLogger(__name__)


@runtime_checkable
class Resolver(Protocol):
    name: str
    default_locale: str
    supported_locales: tuple[str, ...]
    assistants: tuple[str, ...]

    def parse(self, text: str, locale: str = None, pre_parsed: dict = None) -> ParsedResult:
        ...


ResolverFactory = Callable[..., Resolver]


@dataclass
class Registration:
    factory: ResolverFactory
    default_locale: str
    supported_locales: tuple[str, ...]
    instance: Optional[Resolver] = None


@dataclass
class TranslateOptions:
    locale: Optional[str] = None
    on_result: Optional[Callable[[ParsedResult], None]] = None


class Registry:
    """Holds one resolver instance per registered name."""

    def __init__(self):
        self._entries: dict[str, Registration] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._entries

    @property
    def names(self) -> list[str]:
        return list(self._entries)

    def register(self, name: str, factory: ResolverFactory, default_locale: str, supported_locales: Iterable[str]) -> None:
        supported = tuple(supported_locales)
        if default_locale not in supported:
            raise UnsupportedLocale(name, default_locale)
        self._entries[name] = Registration(factory, default_locale, supported)
        _LOGGER.debug("Registered resolver %s (%s)", name, ", ".join(supported))

    def _entry(self, name: str) -> Registration:
        try:
            return self._entries[name]
        except KeyError:
            raise UnregisteredResolver(name) from None

    def supported_locales(self, name: str) -> tuple[str, ...]:
        return self._entry(name).supported_locales

    def get(self, name: str, locale: str = None) -> Resolver:
        entry = self._entry(name)
        if locale is not None and locale not in entry.supported_locales:
            raise UnsupportedLocale(name, locale)
        if entry.instance is None:
            entry.instance = entry.factory(
                registry=self,
                default_locale=entry.default_locale,
                supported_locales=entry.supported_locales,
            )
        return entry.instance

    def run_assistants(self, resolver: Resolver, text: str, locale: str = None) -> dict[str, ParsedResult]:
        """Pass the input to the resolver's assistants and return their results by name."""
        return {name: self.parse(name, text, locale) for name in resolver.assistants}

    def parse(self, name: str, text: str, locale: str = None) -> ParsedResult:
        resolver = self.get(name, locale)
        locale = locale or resolver.default_locale
        pre_parsed = self.run_assistants(resolver, text, locale)
        return resolver.parse(text, locale, pre_parsed=pre_parsed)

    def translate(self, name: str, text: str, options: TranslateOptions = None) -> ParsedResult:
        """Parse ``text`` and hand the result to ``options.on_result`` before returning it."""
        options = options or TranslateOptions()
        if not text:
            raise ValueError("translate was not given an input to parse")
        result = self.parse(name, text, options.locale)
        if options.on_result is not None:
            options.on_result(result)
        return result


@lru_cache(maxsize=None)
def default_registry() -> Registry:
    """The process-wide registry with the built-in resolvers, built on first use."""
    registry = Registry()
    registry.register(NumberResolver.name, NumberResolver, DEFAULT_LOCALE, NUMBER_LOCALES)
    registry.register(DurationResolver.name, DurationResolver, DEFAULT_LOCALE, DURATION_LOCALES)
    return registry
