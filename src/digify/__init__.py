"""Turn spelled out numbers and durations in free text into values."""
from .api import collect_tokens, digify, parse_durations, parse_numbers
from .durations import Duration, DurationResolver
from .exc import DigifyError, InvalidDurationUnit, UnregisteredResolver, UnsupportedLocale
from .locales import DEFAULT_LOCALE, DURATION_LOCALES, NUMBER_LOCALES
from .numbers import NumberResolver
from .params import DigifyParams, modes
from .registry import Registry, Resolver, TranslateOptions, default_registry
from .tokens import ParsedResult, Token, insert_token

__all__ = [
    "DEFAULT_LOCALE",
    "DURATION_LOCALES",
    "NUMBER_LOCALES",
    "DigifyError",
    "DigifyParams",
    "Duration",
    "DurationResolver",
    "InvalidDurationUnit",
    "NumberResolver",
    "ParsedResult",
    "Registry",
    "Resolver",
    "Token",
    "TranslateOptions",
    "UnregisteredResolver",
    "UnsupportedLocale",
    "collect_tokens",
    "default_registry",
    "digify",
    "insert_token",
    "modes",
    "parse_durations",
    "parse_numbers",
]
