"""Static locale tables for the number and duration resolvers.

Tables are built once at import time and never mutated: mappings are wrapped
in ``MappingProxyType`` and word lists are tuples. Supporting another language
means adding a table here, not patching an existing one.
"""
import re
from dataclasses import dataclass, field
from fractions import Fraction
from types import MappingProxyType
from typing import Mapping, Optional

from .exc import UnsupportedLocale

DEFAULT_LOCALE = "en-US"

# largest first; the verbose and compact formatters walk this order
UNIT_CLASSES = (
    "millennium",
    "century",
    "decade",
    "year",
    "day",
    "hour",
    "minute",
    "second",
    "millisecond",
)


def guess_plural(word: str, known: dict[str, str] = None, skip: list[str] = None) -> str:
    if not word.strip() or not word[-1].strip():
        return word
    know_mapping = {
        "millennium": "millennia",
        "child": "children",
        "person": "people",
        **(known or {}),
        **({x: x for x in (skip or [])})
    }
    if know_mapping.get(word, None) is not None:
        return know_mapping[word]
    if word.isupper():
        return word
    if len(word) == 1:
        return word
    if re.search(r"[aeiou]y$", word):
        return word + "s"          # day → days
    if re.search(r"y$", word):
        return word[:-1] + "ies"   # century → centuries
    if re.search(r"(s|x|z|ch|sh)$", word):
        return word + "es"
    return word + "s"


@dataclass(frozen=True)
class NumberLocale:
    tag: str
    numbers: Mapping[str, int | Fraction]
    # text allowed between two words of the same number
    joiners: tuple[str, ...] = ("", " ")
    # joiners that make a small word before a larger one add instead of multiply
    flippers: tuple[str, ...] = ()
    # number-words may sit inside longer words (German compounds)
    compound: bool = False

    def __post_init__(self):
        object.__setattr__(self, "numbers", MappingProxyType(dict(self.numbers)))

    def value_of(self, word: str) -> int | Fraction | None:
        return self.numbers.get(word.lower())

    @property
    def words(self) -> list[str]:
        """Number-words ordered so longer entries are tried before their substrings."""
        return sorted(self.numbers, key=len, reverse=True)


@dataclass(frozen=True)
class UnitNames:
    noun: str
    full: tuple[str, ...] = ()
    short: tuple[str, ...] = ()
    symbol: tuple[str, ...] = ()
    plural: Optional[str] = None

    def __post_init__(self):
        if not self.plural:
            object.__setattr__(self, "plural", guess_plural(self.noun))

    @property
    def names(self) -> tuple[str, ...]:
        return self.full + self.short + self.symbol


@dataclass(frozen=True)
class DurationLocale:
    tag: str
    units: Mapping[str, UnitNames]
    # text allowed between two duration segments that sum into one duration
    time_joiners: tuple[str, ...] = ("",)
    # text allowed between a number and the unit it scales
    modifier_joiners: tuple[str, ...] = ("",)
    zero_word: str = "no"
    _lookup: Mapping[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "units", MappingProxyType(dict(self.units)))
        lookup = {}
        for unit in UNIT_CLASSES:
            names = self.units.get(unit)
            if names is None:
                continue
            for name in names.names:
                lookup.setdefault(name.lower(), unit)
        object.__setattr__(self, "_lookup", MappingProxyType(lookup))

    @property
    def names(self) -> list[str]:
        """Every unit name, longest first."""
        return sorted(self._lookup, key=len, reverse=True)

    def unit_of(self, name: str) -> str | None:
        return self._lookup.get(name.lower())

    def format_noun(self, unit: str, how_many: int) -> str:
        """Pluralizes the unit noun based on how many."""
        names = self.units[unit]
        if how_many == 0:
            return f"{self.zero_word} {names.plural}"
        if how_many == 1:
            return names.noun
        return names.plural

    def symbol_of(self, unit: str) -> str:
        names = self.units[unit]
        return (names.symbol or names.short or names.full or (names.noun,))[0]


EN_US_NUMBERS = NumberLocale(
    tag="en-US",
    numbers={
        "half": Fraction(1, 2),
        "quarter": Fraction(1, 4),
        "qtr": Fraction(1, 4),
        "zero": 0,
        "one": 1,
        "two": 2,
        "three": 3,
        "four": 4,
        "five": 5,
        "six": 6,
        "seven": 7,
        "eight": 8,
        "nine": 9,
        "ten": 10,
        "eleven": 11,
        "twelve": 12,
        "thirteen": 13,
        "fourteen": 14,
        "fifteen": 15,
        "sixteen": 16,
        "seventeen": 17,
        "eighteen": 18,
        "nineteen": 19,
        "twenty": 20,
        "score": 20,
        "thirty": 30,
        "forty": 40,
        "fifty": 50,
        "sixty": 60,
        "seventy": 70,
        "eighty": 80,
        "ninety": 90,
        "hundred": 100,
        "thousand": 1000,
        "half-a-mil": 500000,
        "half-a-mill": 500000,
        "million": 1000000,
        "half-a-bil": 500000000,
        "half-a-bill": 500000000,
        "billion": 1000000000,
        "tenth": Fraction(1, 10),
        "hundredth": Fraction(1, 100),
        "thousandth": Fraction(1, 1000),
    },
    joiners=("", " ", " and ", "-", " a ", " of a "),
    flippers=(),
)

DE_DE_NUMBERS = NumberLocale(
    tag="de-DE",
    numbers={
        "halb": Fraction(1, 2),
        "halbe": Fraction(1, 2),
        "viertel": Fraction(1, 4),
        "null": 0,
        "ein": 1,
        "eine": 1,
        "eins": 1,
        "zwei": 2,
        "zwo": 2,
        "drei": 3,
        "vier": 4,
        "fünf": 5,
        "sechs": 6,
        "sieben": 7,
        "acht": 8,
        "neun": 9,
        "zehn": 10,
        "elf": 11,
        "zwölf": 12,
        "dreizehn": 13,
        "vierzehn": 14,
        "fünfzehn": 15,
        "sechzehn": 16,
        "siebzehn": 17,
        "achtzehn": 18,
        "neunzehn": 19,
        "zwanzig": 20,
        "dreißig": 30,
        "vierzig": 40,
        "fünfzig": 50,
        "sechzig": 60,
        "siebzig": 70,
        "achtzig": 80,
        "neunzig": 90,
        "hundert": 100,
        "tausend": 1000,
        "million": 1000000,
        "milliarde": 1000000000,
    },
    joiners=("", " ", "und", " und ", "-"),
    flippers=("und", " und "),
    compound=True,
)

EN_US_DURATIONS = DurationLocale(
    tag="en-US",
    units={
        "millennium": UnitNames("millennium", full=("millennium", "millennia")),
        "century": UnitNames("century", full=("centuries", "century")),
        "decade": UnitNames("decade", full=("decades", "decade")),
        "year": UnitNames("year", full=("years", "year"), short=("yrs", "yr"), symbol=("y",)),
        "day": UnitNames("day", full=("days", "day"), short=("dys", "dy"), symbol=("d",)),
        "hour": UnitNames("hour", full=("hours", "hour"), short=("hrs", "hr"), symbol=("h",)),
        "minute": UnitNames("minute", full=("minutes", "minute"), short=("mins", "min"), symbol=("m",)),
        "second": UnitNames("second", full=("seconds", "second"), short=("secs", "sec"), symbol=("s",)),
        "millisecond": UnitNames(
            "millisecond",
            full=("milliseconds", "millisecond"),
            short=("millisecs", "millisec", "msecs", "msec"),
            symbol=("ms",),
        ),
    },
    time_joiners=(",", ", and", ",and", "and", ""),
    modifier_joiners=("of an", "of a", "an", "a", ""),
    zero_word="no",
)

DE_DE_DURATIONS = DurationLocale(
    tag="de-DE",
    units={
        "millennium": UnitNames("jahrtausend", full=("jahrtausende", "jahrtausend"), plural="jahrtausende"),
        "century": UnitNames("jahrhundert", full=("jahrhunderte", "jahrhundert"), plural="jahrhunderte"),
        "decade": UnitNames("jahrzehnt", full=("jahrzehnte", "jahrzehnt"), plural="jahrzehnte"),
        "year": UnitNames("jahr", full=("jahren", "jahre", "jahr"), symbol=("j",), plural="jahre"),
        "day": UnitNames("tag", full=("tagen", "tage", "tag"), symbol=("t",), plural="tage"),
        "hour": UnitNames("stunde", full=("stunden", "stunde"), short=("std",), symbol=("st",), plural="stunden"),
        "minute": UnitNames("minute", full=("minuten", "minute"), short=("min",), symbol=("m",), plural="minuten"),
        "second": UnitNames("sekunde", full=("sekunden", "sekunde"), short=("sek",), symbol=("s",), plural="sekunden"),
        "millisecond": UnitNames(
            "millisekunde",
            full=("millisekunden", "millisekunde"),
            short=("millisek", "msek"),
            symbol=("ms",),
            plural="millisekunden",
        ),
    },
    time_joiners=(",", ", und", ",und", "und", ""),
    modifier_joiners=("von", ""),
    zero_word="keine",
)

NUMBER_LOCALES: Mapping[str, NumberLocale] = MappingProxyType({
    EN_US_NUMBERS.tag: EN_US_NUMBERS,
    DE_DE_NUMBERS.tag: DE_DE_NUMBERS,
})

DURATION_LOCALES: Mapping[str, DurationLocale] = MappingProxyType({
    EN_US_DURATIONS.tag: EN_US_DURATIONS,
    DE_DE_DURATIONS.tag: DE_DE_DURATIONS,
})


def number_locale(tag: str | None = None, resolver: str = "numbers") -> NumberLocale:
    tag = tag or DEFAULT_LOCALE
    try:
        return NUMBER_LOCALES[tag]
    except KeyError:
        raise UnsupportedLocale(resolver, tag) from None


def duration_locale(tag: str | None = None, resolver: str = "durations") -> DurationLocale:
    tag = tag or DEFAULT_LOCALE
    try:
        return DURATION_LOCALES[tag]
    except KeyError:
        raise UnsupportedLocale(resolver, tag) from None
