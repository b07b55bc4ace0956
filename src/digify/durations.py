"""Duration Resolver and the ``Duration`` value object.

Durations are resolved on top of the number resolver: every unit word takes
the closest preceding number as its multiplier when only a modifier joiner
("of an", "a", "") separates them, clock literals such as ``1:30:30.5`` are
read positionally, and adjacent segments joined by a time joiner ("," "and"
"") are summed into a single compound duration.
"""
import logging
import re
from dataclasses import dataclass, field
from datetime import timedelta
from fractions import Fraction
from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Optional

from .exc import InvalidDurationUnit, UnsupportedLocale
from .locales import DEFAULT_LOCALE, DURATION_LOCALES, DurationLocale, duration_locale
from .numbers import NumberResolver
from .tokens import ParsedResult, Token, closest_token, format_value, insert_token, tidy

_LOGGER = logging.getLogger(__name__)

SECOND = 1000
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR
YEAR = 365 * DAY
DECADE = 10 * YEAR
CENTURY = 10 * DECADE
MILLENNIUM = 10 * CENTURY

UNIT_MAGNITUDES = MappingProxyType({
    "millennium": MILLENNIUM,
    "century": CENTURY,
    "decade": DECADE,
    "year": YEAR,
    "day": DAY,
    "hour": HOUR,
    "minute": MINUTE,
    "second": SECOND,
    "millisecond": 1,
})

# (attribute, unit class, size) from largest to smallest
_COMPONENTS = (
    ("years", "year", YEAR),
    ("days", "day", DAY),
    ("hours", "hour", HOUR),
    ("minutes", "minute", MINUTE),
    ("seconds", "second", SECOND),
    ("milliseconds", "millisecond", 1),
)

VERBOSE_STYLES = tuple(attr for attr, _, _ in _COMPONENTS)
CLOCK_STYLES = (":", ":minutes")
COMPACT_STYLES = ("hm", "hms")

CLOCK_PATTERN = re.compile(r"\d+:\d+(?::\d+)?(?::\d+)?(?:\.\d{1,3})?")

# clock literal part count -> size of each part
_CLOCK_FIELDS = {
    2: (HOUR, MINUTE),
    3: (HOUR, MINUTE, SECOND),
    4: (DAY, HOUR, MINUTE, SECOND),
}


@dataclass(frozen=True)
class Duration:
    """Immutable span of time measured in milliseconds.

    The components are derived once by successive floor division of the
    magnitude using a 365 day year; there is no calendar awareness. A negative
    duration keeps its sign in ``value`` only, and renders with a leading "-".
    """

    value: int | float
    years: int = field(init=False)
    days: int = field(init=False)
    hours: int = field(init=False)
    minutes: int = field(init=False)
    seconds: int = field(init=False)
    milliseconds: int | float = field(init=False)

    def __post_init__(self):
        value = tidy(self.value)
        object.__setattr__(self, "value", value)
        left = abs(value)
        for attr, _, size in _COMPONENTS[:-1]:
            amount = int(left // size) if left >= size else 0
            object.__setattr__(self, attr, amount)
            left -= amount * size
        object.__setattr__(self, "milliseconds", tidy(left))

    def to_milliseconds(self) -> int | float:
        return self.value

    def to_components(self) -> dict[str, int | float]:
        return {attr: getattr(self, attr) for attr in VERBOSE_STYLES}

    def to_minutes(self) -> int:
        if abs(self.value) > MINUTE:
            minutes = int(abs(self.value) // MINUTE)
            return -minutes if self.value < 0 else minutes
        return 0

    def to_timedelta(self) -> timedelta:
        return timedelta(milliseconds=self.value)

    def format(self, style: str = "milliseconds", locale: str = None) -> str:
        """Render the duration.

        ``style`` is either a verbose specificity cutoff (``"days"``,
        ``"hours"``, ``"minutes"``, ``"seconds"``, ``"milliseconds"``), a clock
        style (``":"``, ``":minutes"``) or a compact style (``"hm"``,
        ``"hms"``).
        """
        loc = duration_locale(locale)
        if style in CLOCK_STYLES:
            rendered = self._clock(style)
        elif style in COMPACT_STYLES:
            rendered = self._compact(style, loc)
        elif style in VERBOSE_STYLES:
            rendered = self._verbose(style, loc)
        else:
            raise ValueError(f"unknown duration format {style!r}")
        if self.value < 0 and rendered[0].isdigit():
            return "-" + rendered
        return rendered

    def _verbose(self, cutoff: str, loc: DurationLocale) -> str:
        info = []
        for attr, unit, _ in _COMPONENTS:
            amount = getattr(self, attr)
            if amount:
                info.append(f"{format_value(amount)} {loc.format_noun(unit, amount)}")
            if attr == cutoff:
                break
        if not info:
            return loc.format_noun(unit, 0)
        return ", ".join(info)

    def _clock(self, style: str) -> str:
        days = self.years * 365 + self.days
        if days > 0:
            return f"{days}:{self.hours:02d}:{self.minutes:02d}"
        if self.hours > 0:
            if style == ":minutes":
                return f"{self.hours}:{self.minutes:02d}"
            return f"{self.hours}:{self.minutes:02d}:{self.seconds:02d}"
        if style == ":minutes":
            return f"{self.minutes}"
        return f"{self.minutes}:{self.seconds:02d}"

    def _compact(self, style: str, loc: DurationLocale) -> str:
        cutoff = "minutes" if style == "hm" else "seconds"
        parts = []
        for attr, unit, _ in _COMPONENTS:
            amount = getattr(self, attr)
            if amount:
                parts.append(f"{amount}{loc.symbol_of(unit)}")
            if attr == cutoff:
                break
        if not parts:
            return f"0{loc.symbol_of(unit)}"
        return "".join(parts)

    def __str__(self):
        return str(self.value)


def unit_value(name: str, locale: DurationLocale) -> int:
    """Return the size of a recognized unit name in milliseconds."""
    unit = locale.unit_of(name)
    if unit is None:
        raise InvalidDurationUnit(name)
    return UNIT_MAGNITUDES[unit]


def clock_value(literal: str) -> Fraction:
    parts = literal.split(":")
    sizes = _CLOCK_FIELDS[len(parts)]
    return sum((Fraction(part) * size for part, size in zip(parts, sizes)), Fraction(0))


@lru_cache(maxsize=None)
def unit_pattern(tag: str) -> re.Pattern:
    names = "|".join(re.escape(n) for n in DURATION_LOCALES[tag].names)
    # starts at a word boundary or right after a digit without consuming it,
    # and never stops in the middle of a word ("hours" is not "h" + "ours")
    return re.compile(rf"(?:\b|(?<=\d))(?:{names})(?![^\W\d_])", re.IGNORECASE)


def _squash(s: str) -> str:
    return " ".join(s.split()).lower()


class DurationResolver:
    """Parses unit words and clock literals into ``Duration`` values."""

    name = "durations"
    assistants: tuple[str, ...] = ("numbers",)

    def __init__(self, registry=None, default_locale: str = DEFAULT_LOCALE, supported_locales: Iterable[str] = None):
        self.registry = registry
        self.default_locale = default_locale
        self.supported_locales = tuple(supported_locales or DURATION_LOCALES)

    def __repr__(self):
        return f"DurationResolver(default_locale={self.default_locale!r})"

    def locale_for(self, locale: Optional[str]) -> DurationLocale:
        tag = locale or self.default_locale
        if tag not in self.supported_locales:
            raise UnsupportedLocale(self.name, tag)
        return duration_locale(tag, self.name)

    def _pre_parse(self, text: str, tag: str, pre_parsed: dict | None) -> dict[str, ParsedResult]:
        pre_parsed = dict(pre_parsed or {})
        if all(name in pre_parsed for name in self.assistants):
            return pre_parsed
        if self.registry is not None:
            pre_parsed.update(self.registry.run_assistants(self, text, tag))
        else:
            pre_parsed["numbers"] = NumberResolver().parse(text, tag)
        return pre_parsed

    def find_matches(self, text: str, loc: DurationLocale) -> list[Token]:
        matches: list[Token] = []
        for m in unit_pattern(loc.tag).finditer(text):
            insert_token(matches, Token("duration.name", m.start(), m.group(0), unit_value(m.group(0), loc)))
        for m in CLOCK_PATTERN.finditer(text):
            insert_token(matches, Token("duration.full", m.start(), m.group(0), clock_value(m.group(0))))
        return matches

    def parse(self, text: str, locale: str = None, pre_parsed: dict = None) -> ParsedResult:
        loc = self.locale_for(locale)
        pre_parsed = self._pre_parse(text, loc.tag, pre_parsed)
        matches = self.find_matches(text, loc)
        if not matches:
            return ParsedResult(text, [], pre_parsed, loc.tag)

        numbers = pre_parsed["numbers"].tokens
        segments: list[Token] = []
        previous: Token | None = None
        for match in matches:
            if match.kind == "duration.full":
                segments.append(Token("duration.full", match.position, match.text, match.value, [match]))
            else:
                segments.append(self._segment(text, loc, numbers, match, previous))
            previous = match

        results = self._merge(text, loc, segments)
        for token in results:
            token.value = Duration(token.value)
            _LOGGER.debug("Resolved duration %r -> %sms", token.text, token.value)
        return ParsedResult(text, results, pre_parsed, loc.tag)

    @staticmethod
    def _segment(text: str, loc: DurationLocale, numbers: list[Token], match: Token, previous: Token | None) -> Token:
        # the number only belongs to this unit if no other duration match sits in between
        lower = previous.end if previous is not None else 0
        number = closest_token(numbers, match.position, lower)
        if number is not None and _squash(text[number.end:match.position]) in loc.modifier_joiners:
            return Token(
                "duration.segment",
                number.position,
                text[number.position:match.end],
                Fraction(str(number.value)) * match.value,
                [number, match],
            )
        # a bare unit word means exactly one of that unit
        return Token("duration.segment", match.position, match.text, match.value, [match])

    @staticmethod
    def _merge(text: str, loc: DurationLocale, segments: list[Token]) -> list[Token]:
        results: list[Token] = []
        for segment in segments:
            if results:
                last = results[-1]
                joiner = _squash(text[last.end:segment.position])
                if joiner in loc.time_joiners:
                    _LOGGER.debug("Merging duration %r with %r", last.text, segment.text)
                    results[-1] = Token(
                        "duration.segment",
                        last.position,
                        text[last.position:segment.end],
                        last.value + segment.value,
                        last.children + segment.children,
                    )
                    continue
            results.append(segment)
        return results
