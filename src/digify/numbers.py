"""Number Resolver: locates groups of spelled out numbers and digit literals.

Words are collected into one position-ordered list, then walked left to right.
Each composite number is a list of segments; every incoming word either
multiplies the current segment, adds to it, starts a new segment, or re-merges
trailing segments under a larger magnitude::

    one million two hundred fifty one thousand
    [1] -> [1000000] -> [1000000, 2] -> [1000000, 200] -> [1000000, 200, 50]
        -> [1000000, 200, 50, 1] -> re-merge -> [1000000, 251000]

The text between two words decides whether they belong to the same number
(joiners) and, in languages that put the ones before the tens, whether a
larger word is added instead of multiplied (flippers).
"""
import logging
import re
from fractions import Fraction
from functools import lru_cache
from typing import Iterable, Optional

from .exc import UnsupportedLocale
from .locales import DEFAULT_LOCALE, NUMBER_LOCALES, NumberLocale, number_locale
from .stages import Stage, Trace
from .tokens import ParsedResult, Token, format_value, insert_token, tidy

_LOGGER = logging.getLogger(__name__)

# a sign only counts when it is not glued to a preceding word ("5-6" is 5 and 6)
DIGITS_PATTERN = re.compile(r"(?:(?<![\w.])[+-])?\d+(?:\.\d+)?")

_LETTER_BEFORE = r"(?<![^\W\d_])"
_LETTER_AFTER = r"(?![^\W\d_])"


@lru_cache(maxsize=None)
def word_pattern(tag: str) -> re.Pattern:
    locale = NUMBER_LOCALES[tag]
    alternatives = "|".join(re.escape(w) for w in locale.words)
    if locale.compound:
        return re.compile(rf"(?:{alternatives})", re.IGNORECASE)
    return re.compile(rf"{_LETTER_BEFORE}(?:{alternatives}){_LETTER_AFTER}", re.IGNORECASE)


def num_digits(value) -> int:
    """Count integer digits; anything strictly between -1 and 1 (except zero) has none."""
    if value == 0:
        return 1
    value = abs(value)
    if value < 1:
        return 0
    return len(str(int(value)))


def is_modifier(value) -> bool:
    return 0 < abs(value) < 1


def find_words(text: str, locale: NumberLocale) -> list[Token]:
    words: list[Token] = []
    for m in word_pattern(locale.tag).finditer(text):
        insert_token(words, Token("number.word", m.start(), m.group(0), locale.value_of(m.group(0))))
    for m in DIGITS_PATTERN.finditer(text):
        insert_token(words, Token("number.word", m.start(), m.group(0), Fraction(m.group(0))))
    return words


def _segments_repr(segments: Iterable[Token]) -> str:
    return "[" + ", ".join(format_value(s.value) for s in segments) + "]"


class NumberResolver:
    """Parses sequences of number-words and digit groups into scaled values."""

    name = "numbers"
    assistants: tuple[str, ...] = ()

    def __init__(self, registry=None, default_locale: str = DEFAULT_LOCALE, supported_locales: Iterable[str] = None):
        self.registry = registry
        self.default_locale = default_locale
        self.supported_locales = tuple(supported_locales or NUMBER_LOCALES)

    def __repr__(self):
        return f"NumberResolver(default_locale={self.default_locale!r})"

    def locale_for(self, locale: Optional[str]) -> NumberLocale:
        tag = locale or self.default_locale
        if tag not in self.supported_locales:
            raise UnsupportedLocale(self.name, tag)
        return number_locale(tag, self.name)

    def parse(self, text: str, locale: str = None, pre_parsed: dict = None, trace: bool = False) -> ParsedResult:
        loc = self.locale_for(locale)
        tr = Trace(text, enabled=trace)
        words = find_words(text, loc)
        if not words:
            return ParsedResult(text, [], dict(pre_parsed or {}), loc.tag, tr.last)

        numbers: list[Token] = []
        current: Token | None = None
        prev: Token | None = None
        for word in words:
            # first check what characters join this word with the last one
            if prev is not None and text[prev.end:word.position] not in loc.joiners:
                self._finalize(text, current, prev, tr)
                prev = None

            if prev is None:
                segment = Token("number.segment", word.position, word.text, word.value, [word])
                current = Token("number", word.position, word.text, None, [segment])
                numbers.append(current)
                tr.record(Stage.NEW_NUMBER, _segments_repr(current.children), word.text, word.position)
            else:
                self._combine(text, loc, current.children, prev, word, tr)
            prev = word
        self._finalize(text, current, prev, tr)

        return ParsedResult(text, numbers, dict(pre_parsed or {}), loc.tag, tr.last)

    def _combine(self, text: str, loc: NumberLocale, segments: list[Token], prev: Token, word: Token, tr: Trace) -> None:
        segment = segments[-1]
        value = word.value
        between = text[prev.end:word.position]

        if is_modifier(value):
            # half/quarter/tenth scale only the segment they touch
            segment.value *= value
            stage = Stage.MODIFY
        elif num_digits(segment.value) < num_digits(value):
            if len(segments) > 1 and segments[-2].value < value:
                self._remerge(text, segments, word)
                stage = Stage.REMERGE
            elif between in loc.flippers:
                segment.value += value
                stage = Stage.FLIP
            else:
                segment.value *= value
                stage = Stage.MULTIPLY
        elif value < segment.value:
            segments.append(Token("number.segment", word.position, word.text, value, [word]))
            tr.record(Stage.NEW_SEGMENT, _segments_repr(segments), word.text, word.position)
            return
        else:
            segment.value += value
            stage = Stage.ADD

        segment = segments[-1]
        if segment.children[-1] is not word:
            segment.children.append(word)
        segment.text = text[segment.position:word.end]
        tr.record(stage, _segments_repr(segments), word.text, word.position)

    @staticmethod
    def _remerge(text: str, segments: list[Token], word: Token) -> None:
        # walk backwards until the end or the tally would exceed the incoming value
        tally = 0
        cut = 0
        for j in range(len(segments) - 1, -1, -1):
            if tally + segments[j].value > word.value:
                cut = j + 1
                break
            tally += segments[j].value
        merged = segments[cut:]
        del segments[cut:]
        children = [w for s in merged for w in s.children] + [word]
        segments.append(Token(
            "number.segment",
            merged[0].position,
            text[merged[0].position:word.end],
            tally * word.value,
            children,
        ))

    @staticmethod
    def _finalize(text: str, number: Token, last: Token, tr: Trace) -> None:
        for segment in number.children:
            segment.value = tidy(segment.value)
            for word in segment.children:
                word.value = tidy(word.value)
        number.value = tidy(sum(s.value for s in number.children))
        number.text = text[number.position:last.end]
        tr.record(Stage.FINALIZE, format_value(number.value), number.text, number.position)
        _LOGGER.debug("Resolved number %r -> %s", number.text, number.value)
