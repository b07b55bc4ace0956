"""Unit tests for digify() and its configuration presets."""
import pytest

from digify import digify, modes, parse_durations, parse_numbers
from digify.api import collect_tokens
from digify.exc import UnsupportedLocale
from digify.params import DigifyParams, _sentinel, resolve_params

TALES = [
    ("fifty cats flew twenty two miles past five dogs", {}, "50 cats flew 22 miles past 5 dogs"),
    ("one hundred and thirty-five dalmatians", {}, "135 dalmatians"),
    ("half an hour later", {}, "1800000 later"),
    ("1 hour. 30 minutes", {}, "3600000. 1800000"),
    ("two hours and 3 dogs", {}, "7200000 and 3 dogs"),
    ("1 hour and 30 minutes", {"config": "clock"}, "1:30:00"),
    ("quarter of a day", {"config": "human"}, "6 hours"),
    ("two dogs", {"config": "token"}, "[NUM=2,OG=two] dogs"),
    ("two hours", {"config": "token"}, "[DUR=7200000,OG=two hours]"),
    ("two hours", {"config": "numbers"}, "2 hours"),
    ("one million", {"use_commas": True}, "1,000,000"),
    ("a thousandth of a thousandth", {}, "a 0.000001"),
    ("-2 hours", {"duration_style": "minutes"}, "-2 hours"),
    ("1hr30min", {"duration_style": "hm"}, "1h30m"),
    ("1hr30min", {"config": "clock", "duration_style": ":minutes"}, "1:30"),
    ("two hours", {"fmt_duration": "%nms"}, "7200000ms"),
    ("ein und zwanzig katzen", {"locale": "de-DE"}, "21 katzen"),
    ("zwei stunden", {"locale": "de-DE", "config": "human"}, "2 stunden"),
]

IDEMPOTENT = [
    "fifty cats flew twenty two miles",
    "1hr30min",
    "half a million",
    "twelve hundred fifty",
    "3.5 million",
    "1 hour. 30 minutes",
    "a thousandth of a thousandth",
    "a hundredth of a thousandth",
    "-2 hours",
]


class TestDigify:
    """Test cases for digify."""

    @pytest.mark.parametrize("text, kwargs, expected", TALES)
    def test_tales(self, text, kwargs, expected):
        assert digify(text, **kwargs) == expected

    @pytest.mark.parametrize("text", IDEMPOTENT)
    def test_idempotent(self, text):
        once = digify(text)
        assert digify(once) == once

    def test_positional_locale(self):
        assert digify("zwei hundert", "de-DE") == "200"

    def test_blank_text(self):
        assert digify("") == ""
        assert digify("   ") == "   "

    def test_text_without_numbers(self):
        assert digify("nothing to see") == "nothing to see"

    def test_custom_registry(self, registry):
        assert digify("two hours", registry=registry) == "7200000"

    def test_params_object(self):
        params = modes.default.replace(fmt="<%n>")
        assert digify("two cats", config=params) == "<2> cats"

    def test_unknown_config(self):
        with pytest.raises(ValueError):
            digify("two", config="loud")

    def test_unknown_locale(self):
        with pytest.raises(UnsupportedLocale):
            digify("two", "fr-FR")


class TestCollectTokens:
    """Test cases for merging resolver output."""

    def test_earlier_resolver_wins(self):
        tokens = collect_tokens("half an hour and 3 dogs", ("durations", "numbers"))
        assert [(t.kind, t.text) for t in tokens] == [
            ("duration.segment", "half an hour"),
            ("number", "3"),
        ]

    def test_order_changes_winner(self):
        tokens = collect_tokens("two hours", ("numbers", "durations"))
        assert [t.kind for t in tokens] == ["number"]

    def test_sorted_by_position(self):
        tokens = collect_tokens("5 cats, 2 hours", ("durations", "numbers"))
        assert [t.position for t in tokens] == [0, 8]


class TestConveniences:
    """Test cases for parse_numbers and parse_durations."""

    def test_parse_numbers(self):
        assert parse_numbers("twelve hundred fifty").values == [1250]

    def test_parse_durations(self):
        assert parse_durations("1hr30min")[0].value.to_milliseconds() == 5400000

    def test_parse_with_locale(self, registry):
        assert parse_numbers("eins", "de-DE", registry=registry).values == [1]


class TestParams:
    """Test cases for DigifyParams and presets."""

    def test_non_sentinels(self):
        params = DigifyParams(fmt="%n")
        assert params.non_sentinels() == {"fmt": "%n"}
        assert params.locale is _sentinel
        assert not params.locale

    def test_replace(self):
        token = modes.default.replace(fmt="[%n]")
        assert token.fmt == "[%n]"
        assert token.resolvers == modes.default.resolvers

    def test_merged_ignores_sentinels(self):
        merged = modes.clock.merged(use_commas=True)
        assert merged.use_commas is True
        assert merged.duration_style == ":"

    def test_merged_allows_none(self):
        merged = modes.human.merged(duration_style=None)
        assert merged.duration_style is None

    @pytest.mark.parametrize("name", ["default", "token", "clock", "human", "numbers"])
    def test_presets(self, name):
        params = resolve_params(name)
        assert params.config == name
        assert set(params.resolvers) <= {"numbers", "durations"}

    def test_resolve_params_object(self):
        params = resolve_params(modes.token, fmt="%n")
        assert params.fmt == "%n"
        assert params.fmt_duration == modes.token.fmt_duration

    def test_resolve_unknown(self):
        with pytest.raises(ValueError):
            resolve_params("replace")

    def test_repr(self):
        assert "fmt=%n" in repr(DigifyParams(fmt="%n"))
