"""Unit tests for the command line."""
import io

import pytest

from digify import cli, digify


class TestParseKwargs:
    """Test cases for --kw parsing."""

    def test_types(self):
        out = cli._parse_kwargs(["use_commas=true", "duration_style=hm", "x=3", "locale=none", "fmt = %n "])
        assert out == {"use_commas": True, "duration_style": "hm", "x": 3, "locale": None, "fmt": "%n"}

    def test_bad_pair(self):
        with pytest.raises(ValueError):
            cli._parse_kwargs(["use_commas"])


class TestExamples:
    """The built-in examples double as a regression suite."""

    @pytest.mark.parametrize("text, kwargs, expected", cli.EXAMPLES)
    def test_example(self, text, kwargs, expected):
        assert digify(text, **kwargs) == expected

    def test_tests_mode(self, capsys):
        assert cli.main(["-m", "tests"]) == 0
        out = capsys.readouterr().out
        assert "FAIL" not in out
        assert out.count(" ok ") == len(cli.EXAMPLES)

    def test_examples_table(self, capsys):
        assert cli.main(["-m", "examples"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].startswith("| prompt")
        assert len(lines) == len(cli.EXAMPLES) + 2


class TestMain:
    """Test cases for main()."""

    def test_single(self, capsys):
        assert cli.main(["twelve", "hundred", "fifty"]) == 0
        assert capsys.readouterr().out == "1250\n"

    def test_locale(self, capsys):
        assert cli.main(["-l", "de-DE", "ein und zwanzig"]) == 0
        assert capsys.readouterr().out == "21\n"

    def test_config(self, capsys):
        cli.main(["--config", "clock", "1hr30min"])
        assert capsys.readouterr().out == "1:30:00\n"

    def test_kw(self, capsys):
        cli.main(["--kw", "use_commas=true", "one million"])
        assert capsys.readouterr().out == "1,000,000\n"

    def test_resolver_numbers(self, capsys):
        cli.main(["-r", "numbers", "two hours"])
        assert capsys.readouterr().out == "2 hours\n"

    def test_tokens(self, capsys):
        cli.main(["--tokens", "two hours and 3 dogs"])
        lines = capsys.readouterr().out.splitlines()
        assert lines == ["0\tduration.segment\t'two hours'\t7200000", "14\tnumber\t'3'\t3"]

    def test_explain(self, capsys):
        cli.main(["--explain", "twelve hundred fifty"])
        out = capsys.readouterr().out
        assert out.startswith("1250\n")
        assert "multiply('hundred')" in out

    def test_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("one\ntwo dogs\n"))
        cli.main([])
        assert capsys.readouterr().out == "1\n2 dogs\n"

    def test_stdin_newline(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("one\ntwo dogs\n"))
        cli.main(["--newline"])
        assert capsys.readouterr().out == "1\n2 dogs\n"

    def test_loop(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("one\ntwo\n"))
        assert cli.main(["-m", "loop"]) == 0
        assert capsys.readouterr().out == "1\n2\n"

    def test_unsupported_locale(self, capsys):
        assert cli.main(["-l", "fr-FR", "un"]) == 2
        assert 'Locale "fr-FR"' in capsys.readouterr().err

    def test_unknown_config(self, capsys):
        assert cli.main(["--config", "loud", "two"]) == 2

    def test_bad_kw(self):
        with pytest.raises(SystemExit):
            cli.main(["--kw", "oops", "two"])
