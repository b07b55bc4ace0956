import argparse
import logging
import re
import sys

from .api import collect_tokens, digify
from .exc import DigifyError
from .registry import default_registry

EXAMPLES = [
    ("one million two hundred fifty one thousand three hundred and sixty five", {}, "1251365"),
    ("fifty cats flew twenty two miles past five dogs", {}, "50 cats flew 22 miles past 5 dogs"),
    ("twelve hundred fifty", {}, "1250"),
    ("half a million", {}, "500000"),
    ("ein und zwanzig", {"locale": "de-DE"}, "21"),
    ("eine million sechs hundertdreiundfünfzigtausend eins katze", {"locale": "de-DE"}, "1653001 katze"),
    ("1hr30min", {}, "5400000"),
    ("half an hour", {}, "1800000"),
    ("quarter of a day", {"config": "human"}, "6 hours"),
    ("1:30:30.5", {"config": "clock"}, "1:30:30"),
    ("1 hour, 30 minutes", {"duration_style": "hms"}, "1h30m"),
    ("1 hour. 30 minutes", {}, "3600000. 1800000"),
    ("first place, two hours and 3 dogs", {"config": "token"}, "first place, [DUR=7200000,OG=two hours] and [NUM=3,OG=3] dogs"),
]

RESOLVER_CHOICES = {
    "all": ("durations", "numbers"),
    "numbers": ("numbers",),
    "durations": ("durations",),
}


def _parse_kwargs(pairs: list[str]) -> dict:
    """
    Parse CLI kwargs like:
      --kw config=token --kw use_commas=true --kw duration_style=hms
    """
    out: dict = {}
    for item in pairs:
        if "=" not in item:
            raise ValueError(f"bad --kw {item!r}; expected key=value")
        k, v = item.split("=", 1)
        k = k.strip()
        v = v.strip()

        vl = v.lower()
        if vl in {"true", "false"}:
            out[k] = (vl == "true")
            continue
        if vl in {"none", "null"}:
            out[k] = None
            continue
        if re.fullmatch(r"[+-]?\d+", v):
            out[k] = int(v)
            continue
        out[k] = v
    return out


def build_md_table(suite) -> str:
    results = []

    def limit_width(s, n=60):
        if len(s) > n:
            return s[:n - 3] + "..."
        return s

    for prompt, params, _ in suite:
        out = digify(prompt, **params)
        results.append({
            "prompt": limit_width(str(prompt)),
            "params": limit_width(str(params)),
            "output": limit_width(str(out)),
        })

    headers = ["prompt", "output", "params"]
    widths = {
        h: max(len(h), max(len(row[h]) for row in results))
        for h in headers
    }

    def row(values):
        return "| " + " | ".join(
            values[h].ljust(widths[h]) for h in headers
        ) + " |"

    lines = [row({h: h for h in headers})]
    lines.append("| " + " | ".join("-" * widths[h] for h in headers) + " |")
    for r in results:
        lines.append(row(r))
    return "\n".join(lines)


def test_many(suite) -> int:
    """Run every (text, kwargs, expected) case, print each outcome and return the failure count."""
    failures = 0
    for i, (text, kwargs, expected) in enumerate(suite):
        out = digify(text, **kwargs)
        ok = out == expected
        failures += not ok
        sys.stdout.write(f"{i}. {'ok' if ok else 'FAIL'} {text!r} -> {out!r}" + ("" if ok else f" (expected {expected!r})") + "\n")
    return failures


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv

    ap = argparse.ArgumentParser(
        prog="digify",
        description="Convert spelled out numbers and durations in text to values.",
    )
    ap.add_argument(
        "text",
        nargs="*",
        help="Input text. If omitted, reads from stdin (single pass).",
    )
    ap.add_argument(
        "-m",
        "--mode",
        choices=["single", "loop", "tests", "examples"],
        default="single",
        help="single: digify once (default). loop: REPL. tests: check the built-in examples. examples: print them as a table.",
    )
    ap.add_argument("-l", "--locale", default=None, help="Locale tag, e.g. en-US or de-DE.")
    ap.add_argument(
        "-r",
        "--resolver",
        choices=sorted(RESOLVER_CHOICES),
        default="all",
        help="Which spans to replace (default: all).",
    )
    ap.add_argument("--config", default="default", help="Preset: default, token, clock, human, numbers.")
    ap.add_argument(
        "--kw",
        action="append",
        default=[],
        metavar="KEY=VAL",
        help="Pass digify() options (repeatable). Example: --kw duration_style=hms --kw use_commas=true",
    )
    ap.add_argument("--tokens", action="store_true", help="List the resolved spans instead of rewriting the text.")
    ap.add_argument("--explain", action="store_true", help="Print how each number was reduced.")
    ap.add_argument(
        "--newline",
        action="store_true",
        help="When reading stdin (single mode), process line-by-line instead of whole blob.",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr.")

    args = ap.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        kwargs = _parse_kwargs(args.kw)
    except ValueError as e:
        ap.error(str(e))
    if args.resolver != "all":
        kwargs["resolvers"] = RESOLVER_CHOICES[args.resolver]

    def _run_single_text(text: str) -> None:
        if args.tokens:
            for token in collect_tokens(text, RESOLVER_CHOICES[args.resolver], args.locale):
                sys.stdout.write(f"{token.position}\t{token.kind}\t{token.text!r}\t{token.value}\n")
        else:
            out = digify(text, args.locale, config=args.config, **kwargs)
            sys.stdout.write(out)
            if not out.endswith("\n"):
                sys.stdout.write("\n")
        if args.explain:
            result = default_registry().get("numbers", args.locale).parse(text, args.locale, trace=True)
            if result.trace is not None:
                sys.stdout.write(result.trace.explain() + "\n")

    try:
        if args.mode == "tests":
            return 1 if test_many(EXAMPLES) else 0

        if args.mode == "examples":
            sys.stdout.write(build_md_table(EXAMPLES) + "\n")
            return 0

        if args.mode == "loop":
            try:
                while True:
                    _run_single_text(input())
            except (KeyboardInterrupt, EOFError):
                return 0

        if args.text:
            _run_single_text(" ".join(args.text))
            return 0

        data = sys.stdin.read()
        if args.newline:
            for line in data.splitlines():
                _run_single_text(line)
        else:
            _run_single_text(data.rstrip("\n"))
    except (DigifyError, ValueError) as e:
        sys.stderr.write(f"digify: {e}\n")
        return 2
    return 0
