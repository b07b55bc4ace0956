"""Token/span model shared by every resolver."""
from dataclasses import dataclass, field
from decimal import Decimal
from fractions import Fraction
from typing import Any, Callable, Iterable, Optional

from .stages import StageResult


def tidy(value):
    """Normalize exact arithmetic results: integral values become ``int``, others ``float``."""
    if isinstance(value, Fraction):
        if value.denominator == 1:
            return int(value)
        return float(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def format_value(value, use_commas: bool = False) -> str:
    value = tidy(value)
    if use_commas and isinstance(value, int):
        return f"{value:,}"
    if isinstance(value, float):
        # positional, never "1e-06"
        return format(Decimal(repr(value)), "f")
    return str(value)


@dataclass
class Token:
    """Tokens are the gold nuggets of lexical analysis."""

    kind: str
    position: int
    text: str
    value: Any = None
    children: list["Token"] = field(default_factory=list)

    @property
    def end(self) -> int:
        return self.position + len(self.text)

    def overlaps(self, other: "Token") -> bool:
        return self.position < other.end and other.position < self.end

    def within(self, other: "Token") -> bool:
        return other.position <= self.position and self.end <= other.end

    def __repr__(self):
        return f"Token({self.kind!r}, {self.position}, {self.text!r}, value={self.value!r})"


def insert_token(tokens: list[Token], token: Token) -> list[Token]:
    """Keep ``tokens`` ordered by position.

    On a position tie the longer match replaces the existing one.
    """
    if not tokens or tokens[-1].position < token.position:
        tokens.append(token)
        return tokens
    for i, existing in enumerate(tokens):
        if existing.position > token.position:
            tokens.insert(i, token)
            break
        if existing.position == token.position:
            if len(existing.text) < len(token.text):
                tokens[i] = token
            break
    return tokens


def closest_token(tokens: Iterable[Token], upper: int, lower: int = 0) -> Optional[Token]:
    """Return the last token lying inside ``[lower, upper)``.

    ``tokens`` must already be ordered by position.
    """
    found = None
    for token in tokens:
        if token.position >= upper:
            break
        if token.position >= lower and token.end <= upper:
            found = token
    return found


def substitute(text: str, tokens: Iterable[Token], render: Callable[[Token], str] = None) -> str:
    """Replace each token's span in ``text`` with its rendered value.

    Tokens must be ordered and non-overlapping; they are applied from the end
    so earlier offsets stay valid.
    """
    render = render or (lambda t: format_value(t.value))
    for token in reversed(list(tokens)):
        text = text[:token.position] + render(token) + text[token.end:]
    return text


@dataclass
class ParsedResult:
    input: str
    tokens: list[Token] = field(default_factory=list)
    pre_parsed: dict[str, "ParsedResult"] = field(default_factory=dict)
    locale: Optional[str] = None
    trace: Optional[StageResult] = None

    def digify(self) -> str:
        """Replace every token span in the input with its value."""
        return substitute(self.input, self.tokens)

    @property
    def values(self) -> list:
        return [t.value for t in self.tokens]

    def __iter__(self):
        return iter(self.tokens)

    def __len__(self):
        return len(self.tokens)

    def __getitem__(self, i):
        return self.tokens[i]

    def __bool__(self):
        return bool(self.tokens)

    def __str__(self):
        return self.digify()
