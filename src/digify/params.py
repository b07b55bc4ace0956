from dataclasses import dataclass
from typing import Iterable, Literal, Optional


class Sentinel:
    def __bool__(self):
        return False

    def __repr__(self):
        return ""

    def __str__(self):
        return ""


_sentinel = Sentinel()

DigifyMode = Literal["default", "token", "clock", "human", "numbers"]


@dataclass
class DigifyParams:
    description: str = _sentinel
    config: DigifyMode | str = _sentinel
    locale: Optional[str] = _sentinel

    # which resolvers replace their spans, in priority order
    resolvers: Iterable[str] = _sentinel

    # %n -> value, %i -> original text
    fmt: str = _sentinel
    fmt_duration: str = _sentinel
    # None -> milliseconds, otherwise any Duration.format style
    duration_style: Optional[str] = _sentinel
    use_commas: bool = _sentinel

    def non_sentinels(self) -> dict:
        return {k: v for k, v in self.__dict__.items() if v is not _sentinel}

    def replace(self, **kwargs):
        return DigifyParams(**{**self.__dict__, **kwargs})

    def merged(self, **overrides) -> "DigifyParams":
        """Return these params with every non-sentinel override applied."""
        given = DigifyParams(**overrides).non_sentinels()
        return DigifyParams(**{**self.non_sentinels(), **given})

    def __repr__(self):
        d = "\n".join(f"\t{k}={v}," for k, v in self.non_sentinels().items())
        return f"DigifyParams(\n{d}\n)"


default = DigifyParams(
    description="Durations become milliseconds, numbers become digits",
    config="default",
    locale=None,
    resolvers=("durations", "numbers"),
    fmt="%n",
    fmt_duration="%n",
    duration_style=None,
    use_commas=False,
)


class modes:
    default = default

    token = default.replace(
        description="ugly but parseable",
        config="token",
        fmt="[NUM=%n,OG=%i]",
        fmt_duration="[DUR=%n,OG=%i]",
    )

    clock = default.replace(
        description="durations as clock strings, e.g. 1:30:00",
        config="clock",
        duration_style=":",
    )

    human = default.replace(
        description="durations spelled out down to the second",
        config="human",
        duration_style="seconds",
    )

    numbers = default.replace(
        description="only numbers, leave unit words alone",
        config="numbers",
        resolvers=("numbers",),
    )


def resolve_params(config: "DigifyMode | str | DigifyParams" = default, **overrides) -> DigifyParams:
    base = config if isinstance(config, DigifyParams) else getattr(modes, config, None)
    if not isinstance(base, DigifyParams):
        raise ValueError(f"unknown config {config!r}")
    return base.merged(**overrides)
