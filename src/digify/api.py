"""Module level conveniences over the default registry."""
import logging

from .params import DigifyMode, DigifyParams, default, resolve_params
from .registry import Registry, default_registry
from .tokens import ParsedResult, Token, format_value, substitute

_LOGGER = logging.getLogger(__name__)


def parse_numbers(text: str, locale: str = None, registry: Registry = None) -> ParsedResult:
    return (registry or default_registry()).parse("numbers", text, locale)


def parse_durations(text: str, locale: str = None, registry: Registry = None) -> ParsedResult:
    return (registry or default_registry()).parse("durations", text, locale)


def _render(token: Token, params: DigifyParams, locale: str | None) -> str:
    if token.kind.startswith("duration"):
        if params.duration_style:
            value = token.value.format(params.duration_style, locale)
        else:
            value = format_value(token.value.to_milliseconds(), params.use_commas)
        fmt = params.fmt_duration
    else:
        value = format_value(token.value, params.use_commas)
        fmt = params.fmt
    return fmt.replace("%n", value).replace("%i", token.text)


def collect_tokens(text: str, resolvers, locale: str = None, registry: Registry = None) -> list[Token]:
    """Top-level tokens of every resolver; earlier resolvers win any overlap."""
    registry = registry or default_registry()
    chosen: list[Token] = []
    for name in resolvers:
        for token in registry.parse(name, text, locale):
            if not any(token.overlaps(c) for c in chosen):
                chosen.append(token)
    return sorted(chosen, key=lambda t: t.position)


def digify(
    text: str,
    locale: str = None,
    *,
    config: DigifyMode | DigifyParams = default,
    registry: Registry = None,
    **overrides,
) -> str:
    """Replace every recognized duration and number span with its value.

    Spans are applied left to right and never overlap; a number inside a
    duration ("half an hour") is replaced as part of that duration.
    """
    if not text.strip():
        return text
    if locale is not None:
        overrides["locale"] = locale
    params = resolve_params(config, **overrides)
    tokens = collect_tokens(text, params.resolvers, params.locale, registry)
    _LOGGER.debug("digify %r: %d spans", text, len(tokens))
    return substitute(text, tokens, lambda t: _render(t, params, params.locale))
