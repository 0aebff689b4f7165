"""
Click binding for the flag store.

Every :class:`FlagSpec` becomes a ``click.Option`` bound to its environment
variable.  After click has parsed the command line, each option's
``ParameterSource`` tells us whether the value was typed by the user, read
from the environment, or left at its default; that provenance is copied into
the store alongside the value.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from datetime import timedelta
from typing import Any, TypeVar

import click
from click.core import ParameterSource

from shipwatch.core.exceptions import ConfigError
from shipwatch.core.flags.registry import default_store
from shipwatch.core.flags.store import FlagKind, FlagSource, FlagSpec, FlagStore

F = TypeVar("F", bound=Callable[..., Any])

_DURATION_PART_RE = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|ms|s|m|h)")
_DURATION_RE = re.compile(r"^[+-]?(?:(?:\d+(?:\.\d*)?|\.\d+)(?:ns|us|µs|ms|s|m|h))+$")
_UNIT_TO_SECONDS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "ms": 1e-3,
    "s": 1,
    "m": 60,
    "h": 60 * 60,
}


def parse_duration(text: str) -> timedelta:
    """Parse ``1h30m``-style durations. A bare integer means seconds."""
    text = text.strip()
    if re.fullmatch(r"[+-]?\d+", text):
        return timedelta(seconds=int(text))
    if not _DURATION_RE.match(text):
        raise ValueError(f"invalid duration {text!r}")
    sign = -1 if text.startswith("-") else 1
    seconds = sum(
        float(value) * _UNIT_TO_SECONDS[unit] for value, unit in _DURATION_PART_RE.findall(text)
    )
    return timedelta(seconds=sign * seconds)


class DurationType(click.ParamType):
    name = "duration"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> timedelta:
        if isinstance(value, timedelta):
            return value
        try:
            return parse_duration(str(value))
        except ValueError as exc:
            self.fail(str(exc), param, ctx)


DURATION = DurationType()


# ---------------------------------------------------------------------------
# Spec -> click option
# ---------------------------------------------------------------------------


def param_name(flag: str) -> str:
    return flag.replace("-", "_")


def _option_args(spec: FlagSpec) -> tuple[list[str], dict[str, Any]]:
    decls = [f"--{spec.name}"]
    if spec.short:
        decls.append(spec.short)
    decls.append(param_name(spec.name))

    kwargs: dict[str, Any] = {"help": spec.help, "envvar": spec.env, "show_envvar": True}
    if spec.kind is FlagKind.BOOL:
        kwargs.update(is_flag=True, default=spec.default)
    elif spec.kind is FlagKind.INT:
        kwargs.update(type=int, default=spec.default, show_default=True)
    elif spec.kind is FlagKind.DURATION:
        kwargs.update(type=DURATION, default=spec.default)
    elif spec.kind is FlagKind.STRING_ARRAY:
        kwargs.update(multiple=True, default=tuple(spec.default or ()))
    else:
        kwargs.update(type=str, default=spec.default, show_default=bool(spec.default))
    return decls, kwargs


def build_options(store: FlagStore) -> list[click.Option]:
    """Return one ``click.Option`` per registered flag, in registration order."""
    options = []
    for flag in store:
        decls, kwargs = _option_args(flag.spec)
        options.append(click.Option(decls, **kwargs))
    return options


def daemon_flags(fn: F) -> F:
    """Decorator attaching every daemon flag to a click command."""
    specs = [flag.spec for flag in default_store()]
    # click applies option decorators bottom-up
    for spec in reversed(specs):
        decls, kwargs = _option_args(spec)
        fn = click.option(*decls, **kwargs)(fn)
    return fn


# ---------------------------------------------------------------------------
# click context -> store
# ---------------------------------------------------------------------------


def _flag_source(source: ParameterSource | None) -> FlagSource:
    if source is None or source is ParameterSource.DEFAULT:
        return FlagSource.DEFAULT
    if source in (ParameterSource.ENVIRONMENT, ParameterSource.DEFAULT_MAP):
        return FlagSource.ENVIRONMENT
    return FlagSource.COMMANDLINE


def store_from_context(ctx: click.Context, store: FlagStore | None = None) -> FlagStore:
    """Copy parsed values and their provenance from *ctx* into *store*."""
    store = store if store is not None else default_store()
    for flag in store:
        name = param_name(flag.name)
        if name not in ctx.params:
            continue
        source = _flag_source(ctx.get_parameter_source(name))
        store.load(flag.name, ctx.params[name], source)
    return store


def parse_args(argv: Sequence[str], store: FlagStore | None = None) -> FlagStore:
    """
    Parse *argv* (and bound environment variables) into a flag store.

    Bad values and unknown options raise :class:`ConfigError`, so library
    callers see the same error type as the rest of the resolution steps.
    """
    store = store if store is not None else default_store()
    command = click.Command("shipwatch", params=build_options(store))
    try:
        with command.make_context("shipwatch", list(argv)) as ctx:
            return store_from_context(ctx, store)
    except click.ClickException as exc:
        raise ConfigError(exc.format_message()) from exc
