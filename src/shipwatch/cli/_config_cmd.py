"""CLI commands: shipwatch config show | validate | env."""

from __future__ import annotations

import json
import os

import click
from rich.console import Console

from shipwatch.core.config import ResolvedConfig
from shipwatch.core.constants import (
    DOCKER_API_VERSION_ENV,
    DOCKER_HOST_ENV,
    DOCKER_TLS_VERIFY_ENV,
)
from shipwatch.core.flags import daemon_flags, store_from_context
from shipwatch.core.logging import configure_logging
from shipwatch.core.resolver import resolve_or_exit

console = Console()


def _resolve(ctx: click.Context, env: dict[str, str] | None = None) -> ResolvedConfig:
    store = store_from_context(ctx)
    # Never export into the real environment from an inspection command
    sink = dict(os.environ) if env is None else env
    return resolve_or_exit(store, sink, log_setup=configure_logging)


@click.group("config")
def config_group() -> None:
    """Inspect the configuration the daemon would start with."""


@config_group.command("show")
@click.option("--json", "as_json", is_flag=True, default=False, help="Output as JSON")
@click.option("--redact/--no-redact", default=True, help="Redact secrets (default: redact)")
@daemon_flags
@click.pass_context
def config_show(ctx: click.Context, as_json: bool, redact: bool, **_: object) -> None:
    """Display the resolved configuration."""
    from shipwatch.core.config import config_to_dict

    cfg = _resolve(ctx)
    data = config_to_dict(cfg, redact=redact)

    if as_json:
        click.echo(json.dumps(data, indent=2))
    else:
        _print_config_rich(data, console)


@config_group.command("validate")
@daemon_flags
@click.pass_context
def config_validate(ctx: click.Context, **_: object) -> None:
    """Check that the flags and environment resolve without conflicts."""
    cfg = _resolve(ctx)
    console.print(f"[green]Config is valid.[/green] Schedule: {cfg.schedule}")


@config_group.command("env")
@daemon_flags
@click.pass_context
def config_env(ctx: click.Context, **_: object) -> None:
    """Print the Docker client variables the daemon would export."""
    sink: dict[str, str] = {}
    for key in (DOCKER_HOST_ENV, DOCKER_TLS_VERIFY_ENV, DOCKER_API_VERSION_ENV):
        if value := os.environ.get(key):
            sink[key] = value
    _resolve(ctx, sink)
    for key in (DOCKER_HOST_ENV, DOCKER_TLS_VERIFY_ENV, DOCKER_API_VERSION_ENV):
        if key in sink:
            click.echo(f"{key}={sink[key]}")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _print_config_rich(data, console):
    """Print config dict in a human-friendly format."""
    console.print("[bold]shipwatch configuration[/bold]\n")

    for section, values in data.items():
        if isinstance(values, dict):
            console.print(f"  [cyan][{section}][/cyan]")
            for k, v in values.items():
                console.print(f"    {k} = {v!r}")
        else:
            console.print(f"  {section} = {values!r}")
    console.print()
