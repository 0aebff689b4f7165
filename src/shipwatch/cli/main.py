"""
shipwatch CLI entry point.

Commands:
  shipwatch config show [flags]      — resolved configuration (secrets redacted)
  shipwatch config validate [flags]  — fail on conflicting or unreadable settings
  shipwatch config env [flags]       — Docker client variables that would be exported
  shipwatch --version                — show version
"""

from __future__ import annotations

import click

from shipwatch import __version__
from shipwatch.cli._config_cmd import config_group
from shipwatch.core.logging import configure_logging

# ---------------------------------------------------------------------------
# Root group
# ---------------------------------------------------------------------------


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "--version", "-V", message="shipwatch %(version)s")
def cli() -> None:
    """shipwatch — configuration resolver for the container-update daemon."""
    # Raised to the resolved --log-level once the flags are processed
    configure_logging()


cli.add_command(config_group)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
