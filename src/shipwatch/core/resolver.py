"""
Startup sequence: turn a parsed flag store into a :class:`ResolvedConfig`.

Order matters and is fixed::

    secrets  → aliases  → log setup  → docker env  → ResolvedConfig

:func:`resolve` only raises.  :func:`resolve_or_exit` is the one place that
turns a :class:`ConfigError` into process termination, through a fatal
handler that tests can replace.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, MutableMapping
from typing import NoReturn

from shipwatch.core.config import ResolvedConfig, build_config
from shipwatch.core.constants import ExitCode
from shipwatch.core.exceptions import ConfigError
from shipwatch.core.flags.aliases import process_flag_aliases
from shipwatch.core.flags.environment import env_config
from shipwatch.core.flags.secrets import get_secrets_from_files
from shipwatch.core.flags.store import FlagStore

logger = logging.getLogger(__name__)

FatalHandler = Callable[[ConfigError], NoReturn]
LogSetup = Callable[[str], None]


def exit_fatal(exc: ConfigError) -> NoReturn:
    """Log *exc* once and terminate with the configuration-error exit code."""
    logger.critical("%s", exc)
    sys.exit(ExitCode.CONFIG_ERROR)


def resolve(
    flags: FlagStore,
    env: MutableMapping[str, str] | None = None,
    log_setup: LogSetup | None = None,
) -> ResolvedConfig:
    """
    Run every resolution step over *flags* in place.

    *log_setup*, when given, is called with the effective log level as soon
    as the ``--debug``/``--trace`` aliases have been folded in.
    """
    get_secrets_from_files(flags)
    process_flag_aliases(flags)
    if log_setup is not None:
        log_setup(flags.get_string("log-level"))
    env_config(flags, env)
    return build_config(flags)


def resolve_or_exit(
    flags: FlagStore,
    env: MutableMapping[str, str] | None = None,
    fatal: FatalHandler = exit_fatal,
    log_setup: LogSetup | None = None,
) -> ResolvedConfig:
    try:
        return resolve(flags, env, log_setup)
    except ConfigError as exc:
        fatal(exc)
