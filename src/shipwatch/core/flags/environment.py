"""Mirror the Docker connection flags into the variables the Docker client reads."""

from __future__ import annotations

import logging
import os
from collections.abc import MutableMapping

from shipwatch.core.constants import (
    DOCKER_API_VERSION_ENV,
    DOCKER_HOST_ENV,
    DOCKER_TLS_VERIFY_ENV,
)
from shipwatch.core.flags.store import FlagStore

logger = logging.getLogger(__name__)


def _set_env_opt_str(
    env: MutableMapping[str, str], key: str, value: str, *, explicit: bool
) -> None:
    if not value or env.get(key) == value:
        return
    # A default never clobbers what the operator already exported
    if env.get(key) and not explicit:
        return
    logger.debug("Exporting %s", key)
    env[key] = value


def _set_env_opt_bool(
    env: MutableMapping[str, str], key: str, value: bool, *, explicit: bool
) -> None:
    if value:
        _set_env_opt_str(env, key, "1", explicit=explicit)


def env_config(flags: FlagStore, env: MutableMapping[str, str] | None = None) -> None:
    """
    Export ``--host``, ``--tlsverify`` and ``--api-version`` to *env*.

    *env* defaults to ``os.environ``.  Raises :class:`FlagLookupError` when
    one of the Docker flags is not registered.
    """
    sink = os.environ if env is None else env

    host = flags.get_string("host")
    tls = flags.get_bool("tlsverify")
    version = flags.get_string("api-version")

    _set_env_opt_str(sink, DOCKER_HOST_ENV, host, explicit=flags.changed("host"))
    _set_env_opt_bool(sink, DOCKER_TLS_VERIFY_ENV, tls, explicit=flags.changed("tlsverify"))
    _set_env_opt_str(sink, DOCKER_API_VERSION_ENV, version, explicit=flags.changed("api-version"))
