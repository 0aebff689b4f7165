"""
shipwatch flags — typed flag store and the resolution steps applied to it.

Public API::

    from shipwatch.core.flags import parse_args, get_secrets_from_files, process_flag_aliases, env_config

    flags = parse_args(["--porcelain", "v1", "--interval", "10"])
    get_secrets_from_files(flags)
    process_flag_aliases(flags)
    env_config(flags)
"""

from shipwatch.core.flags.aliases import PorcelainVersion, process_flag_aliases
from shipwatch.core.flags.environment import env_config
from shipwatch.core.flags.parser import daemon_flags, parse_args, store_from_context
from shipwatch.core.flags.registry import (
    default_store,
    register_docker_flags,
    register_notification_flags,
    register_system_flags,
)
from shipwatch.core.flags.secrets import (
    ValueKind,
    classify_value,
    get_secret_from_file,
    get_secrets_from_files,
    is_file,
)
from shipwatch.core.flags.store import Flag, FlagKind, FlagSource, FlagSpec, FlagStore

__all__ = [
    "Flag",
    "FlagKind",
    "FlagSource",
    "FlagSpec",
    "FlagStore",
    "PorcelainVersion",
    "ValueKind",
    "classify_value",
    "daemon_flags",
    "default_store",
    "env_config",
    "get_secret_from_file",
    "get_secrets_from_files",
    "is_file",
    "parse_args",
    "process_flag_aliases",
    "register_docker_flags",
    "register_notification_flags",
    "register_system_flags",
    "store_from_context",
]
