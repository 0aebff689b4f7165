"""
shipwatch — configuration resolver for a container-update daemon.

shipwatch turns the daemon's run-time parameters, whether they arrive as
command-line flags, environment variables or secret files, into one
validated configuration before the daemon starts its update loop.

Package layout (src/shipwatch/):
  core/flags/  — flag store, flag registry, click parser, secrets, aliases, env sync
  core/        — resolved config models, startup sequence, exceptions, constants
  cli/         — Click CLI entry point
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
