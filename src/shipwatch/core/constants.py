"""shipwatch constants: exit codes, defaults, and flag groups."""

from __future__ import annotations

from enum import IntEnum

# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------


class ExitCode(IntEnum):
    SUCCESS = 0
    ERROR = 1
    CONFIG_ERROR = 2


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

ENV_PREFIX = "WATCHTOWER_"

DOCKER_HOST_ENV = "DOCKER_HOST"
DOCKER_TLS_VERIFY_ENV = "DOCKER_TLS_VERIFY"
DOCKER_API_VERSION_ENV = "DOCKER_API_VERSION"

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_DOCKER_HOST = "unix:///var/run/docker.sock"
DOCKER_API_MIN_VERSION = "1.25"
DEFAULT_INTERVAL_SECONDS = 24 * 60 * 60
DEFAULT_STOP_TIMEOUT_SECONDS = 10
DEFAULT_LOG_LEVEL = "info"
DEFAULT_NOTIFICATION_LEVEL = "info"
DEFAULT_EMAIL_SERVER_PORT = 25
DEFAULT_SLACK_IDENTIFIER = "watchtower"

# ---------------------------------------------------------------------------
# Notifications
# ---------------------------------------------------------------------------

LOGGER_NOTIFICATION_URL = "logger://"
PORCELAIN_TEMPLATE = "porcelain.{version}.summary-no-log"

# Flags whose value may be a path to a file holding the real value
SECRET_FLAGS = (
    "notification-email-server-password",
    "notification-slack-hook-url",
    "notification-msteams-hook",
    "notification-gotify-token",
    "notification-url",
    "http-api-token",
)


def interval_schedule(seconds: int) -> str:
    """Return the fixed-rate schedule expression for *seconds*."""
    return f"@every {seconds}s"


DEFAULT_SCHEDULE = interval_schedule(DEFAULT_INTERVAL_SECONDS)
