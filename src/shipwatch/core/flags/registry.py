"""Flag declarations for the daemon, grouped the way the help output groups them."""

from __future__ import annotations

from datetime import timedelta

from shipwatch.core.constants import (
    DEFAULT_DOCKER_HOST,
    DEFAULT_EMAIL_SERVER_PORT,
    DEFAULT_INTERVAL_SECONDS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_NOTIFICATION_LEVEL,
    DEFAULT_SCHEDULE,
    DEFAULT_SLACK_IDENTIFIER,
    DEFAULT_STOP_TIMEOUT_SECONDS,
    DOCKER_API_MIN_VERSION,
    DOCKER_API_VERSION_ENV,
    DOCKER_HOST_ENV,
    DOCKER_TLS_VERIFY_ENV,
    ENV_PREFIX,
    SECRET_FLAGS,
)
from shipwatch.core.flags.store import FlagKind, FlagSpec, FlagStore


def env_name(flag: str) -> str:
    """Return the conventional environment variable bound to *flag*."""
    return ENV_PREFIX + flag.upper().replace("-", "_")


def _spec(
    name: str,
    kind: FlagKind,
    default: object,
    help: str,
    *,
    env: str | None = None,
    short: str | None = None,
) -> FlagSpec:
    return FlagSpec(
        name=name,
        kind=kind,
        default=default,
        help=help,
        env=env or env_name(name),
        short=short,
        secret=name in SECRET_FLAGS,
    )


# ---------------------------------------------------------------------------
# Docker connection
# ---------------------------------------------------------------------------


def register_docker_flags(store: FlagStore) -> None:
    for spec in (
        _spec(
            "host",
            FlagKind.STRING,
            DEFAULT_DOCKER_HOST,
            "Daemon socket to connect to",
            env=DOCKER_HOST_ENV,
            short="-H",
        ),
        _spec(
            "tlsverify",
            FlagKind.BOOL,
            False,
            "Use TLS and verify the remote",
            env=DOCKER_TLS_VERIFY_ENV,
            short="-v",
        ),
        _spec(
            "api-version",
            FlagKind.STRING,
            DOCKER_API_MIN_VERSION,
            "API version to use by docker client",
            env=DOCKER_API_VERSION_ENV,
            short="-a",
        ),
    ):
        store.register(spec)


# ---------------------------------------------------------------------------
# System / scheduling
# ---------------------------------------------------------------------------


def register_system_flags(store: FlagStore) -> None:
    for spec in (
        _spec(
            "interval",
            FlagKind.INT,
            DEFAULT_INTERVAL_SECONDS,
            "Poll interval (in seconds)",
            env=env_name("poll-interval"),
            short="-i",
        ),
        _spec(
            "schedule",
            FlagKind.STRING,
            DEFAULT_SCHEDULE,
            "The cron expression which defines when to update",
            short="-s",
        ),
        _spec(
            "stop-timeout",
            FlagKind.DURATION,
            timedelta(seconds=DEFAULT_STOP_TIMEOUT_SECONDS),
            "Timeout before a container is forcefully stopped",
            env=env_name("timeout"),
        ),
        _spec("cleanup", FlagKind.BOOL, False, "Remove previously used images after updating", short="-c"),
        _spec("no-restart", FlagKind.BOOL, False, "Do not restart any containers"),
        _spec("monitor-only", FlagKind.BOOL, False, "Will only monitor for new images, not update the containers"),
        _spec("run-once", FlagKind.BOOL, False, "Run once now and exit", short="-R"),
        _spec("debug", FlagKind.BOOL, False, "Enable debug mode with verbose logging", short="-d"),
        _spec("trace", FlagKind.BOOL, False, "Enable trace mode with very verbose logging - caution, exposes credentials"),
        _spec("log-level", FlagKind.STRING, DEFAULT_LOG_LEVEL, "The maximum log level that will be written to STDERR"),
        _spec("http-api-update", FlagKind.BOOL, False, "Runs in HTTP mode, only allowing image updates to be triggered by an HTTP request"),
        _spec("http-api-token", FlagKind.STRING, "", "Sets an authentication token to HTTP API requests"),
        _spec("http-api-periodic-polls", FlagKind.BOOL, False, "Also run periodic updates when HTTP API is enabled"),
        _spec("porcelain", FlagKind.STRING, "", "Write session results to stdout using a stable versioned format", short="-P"),
    ):
        store.register(spec)


# ---------------------------------------------------------------------------
# Notifications
# ---------------------------------------------------------------------------


def register_notification_flags(store: FlagStore) -> None:
    for spec in (
        _spec("notifications", FlagKind.STRING_ARRAY, [], "Notification types to send (valid: email, slack, msteams, gotify, shoutrrr)", short="-n"),
        _spec("notification-level", FlagKind.STRING, DEFAULT_NOTIFICATION_LEVEL, "The log level used for sending notifications"),
        _spec("notification-url", FlagKind.STRING_ARRAY, [], "The shoutrrr URL to send notifications to"),
        _spec("notification-report", FlagKind.BOOL, False, "Use the session report as the notification template data"),
        _spec("notification-log-stdout", FlagKind.BOOL, False, "Write notification logs to stdout instead of logging (to stderr)"),
        _spec("notification-template", FlagKind.STRING, "", "The shoutrrr text/template for the messages"),
        _spec("notification-email-from", FlagKind.STRING, "", "Address to send notification emails from"),
        _spec("notification-email-to", FlagKind.STRING, "", "Address to send notification emails to"),
        _spec("notification-email-server", FlagKind.STRING, "", "SMTP server to send notification emails through"),
        _spec("notification-email-server-port", FlagKind.INT, DEFAULT_EMAIL_SERVER_PORT, "SMTP server port to send notification emails through"),
        _spec("notification-email-server-user", FlagKind.STRING, "", "SMTP server user for sending notifications"),
        _spec("notification-email-server-password", FlagKind.STRING, "", "SMTP server password for sending notifications"),
        _spec("notification-slack-hook-url", FlagKind.STRING, "", "The Slack Hook URL to send notifications to"),
        _spec("notification-slack-identifier", FlagKind.STRING, DEFAULT_SLACK_IDENTIFIER, "A string which will be used to identify the messages coming from this instance"),
        _spec("notification-msteams-hook", FlagKind.STRING, "", "The MSTeams WebHook URL to send notifications to"),
        _spec("notification-gotify-url", FlagKind.STRING, "", "The Gotify URL to send notifications to"),
        _spec("notification-gotify-token", FlagKind.STRING, "", "The Gotify Application required to query the Gotify API"),
    ):
        store.register(spec)


def default_store() -> FlagStore:
    """Return a store with every daemon flag registered at its default."""
    store = FlagStore()
    register_docker_flags(store)
    register_system_flags(store)
    register_notification_flags(store)
    return store
