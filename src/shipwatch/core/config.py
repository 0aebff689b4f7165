"""shipwatch configuration: the resolved, read-only view of the flag store."""

from __future__ import annotations

from datetime import timedelta
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, SecretStr, ValidationError, field_validator

from shipwatch.core.exceptions import ConfigError
from shipwatch.core.flags.store import FlagStore


class LogLevel(StrEnum):
    PANIC = "panic"
    FATAL = "fatal"
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"
    TRACE = "trace"


# ---------------------------------------------------------------------------
# Sub-models
# ---------------------------------------------------------------------------


class DockerSettings(BaseModel):
    host: str
    tls_verify: bool = False
    api_version: str = ""


class EmailSettings(BaseModel):
    sender: str = ""
    recipient: str = ""
    server: str = ""
    server_port: int = 25
    server_user: str = ""
    server_password: SecretStr = SecretStr("")

    @field_validator("server_port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if not (0 < v < 65536):
            raise ValueError("notification-email-server-port must be between 1 and 65535")
        return v


class NotificationSettings(BaseModel):
    types: list[str] = Field(default_factory=list)
    level: LogLevel = LogLevel.INFO
    urls: list[SecretStr] = Field(default_factory=list)
    report: bool = False
    log_stdout: bool = False
    template: str = ""
    email: EmailSettings = Field(default_factory=EmailSettings)
    slack_hook_url: SecretStr = SecretStr("")
    slack_identifier: str = ""
    msteams_hook: SecretStr = SecretStr("")
    gotify_url: str = ""
    gotify_token: SecretStr = SecretStr("")


class RunOptions(BaseModel):
    cleanup: bool = False
    no_restart: bool = False
    monitor_only: bool = False
    stop_timeout: timedelta = timedelta(seconds=10)

    @field_validator("stop_timeout")
    @classmethod
    def validate_timeout(cls, v: timedelta) -> timedelta:
        if v < timedelta(0):
            raise ValueError("Please specify a positive value for timeout value.")
        return v


class HTTPAPISettings(BaseModel):
    update: bool = False
    token: SecretStr = SecretStr("")
    periodic_polls: bool = False


# ---------------------------------------------------------------------------
# Root config
# ---------------------------------------------------------------------------


class ResolvedConfig(BaseModel):
    """Everything the daemon's collaborators read once startup is done."""

    docker: DockerSettings
    schedule: str
    run_once: bool = False
    log_level: LogLevel = LogLevel.INFO
    run: RunOptions = Field(default_factory=RunOptions)
    notifications: NotificationSettings = Field(default_factory=NotificationSettings)
    http_api: HTTPAPISettings = Field(default_factory=HTTPAPISettings)
    porcelain: str = ""


# ---------------------------------------------------------------------------
# Store -> model
# ---------------------------------------------------------------------------


def _validate(model: type[BaseModel], data: dict[str, Any]) -> Any:
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


def read_flags(flags: FlagStore) -> RunOptions:
    """Read the update behaviour flags. Raises :class:`ConfigError`."""
    return _validate(
        RunOptions,
        {
            "cleanup": flags.get_bool("cleanup"),
            "no_restart": flags.get_bool("no-restart"),
            "monitor_only": flags.get_bool("monitor-only"),
            "stop_timeout": flags.get_duration("stop-timeout"),
        },
    )


def build_config(flags: FlagStore) -> ResolvedConfig:
    """Snapshot a fully resolved flag store into a :class:`ResolvedConfig`."""
    data = {
        "docker": {
            "host": flags.get_string("host"),
            "tls_verify": flags.get_bool("tlsverify"),
            "api_version": flags.get_string("api-version"),
        },
        "schedule": flags.get_string("schedule"),
        "run_once": flags.get_bool("run-once"),
        "log_level": flags.get_string("log-level").lower(),
        "run": read_flags(flags),
        "notifications": {
            "types": flags.get_string_array("notifications"),
            "level": flags.get_string("notification-level").lower(),
            "urls": flags.get_string_array("notification-url"),
            "report": flags.get_bool("notification-report"),
            "log_stdout": flags.get_bool("notification-log-stdout"),
            "template": flags.get_string("notification-template"),
            "email": {
                "sender": flags.get_string("notification-email-from"),
                "recipient": flags.get_string("notification-email-to"),
                "server": flags.get_string("notification-email-server"),
                "server_port": flags.get_int("notification-email-server-port"),
                "server_user": flags.get_string("notification-email-server-user"),
                "server_password": flags.get_string("notification-email-server-password"),
            },
            "slack_hook_url": flags.get_string("notification-slack-hook-url"),
            "slack_identifier": flags.get_string("notification-slack-identifier"),
            "msteams_hook": flags.get_string("notification-msteams-hook"),
            "gotify_url": flags.get_string("notification-gotify-url"),
            "gotify_token": flags.get_string("notification-gotify-token"),
        },
        "http_api": {
            "update": flags.get_bool("http-api-update"),
            "token": flags.get_string("http-api-token"),
            "periodic_polls": flags.get_bool("http-api-periodic-polls"),
        },
        "porcelain": flags.get_string("porcelain"),
    }
    return _validate(ResolvedConfig, data)


# ---------------------------------------------------------------------------
# Presentation
# ---------------------------------------------------------------------------


def mask(value: str) -> str:
    """Mask a secret value, showing first 4 and last 4 chars."""
    if not value:
        return ""
    if len(value) <= 12:
        return "***"
    return value[:4] + "***" + value[-4:]


def config_to_dict(cfg: ResolvedConfig, redact: bool = True) -> dict[str, Any]:
    """Serialize *cfg* to a JSON-friendly dict with optional redaction."""

    def secret(value: SecretStr) -> str:
        raw = value.get_secret_value()
        return mask(raw) if redact else raw

    notif = cfg.notifications
    return {
        "docker": cfg.docker.model_dump(),
        "schedule": cfg.schedule,
        "run_once": cfg.run_once,
        "log_level": str(cfg.log_level),
        "run": {
            "cleanup": cfg.run.cleanup,
            "no_restart": cfg.run.no_restart,
            "monitor_only": cfg.run.monitor_only,
            "stop_timeout_seconds": cfg.run.stop_timeout.total_seconds(),
        },
        "notifications": {
            "types": notif.types,
            "level": str(notif.level),
            "urls": [secret(u) for u in notif.urls],
            "report": notif.report,
            "log_stdout": notif.log_stdout,
            "template": notif.template,
            "email": {
                "from": notif.email.sender,
                "to": notif.email.recipient,
                "server": notif.email.server,
                "server_port": notif.email.server_port,
                "server_user": notif.email.server_user,
                "server_password": secret(notif.email.server_password),
            },
            "slack_hook_url": secret(notif.slack_hook_url),
            "slack_identifier": notif.slack_identifier,
            "msteams_hook": secret(notif.msteams_hook),
            "gotify_url": notif.gotify_url,
            "gotify_token": secret(notif.gotify_token),
        },
        "http_api": {
            "update": cfg.http_api.update,
            "token": secret(cfg.http_api.token),
            "periodic_polls": cfg.http_api.periodic_polls,
        },
        "porcelain": cfg.porcelain,
    }
