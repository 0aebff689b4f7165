"""
Alias processing: fold convenience and legacy flags into canonical ones.

Runs once after parsing and secret resolution:

  --porcelain <v>   → notification-url += logger://, log-stdout, report, template
  --interval <n>    → --schedule "@every <n>s" (mutually exclusive with --schedule)
  --debug/--trace   → --log-level debug/trace

Contradictions raise :class:`ConfigConflictError`; the caller decides
whether that ends the process.
"""

from __future__ import annotations

import logging
from enum import StrEnum

from shipwatch.core.constants import (
    DEFAULT_INTERVAL_SECONDS,
    LOGGER_NOTIFICATION_URL,
    PORCELAIN_TEMPLATE,
    interval_schedule,
)
from shipwatch.core.exceptions import ConfigConflictError
from shipwatch.core.flags.store import FlagStore

logger = logging.getLogger(__name__)


class PorcelainVersion(StrEnum):
    V1 = "v1"

    @classmethod
    def parse(cls, token: str) -> PorcelainVersion:
        try:
            return cls(token)
        except ValueError:
            supported = ", ".join(f'"{v}"' for v in cls)
            raise ConfigConflictError(
                f"Unknown porcelain version {token!r}. Supported values: {supported}"
            ) from None

    @property
    def template(self) -> str:
        return PORCELAIN_TEMPLATE.format(version=self.value)


def _apply_porcelain(flags: FlagStore, version: PorcelainVersion) -> None:
    flags.append_unique("notification-url", LOGGER_NOTIFICATION_URL)
    flags.set_unless_changed("notification-log-stdout", True)
    flags.set_unless_changed("notification-report", True)
    flags.set_unless_changed("notification-template", version.template)


def _resolve_schedule(flags: FlagStore) -> None:
    schedule_given = flags.supplied("schedule")
    interval = flags.get_int("interval")
    interval_given = flags.supplied("interval") or interval != DEFAULT_INTERVAL_SECONDS

    if schedule_given and interval_given:
        raise ConfigConflictError("Only schedule or interval can be defined, not both.")

    if interval_given:
        flags.set("schedule", interval_schedule(interval))


def process_flag_aliases(flags: FlagStore) -> None:
    """Reconcile alias flags in *flags*. Raises :class:`ConfigConflictError`."""
    porcelain = flags.get_string("porcelain")
    if porcelain:
        _apply_porcelain(flags, PorcelainVersion.parse(porcelain))

    _resolve_schedule(flags)

    if flags.get_bool("debug"):
        flags.set("log-level", "debug")
    if flags.get_bool("trace"):
        flags.set("log-level", "trace")

    logger.debug("Effective schedule: %s", flags.get_string("schedule"))
