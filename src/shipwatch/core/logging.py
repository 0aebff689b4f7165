"""Logging setup for the shipwatch CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_LEVELS = {
    "panic": logging.CRITICAL,
    "fatal": logging.CRITICAL,
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": logging.DEBUG,
}


def to_logging_level(level: str) -> int:
    return _LEVELS.get(level.lower(), logging.INFO)


def configure_logging(level: str = "info") -> None:
    """Route log records to stderr through rich at the given daemon log level."""
    logging.basicConfig(
        level=to_logging_level(level),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
