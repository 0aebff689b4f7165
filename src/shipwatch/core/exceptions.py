"""shipwatch exception hierarchy."""

from __future__ import annotations


class ShipwatchError(Exception):
    """Base exception for all shipwatch errors."""


class ConfigError(ShipwatchError):
    """Raised when the configuration is invalid or cannot be read."""


class FlagLookupError(ConfigError):
    """Raised when a flag is not registered or is read as the wrong kind."""


class SecretReadError(ConfigError):
    """Raised when a secret-bearing flag points at a file that cannot be read."""

    def __init__(self, flag: str, path: str, reason: str) -> None:
        super().__init__(f"failed to get secret from flag {flag}: cannot read {path}: {reason}")
        self.flag = flag
        self.path = path


class ConfigConflictError(ConfigError):
    """Raised when flags contradict each other and no interpretation is safe."""
