from __future__ import annotations

import os

import pytest

from shipwatch.core.constants import (
    DOCKER_API_VERSION_ENV,
    DOCKER_HOST_ENV,
    DOCKER_TLS_VERIFY_ENV,
    ENV_PREFIX,
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the host's Docker and WATCHTOWER_* variables out of every test."""
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key)
    for key in (DOCKER_HOST_ENV, DOCKER_TLS_VERIFY_ENV, DOCKER_API_VERSION_ENV):
        monkeypatch.delenv(key, raising=False)
