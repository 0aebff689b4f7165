"""
Secret materialization for secret-bearing flags.

Any secret-bearing flag may hold either the secret itself or the path to a
file containing it (the Docker / Kubernetes secrets convention).  Paths are
replaced by the file contents in place; URLs are never probed on disk.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable
from enum import StrEnum
from pathlib import Path

from shipwatch.core.constants import SECRET_FLAGS
from shipwatch.core.exceptions import SecretReadError
from shipwatch.core.flags.store import FlagKind, FlagStore

logger = logging.getLogger(__name__)

# Two or more scheme characters, so Windows drive letters (c:\...) are not schemes
_URL_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]+:")


class ValueKind(StrEnum):
    URL = "url"
    FILE = "file"
    LITERAL = "literal"


def classify_value(value: str) -> ValueKind:
    """Classify *value*; the scheme check runs before any filesystem probe."""
    if _URL_SCHEME_RE.match(value):
        return ValueKind.URL
    if value and os.path.isfile(value):
        return ValueKind.FILE
    return ValueKind.LITERAL


def is_file(value: str) -> bool:
    return classify_value(value) is ValueKind.FILE


def _read(flag: str, path: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SecretReadError(flag, path, str(exc)) from exc


def get_secret_from_file(flags: FlagStore, name: str) -> None:
    """Replace the value of flag *name* with file contents where it names a file."""
    flag = flags.lookup(name)

    if flag.kind is FlagKind.STRING_ARRAY:
        values: list[str] = []
        for value in flags.get_string_array(name):
            if is_file(value):
                logger.debug("Reading secret entries for %s from file", name)
                lines = (line.rstrip("\r") for line in _read(name, value).split("\n"))
                values.extend(line for line in lines if line)
            else:
                values.append(value)
        flags.replace(name, values)
        return

    value = flags.get_string(name)
    if is_file(value):
        logger.debug("Reading secret for %s from file", name)
        flags.replace(name, _read(name, value).strip())


def get_secrets_from_files(flags: FlagStore, names: Iterable[str] = SECRET_FLAGS) -> None:
    """Materialize every secret-bearing flag. Raises :class:`SecretReadError`."""
    for name in names:
        get_secret_from_file(flags, name)
