"""
Flag store: named, typed flag values with their provenance.

Every flag carries the value it currently holds and a :class:`FlagSource`
recording where that value came from.  The distinction matters to the alias
rules: a flag the user typed on the command line is *changed*, a flag filled
from an environment variable is merely *supplied*, and a flag still holding
its compiled-in value is *default*.

The store is created once per process, populated by the parser, then mutated
in place by secret resolution and alias processing.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import timedelta
from enum import StrEnum
from typing import Any

from shipwatch.core.exceptions import FlagLookupError


class FlagKind(StrEnum):
    STRING = "string"
    BOOL = "bool"
    INT = "int"
    DURATION = "duration"
    STRING_ARRAY = "string_array"


class FlagSource(StrEnum):
    DEFAULT = "default"
    ENVIRONMENT = "environment"
    COMMANDLINE = "commandline"
    OVERRIDE = "override"  # set programmatically after parsing


_PYTHON_TYPES: dict[FlagKind, type | tuple[type, ...]] = {
    FlagKind.STRING: str,
    FlagKind.BOOL: bool,
    FlagKind.INT: int,
    FlagKind.DURATION: timedelta,
    FlagKind.STRING_ARRAY: list,
}


@dataclass(frozen=True)
class FlagSpec:
    """Declaration of a single flag."""

    name: str
    kind: FlagKind
    default: Any
    help: str = ""
    env: str | None = None
    short: str | None = None
    secret: bool = False


@dataclass
class Flag:
    spec: FlagSpec
    value: Any
    source: FlagSource = FlagSource.DEFAULT

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def kind(self) -> FlagKind:
        return self.spec.kind

    @property
    def changed(self) -> bool:
        """True when the user (or alias processing) set the flag explicitly."""
        return self.source in (FlagSource.COMMANDLINE, FlagSource.OVERRIDE)

    @property
    def supplied(self) -> bool:
        """True when the value did not come from the compiled-in default."""
        return self.source is not FlagSource.DEFAULT


@dataclass
class FlagStore:
    """Ordered mapping of flag name to :class:`Flag`."""

    _flags: dict[str, Flag] = field(default_factory=dict)

    # ------------------------------------------------------------------
    # Registration and lookup
    # ------------------------------------------------------------------

    def register(self, spec: FlagSpec) -> Flag:
        if spec.name in self._flags:
            raise ValueError(f"flag redefined: {spec.name}")
        flag = Flag(spec=spec, value=_copy_default(spec))
        self._flags[spec.name] = flag
        return flag

    def lookup(self, name: str) -> Flag:
        try:
            return self._flags[name]
        except KeyError:
            raise FlagLookupError(f"flag accessed but not defined: {name}") from None

    def __contains__(self, name: object) -> bool:
        return name in self._flags

    def __iter__(self) -> Iterator[Flag]:
        return iter(self._flags.values())

    def __len__(self) -> int:
        return len(self._flags)

    def names(self) -> list[str]:
        return list(self._flags)

    # ------------------------------------------------------------------
    # Typed getters
    # ------------------------------------------------------------------

    def get_string(self, name: str) -> str:
        return self._get(name, FlagKind.STRING)

    def get_bool(self, name: str) -> bool:
        return self._get(name, FlagKind.BOOL)

    def get_int(self, name: str) -> int:
        return self._get(name, FlagKind.INT)

    def get_duration(self, name: str) -> timedelta:
        return self._get(name, FlagKind.DURATION)

    def get_string_array(self, name: str) -> list[str]:
        return list(self._get(name, FlagKind.STRING_ARRAY))

    def _get(self, name: str, kind: FlagKind) -> Any:
        flag = self.lookup(name)
        if flag.kind is not kind:
            raise FlagLookupError(
                f"trying to get {kind} value of flag of type {flag.kind}: {name}"
            )
        return flag.value

    # ------------------------------------------------------------------
    # Provenance
    # ------------------------------------------------------------------

    def changed(self, name: str) -> bool:
        return self.lookup(name).changed

    def supplied(self, name: str) -> bool:
        return self.lookup(name).supplied

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def load(self, name: str, value: Any, source: FlagSource) -> None:
        """Store a parsed value together with the source it came from."""
        flag = self.lookup(name)
        flag.value = _coerce(flag, value)
        flag.source = source

    def set(self, name: str, value: Any) -> None:
        """Set *name* as if the user had passed it explicitly."""
        self.load(name, value, FlagSource.OVERRIDE)

    def set_unless_changed(self, name: str, value: Any) -> bool:
        """Set *name* only when the user did not set it. Returns True if set."""
        if self.changed(name):
            return False
        self.set(name, value)
        return True

    def replace(self, name: str, value: Any) -> None:
        """Swap the value of *name* without touching its source."""
        flag = self.lookup(name)
        flag.value = _coerce(flag, value)

    def append_unique(self, name: str, value: str) -> bool:
        """Append *value* to an array flag unless already present."""
        values = self.get_string_array(name)
        if value in values:
            return False
        flag = self.lookup(name)
        flag.value = [*values, value]
        return True


def _copy_default(spec: FlagSpec) -> Any:
    if spec.kind is FlagKind.STRING_ARRAY:
        return list(spec.default or ())
    return spec.default


def _coerce(flag: Flag, value: Any) -> Any:
    if flag.kind is FlagKind.STRING_ARRAY:
        if isinstance(value, str):
            raise FlagLookupError(f"flag {flag.name} expects a list of strings, got {value!r}")
        return [str(v) for v in value]
    expected = _PYTHON_TYPES[flag.kind]
    # bool is a subclass of int; keep the two apart
    if flag.kind is FlagKind.INT and isinstance(value, bool):
        raise FlagLookupError(f"flag {flag.name} expects {flag.kind}, got {value!r}")
    if not isinstance(value, expected):
        raise FlagLookupError(f"flag {flag.name} expects {flag.kind}, got {value!r}")
    return value
