"""Unit tests for parsing argv and environment into the flag store."""

from __future__ import annotations

from datetime import timedelta

import pytest

from shipwatch.core.constants import DEFAULT_DOCKER_HOST, DEFAULT_SCHEDULE
from shipwatch.core.exceptions import ConfigError
from shipwatch.core.flags.parser import parse_args, parse_duration
from shipwatch.core.flags.store import FlagSource


class TestParseDuration:
    def test_go_style_units(self) -> None:
        assert parse_duration("10s") == timedelta(seconds=10)
        assert parse_duration("1m30s") == timedelta(seconds=90)
        assert parse_duration("2h") == timedelta(hours=2)
        assert parse_duration("1.5s") == timedelta(seconds=1.5)
        assert parse_duration("250ms") == timedelta(milliseconds=250)

    def test_bare_integer_is_seconds(self) -> None:
        assert parse_duration("30") == timedelta(seconds=30)

    def test_negative(self) -> None:
        assert parse_duration("-5s") == timedelta(seconds=-5)

    @pytest.mark.parametrize("text", ["", "ten", "5d", "s", "1h-2m"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_duration(text)


class TestParseArgs:
    def test_defaults(self) -> None:
        flags = parse_args([])
        assert flags.get_string("host") == DEFAULT_DOCKER_HOST
        assert flags.get_string("schedule") == DEFAULT_SCHEDULE
        assert flags.get_string_array("notification-url") == []
        assert all(flag.source is FlagSource.DEFAULT for flag in flags)

    def test_commandline_values_are_changed(self) -> None:
        flags = parse_args(["--host", "tcp://remote:2375", "--interval", "30"])
        assert flags.get_string("host") == "tcp://remote:2375"
        assert flags.get_int("interval") == 30
        assert flags.changed("host")
        assert flags.changed("interval")
        assert not flags.changed("schedule")

    def test_short_options(self) -> None:
        flags = parse_args(["-H", "tcp://h", "-i", "5", "-c"])
        assert flags.get_string("host") == "tcp://h"
        assert flags.get_int("interval") == 5
        assert flags.get_bool("cleanup") is True

    def test_environment_values_are_supplied_only(self, monkeypatch) -> None:
        monkeypatch.setenv("WATCHTOWER_SCHEDULE", "@hourly")
        flags = parse_args([])
        assert flags.get_string("schedule") == "@hourly"
        assert flags.lookup("schedule").source is FlagSource.ENVIRONMENT
        assert flags.supplied("schedule")
        assert not flags.changed("schedule")

    def test_poll_interval_env(self, monkeypatch) -> None:
        monkeypatch.setenv("WATCHTOWER_POLL_INTERVAL", "60")
        flags = parse_args([])
        assert flags.get_int("interval") == 60

    def test_repeated_array_flag(self) -> None:
        flags = parse_args(["--notification-url", "a://1", "--notification-url", "b://2"])
        assert flags.get_string_array("notification-url") == ["a://1", "b://2"]

    def test_array_flag_from_env_splits_on_whitespace(self, monkeypatch) -> None:
        monkeypatch.setenv("WATCHTOWER_NOTIFICATION_URL", "a://1 b://2")
        flags = parse_args([])
        assert flags.get_string_array("notification-url") == ["a://1", "b://2"]

    def test_duration_flag(self) -> None:
        flags = parse_args(["--stop-timeout", "1m"])
        assert flags.get_duration("stop-timeout") == timedelta(minutes=1)

    def test_invalid_duration_is_config_error(self) -> None:
        with pytest.raises(ConfigError, match="soon"):
            parse_args(["--stop-timeout", "soon"])

    def test_unknown_flag_is_config_error(self) -> None:
        with pytest.raises(ConfigError, match="--no-such-flag"):
            parse_args(["--no-such-flag"])

    def test_invalid_interval_is_config_error(self) -> None:
        with pytest.raises(ConfigError):
            parse_args(["--interval", "abc"])

    def test_invalid_interval_from_env_is_config_error(self, monkeypatch) -> None:
        monkeypatch.setenv("WATCHTOWER_POLL_INTERVAL", "x")
        with pytest.raises(ConfigError):
            parse_args([])

    def test_http_api_periodic_polls(self) -> None:
        flags = parse_args(["--http-api-periodic-polls"])
        assert flags.get_bool("http-api-periodic-polls") is True
