"""Integration tests for the shipwatch config commands."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

from shipwatch import __version__
from shipwatch.cli.main import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestConfigShow:
    def test_help_lists_commands(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["config", "--help"], catch_exceptions=False)
        assert result.exit_code == 0
        assert "show" in result.output
        assert "validate" in result.output
        assert "env" in result.output

    def test_show_json(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            ["config", "show", "--json", "--porcelain", "v1", "--interval", "10"],
            catch_exceptions=False,
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["schedule"] == "@every 10s"
        assert data["notifications"]["template"] == "porcelain.v1.summary-no-log"

    def test_show_schedule_from_env(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            ["config", "show", "--json"],
            env={"WATCHTOWER_SCHEDULE": "@hourly"},
            catch_exceptions=False,
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout)["schedule"] == "@hourly"

    def test_show_redacts_file_secret(self, runner: CliRunner, tmp_path: Path) -> None:
        secret = tmp_path / "password"
        secret.write_text("a-very-long-smtp-password\n")
        result = runner.invoke(
            cli,
            ["config", "show", "--json", "--notification-email-server-password", str(secret)],
            catch_exceptions=False,
        )
        data = json.loads(result.stdout)
        assert data["notifications"]["email"]["server_password"] == "a-ve***word"

    def test_show_no_redact(self, runner: CliRunner, tmp_path: Path) -> None:
        secret = tmp_path / "password"
        secret.write_text("a-very-long-smtp-password\n")
        result = runner.invoke(
            cli,
            [
                "config",
                "show",
                "--json",
                "--no-redact",
                "--notification-email-server-password",
                str(secret),
            ],
            catch_exceptions=False,
        )
        data = json.loads(result.stdout)
        assert data["notifications"]["email"]["server_password"] == "a-very-long-smtp-password"


class TestConfigValidate:
    def test_valid(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["config", "validate"], catch_exceptions=False)
        assert result.exit_code == 0
        assert "valid" in result.stdout.lower()

    def test_schedule_and_interval_conflict(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["config", "validate", "--schedule", "@hourly", "--interval", "10"]
        )
        assert result.exit_code == 2

    def test_unknown_porcelain(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["config", "validate", "--porcelain", "cowboy"])
        assert result.exit_code == 2


class TestConfigEnv:
    def test_exports_docker_variables(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            ["config", "env", "--host", "tcp://remote:2375", "--tlsverify"],
            catch_exceptions=False,
        )
        assert result.exit_code == 0
        assert "DOCKER_HOST=tcp://remote:2375" in result.stdout
        assert "DOCKER_TLS_VERIFY=1" in result.stdout

    def test_default_host(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["config", "env"], catch_exceptions=False)
        assert "DOCKER_HOST=unix:///var/run/docker.sock" in result.stdout
        assert "DOCKER_TLS_VERIFY" not in result.stdout


class TestLogLevel:
    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        level, handlers = root.level, root.handlers[:]
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_default_is_info(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["config", "validate"], catch_exceptions=False)
        assert result.exit_code == 0
        assert logging.getLogger().level == logging.INFO

    @pytest.mark.parametrize("flag", ["--debug", "--trace"])
    def test_alias_raises_verbosity(self, runner: CliRunner, flag: str) -> None:
        result = runner.invoke(cli, ["config", "validate", flag], catch_exceptions=False)
        assert result.exit_code == 0
        assert logging.getLogger().level == logging.DEBUG

    def test_conflict_logged_once(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["config", "validate", "--schedule", "@hourly", "--interval", "10"]
        )
        assert result.exit_code == 2
        assert result.output.count("Only schedule or interval") == 1


def test_version(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["--version"], catch_exceptions=False)
    assert result.exit_code == 0
    assert result.output.strip() == f"shipwatch {__version__}"
