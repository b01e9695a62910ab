from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from termux_api.cli.main import app

runner = CliRunner()


@pytest.fixture
def cli_termux(fake_termux, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("TERMUX_API_BIN_DIR", str(fake_termux.root))
    return fake_termux


def test_call_prints_json(cli_termux) -> None:
    cli_termux.install("sensor", stdout='{"sensors": ["accelerometer"]}')

    result = runner.invoke(app, ["call", "--json", "sensor", "-l"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {"sensors": ["accelerometer"]}
    assert cli_termux.argv("sensor") == ["-l"]


def test_call_passes_tokens_after_command_verbatim(cli_termux, tmp_path) -> None:
    cli_termux.install("call-log", stdout="[]")

    result = runner.invoke(app, ["call", "--json", "call-log", "-l", "5", "-o", "10", "--json", "--output", "x"])

    assert result.exit_code == 0, result.output
    assert cli_termux.argv("call-log") == ["-l", "5", "-o", "10", "--json", "--output", "x"]
    assert json.loads(result.stdout) == []
    assert not (tmp_path / "x").exists()
    assert not (tmp_path / "10").exists()


def test_call_with_stdin_and_output(cli_termux, tmp_path) -> None:
    cli_termux.install("toast", stdout="done\n")
    out = tmp_path / "out" / "toast.json"

    result = runner.invoke(app, ["call", "--stdin", "hi", "--output", str(out), "toast"])

    assert result.exit_code == 0, result.output
    assert "done" in result.stdout
    assert cli_termux.stdin("toast") == "hi"
    assert json.loads(out.read_text(encoding="utf-8")) == "done"


def test_call_failure_exits_with_code_one(cli_termux) -> None:
    cli_termux.install("torch", stdout="ERROR: no flash\n")

    result = runner.invoke(app, ["call", "torch", "on"])

    assert result.exit_code == 1


def test_battery_json(cli_termux) -> None:
    cli_termux.install("battery-status", stdout='{"percentage": 64, "plugged": "PLUGGED_USB"}')

    result = runner.invoke(app, ["battery", "--json"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {"percentage": 64, "plugged": "PLUGGED_USB"}


def test_battery_table(cli_termux) -> None:
    cli_termux.install("battery-status", stdout='{"percentage": 64, "status": "CHARGING"}')

    result = runner.invoke(app, ["battery"])

    assert result.exit_code == 0, result.output
    assert "64%" in result.stdout
    assert "CHARGING" in result.stdout


def test_notify_low_battery(cli_termux) -> None:
    cli_termux.install("battery-status", stdout='{"percentage": 5, "plugged": "UNPLUGGED"}')
    cli_termux.install("notification")

    result = runner.invoke(app, ["notify-low-battery", "--threshold", "10"])

    assert result.exit_code == 0, result.output
    assert cli_termux.was_called("notification")


def test_doctor_reports_missing_commands(cli_termux) -> None:
    cli_termux.install("battery-status", stdout='{"percentage": 50}')

    result = runner.invoke(app, ["doctor", "run", "--probe"])

    assert result.exit_code == 0, result.output
    assert "PARTIAL" in result.stdout
    assert "50%" in result.stdout


def test_doctor_configure_writes_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    env_path = tmp_path / "user.env"
    monkeypatch.setattr("termux_api.cli.doctor.get_user_env_file", lambda: env_path)

    result = runner.invoke(app, ["doctor", "configure"], input="my-\n/opt/bin\n")

    assert result.exit_code == 0, result.output
    text = env_path.read_text(encoding="utf-8")
    assert "TERMUX_API_COMMAND_PREFIX=my-" in text
    assert "TERMUX_API_BIN_DIR=/opt/bin" in text
