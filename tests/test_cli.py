"""Tests for the command-line interface."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from batterywatch.cli import app
from batterywatch.models import HealthState

runner = CliRunner()

READINGS_CSV = """percentage,status,plugged
50,discharging,none
39,discharging,none
15,discharging,none
16,charging,usb
96,full,usb
96,discharging,none
"""


@pytest.fixture(autouse=True)
def no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BATTERYWATCH_CONFIG", raising=False)


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text("warning_level: 40\ncritical_level: 20\n", encoding="utf-8")
    return path


@pytest.fixture
def state_file(tmp_path: Path) -> Path:
    return tmp_path / "state" / "health.json"


def test_replay(tmp_path: Path, config_file: Path, state_file: Path) -> None:
    readings = tmp_path / "readings.csv"
    readings.write_text(READINGS_CSV, encoding="utf-8")

    result = runner.invoke(
        app, ["replay", str(readings), "--config", str(config_file), "--state", str(state_file)]
    )

    assert result.exit_code == 0, result.output
    assert "   2   39%  WARNING" in result.output
    assert "   3   15%  CRITICAL" in result.output
    assert "   4   16%  charger connected" in result.output
    assert "   5   96%  FULL" in result.output
    assert "6 readings, 3 notifications, 1 charge cycle recorded" in result.output
    assert HealthState.load(state_file).charge_cycles == 1


def test_replay_resumes_state(tmp_path: Path, config_file: Path, state_file: Path) -> None:
    HealthState(charge_cycles=4, cycle_in_progress=True).save(state_file)
    readings = tmp_path / "readings.yaml"
    readings.write_text("- {percentage: 100, status: full, plugged: ac}\n", encoding="utf-8")

    result = runner.invoke(
        app, ["replay", str(readings), "-c", str(config_file), "-s", str(state_file)]
    )

    assert result.exit_code == 0, result.output
    assert "5 charge cycles recorded" in result.output


def test_replay_invalid_readings(tmp_path: Path, config_file: Path, state_file: Path) -> None:
    readings = tmp_path / "readings.csv"
    readings.write_text("percentage\nlots\n", encoding="utf-8")

    result = runner.invoke(
        app, ["replay", str(readings), "-c", str(config_file), "-s", str(state_file)]
    )

    assert result.exit_code == 1
    assert not state_file.exists()


def test_replay_undecodable_readings(tmp_path: Path, config_file: Path, state_file: Path) -> None:
    readings = tmp_path / "readings.csv"
    readings.write_bytes(b"\xff\xfe15,discharging\n")

    result = runner.invoke(
        app, ["replay", str(readings), "-c", str(config_file), "-s", str(state_file)]
    )

    assert result.exit_code == 1
    assert not isinstance(result.exception, UnicodeDecodeError)
    assert not state_file.exists()


def test_health_for_cycle_count(config_file: Path, state_file: Path) -> None:
    result = runner.invoke(
        app, ["health", "-c", str(config_file), "-s", str(state_file), "--cycles", "650"]
    )

    assert result.exit_code == 0, result.output
    assert "78% (Fair)" in result.output
    assert "Charge cycles: 650" in result.output
    assert "moderate wear" in result.output


def test_health_reads_state(config_file: Path, state_file: Path) -> None:
    first_use = datetime(2025, 1, 1, tzinfo=UTC)
    HealthState(charge_cycles=300, first_use_timestamp=first_use).save(state_file)
    result = runner.invoke(app, ["health", "-c", str(config_file), "-s", str(state_file)])
    assert result.exit_code == 0, result.output
    assert "95% (Good)" in result.output
    assert "Tracking since: 2025-01-01" in result.output


def test_health_with_corrupt_state(config_file: Path, state_file: Path) -> None:
    state_file.parent.mkdir(parents=True)
    state_file.write_text("garbage", encoding="utf-8")
    result = runner.invoke(app, ["health", "-c", str(config_file), "-s", str(state_file)])
    assert result.exit_code == 1


def test_health_reset(config_file: Path, state_file: Path) -> None:
    HealthState(charge_cycles=12, cycle_in_progress=True).save(state_file)

    result = runner.invoke(app, ["health-reset", "-c", str(config_file), "-s", str(state_file)])

    assert result.exit_code == 0, result.output
    assert "Health data reset" in result.output
    assert HealthState.load(state_file) == HealthState()


def test_invalid_config_exits(tmp_path: Path, state_file: Path) -> None:
    bad = tmp_path / "bad.yaml"
    bad.write_text("warning_level: 10\ncritical_level: 30\n", encoding="utf-8")
    result = runner.invoke(app, ["health", "-c", str(bad), "-s", str(state_file)])
    assert result.exit_code == 1


def test_config_validate(config_file: Path) -> None:
    result = runner.invoke(app, ["config", "validate", str(config_file)])
    assert result.exit_code == 0
    assert "Config valid" in result.output


def test_config_validate_rejects_bad_file(tmp_path: Path) -> None:
    bad = tmp_path / "bad.yaml"
    bad.write_text("warning_level: 150\n", encoding="utf-8")
    result = runner.invoke(app, ["config", "validate", str(bad)])
    assert result.exit_code == 1


def test_config_wizard(tmp_path: Path) -> None:
    dst = tmp_path / "config.yaml"

    result = runner.invoke(app, ["config", "wizard", str(dst)], input="45\n15\nn\ny\n")

    assert result.exit_code == 0, result.output
    data = yaml.safe_load(dst.read_text(encoding="utf-8"))
    assert data["warning_level"] == 45
    assert data["critical_level"] == 15
    assert data["alert_every_tick"] is False
    assert data["full_notify_enabled"] is True


def test_config_wizard_reprompts_on_error(tmp_path: Path) -> None:
    dst = tmp_path / "config.yaml"

    result = runner.invoke(
        app, ["config", "wizard", str(dst)], input="20\n30\nn\ny\n40\n20\nn\ny\n"
    )

    assert result.exit_code == 0, result.output
    assert "Please re-enter" in result.output
    assert yaml.safe_load(dst.read_text(encoding="utf-8"))["critical_level"] == 20
