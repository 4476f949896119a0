"""Tests for reading recorded snapshots."""

from __future__ import annotations

from pathlib import Path

import pytest

from batterywatch.common.enums import PluggedSource
from batterywatch.errors import SnapshotError
from batterywatch.readings import read_snapshots, snapshot_from_record


def test_read_csv(tmp_path: Path) -> None:
    path = tmp_path / "readings.csv"
    path.write_text(
        "percentage,status,plugged\n15,discharging,none\n50,charging,usb\n96,full,\n",
        encoding="utf-8",
    )

    snapshots = read_snapshots(path)

    assert [s.percentage for s in snapshots] == [15, 50, 96]
    assert [s.charging for s in snapshots] == [False, True, True]
    assert snapshots[1].plugged_source is PluggedSource.USB
    assert snapshots[2].is_full is True
    assert snapshots[2].plugged_source is PluggedSource.NONE


def test_read_yaml(tmp_path: Path) -> None:
    path = tmp_path / "readings.yaml"
    path.write_text(
        "- {level: 128, scale: 255, status: charging, plugged: 1}\n"
        "- {percentage: 10, health: dead}\n",
        encoding="utf-8",
    )

    first, second = read_snapshots(path)

    assert first.percentage == 50
    assert first.plugged_source is PluggedSource.AC
    assert second.percentage == 10
    assert second.charging is False


def test_level_without_scale_defaults_to_percent() -> None:
    assert snapshot_from_record({"level": "42"}).percentage == 42


@pytest.mark.parametrize(
    "record",
    [
        {},
        {"status": "charging"},
        {"percentage": "lots"},
        {"level": 5, "scale": "x"},
        {"percentage": 50, "status": "sideways"},
    ],
)
def test_bad_records_carry_the_row(record: dict) -> None:
    with pytest.raises(SnapshotError) as exc_info:
        snapshot_from_record(record)
    assert exc_info.value.row == record


def test_unsupported_file_type(tmp_path: Path) -> None:
    path = tmp_path / "readings.txt"
    path.write_text("50\n", encoding="utf-8")
    with pytest.raises(SnapshotError, match="Unsupported"):
        read_snapshots(path)


def test_yaml_must_be_a_list(tmp_path: Path) -> None:
    path = tmp_path / "readings.yml"
    path.write_text("percentage: 50\n", encoding="utf-8")
    with pytest.raises(SnapshotError, match="list of readings"):
        read_snapshots(path)


def test_yaml_entries_must_be_mappings(tmp_path: Path) -> None:
    path = tmp_path / "readings.yml"
    path.write_text("- 50\n", encoding="utf-8")
    with pytest.raises(SnapshotError, match="mapping"):
        read_snapshots(path)


def test_empty_yaml_file(tmp_path: Path) -> None:
    path = tmp_path / "readings.yaml"
    path.write_text("", encoding="utf-8")
    assert read_snapshots(path) == []


@pytest.mark.parametrize("name", ["readings.csv", "readings.yaml"])
def test_undecodable_file(tmp_path: Path, name: str) -> None:
    path = tmp_path / name
    path.write_bytes(b"\xff\xfe15,discharging\n")
    with pytest.raises(SnapshotError, match="Unable to read"):
        read_snapshots(path)


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SnapshotError, match="Unable to read"):
        read_snapshots(tmp_path / "absent.csv")


def test_malformed_yaml(tmp_path: Path) -> None:
    path = tmp_path / "readings.yaml"
    path.write_text("- {percentage: 50\n", encoding="utf-8")
    with pytest.raises(SnapshotError, match="Unable to read"):
        read_snapshots(path)
