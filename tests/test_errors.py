"""Tests for the exception hierarchy."""

from __future__ import annotations

from batterywatch.errors import BatteryWatchError, SnapshotError, StateFileError


def test_snapshot_error() -> None:
    row = {"percentage": "x"}
    err = SnapshotError("bad reading", row)
    assert isinstance(err, BatteryWatchError)
    assert str(err) == "bad reading"
    assert err.message == "bad reading"
    assert err.row is row


def test_state_file_error_keeps_cause() -> None:
    cause = OSError("disk full")
    err = StateFileError("cannot write", cause)
    assert isinstance(err, BatteryWatchError)
    assert str(err) == "cannot write"
    assert err.original_error is cause


def test_defaults() -> None:
    assert SnapshotError("x").row is None
    assert StateFileError("x").original_error is None
