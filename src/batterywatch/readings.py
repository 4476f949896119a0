"""Reading recorded battery snapshots from CSV or YAML files.

Each record has either a ``percentage`` or a ``level`` (with an optional
``scale``, default 100), plus optional ``status``, ``plugged`` and
``health`` fields, e.g.::

    percentage,status,plugged
    15,discharging,none
    50,charging,usb
    96,full,usb
"""

from __future__ import annotations

import csv
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

import yaml

from batterywatch.errors import SnapshotError
from batterywatch.models.battery import BatterySnapshot

logger: Final = logging.getLogger(__name__)


def snapshot_from_record(record: Mapping[str, Any]) -> BatterySnapshot:
    """Build a snapshot from one recorded reading.

    Args:
        record: Mapping with the fields described in the module docstring

    Returns:
        Snapshot for the record

    Raises:
        SnapshotError: If required fields are missing or not numeric
    """
    try:
        if _present(record.get("percentage")):
            level, scale = int(record["percentage"]), 100
        elif _present(record.get("level")):
            level = int(record["level"])
            scale = int(record["scale"]) if _present(record.get("scale")) else 100
        else:
            raise SnapshotError("Record needs a percentage or a level", record)
    except (TypeError, ValueError) as exc:
        raise SnapshotError(f"Non-numeric battery value: {exc}", record) from exc

    status = record.get("status") or "unknown"
    plugged = record.get("plugged")
    health = record.get("health")
    try:
        return BatterySnapshot.from_raw(
            level,
            scale,
            str(status),
            plugged if plugged is None or isinstance(plugged, int) else str(plugged),
            None if health is None else str(health),
        )
    except SnapshotError as err:
        err.row = record
        raise


def read_snapshots(path: Path) -> list[BatterySnapshot]:
    """Read all snapshots from a CSV or YAML file.

    Args:
        path: ``.csv`` file with a header row, or ``.yaml``/``.yml`` file
            holding a list of mappings

    Returns:
        Snapshots in file order

    Raises:
        SnapshotError: If the file cannot be parsed or a record is invalid
    """
    suffix = path.suffix.lower()
    if suffix not in {".csv", ".yaml", ".yml"}:
        raise SnapshotError(f"Unsupported snapshot file type: {path.suffix or path.name}")

    try:
        if suffix == ".csv":
            with open(path, newline="", encoding="utf-8") as f:
                records: Any = list(csv.DictReader(f))
        else:
            records = yaml.safe_load(path.read_text(encoding="utf-8")) or []
    except (OSError, UnicodeDecodeError, csv.Error, yaml.YAMLError) as exc:
        raise SnapshotError(f"Unable to read {path}: {exc}") from exc

    if not isinstance(records, list):
        raise SnapshotError(f"{path} must contain a list of readings")

    snapshots: list[BatterySnapshot] = []
    for record in records:
        if not isinstance(record, Mapping):
            raise SnapshotError("Each reading must be a mapping", record)
        snapshots.append(snapshot_from_record(record))

    logger.debug("Read %d snapshots from %s", len(snapshots), path)
    return snapshots


def _present(value: Any) -> bool:
    return value is not None and value != ""
