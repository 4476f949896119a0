"""Battery watch CLI application.

This module provides the command-line interface for battery watch:
replaying recorded battery readings through a monitoring session,
showing the battery health estimate, and configuration utilities.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Final

import typer
import yaml
from pydantic import ValidationError

from batterywatch.errors import BatteryWatchError
from batterywatch.models.state import HealthState
from batterywatch.monitor import BatteryMonitor, HealthEstimator
from batterywatch.notify.protocols import LogNotifier
from batterywatch.readings import read_snapshots
from batterywatch.settings.application import ApplicationSettings
from batterywatch.settings.user import UserSettings
from batterywatch.utils.file import resolve_path
from batterywatch.utils.formatting import format_plural
from batterywatch.utils.time import TimeUtils

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Battery watch CLI", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "batterywatch.cli"

# Options shared by several commands
CONFIG_OPTION = typer.Option(None, "--config", "-c", exists=True, dir_okay=False)
STATE_OPTION = typer.Option(None, "--state", "-s", dir_okay=False, help="Health state file")
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
SNAPSHOTS_ARGUMENT = typer.Argument(..., exists=True, dir_okay=False, help="CSV or YAML readings")
CYCLES_OPTION = typer.Option(None, "--cycles", min=0, help="Estimate for this many cycles instead")
DST_ARGUMENT = typer.Argument(..., help="Output config.yaml")


def configure_logging(debug: bool = False) -> None:
    """Configure root logging once for the application."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def _load_settings(config: Path | None) -> ApplicationSettings:
    """Load settings from a config file, or fall back to defaults if none exists."""
    try:
        return ApplicationSettings.load(config)
    except FileNotFoundError:
        logger.debug("No config file found, using defaults")
        return ApplicationSettings(UserSettings())
    except RuntimeError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


def _state_path(settings: ApplicationSettings, state: Path | None) -> Path:
    return resolve_path(state) if state else settings.paths.state_file


def _load_state(path: Path) -> HealthState:
    try:
        return HealthState.load(path)
    except BatteryWatchError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@app.command()
def replay(
    snapshots: Path = SNAPSHOTS_ARGUMENT,
    config: Path | None = CONFIG_OPTION,
    state: Path | None = STATE_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Feed recorded battery readings through a monitoring session."""
    configure_logging(debug)
    settings = _load_settings(config)
    state_path = _state_path(settings, state)

    try:
        readings = read_snapshots(snapshots)
    except BatteryWatchError as exc:
        typer.secho(f"Invalid readings: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    monitor = BatteryMonitor(settings.user, LogNotifier(), _load_state(state_path))
    emitted = 0
    for index, event in enumerate(monitor.handle_all(readings), start=1):
        if event.signal:
            what = "connected" if event.signal.started else "disconnected"
            typer.echo(f"{index:>4}  {event.snapshot.formatted_percentage:>4}  charger {what}")
        if event.intent:
            emitted += 1
            typer.echo(
                f"{index:>4}  {event.snapshot.formatted_percentage:>4}  {event.intent.kind.name}"
            )

    try:
        monitor.health_state.save(state_path)
    except BatteryWatchError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(
        f"{format_plural(len(readings), 'reading')}, "
        f"{format_plural(emitted, 'notification')}, "
        f"{format_plural(monitor.health_state.charge_cycles, 'charge cycle')} recorded"
    )


@app.command()
def health(
    config: Path | None = CONFIG_OPTION,
    state: Path | None = STATE_OPTION,
    cycles: int | None = CYCLES_OPTION,
) -> None:
    """Show the estimated battery health."""
    settings = _load_settings(config)
    health_state = _load_state(_state_path(settings, state))
    if cycles is not None:
        health_state = health_state.model_copy(update={"charge_cycles": cycles})

    summary = HealthEstimator.summary(health_state)
    typer.echo(f"Health:        {summary.formatted_health} ({summary.status.value})")
    typer.echo(f"Charge cycles: {summary.cycles}")
    typer.echo(f"Days in use:   {summary.days_since_first_use}")
    if health_state.first_use_timestamp:
        since = TimeUtils.format_datetime(health_state.first_use_timestamp, "%Y-%m-%d")
        typer.echo(f"Tracking since: {since}")
    typer.echo(summary.description)


@app.command("health-reset")
def health_reset(
    config: Path | None = CONFIG_OPTION,
    state: Path | None = STATE_OPTION,
) -> None:
    """Clear all persisted health tracking data."""
    settings = _load_settings(config)
    state_path = _state_path(settings, state)
    health_state = HealthEstimator.reset(_load_state(state_path))
    try:
        health_state.save(state_path)
    except BatteryWatchError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc
    typer.secho(f"Health data reset in {state_path}", fg=typer.colors.GREEN)


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path):
    """Validate a YAML config file against the schema."""
    try:
        UserSettings.load(file)
        typer.echo("✅ Config valid")
    except (FileNotFoundError, RuntimeError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@config_app.command("wizard")
def wizard(dst: Path = DST_ARGUMENT):
    """Interactive prompt to create a config file."""
    typer.echo("Interactive config builder - press Enter for defaults.")

    while True:
        data: dict[str, Any] = {
            "warning_level": typer.prompt("Warning level (%)", default=40, type=int),
            "critical_level": typer.prompt("Critical level (%)", default=20, type=int),
            "alert_every_tick": typer.confirm("Repeat critical alert on every drop?", default=False),
            "full_notify_enabled": typer.confirm("Notify when full?", default=True),
        }
        try:
            cfg = UserSettings(**data)
            break  # valid → exit loop
        except ValidationError as err:
            typer.secho("\nConfig error(s):", fg=typer.colors.RED, err=True)
            for e in err.errors():
                where = e["loc"][0] if e["loc"] else "settings"
                typer.secho(f"  • {where} - {e['msg']}", fg=typer.colors.RED, err=True)
            typer.echo("Please re-enter the values.\n")

    dst.write_text(yaml.safe_dump(cfg.model_dump(), sort_keys=False), encoding="utf-8")
    typer.secho(f"Config written to {dst}", fg=typer.colors.GREEN)


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
