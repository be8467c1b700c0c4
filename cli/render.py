from __future__ import annotations

from typing import Any, Dict, Iterable

import typer


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def render_ingest(payload: Dict[str, Any]) -> None:
    echo_heading("Ingest Result")
    echo_key_values(
        [
            ("status", payload.get("status")),
            ("message", payload.get("message")),
            ("prediction", payload.get("prediction")),
            ("confidence", payload.get("confidence")),
            ("timestamp", payload.get("timestamp")),
        ]
    )
    _echo_spray(payload.get("spray_active"))


def render_latest(payload: Dict[str, Any]) -> None:
    echo_heading("Latest Reading")
    echo_key_values(
        [
            ("status", payload.get("status")),
            ("time", payload.get("time")),
            ("gas_level", payload.get("gas_level")),
            ("temperature", payload.get("temperature")),
            ("humidity", payload.get("humidity")),
            ("prediction", payload.get("prediction")),
            ("confidence", payload.get("confidence")),
        ]
    )
    _echo_spray(payload.get("spray_active"))


def render_health(payload: Dict[str, Any]) -> None:
    echo_heading("Service Health")
    echo_key_values(
        [
            ("status", payload.get("status")),
            ("service", payload.get("service")),
            ("environment", payload.get("environment")),
            ("version", payload.get("version")),
            ("timestamp", payload.get("timestamp")),
        ]
    )


def _echo_spray(spray_active: Any) -> None:
    if spray_active:
        typer.secho("spray: ON", fg=typer.colors.RED, bold=True)
    else:
        typer.secho("spray: off", fg=typer.colors.GREEN)
