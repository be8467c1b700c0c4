from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional

import typer

from cli.client import ApiClient
from cli.config import CLIConfig, load_config
from cli.render import render_health, render_ingest, render_latest


@dataclass
class CLIState:
    config: CLIConfig
    client: ApiClient


app = typer.Typer(
    help="Send sensor readings to the odor service and inspect its latest state.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=1)
    return state


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        "-b",
        help="Service base URL (defaults to API_BASE_URL env or http://localhost:8000).",
    ),
    poll_interval: Optional[float] = typer.Option(
        None,
        "--poll-interval",
        help="Seconds between refreshes for the watch command.",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Per-request timeout in seconds.",
    ),
) -> None:
    """Entry point for the CLI."""
    config = load_config(
        base_url=base_url,
        poll_interval=poll_interval,
        request_timeout=timeout,
    )
    client = ApiClient(config)
    ctx.obj = CLIState(config=config, client=client)
    ctx.call_on_close(client.close)


@app.command("send")
def send_command(
    ctx: typer.Context,
    mq: float = typer.Option(..., "--mq", help="Gas sensor level."),
    temperature: float = typer.Option(..., "--temperature", "-t", help="Temperature in Celsius."),
    humidity: float = typer.Option(..., "--humidity", "-H", help="Relative humidity in percent."),
) -> None:
    """Post one reading, the way the sensor device does."""
    state = _get_state(ctx)
    typer.echo(f"Sending reading to {state.config.base_url} ...")
    payload = state.client.send_reading(mq, temperature, humidity)
    render_ingest(payload)


@app.command("latest")
def latest_command(ctx: typer.Context) -> None:
    """Show the most recent reading and decision."""
    state = _get_state(ctx)
    render_latest(state.client.get_latest())


@app.command("watch")
def watch_command(
    ctx: typer.Context,
    count: int = typer.Option(0, "--count", "-n", min=0, help="Number of refreshes; 0 runs until interrupted."),
    interval: Optional[float] = typer.Option(
        None,
        "--interval",
        help="Override the refresh interval.",
    ),
) -> None:
    """Poll the latest state repeatedly, like the web dashboard does."""
    state = _get_state(ctx)
    delay = interval if interval is not None else state.config.poll_interval
    iteration = 0
    while True:
        render_latest(state.client.get_latest())
        iteration += 1
        if count and iteration >= count:
            return
        typer.echo()
        time.sleep(delay)


@app.command("health")
def health_command(ctx: typer.Context) -> None:
    """Check that the service is up."""
    state = _get_state(ctx)
    render_health(state.client.get_health())
