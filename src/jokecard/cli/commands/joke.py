"""Joke command for jokecard."""

from __future__ import annotations

import asyncio
import time

import typer
from rich.console import Console
from rich.live import Live

from jokecard.cli.app import ExitCode
from jokecard.cli.app import app
from jokecard.config.settings import get_config
from jokecard.core.acquire import build_acquirer
from jokecard.core.http import cleanup
from jokecard.display.json import outcome_to_dict
from jokecard.display.json import output_json_pretty
from jokecard.display.rich import render_outcome
from jokecard.models import AcquisitionOutcome


@app.command("joke")
def joke_command(
    ctx: typer.Context,
    source: str | None = typer.Option(
        None,
        "--source",
        "-s",
        help="Only use this source (see 'jokecard sources')",
    ),
    count: int = typer.Option(
        1,
        "--count",
        "-n",
        min=1,
        help="Number of jokes to fetch, one after another",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Output in JSON format",
    ),
) -> None:
    """Fetch a random joke."""
    try:
        code = asyncio.run(
            run_jokes(ctx, source=source, count=count, json_output=json_output)
        )
    except KeyboardInterrupt:
        if not ctx.meta.get("quiet", False):
            Console().print("\n[yellow]Interrupted[/yellow]")
        raise typer.Exit(ExitCode.GENERAL_ERROR) from None
    if code != ExitCode.SUCCESS:
        raise typer.Exit(code)


async def run_jokes(
    ctx: typer.Context,
    source: str | None = None,
    count: int = 1,
    json_output: bool = False,
) -> ExitCode:
    """Run `count` sequential acquisition calls and display each outcome."""
    console = Console()
    config = get_config()

    verbose = ctx.meta.get("verbose", False)
    quiet = ctx.meta.get("quiet", False)
    json_mode = json_output or ctx.meta.get("json", False)

    try:
        acquirer = build_acquirer(
            config, source_ids=[source] if source is not None else None
        )
    except ValueError as e:
        if not quiet:
            console.print(f"[red]{e}[/red]")
        return ExitCode.CONFIG_ERROR

    records = []
    start_time = time.monotonic()
    try:
        for _ in range(count):
            if json_mode:
                outcome = await acquirer.acquire()
                records.append(outcome_to_dict(outcome, acquirer.last_result))
            elif quiet:
                outcome = await acquirer.acquire()
                console.print(outcome.joke or outcome.error_message, highlight=False)
            else:
                loading = render_outcome(AcquisitionOutcome.loading())
                with Live(loading, console=console) as live:
                    outcome = await acquirer.acquire()
                    label = None
                    if config.display.show_source and acquirer.last_result:
                        label = acquirer.last_result.source_label
                    live.update(render_outcome(outcome, label))
    finally:
        await cleanup()

    duration_ms = (time.monotonic() - start_time) * 1000

    if json_mode:
        output_json_pretty(records[0] if count == 1 else records)
    elif verbose and not quiet:
        console.print(f"[dim]Fetched in {duration_ms:.0f}ms[/dim]")

    if outcome.succeeded:
        return ExitCode.SUCCESS
    return ExitCode.NETWORK_ERROR
