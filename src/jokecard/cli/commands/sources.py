"""Sources command for jokecard."""

from __future__ import annotations

import typer
from rich.console import Console

from jokecard.cli.app import app
from jokecard.config.settings import get_config
from jokecard.display.json import output_json_pretty
from jokecard.display.rich import render_sources_table
from jokecard.sources import get_all_sources


@app.command("sources")
def sources_command(
    ctx: typer.Context,
    json_output: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Output in JSON format",
    ),
) -> None:
    """List the joke sources and whether they are enabled."""
    console = Console()
    config = get_config()
    sources = get_all_sources()

    if json_output or ctx.meta.get("json", False):
        output_json_pretty(
            {
                source_id: {
                    "name": cls.metadata.name,
                    "homepage": cls.metadata.homepage,
                    "endpoint": cls.metadata.endpoint,
                    "enabled": config.is_source_enabled(source_id),
                }
                for source_id, cls in sources.items()
            }
        )
        return

    enabled = {sid: cls for sid, cls in sources.items() if config.is_source_enabled(sid)}
    console.print(render_sources_table(enabled))

    disabled = sorted(set(sources) - set(enabled))
    if disabled:
        console.print(f"[dim]Disabled: {', '.join(disabled)}[/dim]")
