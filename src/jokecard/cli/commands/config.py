"""Config management commands for jokecard."""

from __future__ import annotations

import tomli_w
import typer
from rich.console import Console
from rich.syntax import Syntax

from jokecard.config.paths import config_file
from jokecard.config.settings import Config
from jokecard.config.settings import get_config
from jokecard.config.settings import save_config
from jokecard.display.json import output_json_pretty

config_app = typer.Typer(help="Manage configuration settings.")


def config_to_dict(config: Config) -> dict:
    """Every setting, including ones left at their defaults."""
    return {
        "enabled_sources": list(config.enabled_sources),
        "fetch": {
            "timeout": config.fetch.timeout,
            "max_retries": config.fetch.max_retries,
            "base_delay_ms": config.fetch.base_delay_ms,
        },
        "payload": {
            "max_attempts": config.payload.max_attempts,
            "retry_delay_ms": config.payload.retry_delay_ms,
        },
        "display": {
            "show_source": config.display.show_source,
        },
    }


@config_app.command("show")
def config_show_command(ctx: typer.Context) -> None:
    """Display current settings."""
    console = Console()
    data = config_to_dict(get_config())

    if ctx.meta.get("json", False):
        output_json_pretty(data)
        return

    console.print(f"[dim]# {config_file()}[/dim]")
    console.print(Syntax(tomli_w.dumps(data), "toml", theme="ansi_dark"))


@config_app.command("path")
def config_path_command() -> None:
    """Show the config file location."""
    typer.echo(str(config_file()))


@config_app.command("reset")
def config_reset_command(
    confirm: bool = typer.Option(
        False, "--yes", "-y", help="Skip confirmation prompt"
    ),
) -> None:
    """Reset configuration to defaults."""
    console = Console()

    if not confirm:
        typer.confirm("Reset all settings to defaults?", abort=True)

    save_config(Config())
    console.print(f"[green]✓[/green] Configuration reset: {config_file()}")
