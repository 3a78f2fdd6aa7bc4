"""Main CLI application for jokecard."""

from __future__ import annotations

import asyncio
from enum import IntEnum

import typer

from jokecard.log import configure_logging

# Create the main app
app = typer.Typer(
    name="jokecard",
    help="Fetch a random joke and show it as a card",
    add_completion=False,
    no_args_is_help=False,
    invoke_without_command=True,
)


class ExitCode(IntEnum):
    """Exit codes for jokecard."""

    SUCCESS = 0
    GENERAL_ERROR = 1
    NETWORK_ERROR = 3
    CONFIG_ERROR = 4


@app.callback()
def main(
    ctx: typer.Context,
    json: bool = typer.Option(False, "--json", "-j", help="Enable JSON output mode"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose output"
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Enable quiet mode"),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
) -> None:
    """Jokecard - a random joke from JokeAPI or icanhazdadjoke."""
    if version:
        from jokecard import __version__

        typer.echo(f"jokecard {__version__}")
        raise typer.Exit()

    # quiet takes precedence
    if verbose and quiet:
        verbose = False

    ctx.meta["json"] = json
    ctx.meta["verbose"] = verbose
    ctx.meta["quiet"] = quiet

    configure_logging(verbose=verbose, quiet=quiet)

    # If no command provided, show a single joke
    if ctx.invoked_subcommand is None:
        from jokecard.cli.commands.joke import run_jokes

        try:
            code = asyncio.run(run_jokes(ctx))
        except KeyboardInterrupt:
            raise typer.Exit(ExitCode.GENERAL_ERROR) from None
        if code != ExitCode.SUCCESS:
            raise typer.Exit(code)


def run_app() -> None:
    """Run the CLI app."""
    app()


# Import command modules - they register themselves via @app.command() decorators
from jokecard.cli.commands import joke  # noqa: E402, F401
from jokecard.cli.commands import sources  # noqa: E402, F401
from jokecard.cli.commands import config as config_cmd  # noqa: E402

app.add_typer(config_cmd.config_app, name="config")
