"""Command-line interface for jokecard."""

from jokecard.cli.app import app, run_app

__all__ = ["app", "run_app"]
