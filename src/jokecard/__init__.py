"""jokecard: a random joke from public joke APIs, shown as a card."""

from __future__ import annotations

__version__ = "0.1.0"

from jokecard.models import AcquisitionOutcome
from jokecard.models import JokeFailure
from jokecard.models import JokeResult
from jokecard.models import JokeSuccess

__all__ = [
    "__version__",
    "AcquisitionOutcome",
    "JokeFailure",
    "JokeResult",
    "JokeSuccess",
]


def main() -> None:
    """Entry point for the jokecard CLI."""
    from jokecard.cli.app import run_app

    run_app()
