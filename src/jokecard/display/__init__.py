"""Output formatting for jokecard."""

from jokecard.display.json import outcome_to_dict, output_json_pretty
from jokecard.display.rich import render_outcome, render_sources_table

__all__ = [
    "outcome_to_dict",
    "output_json_pretty",
    "render_outcome",
    "render_sources_table",
]
