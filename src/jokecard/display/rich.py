"""Rich-based rendering utilities for jokecard."""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from jokecard.models import AcquisitionOutcome


def render_outcome(
    outcome: AcquisitionOutcome,
    source_label: str | None = None,
) -> Panel:
    """Render an outcome as a joke card.

    Args:
        outcome: Current state of the outcome slot
        source_label: Source name for the card subtitle, if shown

    Returns:
        Rich Panel for the loading, joke, or error state
    """
    if outcome.is_loading:
        body = Text("Loading a fresh joke...", style="dim italic")
        border = "dim"
    elif outcome.error_message is not None:
        body = Text(outcome.error_message, style="bold red")
        border = "red"
    else:
        body = Text(outcome.joke or "", style="bold")
        border = "green"

    subtitle = None
    if source_label and not outcome.is_loading:
        subtitle = f"[dim]{source_label}[/dim]"

    return Panel(
        body,
        title="😄 Random Joke",
        subtitle=subtitle,
        border_style=border,
        padding=(1, 2),
    )


def render_sources_table(sources: dict[str, type]) -> Table:
    """Render registered joke sources as a table.

    Args:
        sources: Source id to source class

    Returns:
        Rich Table with one row per source
    """
    table = Table(title="Joke Sources", show_header=True, header_style="bold")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("Homepage", style="dim")

    for source_id, source_cls in sources.items():
        table.add_row(source_id, source_cls.metadata.name, source_cls.metadata.homepage)

    return table
