"""
Instruments command - detailed instrument listing.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from splicedrum.models.pattern import Pattern
from cli.commands.common import load_pattern
from cli.display.tables import display_instruments

console = Console()
app = typer.Typer()


@app.command()
def instruments(
    file: Path = typer.Argument(..., help="Splice pattern file"),
    instrument_id: Optional[int] = typer.Option(
        None, "--id", "-i", help="Only show instruments with this id"
    ),
    name: str = typer.Option("", "--name", "-n", help="Only show instruments with this name"),
) -> None:
    """
    List every instrument with its step grid and hit count.

    Examples:

        splicedrum instruments pattern_1.splice

        splicedrum instruments pattern_1.splice --name kick
    """
    pattern = load_pattern(file)

    selected = list(pattern.instruments)
    if instrument_id is not None:
        selected = [i for i in selected if i.id == instrument_id]
    if name:
        selected = [i for i in selected if i.name.lower() == name.lower()]

    if not selected:
        console.print("[yellow]No matching instruments[/yellow]")
        raise typer.Exit(1)

    display_instruments(
        Pattern(version=pattern.version, tempo=pattern.tempo, instruments=tuple(selected))
    )


if __name__ == "__main__":
    app()
