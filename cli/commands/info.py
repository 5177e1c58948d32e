"""
Info command - display pattern information.
"""

from pathlib import Path

import typer
from rich.console import Console

from splicedrum.render import render_pattern
from cli.commands.common import load_pattern
from cli.display.hex_view import display_hex_dump
from cli.display.tables import display_pattern_info

console = Console()
app = typer.Typer()


@app.command()
def info(
    file: Path = typer.Argument(..., help="Splice pattern file"),
    plain: bool = typer.Option(False, "--plain", "-p", help="Plain text output"),
    show_hex: bool = typer.Option(False, "--hex", "-x", help="Show hex dump of the file"),
) -> None:
    """
    Show pattern version, tempo and the step grid.

    Examples:

        splicedrum info pattern_1.splice

        splicedrum info pattern_1.splice --plain
    """
    pattern = load_pattern(file)

    if plain:
        typer.echo(render_pattern(pattern), nl=False)
        return

    display_pattern_info(pattern, str(file))

    if show_hex:
        data = file.read_bytes()
        display_hex_dump(data, title=f"{file.name} ({len(data)} bytes)")


@app.command(name="print")
def print_pattern(
    file: Path = typer.Argument(..., help="Splice pattern file"),
) -> None:
    """
    Print the pattern as plain text.

    Output is the version line, the tempo line and one
    "(id) name\\t|x---|x---|x---|x---|" line per instrument.
    """
    pattern = load_pattern(file)
    typer.echo(render_pattern(pattern), nl=False)


if __name__ == "__main__":
    app()
