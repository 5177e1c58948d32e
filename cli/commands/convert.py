"""
Convert command - export a .splice pattern to a Standard MIDI File.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from splicedrum.converters.splice_to_midi import gm_note_for, write_midi
from cli.commands.common import load_pattern

console = Console()
app = typer.Typer()


@app.command()
def convert(
    source: Path = typer.Argument(..., help="Source .splice file"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output .mid path"),
    bars: int = typer.Option(1, "--bars", "-b", help="Number of times to repeat the bar"),
    velocity: int = typer.Option(100, "--velocity", help="Note velocity (1-127)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show note mapping"),
) -> None:
    """
    Convert a .splice pattern to a MIDI drum loop.

    Each instrument is mapped to a General MIDI percussion key on
    channel 10 and every hit becomes a 16th note.

    Examples:

        splicedrum convert pattern_1.splice

        splicedrum convert pattern_1.splice -o loop.mid --bars 4
    """
    pattern = load_pattern(source)
    output_path = output or source.with_suffix(".mid")

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        write_midi(pattern, output_path, bars=bars, velocity=velocity)
    except (ValueError, OSError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if verbose:
        for instrument in pattern.instruments:
            console.print(
                f"  ({instrument.id}) {instrument.name:<12} -> note {gm_note_for(instrument)}",
                markup=False,
            )

    console.print(f"[green]Converted:[/green] {source} -> {output_path}")
    console.print(f"[dim]{pattern.total_hits * bars} notes, {bars} bar(s)[/dim]")


if __name__ == "__main__":
    app()
