"""
Rich table displays for pattern information.
"""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich import box

from splicedrum.models.instrument import STEP_COUNT
from splicedrum.models.pattern import Pattern
from splicedrum.render import format_tempo
from cli.display.formatters import density_bar, step_grid

console = Console()


def display_pattern_info(pattern: Pattern, filepath: str = "") -> None:
    """Display pattern overview and step grid with Rich formatting."""
    unique_ids = len({i.id for i in pattern.instruments})
    total_steps = STEP_COUNT * len(pattern.instruments)

    content = f"""[bold]File:[/bold] {escape(filepath) or "N/A"}
[bold]HW Version:[/bold] {escape(pattern.version) or "[dim]<empty>[/dim]"}
[bold]Tempo:[/bold] {format_tempo(pattern.tempo)} BPM
[bold]Instruments:[/bold] {len(pattern.instruments)} ({unique_ids} unique ids)
[bold]Hits:[/bold] {density_bar(pattern.total_hits, total_steps)}"""

    console.print(
        Panel(
            content,
            title="[bold blue]Splice Pattern Info[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )

    if pattern.instruments:
        display_step_grid(pattern)
    else:
        console.print("[dim]No instruments[/dim]")


def display_step_grid(pattern: Pattern) -> None:
    """Display the step grid, one row per instrument."""
    table = Table(box=box.SIMPLE, show_header=True, header_style="dim")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("1   2   3   4", no_wrap=True)

    for instrument in pattern.instruments:
        table.add_row(str(instrument.id), escape(instrument.name), step_grid(instrument))

    console.print(table)


def display_instruments(pattern: Pattern) -> None:
    """Display a detailed instrument table."""
    table = Table(
        title="Instruments", box=box.ROUNDED, show_header=True, header_style="bold cyan"
    )
    table.add_column("#", width=3, style="dim")
    table.add_column("ID", justify="right")
    table.add_column("Name", width=16)
    table.add_column("Steps", no_wrap=True)
    table.add_column("Hits", width=34)
    table.add_column("Raw Steps", style="dim", no_wrap=True)

    for index, instrument in enumerate(pattern.instruments):
        raw = " ".join(group.hex().upper() for group in instrument.steps)
        table.add_row(
            str(index),
            str(instrument.id),
            escape(instrument.name),
            step_grid(instrument),
            density_bar(instrument.hit_count, STEP_COUNT),
            raw,
        )

    console.print(table)
