"""
Validate command - check .splice file structure.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.panel import Panel
from rich import box

from splicedrum.analysis.splice_validator import SpliceValidator, ValidationResult

console = Console()
app = typer.Typer()


def display_validation(result: ValidationResult, verbose: bool = False) -> None:
    """Display validation result with Rich formatting."""
    if result.valid:
        status = "[bold green]VALID[/bold green]"
        border = "green"
    else:
        status = "[bold red]INVALID[/bold red]"
        border = "red"

    console.print(
        Panel(
            f"[bold]File:[/bold] {escape(result.filepath)}\n"
            f"[bold]Status:[/bold] {status}\n"
            f"[bold]Instruments:[/bold] {result.instrument_count}\n\n"
            f"Errors: [red]{len(result.errors)}[/red]  "
            f"Warnings: [yellow]{len(result.warnings)}[/yellow]  "
            f"Info: [blue]{len(result.info)}[/blue]",
            title="[bold]Validation Result[/bold]",
            border_style=border,
        )
    )

    if result.errors or result.warnings:
        table = Table(title="Issues", box=box.ROUNDED, show_header=True, header_style="bold cyan")
        table.add_column("Severity", width=10)
        table.add_column("Area", style="cyan", width=16)
        table.add_column("Offset", style="dim", width=8)
        table.add_column("Message", width=44)
        table.add_column("Expected / Actual", style="dim", width=24)

        severities = (
            ("[red]ERROR[/red]", result.errors),
            ("[yellow]WARN[/yellow]", result.warnings),
        )
        for label, issues in severities:
            for issue in issues:
                detail = f"{issue.expected} / {issue.actual}" if issue.expected else ""
                table.add_row(
                    label,
                    issue.area,
                    f"0x{issue.offset:02X}",
                    escape(issue.message),
                    escape(detail),
                )

        console.print(table)

    if result.info and (verbose or not (result.errors or result.warnings)):
        info_table = Table(title="Validation Checks", box=box.SIMPLE, show_header=False)
        info_table.add_column("", width=70)

        for issue in result.info:
            info_table.add_row(f"[green]OK[/green] {issue.area}: {escape(issue.message)}")

        console.print(info_table)


@app.command()
def validate(
    file: Path = typer.Argument(..., help="Splice file to validate"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show all validation details"),
    strict: bool = typer.Option(False, "--strict", "-s", help="Treat warnings as errors"),
) -> None:
    """
    Validate a .splice pattern file structure.

    Checks for:

    - Valid SPLICE header
    - Payload size consistent with the file length
    - Version and tempo present
    - Instrument records filling the payload exactly
    - Step values other than 0x00/0x01 and repeated instrument ids

    Examples:

        splicedrum validate pattern_1.splice

        splicedrum validate pattern_1.splice --strict
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    data = file.read_bytes()

    validator = SpliceValidator(data, str(file))
    result = validator.validate()

    if strict and result.warnings:
        result.valid = False

    display_validation(result, verbose=verbose)

    if not result.valid:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
