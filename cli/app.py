"""
splicedrum - Inspect and convert Splice drum machine pattern files.

A modern CLI tool for decoding .splice drum patterns.
"""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from splicedrum import __version__
from cli.commands.info import info, print_pattern
from cli.commands.instruments import instruments
from cli.commands.dump import dump
from cli.commands.validate import validate
from cli.commands.convert import convert

console = Console()

app = typer.Typer(
    name="splicedrum",
    help="Inspect and convert Splice drum machine pattern files.",
    add_completion=False,
    rich_markup_mode="rich",
)

app.command(name="info")(info)
app.command(name="print")(print_pattern)
app.command(name="instruments")(instruments)
app.command(name="dump")(dump)
app.command(name="validate")(validate)
app.command(name="convert")(convert)


def setup_logging(verbose: bool) -> None:
    """Route library log records through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]splicedrum[/bold] version {__version__}")
    console.print("[dim]Decoder for Splice drum machine pattern files[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
    verbose: bool = typer.Option(False, "--debug", "-d", help="Show decoder debug logging"),
) -> None:
    """
    splicedrum - Decode Splice drum machine patterns.

    [bold]Quick Start:[/bold]

        splicedrum print pattern_1.splice        # Plain text output
        splicedrum info pattern_1.splice         # Pattern overview

    [bold]Analysis Commands:[/bold]

        splicedrum instruments pattern_1.splice  # Instrument details
        splicedrum dump pattern_1.splice         # Annotated hex dump
        splicedrum validate pattern_1.splice     # Structure check

    [bold]Utility Commands:[/bold]

        splicedrum convert pattern_1.splice      # Export to MIDI

    Use --help with any command for more details.
    """
    setup_logging(verbose)

    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
