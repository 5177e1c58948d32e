"""
Shared helpers for CLI commands.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from splicedrum.formats.splice.reader import SpliceReader
from splicedrum.models.pattern import Pattern
from splicedrum.utils.validation import (
    InvalidHeaderError,
    SpliceError,
    SpliceIOError,
    TruncatedError,
)

console = Console()

ERROR_LABELS = {
    InvalidHeaderError: "Not a Splice pattern file",
    TruncatedError: "Corrupt or truncated pattern",
    SpliceIOError: "Cannot read file",
}


def error_label(error: SpliceError) -> str:
    """Short description of a decode failure for display."""
    for error_type, label in ERROR_LABELS.items():
        if isinstance(error, error_type):
            return label
    return "Decode failed"


def load_pattern(file: Path) -> Pattern:
    """
    Decode a .splice file, exiting with status 1 on any failure.

    Args:
        file: Path to .splice file

    Returns:
        Decoded Pattern
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    try:
        return SpliceReader.read(file)
    except SpliceError as e:
        console.print(f"[red]Error: {error_label(e)}: {escape(str(e))}[/red]")
        raise typer.Exit(1)
