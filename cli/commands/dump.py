"""
Dump command - annotated hex dump of a .splice file.
"""

import struct
from pathlib import Path
from typing import List, Tuple

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich import box

from splicedrum.formats.splice.layout import SpliceLayout
from splicedrum.models.instrument import HIT

console = Console()
app = typer.Typer()

Region = Tuple[int, int, str, str, str]

# Region name -> color
REGION_COLORS = {
    "HEADER": "bright_blue",
    "SIZE": "cyan",
    "VERSION": "green",
    "TEMPO": "yellow",
    "INST_ID": "magenta",
    "NAME_LEN": "magenta",
    "NAME": "bright_magenta",
    "STEPS": "red",
    "TRAILING": "dim",
    "TRUNCATED": "bold red",
}


def _region(start: int, end: int, name: str, desc: str) -> Region:
    return (start, end, name, desc, REGION_COLORS[name])


def build_regions(data: bytes) -> List[Region]:
    """
    Map the file into named regions by walking the record layout.

    The walk stops at the first field that runs past the declared
    payload or the end of the file; the rest is marked TRUNCATED or
    TRAILING.

    Returns:
        List of (start, end, name, description, color)
    """
    regions: List[Region] = []
    size = len(data)

    header_end = min(SpliceLayout.HEADER[1], size)
    regions.append(_region(0, header_end, "HEADER", "Magic header"))
    if size <= SpliceLayout.PAYLOAD_SIZE[0]:
        return regions

    size_offset = SpliceLayout.PAYLOAD_SIZE[0]
    payload_end = size_offset + 1 + data[size_offset]
    regions.append(
        _region(size_offset, size_offset + 1, "SIZE", f"Payload size ({data[size_offset]})")
    )

    limit = min(payload_end, size)
    pos = size_offset + 1
    fields = [
        (SpliceLayout.VERSION[1], "VERSION", "HW version string"),
        (SpliceLayout.TEMPO[1], "TEMPO", "Tempo (float32)"),
    ]
    for field_size, name, desc in fields:
        if pos + field_size > limit:
            break
        regions.append(_region(pos, pos + field_size, name, desc))
        pos += field_size
    else:
        while pos < limit:
            if pos + 5 > limit:
                break
            instrument_id = struct.unpack("<I", data[pos : pos + 4])[0]
            name_length = data[pos + 4]
            if pos + SpliceLayout.record_size(name_length) > limit:
                break
            regions.append(_region(pos, pos + 4, "INST_ID", f"Instrument id {instrument_id}"))
            regions.append(_region(pos + 4, pos + 5, "NAME_LEN", f"Name length ({name_length})"))
            pos += 5
            if name_length:
                regions.append(_region(pos, pos + name_length, "NAME", "Instrument name"))
                pos += name_length
            regions.append(_region(pos, pos + SpliceLayout.STEPS_SIZE, "STEPS", "4 beat groups"))
            pos += SpliceLayout.STEPS_SIZE

    if pos < limit:
        regions.append(_region(pos, limit, "TRUNCATED", "Record runs past payload or file"))
        pos = limit
    if pos < size:
        regions.append(_region(pos, size, "TRAILING", "Bytes after payload (ignored)"))
    if payload_end > size:
        missing = payload_end - size
        regions.append(_region(size, payload_end, "TRUNCATED", f"{missing} declared bytes missing"))

    return regions


def get_region_for_offset(regions: List[Region], offset: int) -> Tuple[str, str, str]:
    """Get region name, description, and color for an offset."""
    for start, end, name, desc, color in regions:
        if start <= offset < end:
            return name, desc, color
    return "UNKNOWN", "Unknown region", "white"


def format_hex_line(
    data: bytes, offset: int, regions: List[Region], bytes_per_line: int = 16
) -> Text:
    """
    Format a single line of hex dump, coloring each byte by region.

    Returns Rich Text object with colored output.
    """
    region_name, _, region_color = get_region_for_offset(regions, offset)

    text = Text()
    text.append(f"0x{offset:04X} ", style="dim")
    text.append(f"[{region_name:9s}] ", style=region_color)

    for i, byte in enumerate(data):
        name, _, color = get_region_for_offset(regions, offset + i)
        if name == "STEPS":
            style = "bold red" if byte == HIT else ("dim" if byte == 0x00 else "yellow")
        elif byte == 0x00:
            style = "dim"
        else:
            style = color
        text.append(f"{byte:02X}", style=style)
        text.append(" ")

    if len(data) < bytes_per_line:
        text.append("   " * (bytes_per_line - len(data)))

    text.append(" ", style="dim")
    for byte in data:
        if 32 <= byte < 127:
            text.append(chr(byte), style="green")
        else:
            text.append(".", style="dim")

    return text


def create_legend(regions: List[Region]) -> Table:
    """Create a legend listing each region of the file."""
    table = Table(title="Layout", box=box.SIMPLE, show_header=False, expand=False)
    table.add_column("Region", width=10)
    table.add_column("Description", width=50)

    for start, end, name, desc, color in regions:
        table.add_row(
            Text(name, style=color),
            f"{desc} ({end - start} bytes, 0x{start:04X}-0x{max(end - 1, start):04X})",
        )

    return table


@app.command()
def dump(
    file: Path = typer.Argument(..., help="Splice file to dump"),
    width: int = typer.Option(16, "--width", "-w", help="Bytes per line"),
    no_legend: bool = typer.Option(False, "--no-legend", help="Hide the layout legend"),
) -> None:
    """
    Annotated hex dump of a .splice pattern file.

    Works on damaged files too: the layout is walked as far as the
    data allows and the remainder is flagged.

    Examples:

        splicedrum dump pattern_1.splice

        splicedrum dump pattern_1.splice --width 8 --no-legend
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    if width < 1:
        console.print(f"[red]Error: Invalid width: {width}[/red]")
        raise typer.Exit(1)

    data = file.read_bytes()
    regions = build_regions(data)

    if not no_legend:
        console.print(create_legend(regions))
        console.print()

    console.print(
        Panel(
            f"[bold]File:[/bold] {file}\n[bold]Size:[/bold] {len(data)} bytes",
            title="[bold]Splice Hex Dump[/bold]",
            border_style="blue",
        )
    )

    for offset in range(0, len(data), width):
        console.print(format_hex_line(data[offset : offset + width], offset, regions, width))

    console.print()
    console.print(f"[dim]Total: {len(data)} bytes, {len(regions)} regions[/dim]")


if __name__ == "__main__":
    app()
