"""
Hex dump display utilities.
"""

from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from splicedrum.formats.splice.layout import SpliceLayout

console = Console()

# Fixed fields of the file prefix, colored in the --hex view
FIELD_STYLES = [
    (SpliceLayout.HEADER, "bold magenta"),
    (SpliceLayout.PAYLOAD_SIZE, "bold red"),
    (SpliceLayout.VERSION, "cyan"),
    (SpliceLayout.TEMPO, "yellow"),
]


def _style_for(offset: int, payload_end: Optional[int]) -> str:
    for (start, size), style in FIELD_STYLES:
        if start <= offset < start + size:
            return style
    if payload_end is not None and offset >= payload_end:
        return "dim red"
    return ""


def _payload_end(data: bytes) -> Optional[int]:
    start, size = SpliceLayout.PAYLOAD_SIZE
    if len(data) < start + size:
        return None
    return start + size + data[start]


def display_hex_dump(
    data: bytes,
    title: str = "Hex Dump",
    bytes_per_line: int = 16,
    max_lines: int = 32,
) -> None:
    """Display a hex dump with the fixed header fields highlighted.

    Bytes past the declared payload are dimmed, since the decoder
    never looks at them.

    Args:
        data: Raw file bytes
        title: Panel title
        bytes_per_line: Bytes shown per row
        max_lines: Rows shown before the rest is summarized
    """
    payload_end = _payload_end(data)
    end = min(len(data), max_lines * bytes_per_line)
    lines: List[Text] = []

    for offset in range(0, end, bytes_per_line):
        chunk = data[offset : offset + bytes_per_line]

        line = Text(f"{offset:08X}  ", style="dim")
        for i, b in enumerate(chunk):
            if i == 8:
                line.append(" ")
            line.append(f"{b:02X}", style=_style_for(offset + i, payload_end))
            line.append(" ")
        line.append("   " * (bytes_per_line - len(chunk)))

        ascii_str = "".join(chr(b) if 32 <= b < 127 else "." for b in chunk)
        line.append(f" {ascii_str}", style="cyan")
        lines.append(line)

    if len(data) > end:
        lines.append(Text(f"... {len(data) - end} more bytes ...", style="dim"))

    console.print(Panel(Text("\n").join(lines), title=title, border_style="blue", expand=False))
