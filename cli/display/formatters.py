"""
Display formatting utilities for CLI output.

Provides step grids, density bars, and byte formatting helpers.
"""

from rich.text import Text

from splicedrum.models.instrument import HIT, Instrument


def step_grid(instrument: Instrument, hit_style: str = "bold green") -> Text:
    """
    Build a colored step grid for an instrument.

    Returns:
        Rich Text like "|x---|x---|x---|x---|" with hits highlighted
    """
    text = Text("|", style="dim")
    for group in instrument.steps:
        for b in group:
            if b == HIT:
                text.append("x", style=hit_style)
            else:
                # Unknown step values still render as rest, flagged in yellow
                text.append("-", style="dim" if b == 0x00 else "yellow")
        text.append("|", style="dim")
    return text


def density_bar(
    used: int,
    total: int,
    width: int = 16,
    filled_char: str = "█",
    empty_char: str = "░",
) -> str:
    """
    Create a density/usage bar with percentage.

    Returns:
        Formatted string like "[████░░░░░░░░░░░░]  25.0% (4/16)"
    """
    if total <= 0:
        return f"[{empty_char * width}]   0.0% (0/0)"

    percent = (used / total) * 100
    fill_count = int((used / total) * width)
    empty_count = width - fill_count

    bar = filled_char * fill_count + empty_char * empty_count

    return f"[{bar}] {percent:5.1f}% ({used}/{total})"
