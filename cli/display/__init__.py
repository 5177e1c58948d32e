"""
CLI display modules.
"""

from cli.display.tables import (
    display_pattern_info,
    display_step_grid,
    display_instruments,
)
from cli.display.hex_view import display_hex_dump

__all__ = [
    "display_pattern_info",
    "display_step_grid",
    "display_instruments",
    "display_hex_dump",
]
