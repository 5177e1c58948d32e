"""
Text rendering for decoded patterns.

Output format:

    Saved with HW Version: 0.808-alpha
    Tempo: 120
    (0) kick	|x---|x---|x---|x---|
"""

import math
import struct
from typing import TYPE_CHECKING

from splicedrum.models.instrument import HIT

if TYPE_CHECKING:
    from splicedrum.models.instrument import Instrument
    from splicedrum.models.pattern import Pattern


def _to_float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def format_tempo(value: float) -> str:
    """
    Format a tempo as the shortest text that reads back to the same float32.

    Integral tempos drop the fractional part ("120", not "120.0").

    Args:
        value: Tempo value (float32 precision)

    Returns:
        Tempo text
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"

    target = _to_float32(value)
    text = repr(target)
    for precision in range(1, 10):
        candidate = f"{target:.{precision}g}"
        if _to_float32(float(candidate)) == target:
            text = repr(float(candidate))
            break

    if text.endswith(".0"):
        text = text[:-2]
    return text


def render_beat_group(group: bytes) -> str:
    """Render one beat group: 'x' for a hit, '-' for anything else."""
    return "".join("x" if b == HIT else "-" for b in group)


def render_instrument(instrument: "Instrument") -> str:
    """Render one instrument line, including the trailing newline."""
    grid = "|".join(render_beat_group(group) for group in instrument.steps)
    return f"({instrument.id}) {instrument.name}\t|{grid}|\n"


def render_pattern(pattern: "Pattern") -> str:
    """
    Render a pattern as display text.

    Args:
        pattern: Decoded pattern

    Returns:
        Version line, tempo line and one line per instrument
    """
    lines = [
        f"Saved with HW Version: {pattern.version}\n",
        f"Tempo: {format_tempo(pattern.tempo)}\n",
    ]
    lines.extend(render_instrument(instrument) for instrument in pattern.instruments)
    return "".join(lines)
