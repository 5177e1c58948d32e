"""
Pattern data model - the decoded contents of a .splice file.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from splicedrum.models.instrument import Instrument


@dataclass(frozen=True)
class Pattern:
    """
    Complete drum pattern.

    A Pattern is built once by the decoder and never modified.
    Instruments keep file order and duplicate ids are allowed.

    Attributes:
        version: Hardware version string the pattern was saved with
        tempo: Tempo in BPM (float32 precision)
        instruments: Instrument tracks in file order
    """

    version: str = ""
    tempo: float = 120.0
    instruments: Tuple[Instrument, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "instruments", tuple(self.instruments))

    def get_instrument(self, instrument_id: int) -> Optional[Instrument]:
        """Get the first instrument with the given id."""
        for instrument in self.instruments:
            if instrument.id == instrument_id:
                return instrument
        return None

    def get_instruments_by_name(self, name: str) -> List[Instrument]:
        """Get all instruments whose name matches (case-insensitive)."""
        wanted = name.lower()
        return [i for i in self.instruments if i.name.lower() == wanted]

    @property
    def total_hits(self) -> int:
        """Number of hit steps across all instruments."""
        return sum(i.hit_count for i in self.instruments)

    def __str__(self) -> str:
        from splicedrum.render import render_pattern

        return render_pattern(self)

    def __repr__(self) -> str:
        return (
            f"Pattern(version={self.version!r}, tempo={self.tempo}, "
            f"instruments={len(self.instruments)})"
        )
