"""
Pattern converters.

Example:
    from splicedrum import SpliceReader
    from splicedrum.converters import write_midi

    pattern = SpliceReader.read("pattern_1.splice")
    write_midi(pattern, "pattern_1.mid")
"""

from splicedrum.converters.splice_to_midi import gm_note_for, splice_to_midi, write_midi

__all__ = [
    "gm_note_for",
    "splice_to_midi",
    "write_midi",
]
