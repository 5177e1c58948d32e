"""
splicedrum - Decoder for Splice drum machine pattern files.

This library provides tools to:
- Decode .splice binary pattern files into Pattern objects
- Render patterns as text
- Validate file structure and export patterns to MIDI

Example usage:
    from splicedrum import SpliceReader, render_pattern

    pattern = SpliceReader.read("pattern_1.splice")
    print(render_pattern(pattern))
"""

__version__ = "0.1.0"
__author__ = "splicedrum Contributors"

from splicedrum.formats.splice.decoder import decode_bytes, decode_splice_file
from splicedrum.formats.splice.reader import SpliceReader
from splicedrum.models.instrument import Instrument
from splicedrum.models.pattern import Pattern
from splicedrum.render import render_pattern
from splicedrum.utils.validation import (
    SpliceError,
    SpliceIOError,
    InvalidHeaderError,
    TruncatedError,
)

__all__ = [
    "SpliceReader",
    "decode_bytes",
    "decode_splice_file",
    "render_pattern",
    "Pattern",
    "Instrument",
    "SpliceError",
    "SpliceIOError",
    "InvalidHeaderError",
    "TruncatedError",
]
