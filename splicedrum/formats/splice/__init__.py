"""Splice format handlers."""

from splicedrum.formats.splice.layout import SpliceLayout
from splicedrum.formats.splice.decoder import (
    SpliceDecoder,
    decode_bytes,
    decode_splice_file,
    parse_header,
    parse_instrument,
    parse_instruments,
    parse_metadata,
    parse_payload_size,
)
from splicedrum.formats.splice.reader import SpliceReader

__all__ = [
    "SpliceLayout",
    "SpliceDecoder",
    "SpliceReader",
    "decode_bytes",
    "decode_splice_file",
    "parse_header",
    "parse_instrument",
    "parse_instruments",
    "parse_metadata",
    "parse_payload_size",
]
