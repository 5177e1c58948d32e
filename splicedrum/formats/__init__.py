"""Format handlers for Splice drum patterns."""

from splicedrum.formats.splice import SpliceDecoder, SpliceReader

__all__ = ["SpliceDecoder", "SpliceReader"]
