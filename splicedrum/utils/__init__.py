"""Utility modules for Splice pattern handling."""

from splicedrum.utils.validation import (
    SpliceError,
    SpliceIOError,
    InvalidHeaderError,
    TruncatedError,
    validate_splice_header,
)

__all__ = [
    "SpliceError",
    "SpliceIOError",
    "InvalidHeaderError",
    "TruncatedError",
    "validate_splice_header",
]
