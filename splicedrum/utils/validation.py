"""
Error types and lightweight checks for Splice pattern data.
"""

from typing import Optional


class SpliceError(Exception):
    """Base class for all Splice decoding failures."""

    pass


class SpliceIOError(SpliceError):
    """Raised when the byte source cannot supply the requested bytes."""

    pass


class InvalidHeaderError(SpliceError):
    """Raised when the magic header is not "SPLICE"."""

    pass


class TruncatedError(SpliceError):
    """
    Raised when the declared payload size disagrees with the data.

    Attributes:
        offset: File offset where the shortfall was detected
        expected: Number of bytes the layout required
        available: Number of bytes actually left
    """

    def __init__(
        self,
        message: str,
        offset: Optional[int] = None,
        expected: Optional[int] = None,
        available: Optional[int] = None,
    ):
        super().__init__(message)
        self.offset = offset
        self.expected = expected
        self.available = available


def validate_splice_header(data: bytes) -> bool:
    """
    Validate the Splice magic header.

    Args:
        data: File data (at least 13 bytes)

    Returns:
        True if the first 13 bytes are "SPLICE" plus zero padding
    """
    if len(data) < 13:
        return False

    return data[:13].rstrip(b"\x00") == b"SPLICE"
