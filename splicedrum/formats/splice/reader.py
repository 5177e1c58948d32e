"""
Splice pattern file reader.

Reads .splice binary files and converts them to the Pattern model.
"""

import logging
from pathlib import Path
from typing import Union

from splicedrum.formats.splice.decoder import decode_bytes, decode_splice_file
from splicedrum.formats.splice.layout import SpliceLayout
from splicedrum.models.pattern import Pattern
from splicedrum.utils.validation import SpliceIOError, validate_splice_header

logger = logging.getLogger(__name__)


class SpliceReader:
    """
    Reader for Splice drum pattern files.

    Example:
        pattern = SpliceReader.read("pattern_1.splice")
        print(f"Version: {pattern.version}, Tempo: {pattern.tempo}")
    """

    @classmethod
    def read(cls, filepath: Union[str, Path]) -> Pattern:
        """
        Read a .splice file and return a Pattern.

        Args:
            filepath: Path to .splice file

        Returns:
            Parsed Pattern object
        """
        reader = cls()
        return reader.parse_file(filepath)

    def parse_file(self, filepath: Union[str, Path]) -> Pattern:
        """
        Parse a .splice file.

        Args:
            filepath: Path to .splice file

        Returns:
            Parsed Pattern object

        Raises:
            SpliceIOError: If the file does not exist or cannot be read
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise SpliceIOError(f"File not found: {filepath}")

        return decode_splice_file(filepath)

    def parse_bytes(self, data: bytes) -> Pattern:
        """
        Parse Splice data from bytes.

        Args:
            data: Raw file contents

        Returns:
            Parsed Pattern object
        """
        return decode_bytes(data)

    @classmethod
    def can_read(cls, filepath: Union[str, Path]) -> bool:
        """
        Check if a file looks like a Splice pattern.

        Only the header is checked.

        Args:
            filepath: Path to check

        Returns:
            True if the file has a valid Splice header
        """
        filepath = Path(filepath)

        if not filepath.is_file():
            return False

        try:
            with open(filepath, "rb") as f:
                header = f.read(SpliceLayout.HEADER[1])
        except OSError as e:
            logger.debug("Cannot read %s: %s", filepath, e)
            return False

        return validate_splice_header(header)

    @classmethod
    def get_file_info(cls, filepath: Union[str, Path]) -> dict:
        """
        Get basic information about a .splice file without full parsing.

        Args:
            filepath: Path to .splice file

        Returns:
            Dictionary with file info
        """
        filepath = Path(filepath)

        with open(filepath, "rb") as f:
            data = f.read()

        info = {
            "valid": False,
            "size": len(data),
        }

        header_size = SpliceLayout.HEADER[1]
        if len(data) >= header_size:
            info["header"] = data[:header_size].rstrip(b"\x00").decode("ascii", errors="replace")
            info["valid"] = validate_splice_header(data)

        size_offset = SpliceLayout.PAYLOAD_SIZE[0]
        if len(data) > size_offset:
            payload_size = data[size_offset]
            info["payload_size"] = payload_size
            info["expected_size"] = size_offset + 1 + payload_size

        version_offset, version_size = SpliceLayout.VERSION
        if len(data) >= version_offset + version_size:
            raw = data[version_offset : version_offset + version_size]
            info["version"] = raw.rstrip(b"\x00").decode("utf-8", errors="replace")

        return info
