"""
Splice drum pattern decoder.

Decodes the binary .splice format into an immutable Pattern. The decode
is a single forward pass over the byte source:

    Header -> Payload size -> Version -> Tempo -> Instrument loop

The payload size byte is the only length authority. The instrument loop
keeps an explicit count of bytes remaining in the frame and must land
on exactly zero; any overrun is reported as TruncatedError.
"""

import io
import logging
import struct
from pathlib import Path
from typing import BinaryIO, List, Optional, Tuple, Union

from splicedrum.formats.splice.layout import SpliceLayout
from splicedrum.models.instrument import Instrument
from splicedrum.models.pattern import Pattern
from splicedrum.utils.validation import InvalidHeaderError, SpliceIOError, TruncatedError

logger = logging.getLogger(__name__)


def _take(data: bytes, offset: int, size: int, end: int, field_name: str) -> bytes:
    """Slice `size` bytes at `offset`, failing if that would cross `end`."""
    if offset + size > end:
        raise TruncatedError(
            f"Truncated {field_name} at offset 0x{offset:02X}: "
            f"need {size} bytes, {max(end - offset, 0)} left",
            offset=offset,
            expected=size,
            available=max(end - offset, 0),
        )
    return data[offset : offset + size]


def _decode_text(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace")


def parse_header(buf: bytes) -> None:
    """
    Validate the 13-byte magic header.

    Args:
        buf: First 13 bytes of the file

    Raises:
        InvalidHeaderError: If the zero-trimmed header is not "SPLICE"
    """
    size = SpliceLayout.HEADER[1]
    if len(buf) != size:
        raise InvalidHeaderError(f"Header must be {size} bytes, got {len(buf)}")

    magic = buf.rstrip(b"\x00")
    if magic != SpliceLayout.MAGIC:
        raise InvalidHeaderError(f"Invalid Splice header: {magic!r}")


def parse_payload_size(buf: bytes) -> int:
    """Read the payload size byte (0-255)."""
    if len(buf) != SpliceLayout.PAYLOAD_SIZE[1]:
        raise TruncatedError("Missing payload size byte", expected=1, available=len(buf))
    return buf[0]


def parse_metadata(
    data: bytes, offset: int = 0, limit: Optional[int] = None
) -> Tuple[str, float, int]:
    """
    Parse the version string and tempo.

    Args:
        data: Buffer holding the metadata
        offset: Position of the version field in `data`
        limit: Bytes that may be consumed from `offset` (default: rest of data)

    Returns:
        (version, tempo, bytes consumed)

    Raises:
        TruncatedError: If fewer than 36 bytes are available
    """
    end = len(data) if limit is None else min(len(data), offset + limit)
    if end - offset < SpliceLayout.METADATA_SIZE:
        raise TruncatedError(
            f"Payload too short for version and tempo: "
            f"{max(end - offset, 0)} of {SpliceLayout.METADATA_SIZE} bytes",
            offset=offset,
            expected=SpliceLayout.METADATA_SIZE,
            available=max(end - offset, 0),
        )

    pos = offset
    version_raw = _take(data, pos, SpliceLayout.VERSION[1], end, "version")
    pos += SpliceLayout.VERSION[1]
    version = _decode_text(version_raw.rstrip(b"\x00"))

    tempo_raw = _take(data, pos, SpliceLayout.TEMPO[1], end, "tempo")
    pos += SpliceLayout.TEMPO[1]
    tempo = struct.unpack("<f", tempo_raw)[0]

    return version, tempo, pos - offset


def parse_instrument(
    data: bytes, offset: int = 0, limit: Optional[int] = None
) -> Tuple[Instrument, int]:
    """
    Parse one instrument record.

    Args:
        data: Buffer holding the record
        offset: Position of the record in `data`
        limit: Bytes that may be consumed from `offset` (default: rest of data)

    Returns:
        (instrument, bytes consumed), consumed = 5 + name length + 16

    Raises:
        TruncatedError: If any field runs past the limit
    """
    end = len(data) if limit is None else min(len(data), offset + limit)
    pos = offset

    id_raw = _take(data, pos, SpliceLayout.INSTRUMENT_ID_SIZE, end, "instrument id")
    pos += SpliceLayout.INSTRUMENT_ID_SIZE
    instrument_id = struct.unpack("<I", id_raw)[0]

    name_length = _take(data, pos, SpliceLayout.NAME_LENGTH_SIZE, end, "name length")[0]
    pos += SpliceLayout.NAME_LENGTH_SIZE

    name_raw = _take(data, pos, name_length, end, "instrument name")
    pos += name_length

    steps = []
    for _ in range(SpliceLayout.BEAT_GROUPS):
        steps.append(_take(data, pos, SpliceLayout.BEAT_GROUP_SIZE, end, "beat group"))
        pos += SpliceLayout.BEAT_GROUP_SIZE

    instrument = Instrument(id=instrument_id, name=_decode_text(name_raw), steps=tuple(steps))
    return instrument, pos - offset


def parse_instruments(data: bytes, offset: int, remaining: int) -> Tuple[Instrument, ...]:
    """
    Parse instrument records until exactly `remaining` bytes are consumed.

    Args:
        data: Buffer holding the records
        offset: Position of the first record
        remaining: Bytes left in the payload frame

    Returns:
        Instruments in file order

    Raises:
        TruncatedError: If a record overruns the frame
    """
    if remaining < 0:
        raise TruncatedError(
            f"Negative instrument area: {remaining} bytes", offset=offset, available=remaining
        )

    instruments: List[Instrument] = []
    pos = offset

    while remaining > 0:
        instrument, consumed = parse_instrument(data, pos, remaining)
        logger.debug(
            "Instrument %d %r at 0x%02X (%d bytes)", instrument.id, instrument.name, pos, consumed
        )
        instruments.append(instrument)
        pos += consumed
        remaining -= consumed

    return tuple(instruments)


class SpliceDecoder:
    """
    Decoder for a single Splice byte source.

    The stream is read in order and never rewound. The decoder does not
    close the stream; use decode_splice_file() to decode from a path.

    Example:
        with open("pattern_1.splice", "rb") as f:
            pattern = SpliceDecoder(f).decode()
    """

    def __init__(self, stream: BinaryIO):
        """
        Initialize decoder.

        Args:
            stream: Binary stream positioned at the start of the file
        """
        self.stream = stream
        self.data = bytearray()

    def _read_exact(self, size: int, field_name: str) -> Optional[bytes]:
        """Read up to `size` bytes; returns None on a short read."""
        chunks = []
        wanted = size
        try:
            while wanted > 0:
                chunk = self.stream.read(wanted)
                if not chunk:
                    break
                chunks.append(chunk)
                wanted -= len(chunk)
        except OSError as e:
            raise SpliceIOError(f"Error reading {field_name}: {e}") from e

        buf = b"".join(chunks)
        self.data.extend(buf)
        if len(buf) != size:
            return None
        return buf

    def decode(self) -> Pattern:
        """
        Decode the stream into a Pattern.

        Returns:
            Fully populated Pattern

        Raises:
            SpliceIOError: If the header or size byte cannot be read
            InvalidHeaderError: If the magic header is wrong
            TruncatedError: If the payload is shorter than declared or corrupt
        """
        header_size = SpliceLayout.HEADER[1]
        header = self._read_exact(header_size, "header")
        if header is None:
            raise SpliceIOError(
                f"Unexpected end of data reading header: "
                f"got {len(self.data)} of {header_size} bytes"
            )
        parse_header(header)
        logger.debug("Header OK")

        size_byte = self._read_exact(SpliceLayout.PAYLOAD_SIZE[1], "payload size")
        if size_byte is None:
            raise SpliceIOError("Unexpected end of data reading payload size")
        payload_size = parse_payload_size(size_byte)
        logger.debug("Payload size: %d bytes", payload_size)

        payload_start = len(self.data)
        payload = self._read_exact(payload_size, "payload")
        if payload is None:
            available = len(self.data) - payload_start
            raise TruncatedError(
                f"Payload declares {payload_size} bytes but only {available} are available",
                offset=payload_start,
                expected=payload_size,
                available=available,
            )

        version, tempo, consumed = parse_metadata(self.data, payload_start, payload_size)
        logger.debug("Version %r, tempo %s", version, tempo)

        instruments = parse_instruments(
            self.data, payload_start + consumed, payload_size - consumed
        )
        logger.debug("Decoded %d instruments", len(instruments))

        return Pattern(version=version, tempo=tempo, instruments=instruments)


def decode_bytes(data: bytes) -> Pattern:
    """
    Decode a Splice pattern held in memory.

    Bytes after the declared payload are ignored.

    Args:
        data: Complete file contents

    Returns:
        Decoded Pattern
    """
    with io.BytesIO(data) as stream:
        pattern = SpliceDecoder(stream).decode()
        trailing = len(data) - stream.tell()
    if trailing:
        logger.debug("Ignoring %d trailing bytes", trailing)
    return pattern


def decode_splice_file(filepath: Union[str, Path]) -> Pattern:
    """
    Decode a .splice file.

    The file is closed on every exit path, including failures.

    Args:
        filepath: Path to .splice file

    Returns:
        Decoded Pattern
    """
    filepath = Path(filepath)
    logger.debug("Decoding %s", filepath)

    try:
        f = open(filepath, "rb")
    except OSError as e:
        raise SpliceIOError(f"Cannot open {filepath}: {e}") from e

    with f:
        return SpliceDecoder(f).decode()
