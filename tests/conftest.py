"""Test configuration and fixtures."""

import struct
from pathlib import Path
from typing import Iterable, Optional, Sequence

import pytest

HEADER = b"SPLICE" + bytes(7)
KICK_STEPS = (b"\x01\x00\x00\x00",) * 4


def build_record(instrument_id: int, name: bytes, steps: Sequence[bytes] = KICK_STEPS) -> bytes:
    """Raw bytes of one instrument record."""
    return struct.pack("<I", instrument_id) + bytes([len(name)]) + name + b"".join(steps)


def build_splice(
    version: bytes = b"0.808-alpha",
    tempo: float = 120.0,
    records: Iterable[bytes] = (),
    payload_size: Optional[int] = None,
    header: bytes = HEADER,
    trailing: bytes = b"",
) -> bytes:
    """Raw bytes of a complete .splice file."""
    body = version.ljust(32, b"\x00") + struct.pack("<f", tempo) + b"".join(records)
    if payload_size is None:
        payload_size = len(body)
    return header + bytes([payload_size]) + body + trailing


@pytest.fixture
def make_record():
    """Return the instrument record builder."""
    return build_record


@pytest.fixture
def make_splice():
    """Return the .splice file builder."""
    return build_splice


@pytest.fixture
def empty_pattern_data() -> bytes:
    """Version 0.808-alpha, tempo 120, no instruments."""
    return build_splice()


@pytest.fixture
def drum_pattern_data() -> bytes:
    """A four-instrument pattern."""
    records = [
        build_record(0, b"kick", KICK_STEPS),
        build_record(1, b"snare", (b"\x00\x00\x00\x00", b"\x01\x00\x00\x00") * 2),
        build_record(3, b"hh-open", (b"\x00\x00\x01\x00",) * 4),
        build_record(4, b"hh-close", (b"\x01\x01\x00\x01",) * 4),
    ]
    return build_splice(version=b"0.808-alpha", tempo=98.4, records=records)


@pytest.fixture
def drum_pattern_file(tmp_path: Path, drum_pattern_data: bytes) -> Path:
    """Write the four-instrument pattern to disk."""
    path = tmp_path / "pattern_1.splice"
    path.write_bytes(drum_pattern_data)
    return path


@pytest.fixture
def bad_header_file(tmp_path: Path) -> Path:
    """A file whose header is not SPLICE."""
    path = tmp_path / "not_a_pattern.splice"
    path.write_bytes(build_splice(header=b"NOTSPLICE\x00\x00\x00\x00"))
    return path


@pytest.fixture
def truncated_file(tmp_path: Path) -> Path:
    """A file whose payload size is one byte larger than the data."""
    path = tmp_path / "truncated.splice"
    path.write_bytes(build_splice(payload_size=37))
    return path
