"""Tests for Pattern and Instrument models."""

import dataclasses

import pytest

from splicedrum.models.instrument import STEP_COUNT, Instrument
from splicedrum.models.pattern import Pattern


class TestInstrument:
    """Test cases for the Instrument model."""

    def test_steps_shape_enforced(self):
        with pytest.raises(ValueError, match="4 beat groups"):
            Instrument(id=0, name="kick", steps=(b"\x00\x00\x00\x00",) * 3)

        with pytest.raises(ValueError, match="4 bytes"):
            Instrument(id=0, name="kick", steps=(b"\x00\x00\x00",) * 4)

    def test_from_steps(self):
        flat = bytes([1, 0, 0, 0, 0, 0, 1, 0, 1, 0, 0, 0, 0, 0, 1, 1])

        instrument = Instrument.from_steps(2, "clap", flat)

        assert instrument.steps == (
            b"\x01\x00\x00\x00",
            b"\x00\x00\x01\x00",
            b"\x01\x00\x00\x00",
            b"\x00\x00\x01\x01",
        )
        assert instrument.flat_steps == flat

    def test_from_steps_wrong_length(self):
        with pytest.raises(ValueError):
            Instrument.from_steps(2, "clap", bytes(15))

    def test_hits(self):
        instrument = Instrument.from_steps(0, "kick", bytes([1, 0, 2, 0xFF] * 4))

        assert len(instrument.hits) == STEP_COUNT
        assert instrument.hits[:4] == (True, False, False, False)
        assert instrument.hit_count == 4

    def test_steps_normalized_to_bytes(self):
        instrument = Instrument(id=0, name="kick", steps=[bytearray(4)] * 4)

        assert isinstance(instrument.steps, tuple)
        assert all(type(group) is bytes for group in instrument.steps)

    def test_immutable(self):
        instrument = Instrument(id=0, name="kick", steps=(bytes(4),) * 4)

        with pytest.raises(dataclasses.FrozenInstanceError):
            instrument.name = "snare"


class TestPattern:
    """Test cases for the Pattern model."""

    def test_defaults(self):
        pattern = Pattern()

        assert pattern.version == ""
        assert pattern.tempo == 120.0
        assert pattern.instruments == ()

    def test_instruments_become_tuple(self):
        kick = Instrument(id=0, name="kick", steps=(bytes(4),) * 4)

        pattern = Pattern(version="v", tempo=100.0, instruments=[kick])

        assert pattern.instruments == (kick,)

    def test_lookup(self):
        a = Instrument(id=5, name="Kick", steps=(bytes(4),) * 4)
        b = Instrument(id=5, name="kick", steps=(b"\x01" * 4,) * 4)
        pattern = Pattern(instruments=(a, b))

        assert pattern.get_instrument(5) is a
        assert pattern.get_instrument(6) is None
        assert pattern.get_instruments_by_name("KICK") == [a, b]
        assert pattern.total_hits == 16

    def test_equality(self):
        kick = Instrument(id=0, name="kick", steps=(bytes(4),) * 4)

        assert Pattern("v", 1.0, (kick,)) == Pattern("v", 1.0, (kick,))

    def test_repr(self):
        expected = "Pattern(version='0.808', tempo=120.0, instruments=0)"
        assert repr(Pattern("0.808", 120.0)) == expected
