"""Tests for MIDI export."""

import mido
import pytest

from splicedrum.converters import gm_note_for, splice_to_midi, write_midi
from splicedrum.formats.splice.decoder import decode_bytes
from splicedrum.models.instrument import Instrument
from splicedrum.models.pattern import Pattern


def note_ons(midi):
    return [m for m in midi.tracks[0] if m.type == "note_on" and m.velocity > 0]


class TestGmNoteMapping:
    @pytest.mark.parametrize(
        "name,note",
        [
            ("kick", 36),
            ("Snare", 38),
            ("clap", 39),
            ("hh-open", 46),
            ("hh-close", 42),
            ("cowbell", 56),
            ("low tom", 45),
        ],
    )
    def test_known_names(self, name, note):
        assert gm_note_for(Instrument(id=0, name=name, steps=(bytes(4),) * 4)) == note

    def test_unknown_name_uses_id(self):
        instrument = Instrument(id=1000, name="zap", steps=(bytes(4),) * 4)

        assert 35 <= gm_note_for(instrument) <= 81


class TestSpliceToMidi:
    """Test cases for splice_to_midi()."""

    def test_one_note_per_hit(self, drum_pattern_data):
        pattern = decode_bytes(drum_pattern_data)

        midi = splice_to_midi(pattern)

        assert midi.type == 0
        assert len(note_ons(midi)) == pattern.total_hits
        assert all(m.channel == 9 for m in note_ons(midi))

    def test_bars_repeat(self, drum_pattern_data):
        pattern = decode_bytes(drum_pattern_data)

        midi = splice_to_midi(pattern, bars=3)

        assert len(note_ons(midi)) == pattern.total_hits * 3

    def test_kick_timing(self):
        kick = Instrument(id=0, name="kick", steps=(b"\x01\x00\x00\x00",) * 4)
        midi = splice_to_midi(Pattern("v", 120.0, (kick,)), ticks_per_beat=480)

        ticks = []
        now = 0
        for message in midi.tracks[0]:
            now += message.time
            if message.type == "note_on":
                ticks.append(now)

        assert ticks == [0, 480, 960, 1440]
        assert now == 1920

    def test_tempo(self):
        midi = splice_to_midi(Pattern("v", 98.4, ()))

        tempos = [m.tempo for m in midi.tracks[0] if m.type == "set_tempo"]
        assert tempos == [mido.bpm2tempo(98.4)]

    def test_unusable_tempo_falls_back(self):
        midi = splice_to_midi(Pattern("v", 0.0, ()))

        tempos = [m.tempo for m in midi.tracks[0] if m.type == "set_tempo"]
        assert tempos == [mido.bpm2tempo(120.0)]

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            splice_to_midi(Pattern(), bars=0)
        with pytest.raises(ValueError):
            splice_to_midi(Pattern(), velocity=200)

    def test_write_midi(self, tmp_path, drum_pattern_data):
        pattern = decode_bytes(drum_pattern_data)
        path = write_midi(pattern, tmp_path / "loop.mid")

        loaded = mido.MidiFile(str(path))

        assert len(note_ons(loaded)) == pattern.total_hits
