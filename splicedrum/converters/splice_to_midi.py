"""
Splice to Standard MIDI File converter.

Writes a pattern as a one-track drum loop on GM channel 10. Each of the
16 steps is a 16th note; a step byte of 0x01 becomes a note, any other
value is a rest.
"""

import logging
import math
from pathlib import Path
from typing import Union

import mido

from splicedrum.models.instrument import Instrument, STEP_COUNT
from splicedrum.models.pattern import Pattern

logger = logging.getLogger(__name__)

DRUM_CHANNEL = 9  # GM channel 10 (0-based)
DEFAULT_TEMPO = 120.0
MIN_TEMPO = 4.0  # set_tempo holds at most 0xFFFFFF microseconds per beat

# Instrument name keyword -> GM percussion note
GM_DRUM_NOTES = {
    "kick": 36,
    "bass drum": 36,
    "rim": 37,
    "snare": 38,
    "clap": 39,
    "hh-close": 42,
    "hh-closed": 42,
    "closed": 42,
    "tom": 45,
    "hh-open": 46,
    "open": 46,
    "crash": 49,
    "cymbal": 49,
    "ride": 51,
    "cowbell": 56,
    "conga": 63,
    "maracas": 70,
    "shaker": 70,
    "clave": 75,
}

# GM percussion key range
GM_DRUM_LOW = 35
GM_DRUM_HIGH = 81


def gm_note_for(instrument: Instrument) -> int:
    """
    Pick a GM percussion note for an instrument.

    The name is matched against GM_DRUM_NOTES (longest keyword first);
    unknown names fall back to a note derived from the instrument id.
    """
    name = instrument.name.lower()
    for keyword in sorted(GM_DRUM_NOTES, key=len, reverse=True):
        if keyword in name:
            return GM_DRUM_NOTES[keyword]

    span = GM_DRUM_HIGH - GM_DRUM_LOW + 1
    return GM_DRUM_LOW + 1 + instrument.id % (span - 1)


def splice_to_midi(
    pattern: Pattern,
    ticks_per_beat: int = 480,
    bars: int = 1,
    velocity: int = 100,
) -> mido.MidiFile:
    """
    Convert a pattern to a type 0 MIDI file.

    Args:
        pattern: Decoded pattern
        ticks_per_beat: MIDI resolution
        bars: Number of times the 16-step bar is repeated
        velocity: Note-on velocity for hits (1-127)

    Returns:
        MidiFile ready to save
    """
    if bars < 1:
        raise ValueError(f"bars must be >= 1, got {bars}")
    if not 1 <= velocity <= 127:
        raise ValueError(f"velocity must be 1-127, got {velocity}")

    tempo = pattern.tempo
    if not math.isfinite(tempo) or tempo < MIN_TEMPO:
        logger.warning("Tempo %s is not usable, writing %s BPM", tempo, DEFAULT_TEMPO)
        tempo = DEFAULT_TEMPO

    step_ticks = ticks_per_beat // 4
    gate_ticks = max(step_ticks // 2, 1)

    # (absolute tick, order, message): note_off sorts before note_on at the same tick
    events = []
    for instrument in pattern.instruments:
        note = gm_note_for(instrument)
        for bar in range(bars):
            for step, hit in enumerate(instrument.hits):
                if not hit:
                    continue
                start = (bar * STEP_COUNT + step) * step_ticks
                note_on = mido.Message(
                    "note_on", channel=DRUM_CHANNEL, note=note, velocity=velocity
                )
                events.append((start, 1, note_on))
                events.append(
                    (
                        start + gate_ticks,
                        0,
                        mido.Message("note_off", channel=DRUM_CHANNEL, note=note, velocity=0),
                    )
                )
    events.sort(key=lambda e: (e[0], e[1]))

    track = mido.MidiTrack()
    # Meta text is stored as latin-1
    title = (pattern.version or "splice").encode("latin-1", errors="replace").decode("latin-1")
    track.append(mido.MetaMessage("track_name", name=title, time=0))
    track.append(mido.MetaMessage("set_tempo", tempo=mido.bpm2tempo(tempo), time=0))
    track.append(mido.MetaMessage("time_signature", numerator=4, denominator=4, time=0))

    now = 0
    for tick, _, message in events:
        track.append(message.copy(time=tick - now))
        now = tick

    end_tick = bars * STEP_COUNT * step_ticks
    track.append(mido.MetaMessage("end_of_track", time=max(end_tick - now, 0)))

    midi = mido.MidiFile(type=0, ticks_per_beat=ticks_per_beat)
    midi.tracks.append(track)
    return midi


def write_midi(pattern: Pattern, filepath: Union[str, Path], **kwargs) -> Path:
    """
    Convert a pattern and save it as a .mid file.

    Args:
        pattern: Decoded pattern
        filepath: Output path
        **kwargs: Passed to splice_to_midi()

    Returns:
        Path of the written file
    """
    filepath = Path(filepath)
    midi = splice_to_midi(pattern, **kwargs)
    midi.save(str(filepath))
    logger.debug("Wrote %d events to %s", len(midi.tracks[0]), filepath)
    return filepath
