"""Data models for Splice pattern representation."""

from splicedrum.models.pattern import Pattern
from splicedrum.models.instrument import (
    Instrument,
    BEAT_GROUPS,
    BEAT_GROUP_SIZE,
    STEP_COUNT,
    HIT,
)

__all__ = [
    "Pattern",
    "Instrument",
    "BEAT_GROUPS",
    "BEAT_GROUP_SIZE",
    "STEP_COUNT",
    "HIT",
]
