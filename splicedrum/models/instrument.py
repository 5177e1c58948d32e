"""
Instrument data model - one voice of a drum pattern.
"""

from dataclasses import dataclass
from typing import Tuple

BEAT_GROUPS = 4  # Beat groups per instrument
BEAT_GROUP_SIZE = 4  # Steps per beat group
STEP_COUNT = BEAT_GROUPS * BEAT_GROUP_SIZE
HIT = 0x01  # Any other step value is a rest


@dataclass(frozen=True)
class Instrument:
    """
    A single instrument track within a pattern.

    Each instrument carries 16 steps stored as 4 beat groups of
    4 raw bytes. Step bytes are kept exactly as read from the file.

    Attributes:
        id: Instrument id (uint32, not necessarily unique)
        name: Instrument name
        steps: 4 beat groups of 4 step bytes each
    """

    id: int
    name: str
    steps: Tuple[bytes, ...]

    def __post_init__(self):
        if len(self.steps) != BEAT_GROUPS:
            raise ValueError(f"Instrument needs {BEAT_GROUPS} beat groups, got {len(self.steps)}")
        for group in self.steps:
            if len(group) != BEAT_GROUP_SIZE:
                raise ValueError(
                    f"Beat group must be {BEAT_GROUP_SIZE} bytes, got {len(group)}"
                )
        # Normalize to an immutable tuple of bytes
        object.__setattr__(self, "steps", tuple(bytes(group) for group in self.steps))

    @property
    def flat_steps(self) -> bytes:
        """All 16 step bytes in order."""
        return b"".join(self.steps)

    @property
    def hits(self) -> Tuple[bool, ...]:
        """One flag per step, True where the step is a hit."""
        return tuple(b == HIT for b in self.flat_steps)

    @property
    def hit_count(self) -> int:
        """Number of hit steps."""
        return sum(self.hits)

    @classmethod
    def from_steps(cls, id: int, name: str, steps: bytes) -> "Instrument":
        """
        Create an instrument from 16 flat step bytes.

        Args:
            id: Instrument id
            name: Instrument name
            steps: 16 step bytes

        Returns:
            New Instrument instance
        """
        if len(steps) != STEP_COUNT:
            raise ValueError(f"Expected {STEP_COUNT} step bytes, got {len(steps)}")

        groups = tuple(
            steps[i : i + BEAT_GROUP_SIZE] for i in range(0, STEP_COUNT, BEAT_GROUP_SIZE)
        )
        return cls(id=id, name=name, steps=groups)
