"""
Offset map for the Splice drum pattern file.

File Structure (all integers little-endian):
    0x00-0x0C: Header "SPLICE" + zero padding
    0x0D:      Payload size N (bytes following this field)
    0x0E-0x2D: Hardware version string, zero padded
    0x2E-0x31: Tempo (float32)
    0x32-...:  Instrument records until N bytes are consumed

Instrument record:
    +0: id (uint32)
    +4: name length L (uint8)
    +5: name (L bytes)
    +5+L: 4 beat groups of 4 step bytes
"""


class SpliceLayout:
    """
    Offsets and field sizes for the Splice format.
    """

    MAGIC = b"SPLICE"

    HEADER = (0x00, 13)
    PAYLOAD_SIZE = (0x0D, 1)
    VERSION = (0x0E, 32)
    TEMPO = (0x2E, 4)
    INSTRUMENTS_START = 0x32

    # Version + tempo, counted against the payload size
    METADATA_SIZE = 36

    # Instrument record fields
    INSTRUMENT_ID_SIZE = 4
    NAME_LENGTH_SIZE = 1
    BEAT_GROUPS = 4
    BEAT_GROUP_SIZE = 4
    STEPS_SIZE = BEAT_GROUPS * BEAT_GROUP_SIZE

    # Record size without the name
    RECORD_FIXED_SIZE = INSTRUMENT_ID_SIZE + NAME_LENGTH_SIZE + STEPS_SIZE

    @classmethod
    def record_size(cls, name_length: int) -> int:
        """Total size of an instrument record with a name of the given length."""
        return cls.RECORD_FIXED_SIZE + name_length
