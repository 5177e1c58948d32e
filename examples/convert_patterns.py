#!/usr/bin/env python3
"""
Example: Convert a folder of .splice patterns to Standard MIDI Files

Each pattern becomes a General MIDI drum loop next to the source file.
"""

import sys
from pathlib import Path

from splicedrum import SpliceError, SpliceReader
from splicedrum.converters import write_midi


def main():
    folder = Path(sys.argv[1] if len(sys.argv) > 1 else ".")

    for source in sorted(folder.glob("*.splice")):
        try:
            pattern = SpliceReader.read(source)
        except SpliceError as e:
            print(f"  Skipped {source.name}: {e}")
            continue

        output = write_midi(pattern, source.with_suffix(".mid"), bars=4)
        print(f"  Created: {output} ({output.stat().st_size} bytes)")


if __name__ == "__main__":
    main()
