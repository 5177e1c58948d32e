#!/usr/bin/env python3
"""
Example: Basic pattern analysis

Shows how to decode a .splice file and inspect its instruments.
"""

import sys
from pathlib import Path

from splicedrum import SpliceReader, render_pattern
from splicedrum.analysis import SpliceValidator


def main():
    path = sys.argv[1] if len(sys.argv) > 1 else "pattern_1.splice"

    # Quick look at the header before decoding
    info = SpliceReader.get_file_info(path)
    print(f"File size: {info['size']} bytes")
    if not info["valid"]:
        print("Not a Splice pattern file")
        return 1

    pattern = SpliceReader.read(path)

    print(f"Version: {pattern.version}")
    print(f"Tempo: {pattern.tempo:g} BPM")
    print(f"Instruments: {len(pattern.instruments)} ({pattern.total_hits} hits)")
    print()

    for instrument in pattern.instruments:
        print(f"  {instrument.id:>3} {instrument.name:<16} {instrument.hit_count:>2} hits")
    print()

    # Same text the drum machine prints
    print(render_pattern(pattern), end="")

    result = SpliceValidator(Path(path).read_bytes(), path).validate()
    for issue in result.warnings + result.info:
        print(f"[{issue.area}] {issue.message}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
