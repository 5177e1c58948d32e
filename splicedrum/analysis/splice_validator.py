"""
Structural validator for Splice pattern files.

Unlike the decoder, which stops at the first problem, the validator walks
as much of the file as it can and reports every issue it finds.
"""

import struct
from collections import Counter
from dataclasses import dataclass, field
from typing import List

from splicedrum.formats.splice.layout import SpliceLayout
from splicedrum.models.instrument import HIT


@dataclass
class ValidationIssue:
    """A single validation issue."""

    severity: str  # "error", "warning", "info"
    area: str
    offset: int
    message: str
    expected: str = ""
    actual: str = ""


@dataclass
class ValidationResult:
    """Result of validating a .splice file."""

    filepath: str
    valid: bool
    errors: List[ValidationIssue] = field(default_factory=list)
    warnings: List[ValidationIssue] = field(default_factory=list)
    info: List[ValidationIssue] = field(default_factory=list)
    instrument_count: int = 0

    @property
    def total_issues(self) -> int:
        return len(self.errors) + len(self.warnings) + len(self.info)


class SpliceValidator:
    """Validate .splice file structure."""

    def __init__(self, data: bytes, filepath: str = "<bytes>"):
        self.data = data
        self.filepath = filepath
        self.issues: List[ValidationIssue] = []
        self.file_size = len(data)
        self._instrument_ids: List[int] = []

    def validate(self) -> ValidationResult:
        """Perform full validation and return result."""
        self.issues = []
        self._instrument_ids = []

        if self._validate_header() and self._validate_payload_size():
            if self._validate_metadata():
                self._validate_instruments()

        errors = [i for i in self.issues if i.severity == "error"]
        warnings = [i for i in self.issues if i.severity == "warning"]
        info = [i for i in self.issues if i.severity == "info"]

        return ValidationResult(
            filepath=self.filepath,
            valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            info=info,
            instrument_count=len(self._instrument_ids),
        )

    def _add_issue(
        self,
        severity: str,
        area: str,
        offset: int,
        message: str,
        expected: str = "",
        actual: str = "",
    ) -> None:
        """Add a validation issue."""
        self.issues.append(
            ValidationIssue(
                severity=severity,
                area=area,
                offset=offset,
                message=message,
                expected=expected,
                actual=actual,
            )
        )

    @property
    def payload_end(self) -> int:
        """File offset just past the declared payload."""
        return SpliceLayout.PAYLOAD_SIZE[0] + 1 + self.data[SpliceLayout.PAYLOAD_SIZE[0]]

    def _validate_header(self) -> bool:
        offset, size = SpliceLayout.HEADER
        if self.file_size < size:
            self._add_issue(
                "error",
                "Header",
                offset,
                f"File too short for header: {self.file_size} bytes",
                f"{size} bytes",
                f"{self.file_size} bytes",
            )
            return False

        magic = self.data[offset:size].rstrip(b"\x00")
        if magic != SpliceLayout.MAGIC:
            self._add_issue(
                "error",
                "Header",
                offset,
                "Invalid header magic",
                SpliceLayout.MAGIC.decode(),
                magic.decode("ascii", errors="replace"),
            )
            return False

        self._add_issue("info", "Header", offset, "Valid SPLICE magic")
        return True

    def _validate_payload_size(self) -> bool:
        offset = SpliceLayout.PAYLOAD_SIZE[0]
        if self.file_size <= offset:
            self._add_issue("error", "Payload Size", offset, "Missing payload size byte")
            return False

        payload_size = self.data[offset]
        end = self.payload_end

        if payload_size < SpliceLayout.METADATA_SIZE:
            self._add_issue(
                "error",
                "Payload Size",
                offset,
                f"Payload size {payload_size} is smaller than version + tempo",
                f">= {SpliceLayout.METADATA_SIZE}",
                str(payload_size),
            )

        if end > self.file_size:
            self._add_issue(
                "error",
                "Payload Size",
                offset,
                f"Payload declares {payload_size} bytes, file has {self.file_size - offset - 1}",
                f"{end} bytes",
                f"{self.file_size} bytes",
            )
        elif end < self.file_size:
            self._add_issue(
                "warning",
                "Trailing Data",
                end,
                f"{self.file_size - end} bytes after payload are ignored",
            )
        else:
            self._add_issue("info", "Payload Size", offset, f"{payload_size} bytes, matches file")

        return True

    def _validate_metadata(self) -> bool:
        version_offset = SpliceLayout.VERSION[0]
        tempo_offset, tempo_size = SpliceLayout.TEMPO
        end = min(self.payload_end, self.file_size)

        if tempo_offset + tempo_size > end:
            self._add_issue(
                "error",
                "Metadata",
                version_offset,
                "Version/tempo block is truncated",
                f"{SpliceLayout.METADATA_SIZE} bytes",
                f"{max(end - version_offset, 0)} bytes",
            )
            return False

        tempo = struct.unpack("<f", self.data[tempo_offset : tempo_offset + tempo_size])[0]
        self._add_issue("info", "Tempo", tempo_offset, f"Tempo {tempo:.2f}")
        return True

    def _validate_instruments(self) -> None:
        end = self.payload_end
        readable_end = min(end, self.file_size)
        pos = SpliceLayout.INSTRUMENTS_START

        while pos < end:
            fixed_head = SpliceLayout.INSTRUMENT_ID_SIZE + SpliceLayout.NAME_LENGTH_SIZE
            if pos + fixed_head > readable_end:
                self._add_issue(
                    "error",
                    "Instrument",
                    pos,
                    "Instrument record header overruns payload",
                    f"{fixed_head} bytes",
                    f"{readable_end - pos} bytes",
                )
                return

            instrument_id = struct.unpack("<I", self.data[pos : pos + 4])[0]
            name_length = self.data[pos + 4]
            record_size = SpliceLayout.record_size(name_length)

            if pos + record_size > readable_end:
                self._add_issue(
                    "error",
                    "Instrument",
                    pos,
                    f"Instrument {instrument_id} record overruns payload",
                    f"{record_size} bytes",
                    f"{readable_end - pos} bytes",
                )
                return

            steps_start = pos + record_size - SpliceLayout.STEPS_SIZE
            steps = self.data[steps_start : pos + record_size]
            odd = sorted({b for b in steps if b not in (0x00, HIT)})
            if odd:
                values = " ".join(f"0x{b:02X}" for b in odd)
                self._add_issue(
                    "info",
                    "Steps",
                    steps_start,
                    f"Instrument {instrument_id} has step values {values} (shown as rest)",
                )

            self._instrument_ids.append(instrument_id)
            pos += record_size

        for instrument_id, count in Counter(self._instrument_ids).items():
            if count > 1:
                self._add_issue(
                    "info",
                    "Instrument",
                    SpliceLayout.INSTRUMENTS_START,
                    f"Instrument id {instrument_id} appears {count} times",
                )

        self._add_issue(
            "info",
            "Instruments",
            SpliceLayout.INSTRUMENTS_START,
            f"{len(self._instrument_ids)} instrument records fill the payload exactly",
        )
