"""Tests for the structural validator."""

from splicedrum.analysis import SpliceValidator


def areas(issues):
    return [issue.area for issue in issues]


class TestSpliceValidator:
    """Test cases for SpliceValidator."""

    def test_valid_file(self, drum_pattern_data):
        result = SpliceValidator(drum_pattern_data, "pattern_1.splice").validate()

        assert result.valid
        assert result.errors == []
        assert result.warnings == []
        assert result.instrument_count == 4
        assert result.filepath == "pattern_1.splice"

    def test_bad_header(self, make_splice):
        result = SpliceValidator(make_splice(header=b"WRONG" + bytes(8))).validate()

        assert not result.valid
        assert areas(result.errors) == ["Header"]
        assert result.errors[0].actual == "WRONG"

    def test_short_file(self):
        result = SpliceValidator(b"SPLICE").validate()

        assert not result.valid
        assert result.errors[0].area == "Header"

    def test_missing_size_byte(self):
        result = SpliceValidator(b"SPLICE" + bytes(7)).validate()

        assert not result.valid
        assert areas(result.errors) == ["Payload Size"]

    def test_payload_longer_than_file(self, make_splice):
        result = SpliceValidator(make_splice(payload_size=37)).validate()

        assert not result.valid
        assert "Payload Size" in areas(result.errors)

    def test_payload_smaller_than_metadata(self, make_splice):
        result = SpliceValidator(make_splice(payload_size=10)).validate()

        assert not result.valid
        assert "Metadata" in areas(result.errors)

    def test_trailing_data_is_warning(self, make_splice):
        result = SpliceValidator(make_splice(trailing=b"\x00\x00")).validate()

        assert result.valid
        assert areas(result.warnings) == ["Trailing Data"]
        assert result.warnings[0].offset == 50

    def test_record_overrun(self, make_splice, make_record):
        record = make_record(0, b"kick")
        data = make_splice(records=[record], payload_size=36 + len(record) - 3, trailing=b"xyz")

        result = SpliceValidator(data).validate()

        assert not result.valid
        assert areas(result.errors) == ["Instrument"]
        assert result.errors[0].offset == 50

    def test_odd_step_values_reported(self, make_splice, make_record):
        data = make_splice(records=[make_record(0, b"kick", (b"\x01\x02\x00\xff",) * 4)])

        result = SpliceValidator(data).validate()

        assert result.valid
        messages = [i.message for i in result.info if i.area == "Steps"]
        assert messages == ["Instrument 0 has step values 0x02 0xFF (shown as rest)"]

    def test_duplicate_ids_reported(self, make_splice, make_record):
        data = make_splice(records=[make_record(2, b"a"), make_record(2, b"b")])

        result = SpliceValidator(data).validate()

        assert result.valid
        assert any("appears 2 times" in i.message for i in result.info)
