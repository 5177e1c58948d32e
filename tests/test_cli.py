"""Tests for the splicedrum command line."""

import mido
import pytest
from typer.testing import CliRunner

from cli.app import app
from cli.commands.dump import build_regions


@pytest.fixture
def runner():
    return CliRunner()


class TestPrintCommand:
    def test_plain_output(self, runner, drum_pattern_file):
        result = runner.invoke(app, ["print", str(drum_pattern_file)])

        assert result.exit_code == 0
        assert result.output == (
            "Saved with HW Version: 0.808-alpha\n"
            "Tempo: 98.4\n"
            "(0) kick\t|x---|x---|x---|x---|\n"
            "(1) snare\t|----|x---|----|x---|\n"
            "(3) hh-open\t|--x-|--x-|--x-|--x-|\n"
            "(4) hh-close\t|xx-x|xx-x|xx-x|xx-x|\n"
        )

    def test_invalid_header(self, runner, bad_header_file):
        result = runner.invoke(app, ["print", str(bad_header_file)])

        assert result.exit_code == 1
        assert "Not a Splice pattern file" in result.output

    def test_truncated(self, runner, truncated_file):
        result = runner.invoke(app, ["print", str(truncated_file)])

        assert result.exit_code == 1
        assert "Corrupt or truncated" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(app, ["print", str(tmp_path / "missing.splice")])

        assert result.exit_code == 1
        assert "File not found" in result.output


class TestInfoCommand:
    def test_info(self, runner, drum_pattern_file):
        result = runner.invoke(app, ["info", str(drum_pattern_file)])

        assert result.exit_code == 0
        assert "0.808-alpha" in result.output
        assert "98.4 BPM" in result.output
        assert "hh-close" in result.output

    def test_info_plain(self, runner, drum_pattern_file):
        result = runner.invoke(app, ["info", str(drum_pattern_file), "--plain"])

        assert result.exit_code == 0
        assert result.output.startswith("Saved with HW Version: 0.808-alpha\nTempo: 98.4\n")

    def test_info_hex(self, runner, drum_pattern_file):
        result = runner.invoke(app, ["info", str(drum_pattern_file), "--hex"])

        assert result.exit_code == 0
        assert "53 50 4C 49 43 45" in result.output


class TestInstrumentsCommand:
    def test_list(self, runner, drum_pattern_file):
        result = runner.invoke(app, ["instruments", str(drum_pattern_file)])

        assert result.exit_code == 0
        assert "snare" in result.output

    def test_filter_no_match(self, runner, drum_pattern_file):
        result = runner.invoke(app, ["instruments", str(drum_pattern_file), "--id", "99"])

        assert result.exit_code == 1
        assert "No matching instruments" in result.output


class TestDumpCommand:
    def test_dump(self, runner, drum_pattern_file):
        result = runner.invoke(app, ["dump", str(drum_pattern_file)])

        assert result.exit_code == 0
        assert "HEADER" in result.output
        assert "STEPS" in result.output

    def test_dump_damaged_file(self, runner, truncated_file):
        result = runner.invoke(app, ["dump", str(truncated_file)])

        assert result.exit_code == 0
        assert "TRUNCATED" in result.output

    def test_regions_cover_file(self, drum_pattern_data):
        regions = build_regions(drum_pattern_data)

        names = [r[2] for r in regions]
        assert names[:4] == ["HEADER", "SIZE", "VERSION", "TEMPO"]
        assert names.count("STEPS") == 4
        assert regions[-1][1] == len(drum_pattern_data)


class TestValidateCommand:
    def test_valid(self, runner, drum_pattern_file):
        result = runner.invoke(app, ["validate", str(drum_pattern_file)])

        assert result.exit_code == 0
        assert "VALID" in result.output

    def test_invalid(self, runner, truncated_file):
        result = runner.invoke(app, ["validate", str(truncated_file)])

        assert result.exit_code == 1
        assert "INVALID" in result.output

    def test_strict_fails_on_warning(self, runner, tmp_path, make_splice):
        path = tmp_path / "trailing.splice"
        path.write_bytes(make_splice(trailing=b"\x00"))

        assert runner.invoke(app, ["validate", str(path)]).exit_code == 0
        assert runner.invoke(app, ["validate", str(path), "--strict"]).exit_code == 1


class TestConvertCommand:
    def test_convert(self, runner, drum_pattern_file, tmp_path):
        output = tmp_path / "out" / "loop.mid"

        result = runner.invoke(
            app, ["convert", str(drum_pattern_file), "-o", str(output), "--bars", "2"]
        )

        assert result.exit_code == 0
        assert output.exists()
        assert mido.MidiFile(str(output)).ticks_per_beat == 480

    def test_default_output_path(self, runner, drum_pattern_file):
        result = runner.invoke(app, ["convert", str(drum_pattern_file)])

        assert result.exit_code == 0
        assert drum_pattern_file.with_suffix(".mid").exists()

    def test_bad_velocity(self, runner, drum_pattern_file, tmp_path):
        output = tmp_path / "x.mid"
        result = runner.invoke(
            app, ["convert", str(drum_pattern_file), "-o", str(output), "--velocity", "0"]
        )

        assert result.exit_code == 1


class TestVersion:
    def test_version_command(self, runner):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "splicedrum" in result.output

    def test_version_flag(self, runner):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "version" in result.output
