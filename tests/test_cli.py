import pytest

from SFG import __version__
from SFG.cli import build_parser, main


def frame_count(path):
    return path.stat().st_size // 2048


class TestGenerate:
    def test_writes_pattern_file(self, definition_files, capsys):
        assert main(["--config", str(definition_files)]) == 0
        out = capsys.readouterr().out
        assert f"Version {__version__}" in out
        assert "Frame group(s) required" in out

        pattern = definition_files.parent / "pattern.bin"
        # longest sequence 8 (polyA + ramp), 8 // 4 + 1 = 3 groups of 4
        assert frame_count(pattern) == 12

    def test_dict_prints_report_and_writes_nothing(self, definition_files, capsys):
        assert main(["-config", str(definition_files), "-dict"]) == 0
        out = capsys.readouterr().out
        assert "Fragment Name" in out
        assert "3,7,2" in out
        assert not (definition_files.parent / "pattern.bin").exists()

    def test_capacity_failure(self, definition_files, capsys):
        text = definition_files.read_text().replace("64K", "8K")
        definition_files.write_text(text)
        assert main(["--config", str(definition_files)]) == 1
        captured = capsys.readouterr()
        assert "Frames required in total" in captured.out
        assert "won't fit" in captured.err
        assert not (definition_files.parent / "pattern.bin").exists()

    def test_definition_error_exit_status(self, definition_files, capsys):
        (definition_files.parent / "distribution.def").write_text("1 $ nothing\n")
        assert main(["--config", str(definition_files)]) == 1
        assert "Undefined fragment name 'nothing'" in capsys.readouterr().err

    def test_invalid_utf8_definition_file(self, definition_files, capsys):
        (definition_files.parent / "fragments.def").write_bytes(b"ramp 1, 2\n\xff\xfe 3\n")
        assert main(["--config", str(definition_files)]) == 1
        assert "fragments.def:2: Invalid UTF-8" in capsys.readouterr().err
        assert not (definition_files.parent / "pattern.bin").exists()

    def test_malformed_config_line(self, definition_files, capsys):
        with open(definition_files, "a") as f:
            f.write("data_frames = 4 8\n")
        assert main(["--config", str(definition_files)]) == 1
        assert "Unexpected text after the value of 'data_frames'" in capsys.readouterr().err

    def test_missing_required_key(self, definition_files, capsys):
        kept = [l for l in definition_files.read_text().splitlines()
                if not l.startswith("output_file")]
        definition_files.write_text("\n".join(kept) + "\n")
        assert main(["--config", str(definition_files)]) == 1
        assert "Missing required key(s): output_file" in capsys.readouterr().err

    def test_same_seed_same_output(self, definition_files):
        pattern = definition_files.parent / "pattern.bin"
        main(["--config", str(definition_files)])
        first = pattern.read_bytes()
        main(["--config", str(definition_files)])
        assert pattern.read_bytes() == first

    def test_missing_config(self, tmp_path, capsys):
        assert main(["--config", str(tmp_path / "none.conf")]) == 1
        assert "not found" in capsys.readouterr().err


class TestTrace:
    def test_trace_literal_cell(self, definition_files, capsys):
        main(["--config", str(definition_files)])
        capsys.readouterr()

        assert main(["--config", str(definition_files), "--trace", "0"]) == 0
        values = capsys.readouterr().out.split()[2:]
        assert values == ["1", "2", "3", "4"] + [str(0x55)] * 8

    def test_trace_nucleotide_cell(self, definition_files, capsys):
        main(["--config", str(definition_files)])
        capsys.readouterr()

        main(["--config", str(definition_files), "-trace", "4"])
        values = [int(v) for v in capsys.readouterr().out.split()[2:]]
        assert set(values[:4]) <= {10, 20}
        assert values[4:8] == [1, 2, 3, 4]
        assert values[8:] == [0x55] * 4

    def test_trace_without_output_file(self, definition_files, capsys):
        assert main(["--config", str(definition_files), "--trace", "0"]) == 1
        assert "Can't open" in capsys.readouterr().err


class TestParser:
    def test_trace_and_dict_are_exclusive(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--trace", "1", "--dict"])

    def test_default_config_name(self):
        assert build_parser().parse_args([]).config == "sensor_frame_gen.conf"
