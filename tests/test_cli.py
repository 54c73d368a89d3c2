"""Tests for the brightnessqs command line tool."""
from pathlib import Path

import pytest

from brightnessqs.cli import EXIT_INVALID, EXIT_OK, main

SAMPLE_CONFIG = Path(__file__).parent / "config.yaml"


def table_rows(out: str) -> list[list[str]]:
    return [line.split() for line in out.splitlines()[1:]]


class TestConvert:

    def test_to_sys(self, capsys):
        assert main(["--no-colour", "to-sys", "75"]) == EXIT_OK
        assert capsys.readouterr().out == "sys_brightness: 130\n"

    def test_to_pct(self, capsys):
        assert main(["--no-colour", "to-pct", "255"]) == EXIT_OK
        assert capsys.readouterr().out == "ui_pct: 100\n"

    def test_coloured_by_default(self, capsys):
        assert main(["to-sys", "50"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "\x1b[" in out
        assert "50" in out

    @pytest.mark.parametrize("argv, message", [
        (["to-sys", "101"], "ui_pct must be an int between 0 and 100. Actual:<101>"),
        (["to-sys", "-1"], "ui_pct must be an int between 0 and 100. Actual:<-1>"),
        (["to-pct", "256"], "sys_brightness must be an int between 0 and 255. Actual:<256>"),
    ])
    def test_out_of_range(self, capsys, argv, message):
        assert main(argv) == EXIT_INVALID
        captured = capsys.readouterr()
        assert captured.out == ""
        assert message in captured.err

    def test_not_a_number(self):
        with pytest.raises(SystemExit) as excinfo:
            main(["to-sys", "bright"])
        assert excinfo.value.code == 2

    def test_command_required(self):
        with pytest.raises(SystemExit):
            main([])


class TestTable:

    def test_step(self, capsys):
        assert main(["--no-colour", "table", "--step", "25"]) == EXIT_OK
        assert table_rows(capsys.readouterr().out) == [
            ["0", "0", "0"],
            ["25", "10", "25"],
            ["50", "50", "50"],
            ["75", "130", "75"],
            ["100", "255", "100"],
        ]

    def test_header(self, capsys):
        main(["--no-colour", "table"])
        assert capsys.readouterr().out.splitlines()[0].split() == ["UI", "%", "SYS", "UI", "%", "(back)"]

    def test_range(self, capsys):
        assert main(["--no-colour", "table", "--start", "50", "--stop", "75", "--step", "25"]) == EXIT_OK
        assert table_rows(capsys.readouterr().out) == [["50", "50", "50"], ["75", "130", "75"]]

    def test_config_supplies_defaults(self, capsys):
        assert main(["--config", str(SAMPLE_CONFIG), "table"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "\x1b[" not in out
        assert [row[0] for row in table_rows(out)] == [str(n) for n in range(0, 101, 10)]

    def test_arguments_override_config(self, capsys):
        assert main(["--config", str(SAMPLE_CONFIG), "table", "--step", "50"]) == EXIT_OK
        assert [row[0] for row in table_rows(capsys.readouterr().out)] == ["0", "50", "100"]

    def test_invalid_range(self, capsys):
        assert main(["table", "--start", "80", "--stop", "20"]) == EXIT_INVALID
        assert "conversion_table()" in capsys.readouterr().err


class TestConfigErrors:

    def test_missing_config(self, capsys, tmp_path):
        assert main(["--config", str(tmp_path / "nope.yaml"), "to-sys", "50"]) == EXIT_INVALID
        assert "Cannot read configuration file" in capsys.readouterr().err

    def test_bad_log_level(self, capsys, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("logging:\n  level: LOUD\n", encoding="utf-8")
        assert main(["--config", str(path), "to-sys", "50"]) == EXIT_INVALID
        assert "Invalid logging level" in capsys.readouterr().err

    def test_unopenable_log_file(self, capsys, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(f"logging:\n  file: {tmp_path / 'nodir' / 'cli.log'}\n", encoding="utf-8")
        assert main(["--config", str(path), "to-sys", "50"]) == EXIT_INVALID
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Cannot open log file" in captured.err

    def test_verbose_logs_to_stderr(self, capsys):
        assert main(["-v", "--no-colour", "to-sys", "50"]) == EXIT_OK
        captured = capsys.readouterr()
        assert captured.out == "sys_brightness: 50\n"
        assert "DEBUG: Running 'to-sys'" in captured.err

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "cli.log"
        path = tmp_path / "config.yaml"
        path.write_text(f"logging:\n  level: DEBUG\n  file: {log_file}\n", encoding="utf-8")
        assert main(["--config", str(path), "to-pct", "300"]) == EXIT_INVALID
        assert "rejected sys_brightness=300" in log_file.read_text(encoding="utf-8")
