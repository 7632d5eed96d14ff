"""Tests for the command-line interface."""

import json
from pathlib import Path

import pytest

from bitcoinwell_koinly.cli import main


class TestCli:
    """Tests for the main entry point."""

    @pytest.fixture(autouse=True)
    def in_tmp_dir(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Run each CLI test from an empty working directory."""
        monkeypatch.chdir(tmp_path)

    def test_writes_default_output(
        self, history_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test conversion writes koinly_export.csv by default."""
        assert main([str(history_file)]) == 0

        output = (tmp_path / "koinly_export.csv").read_text(encoding="utf-8")
        assert output.count("\n") == 4

        err = capsys.readouterr().err
        assert "Read 5 rows" in err
        assert "Skipped 1 swap orders" in err
        assert "Wrote 4 transactions" in err

    def test_explicit_output(self, history_file: Path, tmp_path: Path) -> None:
        """Test -o chooses the output path."""
        assert main([str(history_file), "-o", "out.csv"]) == 0
        assert (tmp_path / "out.csv").exists()
        assert not (tmp_path / "koinly_export.csv").exists()

    def test_output_from_config(self, history_file: Path, tmp_path: Path) -> None:
        """Test output filename from config.json."""
        (tmp_path / "config.json").write_text(json.dumps({"output_filename": "cfg.csv"}))

        assert main([str(history_file)]) == 0
        assert (tmp_path / "cfg.csv").exists()

    def test_stdout(
        self, history_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test --stdout prints the CSV and writes no file."""
        assert main([str(history_file), "--stdout"]) == 0

        out = capsys.readouterr().out
        assert out.startswith("Date,Sent Amount,")
        assert out.endswith(",Deposit,,ghi789")
        assert out.count("\n") == 4
        assert not (tmp_path / "koinly_export.csv").exists()

    def test_bad_date_reports_row(
        self, bad_date_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test malformed dates halt with an error naming the row."""
        assert main([str(bad_date_file)]) == 1

        err = capsys.readouterr().err
        assert err.startswith("Error: Malformed order date")
        assert "row 1" in err
        assert "transaction BW-2001" in err
        assert not (tmp_path / "koinly_export.csv").exists()

    def test_unknown_format(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test unrecognized files are reported."""
        test_file = tmp_path / "unknown.csv"
        test_file.write_text("random,data,here\n1,2,3\n")

        assert main([str(test_file)]) == 1
        assert "No parser found" in capsys.readouterr().err

    def test_missing_input(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test a nonexistent input path."""
        assert main(["/nonexistent/file.csv"]) == 1
        assert "not found" in capsys.readouterr().err

    def test_no_input_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test running without arguments shows usage."""
        assert main([]) == 1
        assert "usage:" in capsys.readouterr().out

    def test_list_parsers(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test --list-parsers output."""
        assert main(["--list-parsers"]) == 0
        assert "Bitcoin Well: BitcoinWellParser" in capsys.readouterr().out

    def test_show_config(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test --show-config prints the loaded config."""
        (tmp_path / "config.json").write_text(json.dumps({"log_level": "INFO"}))

        assert main(["--show-config"]) == 0
        assert '"log_level": "INFO"' in capsys.readouterr().out

    def test_invalid_config(
        self, history_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test a broken config file is reported before converting."""
        (tmp_path / "config.json").write_text("{broken")

        assert main([str(history_file)]) == 1
        assert "Invalid JSON" in capsys.readouterr().err

    def test_date_out_of_range(
        self, tmp_path: Path, bitcoinwell_header: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test a date that overflows during conversion is a clean error."""
        export = tmp_path / "late.csv"
        export.write_text(
            f"{bitcoinwell_header}\n"
            "BW-9,Buy,Bitcoin,Completed,9999-12-31 20:00:00,1,CAD,1,BTC,-,1,addr,,\n"
        )

        assert main([str(export), "--stdout"]) == 1

        captured = capsys.readouterr()
        assert captured.err.startswith("Error: Malformed order date")
        assert captured.out == ""

    def test_init_config(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test --init-config writes defaults once and refuses to overwrite."""
        config_path = tmp_path / "xdg_config" / "bitcoinwell-koinly" / "config.json"

        assert main(["--init-config"]) == 0
        assert json.loads(config_path.read_text()) == {
            "output_filename": "koinly_export.csv",
            "log_level": "WARNING",
        }
        assert "Wrote default config" in capsys.readouterr().err

        assert main(["--init-config"]) == 1
        assert "Config already exists" in capsys.readouterr().err
