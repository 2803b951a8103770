"""Tests for the command-line entry point."""

import pytest

from skirun_finder.cli import EXIT_BAD_MAP, EXIT_OK, build_parser, main


class TestCli:
    def test_prints_report(self, map_file, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(map_file)]) == EXIT_OK
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "Best path has 5 steps with a descent of 8",
            "Starts at 2,1 and follows these directions:",
            "West",
            "North",
            "East",
            "North",
        ]

    def test_empty_map(self, tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "empty.txt"
        path.write_text("0 0\n", encoding="utf-8")
        assert main([str(path)]) == EXIT_OK
        assert capsys.readouterr().out.strip() == "Failed to find best path"

    def test_missing_file(self, tmp_path) -> None:
        assert main([str(tmp_path / "nope.txt")]) == EXIT_BAD_MAP

    def test_malformed_file(self, tmp_path) -> None:
        path = tmp_path / "bad.txt"
        path.write_text("2 2\n1 2\n", encoding="utf-8")
        assert main([str(path)]) == EXIT_BAD_MAP

    def test_altitude_out_of_range(self, tmp_path) -> None:
        path = tmp_path / "huge.txt"
        path.write_text("2 1\n99999999999999999999 1\n", encoding="utf-8")
        assert main([str(path)]) == EXIT_BAD_MAP

    def test_non_utf8_file(self, tmp_path) -> None:
        path = tmp_path / "binary.txt"
        path.write_bytes(b"1 1\n\xff\n")
        assert main([str(path)]) == EXIT_BAD_MAP

    def test_export_html(self, map_file, tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
        target = tmp_path / "out" / "run"
        assert main([str(map_file), "--export-html", str(target)]) == EXIT_OK
        written = tmp_path / "out" / "run.html"
        assert written.exists()
        assert "plotly" in written.read_text(encoding="utf-8").lower()
        assert f"Height map written to {written}" in capsys.readouterr().out

    def test_map_file_is_required(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_log_level_choices(self) -> None:
        args = build_parser().parse_args(["map.txt", "--log-level", "DEBUG"])
        assert args.log_level == "DEBUG"
        with pytest.raises(SystemExit):
            build_parser().parse_args(["map.txt", "--log-level", "LOUD"])
