"""Tests for the text map reader."""

import pytest

from skirun_finder.core.map_reader import MapParseError, decode_map_bytes, parse_map, read_map_file


class TestParseMap:
    """parse_map - header, rows, and error line numbers."""

    def test_sample_map(self, sample_map_text: str) -> None:
        grid = parse_map(sample_map_text)
        assert (grid.width, grid.height) == (4, 4)
        assert grid.altitude(x=2, y=1) == 9
        assert grid.altitude(x=3, y=3) == 6

    def test_extra_whitespace_between_values(self) -> None:
        grid = parse_map("3  1\n  3   2\t1  \n")
        assert grid.altitudes.tolist() == [[3, 2, 1]]

    def test_negative_altitudes(self) -> None:
        grid = parse_map("2 1\n-4 -7\n")
        assert grid.altitudes.tolist() == [[-4, -7]]

    def test_trailing_blank_lines_ignored(self) -> None:
        grid = parse_map("1 1\n5\n\n   \n")
        assert grid.altitude(x=0, y=0) == 5

    def test_missing_final_newline(self) -> None:
        assert parse_map("2 1\n1 2").width == 2

    def test_zero_sized_maps(self) -> None:
        assert parse_map("0 0\n").is_empty
        assert parse_map("0 3\n").is_empty
        assert parse_map("3 0\n").is_empty

    @pytest.mark.parametrize(
        "text, message",
        [
            ("", "Line 1 is empty"),
            ("   \n1 2\n", "Line 1 is empty"),
            ("4\n", "Unable to parse width and height of map"),
            ("1 2 3\n", "Unable to parse width and height of map"),
            ("x 2\n", r"Unable to parse grid width \(x\)"),
            ("2 y\n", r"Unable to parse grid height \(y\)"),
            ("-1 2\n", "must not be negative"),
            ("2 2\n1 2\n\n3 4\n", "Line 3 is empty"),
            ("2 2\n1 2\n3\n", "Line 3 does not have 2 altitude values"),
            ("2 1\n1 2 3\n", "Line 2 does not have 2 altitude values"),
            ("2 1\n1 a\n", r"Unable to parse value 1 on line 2 \(a\)"),
            ("2 1\n1 2.5\n", r"Unable to parse value 1 on line 2 \(2.5\)"),
            ("1 1\n99999999999999999999\n", r"Unable to parse value 0 on line 2 \(99999999999999999999\): outside"),
            ("2 1\n0 -9223372036854775809\n", r"Unable to parse value 1 on line 2 \(-9223372036854775809\): outside"),
            ("99999999999999999999 1\n", r"Unable to parse grid width \(99999999999999999999\)"),
            ("2 3\n1 2\n3 4\n", "Failed to read expected number of lines"),
            ("1 1\n5\n6\n", "Unexpected lines at end of file"),
        ],
    )
    def test_malformed_maps(self, text: str, message: str) -> None:
        with pytest.raises(MapParseError, match=message):
            parse_map(text)

    def test_parse_error_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_map("")


class TestReadMapFile:
    def test_reads_file(self, map_file) -> None:
        grid = read_map_file(map_file)
        assert (grid.width, grid.height) == (4, 4)

    def test_accepts_str_path(self, map_file) -> None:
        assert read_map_file(str(map_file)).size == 16

    def test_missing_file_raises_os_error(self, tmp_path) -> None:
        with pytest.raises(OSError):
            read_map_file(tmp_path / "missing.txt")

    def test_invalid_utf8_is_a_parse_error(self, tmp_path) -> None:
        path = tmp_path / "binary.txt"
        path.write_bytes(b"1 1\n\xff\xfe\n")
        with pytest.raises(MapParseError, match="not valid utf-8 text"):
            read_map_file(path)

    def test_crlf_line_endings(self, tmp_path) -> None:
        path = tmp_path / "windows.txt"
        path.write_bytes(b"2 1\r\n3 1\r\n")
        assert read_map_file(path).altitudes.tolist() == [[3, 1]]


class TestDecodeMapBytes:
    def test_decodes_utf8(self) -> None:
        assert decode_map_bytes(b"1 1\n5\n") == "1 1\n5\n"

    def test_reports_offending_byte(self) -> None:
        with pytest.raises(MapParseError, match="at byte 4"):
            decode_map_bytes(b"1 1\n\x80\n")
