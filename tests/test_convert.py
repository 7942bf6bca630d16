"""Tests for fixed-width <-> CSV file conversion."""

import pytest

from fixedwidth import (
    IncorrectLineWidthError,
    LayoutConfig,
    LineEnding,
    csv_to_fixed,
    fixed_to_csv,
)


class TestFixedToCsv:
    """Tests for fixed_to_csv."""

    def test_converts_people(self, tmp_path, people_input, people_layout) -> None:
        source = tmp_path / "people.txt"
        source.write_bytes(people_input)
        target = tmp_path / "people.csv"

        result = fixed_to_csv(source, target, people_layout)

        assert result.records == 4
        assert result.lines == 7
        assert target.read_text().splitlines() == [
            "John,1245",
            "Peter,3545",
            "Susan,6784",
            "Sarah,4321",
        ]

    def test_custom_delimiter_and_quoting(self, tmp_path) -> None:
        source = tmp_path / "in.txt"
        source.write_bytes(b"a;b12\n")
        target = tmp_path / "out.csv"
        layout = LayoutConfig(field_lengths=[3, 2], line_ending=LineEnding.LF)

        fixed_to_csv(source, target, layout, delimiter=";")

        assert target.read_bytes() == b'"a;b";12\r\n'

    def test_bad_line_raises(self, tmp_path) -> None:
        source = tmp_path / "in.txt"
        source.write_bytes(b"abc\nab\n")
        layout = LayoutConfig(field_lengths=[3], line_ending=LineEnding.LF)

        with pytest.raises(IncorrectLineWidthError) as exc_info:
            fixed_to_csv(source, tmp_path / "out.csv", layout)

        assert exc_info.value.line == 2


class TestCsvToFixed:
    """Tests for csv_to_fixed."""

    def test_converts_rows(self, tmp_path) -> None:
        source = tmp_path / "countries.csv"
        source.write_text("us,United States,English\nfr,France,French\n\n")
        target = tmp_path / "countries.txt"
        layout = LayoutConfig(field_lengths=[2, 14, 8], line_ending=LineEnding.LF)

        result = csv_to_fixed(source, target, layout)

        assert result.records == 2
        assert result.lines == 2
        assert target.read_bytes() == (
            b"usUnited States English \n"
            b"frFrance        French  \n"
        )

    def test_round_trip_through_csv(self, tmp_path, people_layout) -> None:
        people_layout.skip_lines = 0
        source = tmp_path / "in.csv"
        source.write_text("John,1245\nPeter,3545\n")
        fixed = tmp_path / "fixed.txt"
        back = tmp_path / "back.csv"

        csv_to_fixed(source, fixed, people_layout)
        fixed_to_csv(fixed, back, people_layout)

        assert back.read_text().splitlines() == ["John,1245", "Peter,3545"]
