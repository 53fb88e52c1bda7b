"""
Tests for parsing HH:MM - HH:MM lines into entries.
"""

import pytest
from timecalc.domain.models import ParseErrorKind
from timecalc.services.parser import parse_line, parse_text


class TestValidLines:

    @pytest.mark.parametrize("line,hours,minutes", [
        ("09:30 - 17:45", 8, 15),
        ("13:00 - 14:30", 1, 30),
        ("18:20 - 21:00", 2, 40),
        ("9:05-9:50", 0, 45),
        ("00:00 - 23:59", 23, 59),
        ("12:00 - 12:00", 0, 0),
    ])
    def test_duration(self, line: str, hours: int, minutes: int):
        entry = parse_line(line)
        assert entry.is_valid
        assert (entry.hours, entry.minutes) == (hours, minutes)
        assert entry.error_kind is None

    def test_duration_matches_offset_difference(self):
        for start in range(0, 24 * 60, 97):
            for end in range(start, 24 * 60, 131):
                line = f"{start // 60:02d}:{start % 60:02d} - {end // 60:02d}:{end % 60:02d}"
                entry = parse_line(line)
                assert entry.duration_minutes == end - start
                assert 0 <= entry.minutes <= 59

    def test_labels_are_zero_padded(self):
        entry = parse_line("9:05 - 17:30")
        assert entry.start_label == "09:05"
        assert entry.end_label == "17:30"
        assert entry.next_day is False

    def test_surrounding_whitespace_ignored(self):
        entry = parse_line("   08:00 - 09:00  \r")
        assert entry.is_valid
        assert entry.raw_input == "08:00 - 09:00"

    def test_spaces_around_dash_optional(self):
        assert parse_line("08:00-09:00").is_valid
        assert parse_line("08:00   -   09:00").is_valid


class TestCrossMidnight:

    def test_end_before_start_is_next_day(self):
        entry = parse_line("23:30 - 00:15")
        assert entry.is_valid
        assert (entry.hours, entry.minutes) == (0, 45)
        assert entry.next_day is True
        assert entry.end_label == "00:15"

    def test_long_overnight_span(self):
        entry = parse_line("22:00 - 06:30")
        assert (entry.hours, entry.minutes) == (8, 30)


class TestInvalidLines:

    @pytest.mark.parametrize("line", ["24:00 - 01:00", "12:75 - 13:00", "10:00 - 10:60", "08:00 - 99:00"])
    def test_out_of_range(self, line: str):
        entry = parse_line(line)
        assert not entry.is_valid
        assert entry.error_kind == ParseErrorKind.OUT_OF_RANGE
        assert entry.duration_minutes == 0

    @pytest.mark.parametrize("line", [
        "hello",
        "12-13",
        "9:5 - 10:00",
        "09:00 ~ 10:00",
        "09:00 - 10:00 meeting",
        "123:00 - 10:00",
    ])
    def test_malformed(self, line: str):
        entry = parse_line(line)
        assert not entry.is_valid
        assert entry.error_kind == ParseErrorKind.MALFORMED_FORMAT
        assert entry.start_label is None

    def test_blank_line_yields_nothing(self):
        assert parse_line("") is None
        assert parse_line("   \t ") is None


class TestParseText:

    def test_blank_lines_skipped(self):
        entries = parse_text("09:00 - 10:00\n\n10:00 - 11:30")
        assert len(entries) == 2

    def test_order_follows_input(self):
        entries = parse_text("bad\n09:00 - 10:00\n25:00 - 26:00")
        assert [e.raw_input for e in entries] == ["bad", "09:00 - 10:00", "25:00 - 26:00"]
        assert [e.is_valid for e in entries] == [False, True, False]

    def test_ids_are_unique(self):
        entries = parse_text("09:00 - 10:00\n09:00 - 10:00\n09:00 - 10:00")
        assert len({e.id for e in entries}) == 3

    def test_entries_are_immutable(self):
        entry = parse_line("09:00 - 10:00")
        with pytest.raises(Exception):
            entry.hours = 5
