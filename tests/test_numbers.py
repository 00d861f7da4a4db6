"""Tests for turning raw number text into digit sequences."""

import pytest

from migrator.core.exceptions import NumberParseError, RegionCodeError
from migrator.numbers import build_number_range_map, parse_number, read_numbers_file
from migrator.ranges.digit_sequence import DigitSequence


class TestParseNumber:
    """Tests for parse_number."""

    def test_international_plus(self):
        assert parse_number("+447100000001", "GB") == DigitSequence("447100000001")

    def test_international_formatted(self):
        assert parse_number("+44 (71) 0000-0001", "GB") == DigitSequence("447100000001")

    def test_international_dial_prefix(self):
        assert parse_number("0044 7100 000001", "GB") == DigitSequence("447100000001")

    def test_international_ignores_region(self):
        assert parse_number("+1 212 555 1234", "GB") == DigitSequence("12125551234")

    def test_national_trunk_zero(self):
        assert parse_number("07100 000001", "GB") == DigitSequence("447100000001")

    def test_national_without_trunk(self):
        assert parse_number("(212) 555-1234", "US") == DigitSequence("12125551234")

    def test_national_already_has_calling_code(self):
        """Too long for a national number, so the leading 1 is the calling code."""
        assert parse_number("12125551234", "US") == DigitSequence("12125551234")

    def test_italian_leading_zero_kept(self):
        """Italian numbers keep their 0 after the calling code."""
        assert parse_number("06 1234 5678", "IT") == DigitSequence("390612345678")

    def test_region_international_prefix(self):
        """The US dials 011 before a calling code, not 00."""
        assert parse_number("011 44 7100 000001", "US") == DigitSequence("447100000001")

    def test_australian_international_prefix(self):
        assert parse_number("0011 44 7100 000001", "AU") == DigitSequence("447100000001")

    def test_unassigned_calling_code(self):
        with pytest.raises(NumberParseError, match="Cannot parse number"):
            parse_number("+999 1234 5678", "GB")

    def test_region_object_accepted(self, gb):
        assert parse_number("07100000001", gb) == DigitSequence("447100000001")

    def test_empty(self):
        with pytest.raises(NumberParseError, match="empty"):
            parse_number("   ", "GB")

    def test_letters(self):
        with pytest.raises(NumberParseError, match="unexpected character 'A'"):
            parse_number("+44 7100 ABC", "GB")

    def test_plus_in_middle(self):
        with pytest.raises(NumberParseError, match="unexpected character"):
            parse_number("44+7100", "GB")

    def test_only_formatting(self):
        with pytest.raises(NumberParseError, match="no digits"):
            parse_number("+ ( ) -", "GB")

    def test_too_long(self):
        with pytest.raises(NumberParseError, match="more than 15 digits"):
            parse_number("+4471000000011234", "GB")

    def test_error_keeps_input(self):
        with pytest.raises(NumberParseError) as exc_info:
            parse_number("abc", "GB")
        assert exc_info.value.raw == "abc"

    def test_unknown_region_for_national(self):
        with pytest.raises(RegionCodeError):
            parse_number("07100000001", "ZZ")


class TestBuildNumberRangeMap:
    """Tests for build_number_range_map."""

    def test_keeps_raw_text(self):
        numbers = build_number_range_map(["+44 7100 000001", "07200 000001"], "GB")
        assert dict(numbers) == {
            DigitSequence("447100000001"): "+44 7100 000001",
            DigitSequence("447200000001"): "07200 000001",
        }

    def test_first_duplicate_wins(self):
        numbers = build_number_range_map(["+447100000001", "07100 000001"], "GB")
        assert list(numbers.values()) == ["+447100000001"]

    def test_read_only(self):
        numbers = build_number_range_map(["+447100000001"], "GB")
        with pytest.raises(TypeError):
            numbers[DigitSequence("1")] = "1"

    def test_empty_input(self):
        assert len(build_number_range_map([], "GB")) == 0

    def test_bad_number_raises(self):
        with pytest.raises(NumberParseError):
            build_number_range_map(["+447100000001", "nope"], "GB")


class TestReadNumbersFile:
    """Tests for read_numbers_file."""

    def test_skips_blank_and_comments(self, tmp_path):
        path = tmp_path / "numbers.txt"
        path.write_text("# GB mobiles\n+447100000001\n\n  07200 000001  \n")
        assert list(read_numbers_file(path)) == ["+447100000001", "07200 000001"]
