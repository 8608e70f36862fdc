"""
Tests for Category Matchers
"""

import pytest

from ielts_answers.evaluation.matchers import (
    DateOrder,
    DateValue,
    match_currency,
    match_date,
    match_measurement,
    match_number,
    match_phone_number,
    match_time,
    parse_date,
)


class TestTimeMatcher:
    """Test cases for match_time()."""

    @pytest.mark.parametrize("user,correct", [
        ("9am", "9 a.m."),
        ("9 AM", "9am"),
        ("9.30 pm", "9:30pm"),
        ("nine o'clock", "nine"),
        ("9 o’clock", "9"),
    ])
    def test_equivalent_times(self, user, correct):
        """Test formatting-only differences are accepted."""
        assert match_time(user, correct)

    def test_digit_sequences_must_agree(self):
        """Test times are not parsed: 9:00am and 9am differ."""
        assert not match_time("9:00am", "9am")
        assert not match_time("9am", "9pm")

    def test_empty_after_compaction(self):
        """Test answers that are only punctuation or o'clock are not times."""
        assert not match_time(".", ":")
        assert not match_time("...", "o'clock")
        assert not match_time("", "")


class TestNumberMatcher:
    """Test cases for match_number()."""

    @pytest.mark.parametrize("user,correct", [
        ("12", "twelve"),
        ("Twelve", "12"),
        ("100", "one hundred"),
        ("hundred", "100"),
        ("1,000", "1000"),
        ("one thousand", "1,000"),
        ("1000000", "one million"),
        ("0", "oh"),
        ("zero", "o"),
        ("20 20", "2020"),
    ])
    def test_equivalent_numbers(self, user, correct):
        """Test numerals, number words and comma formatting."""
        assert match_number(user, correct)

    @pytest.mark.parametrize("user,correct", [
        ("13", "thirty"),
        ("25", "twenty-five"),
        ("twelve", "eleven"),
        ("", ""),
    ])
    def test_different_numbers(self, user, correct):
        """Test different values and undecomposed compounds are rejected."""
        assert not match_number(user, correct)


class TestMeasurementMatcher:
    """Test cases for match_measurement()."""

    @pytest.mark.parametrize("user,correct", [
        ("5km", "5 kilometres"),
        ("5 KM", "5 kilometers"),
        ("2.5 kg", "2.5 kilos"),
        ("1,500 m", "1500 metres"),
        ("3 ft", "3 feet"),
        ("10 lbs", "10 pounds"),
    ])
    def test_equivalent_measurements(self, user, correct):
        """Test unit spellings of the same unit."""
        assert match_measurement(user, correct)

    @pytest.mark.parametrize("user,correct", [
        ("5km", "6km"),
        ("5 km", "5 miles"),
        ("5 km", "5 m"),
        ("km", "5 km"),
        ("5", "5"),
        ("five km", "5 km"),
    ])
    def test_different_measurements(self, user, correct):
        """Test different amounts, units or unparseable operands."""
        assert not match_measurement(user, correct)


class TestCurrencyMatcher:
    """Test cases for match_currency()."""

    @pytest.mark.parametrize("user,correct", [
        ("$50", "50 dollars"),
        ("50 USD", "$50"),
        ("£1,200", "1200 pounds"),
        ("€ 30", "30 euros"),
        ("¥500", "500 yen"),
    ])
    def test_equivalent_amounts(self, user, correct):
        """Test symbols and currency words."""
        assert match_currency(user, correct)

    @pytest.mark.parametrize("user,correct", [
        ("£50", "$50"),
        ("$50", "$60"),
        ("50", "50"),
        ("50 dollars", "50 euros"),
    ])
    def test_different_amounts(self, user, correct):
        """Test different currencies, amounts, or missing currency."""
        assert not match_currency(user, correct)


class TestPhoneNumberMatcher:
    """Test cases for match_phone_number()."""

    @pytest.mark.parametrize("user,correct", [
        ("double 5 5", "5 5 5"),
        ("o123", "0123"),
        ("O161 555 2090", "0161 555 2090"),
        ("0161 triple 5 2090", "01615552090"),
        ("Double 7 8", "778"),
        ("double o 5", "005"),
        ("double oh 5", "005"),
        ("0161 triple o 4", "01610004"),
    ])
    def test_dictated_numbers(self, user, correct):
        """Test zero-as-o and double/triple expansion."""
        assert match_phone_number(user, correct)

    def test_different_numbers(self):
        """Test digit differences are rejected."""
        assert not match_phone_number("double 5", "5")
        assert not match_phone_number("0161 555 2091", "0161 555 2090")
        assert not match_phone_number("", "")


class TestDateMatcher:
    """Test cases for parse_date() and match_date()."""

    @pytest.mark.parametrize("text,expected", [
        ("March 5th", DateValue(5, 3)),
        ("mar 5", DateValue(5, 3)),
        ("march fifth", DateValue(5, 3)),
        ("5th March", DateValue(5, 3)),
        ("5 of march", DateValue(5, 3)),
        ("fifth of March", DateValue(5, 3)),
        ("Sept. 21st", DateValue(21, 9)),
        ("21 September 2024", DateValue(21, 9, 2024)),
        ("march 5, 2024", DateValue(5, 3, 2024)),
        ("5/3", DateValue(5, 3)),
        ("05-03", DateValue(5, 3)),
        ("2024-03-05", DateValue(5, 3, 2024)),
        ("2024/3/5", DateValue(5, 3, 2024)),
        ("29 february", DateValue(29, 2)),
        ("feb 29, 2024", DateValue(29, 2, 2024)),
        ("31st December", DateValue(31, 12)),
    ])
    def test_parse_date(self, text, expected):
        """Test every supported date form."""
        assert parse_date(text) == expected

    @pytest.mark.parametrize("text", [
        "the beach", "room 12", "march", "32nd march", "13/13", "2024-13-01", "", "5 5",
        "31 feb", "31st April", "30/2", "29 february 2023",
    ])
    def test_parse_non_dates(self, text):
        """Test text that is not a date."""
        assert parse_date(text) is None

    def test_numeric_date_order(self):
        """Test ambiguous numeric dates follow the configured order."""
        assert parse_date("03/05") == DateValue(3, 5)
        assert parse_date("03/05", DateOrder.MONTH_FIRST) == DateValue(5, 3)
        assert parse_date("12/25") is None
        assert parse_date("12/25", DateOrder.MONTH_FIRST) == DateValue(25, 12)

    @pytest.mark.parametrize("user,correct", [
        ("March 5th", "5 March"),
        ("5th of March", "march 5"),
        ("5-3", "5th March"),
        ("2024-03-05", "5 March 2024"),
    ])
    def test_same_dates(self, user, correct):
        """Test dates written differently are compared by value."""
        assert match_date(user, correct)

    @pytest.mark.parametrize("user,correct", [
        ("March 5th", "March 6th"),
        ("5 March", "5 May"),
        ("5 March 2024", "5 March"),
        ("5 March", "the beach"),
    ])
    def test_different_dates(self, user, correct):
        """Test different values are rejected even when both look like dates."""
        assert not match_date(user, correct)
