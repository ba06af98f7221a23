"""Unit tests for the text, temporal and email normalizers.

Run with: pytest tests/test_normalizers.py -v
"""

import pytest

from bookings.domain.email import validate_and_normalize
from bookings.domain.errors import (
    InvalidDateError,
    InvalidEmailError,
    InvalidInputError,
    InvalidTimeFormatError,
    InvalidTimeValueError,
)
from bookings.domain.temporal import normalize_date, normalize_time
from bookings.domain.text import slugify


class TestSlugify:
    """Tests for slug derivation."""

    @pytest.mark.parametrize(
        ("title", "expected"),
        [
            ("Tech Conference 2024", "tech-conference-2024"),
            ("Tech @ Conference! 2024 #Special", "tech-conference-2024-special"),
            ("Tech    Conference   2024", "tech-conference-2024"),
            ("  Tech Conference 2024  ", "tech-conference-2024"),
            ("TECH CONFERENCE 2024", "tech-conference-2024"),
            ("Event: The Beginning (2024)", "event-the-beginning-2024"),
            ("--a -- b--", "a-b"),
            ("snake_case title", "snakecase-title"),
        ],
    )
    def test_slug_values(self, title, expected):
        assert slugify(title) == expected

    @pytest.mark.parametrize(
        "title",
        ["Tech Conference 2024", "  Mixed   CASE -- title!! ", "Café über 2025", "a\tb\nc"],
    )
    def test_idempotent(self, title):
        slug = slugify(title)
        assert slugify(slug) == slug

    def test_deterministic(self):
        assert slugify("Same Title") == slugify("Same Title")

    @pytest.mark.parametrize("title", ["", "   ", "!!!", "@#$ %^&", "---", "___"])
    def test_empty_result_rejected(self, title):
        with pytest.raises(InvalidInputError):
            slugify(title)


class TestNormalizeTime:
    """Tests for 12/24-hour time normalization."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("12:00 AM", "00:00"),
            ("12:00 PM", "12:00"),
            ("1:00 AM", "01:00"),
            ("11:59 PM", "23:59"),
            ("2:30 PM", "14:30"),
            ("9:15", "09:15"),
            ("9:30 am", "09:30"),
            ("3:45PM", "15:45"),
            ("5:45", "05:45"),
            (" 10:05 pm ", "22:05"),
        ],
    )
    def test_conversion_table(self, value, expected):
        assert normalize_time(value) == expected

    @pytest.mark.parametrize("hour", range(24))
    def test_24_hour_round_trip(self, hour):
        for minute in (0, 1, 30, 59):
            value = f"{hour:02d}:{minute:02d}"
            assert normalize_time(value) == value

    @pytest.mark.parametrize(
        "value",
        [
            "12:30:45",
            "",
            "invalid-time",
            "1230",
            "12:3",
            "12:30 XM",
            None,
            "\u0661\u0662:\u0663\u0660",
            "\uff19:30",
        ],
    )
    def test_invalid_format(self, value):
        with pytest.raises(InvalidTimeFormatError, match="Invalid time format"):
            normalize_time(value)

    @pytest.mark.parametrize("value", ["25:00", "12:60", "24:00", "13:00 PM", "0:30 AM", "12:75 AM"])
    def test_invalid_values(self, value):
        with pytest.raises(InvalidTimeValueError, match="Invalid time values"):
            normalize_time(value)


class TestNormalizeDate:
    """Tests for date canonicalization."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("2024-12-31", "2024-12-31"),
            ("December 31, 2024", "2024-12-31"),
            ("12/31/2024", "2024-12-31"),
            ("2024-01-01T10:30:00.000Z", "2024-01-01"),
            ("2024-12-15T10:30:00Z", "2024-12-15"),
            ("Dec 5, 2025", "2025-12-05"),
            ("  2024-02-29  ", "2024-02-29"),
        ],
    )
    def test_canonical_dates(self, value, expected):
        assert normalize_date(value) == expected

    def test_zone_aware_input_uses_utc_date(self):
        assert normalize_date("2024-12-31T23:30:00-05:00") == "2025-01-01"

    @pytest.mark.parametrize(
        "value",
        ["invalid-date-string", "", "   ", "February 30, 2024", "December 2024", "9:15", None],
    )
    def test_invalid_dates(self, value):
        with pytest.raises(InvalidDateError, match="Invalid date format"):
            normalize_date(value)


class TestValidateEmail:
    """Tests for email validation and canonicalization."""

    def test_trims_and_lowercases(self):
        assert validate_and_normalize("  TEST@EXAMPLE.COM  ") == "test@example.com"

    def test_long_local_part(self):
        email = "verylongemailaddress" + "a" * 50 + "@example.com"
        assert validate_and_normalize(email) == email

    @pytest.mark.parametrize(
        "email",
        [
            "user@example.com",
            "user.name+tag@example.com",
            "user_name@example.co.uk",
            "o'connor@example.com",
            "user123@example456.com",
            "user@mail.subdomain.example.com",
            "a" * 64 + "@example.com",
        ],
    )
    def test_accepts_valid(self, email):
        assert validate_and_normalize(email) == email.lower()

    @pytest.mark.parametrize(
        "email",
        [
            "invalid",
            "invalid-email",
            "@example.com",
            "user@",
            "test@",
            "user@.com",
            "user..name@example.com",
            ".user@example.com",
            "user.@example.com",
            "user name@example.com",
            "test user@example.com",
            "user@example",
            "user@domain",
            "test<>@example.com",
            "<user@example.com>",
            "user@@example.com",
            "user@exa mple.com",
            "user@-example.com",
            "user@localhost",
            "\"john doe\"@example.com",
            "",
            "user@" + "a" * 250 + ".com",
            None,
        ],
    )
    def test_rejects_invalid(self, email):
        with pytest.raises(InvalidEmailError, match="Please provide a valid email address"):
            validate_and_normalize(email)
