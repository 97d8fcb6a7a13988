"""
Tests for the digit-string helpers shared by the numeric extractors.
"""

import re

from brain.utils_text import MAX_INT_DIGITS, first_count, multiply_digits

COUNT = re.compile(r"([0-9]+)\s*units?")


class TestFirstCount:

    def test_no_match(self):
        assert first_count(COUNT, "") is None
        assert first_count(COUNT, "no numbers") is None

    def test_zero_kept_unless_positive(self):
        assert first_count(COUNT, "0 units, 5 units") == "0"
        assert first_count(COUNT, "0 units, 5 units", positive=True) == "5"
        assert first_count(COUNT, "000 units", positive=True) is None

    def test_leading_zeros_dropped(self):
        assert first_count(COUNT, "007 units") == "7"


class TestMultiplyDigits:

    def test_short_numbers(self):
        assert multiply_digits("3", 4) == "12"
        assert multiply_digits("25", 4) == "100"

    def test_long_hand_path(self):
        digits = "9" * (MAX_INT_DIGITS + 1)
        # 99...9 (n digits) * 4 == "3" + "9" * (n - 1) + "6"
        assert multiply_digits(digits, 4) == "3" + "9" * MAX_INT_DIGITS + "6"
        assert multiply_digits("3" + "0" * 4299, 4) == "12" + "0" * 4299
