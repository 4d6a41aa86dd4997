#!/usr/bin/env python3
"""
Tests for numeric normalization.
"""

import unittest
from decimal import Decimal

from quote_extractor.normalizer import format_amount, parse_amount, parse_quantity


class TestParseAmount(unittest.TestCase):
    """Test cases for money parsing."""

    def test_valid_amounts(self):
        test_cases = [
            ("$1,234.56", Decimal("1234.56")),
            ("1234.56", Decimal("1234.56")),
            ("$1,234", Decimal("1234")),
            ("€99.90", Decimal("99.90")),
            ("£ 12", Decimal("12")),
            ("1,234.56 USD", Decimal("1234.56")),
            (" 25.00 ", Decimal("25.00")),
        ]

        for text, expected in test_cases:
            with self.subTest(text=text):
                self.assertEqual(parse_amount(text), expected)

    def test_invalid_amounts_are_absent_not_zero(self):
        for text in ["", None, "invalid", "12.5.3", "-5", "$", "1,2a"]:
            with self.subTest(text=text):
                self.assertIsNone(parse_amount(text))

    def test_zero_is_a_valid_amount(self):
        self.assertEqual(parse_amount("$0.00"), Decimal("0"))


class TestParseQuantity(unittest.TestCase):
    """Test cases for quantity parsing."""

    def test_positive_integers(self):
        self.assertEqual(parse_quantity("5"), 5)
        self.assertEqual(parse_quantity(" 12 "), 12)
        self.assertEqual(parse_quantity("0100"), 100)

    def test_rejected_quantities(self):
        for text in ["0", "-3", "abc", "2.5", "", None, "many"]:
            with self.subTest(text=text):
                self.assertIsNone(parse_quantity(text))


class TestFormatAmount(unittest.TestCase):

    def test_two_decimal_places(self):
        self.assertEqual(format_amount(Decimal("25")), "25.00")
        self.assertEqual(format_amount(Decimal("2.005")), "2.01")
        self.assertEqual(format_amount(Decimal("1240.5")), "1240.50")


if __name__ == "__main__":
    unittest.main()
