#!/usr/bin/env python3
"""
Tests for order total detection.
"""

import unittest
from decimal import Decimal

from quote_extractor.totals import TotalAmountExtractor


class TestTotalAmountExtractor(unittest.TestCase):
    """Test cases for the TotalAmountExtractor."""

    def setUp(self):
        self.extractor = TotalAmountExtractor()

    def test_keyword_totals(self):
        test_cases = [
            ("Total: $1,250.50", Decimal("1250.50")),
            ("TOTAL 300", Decimal("300")),
            ("Amount: 75.00", Decimal("75.00")),
            ("Grand Total: $500.00", Decimal("500.00")),
            ("Final total: €42", Decimal("42")),
            ("$450.00 total", Decimal("450.00")),
            ("Subtotal: $120.00", Decimal("120.00")),
        ]

        for text, expected in test_cases:
            with self.subTest(text=text):
                self.assertEqual(self.extractor.extract(text), expected)

    def test_largest_value_wins_across_patterns(self):
        text = """
        Subtotal: $300.00
        Discount: $20.00
        Grand Total: $280.00
        """
        self.assertEqual(self.extractor.extract(text), Decimal("300.00"))

    def test_every_occurrence_is_considered(self):
        text = "Total: $10.00\nsome lines later\nTotal: $90.00\nTotal: $40.00"
        self.assertEqual(self.extractor.extract(text), Decimal("90.00"))

    def test_no_total_is_zero(self):
        self.assertEqual(self.extractor.extract("Mild Steel 2.0mm 10 $20.00"), Decimal("0"))
        self.assertEqual(self.extractor.extract(""), Decimal("0"))


if __name__ == "__main__":
    unittest.main()
