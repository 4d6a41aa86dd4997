#!/usr/bin/env python3
"""
Tests for the line item data models.
"""

import json
import unittest
from dataclasses import FrozenInstanceError
from decimal import Decimal

from quote_extractor.models import ExtractedLineItem, ExtractionResult


class TestExtractedLineItem(unittest.TestCase):

    def setUp(self):
        self.item = ExtractedLineItem.create(
            material="Copper",
            thickness="1.0mm",
            grade="C101",
            quantity=3,
            unit_price=Decimal("45.00"),
            remarks="Extracted from PDF",
        )

    def test_create_derives_total(self):
        self.assertEqual(self.item.total_price, Decimal("135.00"))
        self.assertTrue(self.item.is_priced)

    def test_defaults(self):
        item = ExtractedLineItem(material="Brass", thickness="1.5mm")
        self.assertEqual((item.grade, item.quantity), ("Standard", 1))
        self.assertFalse(item.is_priced)

    def test_with_unit_price_recomputes_total(self):
        repriced = self.item.with_unit_price(Decimal("10"), note="(repriced)")

        self.assertEqual(repriced.total_price, Decimal("30"))
        self.assertEqual(repriced.remarks, "Extracted from PDF (repriced)")
        self.assertEqual(self.item.unit_price, Decimal("45.00"))

    def test_items_are_immutable(self):
        with self.assertRaises(FrozenInstanceError):
            self.item.quantity = 5

    def test_to_dict(self):
        self.assertEqual(self.item.to_dict(), {
            "material": "Copper",
            "thickness": "1.0mm",
            "grade": "C101",
            "quantity": 3,
            "unitPrice": "45.00",
            "totalPrice": "135.00",
            "remarks": "Extracted from PDF",
        })


class TestExtractionResult(unittest.TestCase):

    def test_to_json(self):
        item = ExtractedLineItem.create("Steel", "2mm", "A36", 2, Decimal("20"), "x")
        result = ExtractionResult(items=[item], total_amount=Decimal("40"))

        payload = json.loads(result.to_json())
        self.assertEqual(payload["totalAmount"], "40.00")
        self.assertEqual(payload["items"][0]["totalPrice"], "40.00")


if __name__ == "__main__":
    unittest.main()
