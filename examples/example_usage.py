#!/usr/bin/env python3
"""
Example usage of the Material Quote Extractor
Demonstrates the extraction cascade on a few sample documents.
"""

import logging

from quote_extractor import extract_line_items


def create_sample_quote_text():
    """Create sample quote text for demonstration."""
    return """
    ACME FABRICATION - QUOTATION Q-2025-014

    Mild Steel 2.0mm S275 50 $12.00
    Aluminum 1.0mm 20 $22.00
    Laser Cutting $150.00

    SUBTOTAL: $1,190.00
    GRAND TOTAL: $1,428.00

    TERMS: Net 30
    """


def create_sample_pricing_sheet():
    """Create sample pricing sheet text for demonstration."""
    return """
    MATERIAL PRICES (Per Piece):
    1. Stainless Steel 2.0mm - $25.00
    2. Zintec 1.5mm - $15.00
    3. Brass 1.5mm - $38.00

    BULK DISCOUNTS: 10% over 100 pieces
    """


def demonstrate(title, text):
    print("=" * 60)
    print(f"DEMONSTRATION: {title}")
    print("=" * 60)
    result = extract_line_items(text)
    print(result.to_json())
    print()


def main():
    logging.basicConfig(level=logging.INFO)

    demonstrate("Priced quote", create_sample_quote_text())
    demonstrate("Pricing sheet", create_sample_pricing_sheet())
    demonstrate("Unpriced enquiry", "Please quote 250 pcs of mild steel sheet, 3mm thick")
    demonstrate("Unrecognised text", "hello world")


if __name__ == "__main__":
    main()
