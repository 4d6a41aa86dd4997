"""
Pricing sheet detection.

A pricing sheet is a catalog block listing per-piece prices, e.g.::

    MATERIAL PRICES (Per Piece):
    1. Stainless Steel 2.0mm - $25.00
    2. Zintec 1.5mm - $15.00
    BULK DISCOUNTS: ...
"""

import logging
import re
from typing import List

from .models import ExtractedLineItem
from .normalizer import AMOUNT, CURRENCY, parse_amount

logger = logging.getLogger(__name__)


class PricingSheetExtractor:
    """Parses the rows of a ``MATERIAL PRICES`` section into catalog items."""

    def __init__(self):
        self.section_pattern = re.compile(
            r'MATERIAL[ \t]+PRICES(?:[ \t]*\(Per[ \t]+Piece\))?[ \t]*:?'
            r'(.*?)'
            r'(?:BULK[ \t]+DISCOUNTS|TERMS|Contact:)',
            re.IGNORECASE | re.DOTALL,
        )
        self.line_pattern = re.compile(
            rf'^[ \t]*(?:\d+\.[ \t]*)?([A-Za-z][A-Za-z ]*?)[ \t]+(\d+(?:\.\d+)?mm)'
            rf'[ \t]*-[ \t]*{CURRENCY}?({AMOUNT})',
            re.IGNORECASE,
        )

    def extract(self, text: str) -> List[ExtractedLineItem]:
        section = self.section_pattern.search(text)
        if not section:
            return []

        logger.info("Found pricing sheet section")
        items = []
        for line in section.group(1).splitlines():
            if not line.strip():
                continue

            match = self.line_pattern.match(line)
            if not match:
                logger.debug(f"Skipping pricing sheet line: {line.strip()}")
                continue

            material = match.group(1).strip()
            thickness = match.group(2)
            price = parse_amount(match.group(3))
            if not price:
                continue

            items.append(ExtractedLineItem.create(
                material=material,
                thickness=thickness,
                grade="Standard",
                quantity=1,
                unit_price=price,
                remarks=f"Extracted from pricing sheet: {material} {thickness}",
            ))

        logger.info(f"Pricing sheet yielded {len(items)} items")
        return items
