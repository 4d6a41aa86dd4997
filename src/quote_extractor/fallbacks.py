"""
Last-resort stages used when no rule produced a candidate.
"""

import logging
import re
from decimal import Decimal
from typing import List

from .models import ExtractedLineItem
from .normalizer import parse_quantity
from .rules import MATERIAL_VOCABULARY

logger = logging.getLogger(__name__)


class KeywordFallback:
    """Builds one candidate from the first material, thickness and quantity seen.

    The three tokens are searched independently; all three must be present.
    """

    def __init__(self):
        self.material_pattern = re.compile(
            r'\b(' + '|'.join(re.escape(name) for name in MATERIAL_VOCABULARY) + r')\b',
            re.IGNORECASE,
        )
        # First number in text order, with an optional mm unit, that is not
        # itself a quantity such as "100 pcs".
        self.thickness_pattern = re.compile(
            r'(?<![\d.])(\d+(?:\.\d+)?(?!\.?\d)(?:[ \t]?mm)?)'
            r'(?![ \t]*(?:pcs|pieces|units|qty|quantity)\b)',
            re.IGNORECASE,
        )
        self.quantity_pattern = re.compile(
            r'(\d+)[ \t]*(?:pcs|pieces|units|qty|quantity)\b', re.IGNORECASE
        )
        self._canonical = {name.lower(): name for name in MATERIAL_VOCABULARY}

    def extract(self, text: str) -> List[ExtractedLineItem]:
        material = self.material_pattern.search(text)
        thickness = self.thickness_pattern.search(text)
        quantity = self.quantity_pattern.search(text)
        if not (material and thickness and quantity):
            return []

        count = parse_quantity(quantity.group(1))
        if count is None:
            return []

        name = self._canonical[material.group(1).lower()]
        thickness = thickness.group(1)
        logger.info(f"Keyword fallback matched {name} {thickness} x{count}")
        return [ExtractedLineItem.create(
            material=name,
            thickness=thickness,
            grade="Standard",
            quantity=count,
            unit_price=Decimal("0"),
            remarks="Extracted from PDF specifications",
        )]


class DefaultSynthesizer:
    """Emits the placeholder item that guarantees a non-empty result."""

    REMARKS = "Default specification - please update as needed"

    def extract(self, text: str) -> List[ExtractedLineItem]:
        logger.warning("No line items recognised; emitting default placeholder")
        return [ExtractedLineItem(
            material="Steel",
            thickness="2mm",
            grade="A36",
            quantity=100,
            remarks=self.REMARKS,
        )]
