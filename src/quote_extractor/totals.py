"""
Order total detection.
"""

import logging
import re
from decimal import Decimal
from typing import Iterator, List

from .normalizer import AMOUNT, CURRENCY, parse_amount

logger = logging.getLogger(__name__)


class TotalAmountExtractor:
    """Finds the order total stated anywhere in the document.

    Every keyword pattern is scanned for all of its occurrences and the largest
    value wins. Documents often quote a subtotal before discounts and a grand
    total after them, so no single occurrence can be trusted on position alone.
    """

    def __init__(self):
        self.total_patterns: List[re.Pattern] = [
            re.compile(rf'\btotal\b[ \t:]*{CURRENCY}?[ \t]*({AMOUNT})', re.IGNORECASE),
            re.compile(rf'\bamount\b[ \t:]*{CURRENCY}?[ \t]*({AMOUNT})', re.IGNORECASE),
            re.compile(rf'\bgrand[ \t]+total\b[ \t:]*{CURRENCY}?[ \t]*({AMOUNT})', re.IGNORECASE),
            re.compile(rf'\bfinal[ \t]+total\b[ \t:]*{CURRENCY}?[ \t]*({AMOUNT})', re.IGNORECASE),
            re.compile(rf'{CURRENCY}[ \t]*({AMOUNT})[ \t]*total\b', re.IGNORECASE),
            re.compile(rf'\bsubtotal\b[ \t:]*{CURRENCY}?[ \t]*({AMOUNT})', re.IGNORECASE),
        ]

    def _candidates(self, text: str) -> Iterator[Decimal]:
        for pattern in self.total_patterns:
            for match in pattern.finditer(text):
                value = parse_amount(match.group(1))
                if value is not None:
                    yield value

    def extract(self, text: str) -> Decimal:
        """Return the largest stated total, or zero when none is present."""
        total = max(self._candidates(text), default=Decimal("0"))
        if total:
            logger.debug(f"Stated order total: {total}")
        return total
