"""
Numeric normalization shared by every extraction stage.

Parsing failures are reported as ``None`` so callers can skip the candidate
instead of treating it as zero.
"""

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional

CURRENCY_SYMBOLS = "$€£¥"

# Fragment shared by the extraction patterns: an amount with optional
# thousands separators and decimals.
AMOUNT = r'\d[\d,]*(?:\.\d+)?'
CURRENCY = r'[$€£¥]'

_TWO_PLACES = Decimal("0.01")


def parse_amount(text: Optional[str]) -> Optional[Decimal]:
    """Parse a money-like string such as ``$1,234.50`` into a Decimal."""
    if not text:
        return None

    cleaned = text.strip()
    cleaned = re.sub(r'\s*USD$', '', cleaned, flags=re.IGNORECASE)
    cleaned = cleaned.lstrip(CURRENCY_SYMBOLS).strip()
    cleaned = cleaned.replace(',', '')

    if not re.fullmatch(r'[0-9]+(?:\.[0-9]*)?|\.[0-9]+', cleaned):
        return None

    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        return None

    if not value.is_finite() or value < 0:
        return None
    return value


def parse_quantity(text: Optional[str]) -> Optional[int]:
    """Parse a positive whole quantity; anything else is rejected."""
    if text is None:
        return None

    cleaned = str(text).strip()
    if not re.fullmatch(r'[0-9]+', cleaned):
        return None

    quantity = int(cleaned)
    if quantity <= 0:
        return None
    return quantity


def format_amount(value: Decimal) -> str:
    """Render a monetary value with two decimal places."""
    return str(value.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))
