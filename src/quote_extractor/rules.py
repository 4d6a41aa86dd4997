"""
Regular-expression extraction rules.

Rules are plain data: a compiled pattern plus the item field each capture group
maps to. A cascade is an ordered tuple of rules; every rule runs over the whole
text and every match contributes a candidate, so overlapping rules may yield
the same line twice. Candidates are not deduplicated.
"""

import logging
import re
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .models import ExtractedLineItem
from .normalizer import AMOUNT, CURRENCY, parse_amount, parse_quantity

logger = logging.getLogger(__name__)

# Longest names first so "Mild Steel" is preferred over "Steel".
MATERIAL_VOCABULARY: Tuple[str, ...] = (
    "Carbon Steel",
    "Mild Steel",
    "Stainless",
    "Aluminum",
    "Copper",
    "Zintec",
    "Brass",
    "Steel",
)

# Words that mark a field label or an order summary line rather than a material.
SUMMARY_KEYWORDS = re.compile(
    r'\b(?:total|subtotal|due|tax|vat|balance|discount|shipping|amount|price|quantity|qty)\b',
    re.IGNORECASE,
)

WORDS = r'([A-Za-z][A-Za-z ]*?)'
THICKNESS = r'(\d+(?:\.\d+)?mm?)'
NUMBER = r'(\d+(?:\.\d+)?)'
GRADE = r'([A-Za-z0-9][A-Za-z0-9-]*)'
QUANTITY = r'(\d+)'
PRICE = rf'{CURRENCY}?[ \t]*({AMOUNT})'
VOCABULARY = '(' + '|'.join(re.escape(name) for name in MATERIAL_VOCABULARY) + ')'
LABEL_VALUE = r'([^\n\r,]+?)'

LABELLED_FIELDS = (
    rf'material[ \t]*:?[ \t]*{LABEL_VALUE}[\s,]*'
    rf'thickness[ \t]*:?[ \t]*{LABEL_VALUE}[\s,]*'
    rf'grade[ \t]*:?[ \t]*{LABEL_VALUE}[\s,]*'
    r'quantity[ \t]*:?[ \t]*([^\s,]+)'
)

PRICED = ("material", "thickness", "grade", "quantity", "price")
UNPRICED = ("material", "thickness", "grade", "quantity")


@dataclass(frozen=True)
class ExtractionRule:
    """A single pattern and the mapping from its groups to item fields."""
    name: str
    pattern: re.Pattern
    fields: Tuple[str, ...]
    defaults: Dict[str, str] = field(default_factory=dict)

    def build(self, match) -> Optional[ExtractedLineItem]:
        """Map a match onto a line item, or ``None`` if it does not validate."""
        values = dict(self.defaults)
        for name, group in zip(self.fields, match.groups()):
            values[name] = (group or "").strip()

        material = values.get("material", "")
        thickness = values.get("thickness", "")
        grade = values.get("grade", "")
        if not (material and thickness and grade):
            return None

        quantity = parse_quantity(values.get("quantity"))
        if quantity is None:
            logger.debug(f"{self.name}: discarding '{match.group(0).strip()}' (bad quantity)")
            return None

        if "price" in values:
            unit_price = parse_amount(values["price"])
            if unit_price is None:
                return None
        else:
            unit_price = Decimal("0")

        return ExtractedLineItem.create(
            material=material,
            thickness=thickness,
            grade=grade,
            quantity=quantity,
            unit_price=unit_price,
            remarks=f"Extracted from PDF ({self.name}): {material} {thickness} {grade}",
        )

    def extract(self, text: str) -> List[ExtractedLineItem]:
        items = []
        for match in self.pattern.finditer(text):
            item = self.build(match)
            if item is not None:
                items.append(item)
        return items


class SummaryLabelRule(ExtractionRule):
    """``words, amount`` rule that refuses order-summary labels as materials."""

    def build(self, match) -> Optional[ExtractedLineItem]:
        if SUMMARY_KEYWORDS.search(match.group(1)):
            return None
        return super().build(match)


class CurrencyEnrichment:
    """Prices the most recent candidate from bare currency amounts.

    Never creates candidates; it only fills in the unit price of the last
    candidate while that candidate is still unpriced.
    """

    name = "currency amount"

    def __init__(self):
        self.pattern = re.compile(rf'{CURRENCY}[ \t]*({AMOUNT})')

    def apply(self, text: str, items: Sequence[ExtractedLineItem]) -> List[ExtractedLineItem]:
        enriched = list(items)
        if not enriched:
            return enriched

        for match in self.pattern.finditer(text):
            last = enriched[-1]
            if last.is_priced:
                break
            price = parse_amount(match.group(1))
            if not price:
                continue
            logger.debug(f"Pricing '{last.material}' from bare amount {match.group(0)}")
            enriched[-1] = last.with_unit_price(
                price, note=f"(price taken from amount {match.group(0).strip()})"
            )
        return enriched


def _rule(name: str, pattern: str, fields: Tuple[str, ...], flags: int = 0, **defaults) -> ExtractionRule:
    return ExtractionRule(name, re.compile(pattern, flags | re.MULTILINE), fields, defaults)


PATTERN_CASCADE: Tuple[ExtractionRule, ...] = (
    _rule(
        "material thickness price",
        rf'^[ \t]*{WORDS}[ \t]+{THICKNESS}[ \t]*-[ \t]*{PRICE}',
        ("material", "thickness", "price"),
        re.IGNORECASE,
        grade="Standard", quantity="1",
    ),
    _rule(
        "numbered list",
        rf'^[ \t]*\d+\.[ \t]*{WORDS}[ \t]+{THICKNESS}[ \t]*-[ \t]*{PRICE}',
        ("material", "thickness", "price"),
        re.IGNORECASE,
        grade="Standard", quantity="1",
    ),
    _rule(
        "labelled fields",
        LABELLED_FIELDS + rf'[\s,]*price[ \t]*:?[ \t]*{PRICE}',
        PRICED,
        re.IGNORECASE,
    ),
    _rule(
        "tabular",
        rf'^[ \t]*{WORDS}[ \t]+{THICKNESS}[ \t]+{GRADE}[ \t]+{QUANTITY}[ \t]+{PRICE}',
        PRICED,
    ),
    _rule(
        "known material",
        rf'\b{VOCABULARY}[ \t,]*{THICKNESS}[ \t,]+{GRADE}[ \t,]+{QUANTITY}[ \t,]+{PRICE}',
        PRICED,
        re.IGNORECASE,
    ),
    _rule(
        "generic specification",
        rf'^[ \t]*{WORDS}[ \t]+{NUMBER}[ \t]+{GRADE}[ \t]+{QUANTITY}[ \t]+{PRICE}',
        PRICED,
    ),
    _rule(
        "thickness quantity price",
        rf'^[ \t]*{WORDS}[ \t]+{THICKNESS}[ \t]+{QUANTITY}[ \t]+{PRICE}',
        ("material", "thickness", "quantity", "price"),
        grade="Standard",
    ),
    SummaryLabelRule(
        "material price",
        re.compile(rf'^[ \t]*{WORDS}[ \t]*{CURRENCY}[ \t]*({AMOUNT})[ \t]*$', re.MULTILINE),
        ("material", "price"),
        {"thickness": "1.5", "grade": "Standard", "quantity": "1"},
    ),
)

CURRENCY_ENRICHMENT = CurrencyEnrichment()

BASIC_SPEC_CASCADE: Tuple[ExtractionRule, ...] = (
    _rule("labelled fields", LABELLED_FIELDS, UNPRICED, re.IGNORECASE),
    _rule(
        "tabular",
        rf'^[ \t]*{WORDS}[ \t]+{THICKNESS}[ \t]+{GRADE}[ \t]+{QUANTITY}\b',
        UNPRICED,
    ),
    _rule(
        "known material",
        rf'\b{VOCABULARY}[ \t,]*{THICKNESS}[ \t,]+{GRADE}[ \t,]+{QUANTITY}\b',
        UNPRICED,
        re.IGNORECASE,
    ),
    _rule(
        "generic specification",
        rf'^[ \t]*{WORDS}[ \t]+{NUMBER}[ \t]+{GRADE}[ \t]+{QUANTITY}\b',
        UNPRICED,
    ),
)


def run_cascade(rules: Iterable[ExtractionRule], text: str) -> List[ExtractedLineItem]:
    """Apply every rule in order and accumulate all of their candidates."""
    items: List[ExtractedLineItem] = []
    for rule in rules:
        found = rule.extract(text)
        if found:
            logger.debug(f"Rule '{rule.name}' matched {len(found)} candidates")
        items.extend(found)
    return items
