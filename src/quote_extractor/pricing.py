"""
Static fallback pricing used when a document carries no prices at all.
"""

import logging
from decimal import Decimal
from types import MappingProxyType
from typing import List, Mapping, Sequence

from .models import ExtractedLineItem

logger = logging.getLogger(__name__)

DEFAULT_MATERIAL = "Steel"
DEFAULT_THICKNESS = "default"


def _freeze(table):
    return MappingProxyType({
        material: MappingProxyType({thickness: Decimal(price) for thickness, price in prices.items()})
        for material, prices in table.items()
    })


# Price per piece, keyed by material then thickness.
FALLBACK_PRICING: Mapping[str, Mapping[str, Decimal]] = _freeze({
    "Zintec": {"1.5mm": "15.00", "2.0mm": "20.00", "default": "17.50"},
    "Stainless Steel": {"2.0mm": "25.00", "3.0mm": "35.00", "default": "30.00"},
    "Mild Steel": {"1.5mm": "12.00", "2.0mm": "18.00", "default": "15.00"},
    "Aluminum": {"1.0mm": "22.00", "2.0mm": "28.00", "default": "25.00"},
    "Copper": {"1.0mm": "45.00", "default": "45.00"},
    "Brass": {"1.5mm": "38.00", "default": "38.00"},
    "Steel": {"default": "20.00"},
})


def lookup_price(material: str, thickness: str,
                 table: Mapping[str, Mapping[str, Decimal]] = FALLBACK_PRICING) -> Decimal:
    """Resolve a per-piece price by exact material, then exact thickness."""
    prices = table.get(material, table[DEFAULT_MATERIAL])
    return prices.get(thickness, prices[DEFAULT_THICKNESS])


class FallbackPricingEnricher:
    """Assigns table prices when no candidate carries a price of its own.

    The precondition is global: a single priced candidate disables the stage
    for every candidate, unpriced ones included.
    """

    def __init__(self, table: Mapping[str, Mapping[str, Decimal]] = FALLBACK_PRICING):
        if DEFAULT_THICKNESS not in table.get(DEFAULT_MATERIAL, {}):
            raise ValueError(f"Pricing table needs a '{DEFAULT_MATERIAL}' row with a '{DEFAULT_THICKNESS}' price")
        for material, prices in table.items():
            if DEFAULT_THICKNESS not in prices:
                raise ValueError(f"Pricing row '{material}' has no '{DEFAULT_THICKNESS}' price")
        self.table = table

    def applies_to(self, items: Sequence[ExtractedLineItem]) -> bool:
        return bool(items) and all(not item.is_priced for item in items)

    def apply(self, items: Sequence[ExtractedLineItem]) -> List[ExtractedLineItem]:
        if not self.applies_to(items):
            return list(items)

        logger.info("No pricing found in document, applying fallback pricing")
        enriched = []
        for item in items:
            price = lookup_price(item.material, item.thickness, self.table)
            enriched.append(item.with_unit_price(
                price,
                note=f"(Fallback pricing applied: ${price} for {item.material} {item.thickness})",
            ))
        return enriched
