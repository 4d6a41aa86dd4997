"""
Material Quote Extractor pipeline.

Turns the plain text of a quote or pricing sheet into line items and an order
total. Stages run strictly in order, and each fallback tier only runs while
nothing has been found::

    total amount | pricing sheet -> pattern cascade -> currency enrichment
    -> basic spec cascade -> keyword fallback -> default placeholder
    -> fallback pricing -> result assembly
"""

import logging
from decimal import Decimal
from typing import List, Mapping, Sequence

from .exceptions import InvalidInputError
from .fallbacks import DefaultSynthesizer, KeywordFallback
from .models import ExtractedLineItem, ExtractionResult
from .pricing import FALLBACK_PRICING, FallbackPricingEnricher
from .pricing_sheet import PricingSheetExtractor
from .rules import BASIC_SPEC_CASCADE, CURRENCY_ENRICHMENT, PATTERN_CASCADE, run_cascade
from .totals import TotalAmountExtractor

logger = logging.getLogger(__name__)


def assemble_result(items: Sequence[ExtractedLineItem], stated_total: Decimal) -> ExtractionResult:
    """Prefer a stated total; otherwise sum the item totals."""
    item_sum = sum((item.total_price for item in items), Decimal("0"))
    total_amount = stated_total if stated_total else item_sum
    return ExtractionResult(items=list(items), total_amount=total_amount)


class QuoteExtractor:
    """Rule-based extractor for manufacturing quote text.

    Instances hold only immutable configuration, so one extractor can serve
    concurrent callers.
    """

    def __init__(self, pricing_table: Mapping[str, Mapping[str, Decimal]] = FALLBACK_PRICING):
        self.total_extractor = TotalAmountExtractor()
        self.pricing_sheet = PricingSheetExtractor()
        self.pattern_cascade = PATTERN_CASCADE
        self.currency_enrichment = CURRENCY_ENRICHMENT
        self.basic_spec_cascade = BASIC_SPEC_CASCADE
        self.keyword_fallback = KeywordFallback()
        self.default_synthesizer = DefaultSynthesizer()
        self.pricing_enricher = FallbackPricingEnricher(pricing_table)

    def _find_candidates(self, text: str) -> List[ExtractedLineItem]:
        items = self.pricing_sheet.extract(text)
        items.extend(run_cascade(self.pattern_cascade, text))
        items = self.currency_enrichment.apply(text, items)
        if items:
            return items

        logger.info("No priced line items found, trying basic specifications")
        items = run_cascade(self.basic_spec_cascade, text)
        if items:
            return items

        logger.info("No specifications found, trying keyword search")
        return self.keyword_fallback.extract(text)

    def extract(self, text: str) -> ExtractionResult:
        """Extract line items and the order total from document text."""
        if not isinstance(text, str):
            raise InvalidInputError(f"Expected document text as str, got {type(text).__name__}")

        logger.info(f"Extracting line items from {len(text)} characters")
        stated_total = self.total_extractor.extract(text)

        items = self._find_candidates(text)
        if self.pricing_enricher.applies_to(items):
            items = self.pricing_enricher.apply(items)
            # A stated total cannot describe table prices.
            stated_total = Decimal("0")
        elif not items:
            # The placeholder keeps a zero price so it reads as a placeholder.
            items = self.default_synthesizer.extract(text)

        result = assemble_result(items, stated_total)
        logger.info(f"Extracted {len(result.items)} line items, total {result.total_amount}")
        return result


_default_extractor = QuoteExtractor()


def extract_line_items(text: str) -> ExtractionResult:
    """Convenience function running the default extractor."""
    return _default_extractor.extract(text)
