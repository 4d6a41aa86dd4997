"""
Material Quote Extractor

A rule-based engine for recovering manufacturing line items from quote text.
"""

__version__ = "1.0.0"

from .exceptions import (
    DocumentConversionError,
    DocumentTooLargeError,
    InvalidInputError,
    QuoteExtractionError,
)
from .extractor import QuoteExtractor, extract_line_items
from .models import ExtractedLineItem, ExtractionResult
from .pdf_extractor import extract_document_text
from .pricing import FALLBACK_PRICING, FallbackPricingEnricher, lookup_price

__all__ = [
    "QuoteExtractor",
    "extract_line_items",
    "extract_document_text",
    "ExtractedLineItem",
    "ExtractionResult",
    "FALLBACK_PRICING",
    "FallbackPricingEnricher",
    "lookup_price",
    "QuoteExtractionError",
    "InvalidInputError",
    "DocumentConversionError",
    "DocumentTooLargeError",
]
