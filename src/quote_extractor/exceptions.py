"""
Errors raised by the Material Quote Extractor.

Finding nothing in a document is not an error; the extraction cascade always
degrades to a placeholder item instead.
"""


class QuoteExtractionError(Exception):
    """Base class for all extractor errors."""


class InvalidInputError(QuoteExtractionError, TypeError):
    """The engine was handed something that is not text."""


class DocumentConversionError(QuoteExtractionError):
    """An uploaded document could not be converted to plain text."""


class DocumentTooLargeError(DocumentConversionError):
    """An uploaded document exceeds the upload size limit."""
