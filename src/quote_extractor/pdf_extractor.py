#!/usr/bin/env python3
"""
Document to text conversion ahead of line item extraction.
"""

import logging
import re
from pathlib import Path
from typing import List, Union

import pdfplumber

from .exceptions import DocumentConversionError, DocumentTooLargeError

logger = logging.getLogger(__name__)

MAX_UPLOAD_BYTES = 10 * 1024 * 1024

TEXT_SUFFIXES = {".txt", ".text"}


class DocumentTextExtractor:
    """Converts an uploaded PDF or text file into plain text."""

    def __init__(self, max_bytes: int = MAX_UPLOAD_BYTES):
        self.max_bytes = max_bytes

    def extract_text(self, path: Union[str, Path]) -> str:
        """
        Extract text from a document.

        Args:
            path: Path to a PDF or plain text file

        Returns:
            Extracted text with its line structure preserved

        Raises:
            DocumentTooLargeError: the file exceeds the upload limit
            DocumentConversionError: the file is not a readable PDF or text file
        """
        path = Path(path)
        if not path.is_file():
            raise DocumentConversionError(f"File not found: {path}")

        size = path.stat().st_size
        if size > self.max_bytes:
            raise DocumentTooLargeError(
                f"{path.name} is {size} bytes, limit is {self.max_bytes} bytes"
            )

        suffix = path.suffix.lower()
        if suffix in TEXT_SUFFIXES:
            return self._extract_plain_text(path)
        if suffix == ".pdf":
            return self._extract_with_pdfplumber(path)
        raise DocumentConversionError(f"Only PDF and text files are supported, got '{path.name}'")

    def _extract_plain_text(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise DocumentConversionError(f"{path.name} is not UTF-8 text: {e}") from e

    def _extract_with_pdfplumber(self, path: Path) -> str:
        """Extract text using pdfplumber, one block per page."""
        pages: List[str] = []
        try:
            with pdfplumber.open(path) as pdf:
                for page in pdf.pages:
                    page_text = page.extract_text()
                    if not page_text:
                        # Retry with layout-aware settings
                        page_text = page.extract_text(layout=True, x_tolerance=3, y_tolerance=3)
                    if page_text:
                        pages.append(page_text)
        except Exception as e:
            logger.error(f"pdfplumber extraction failed: {e}")
            raise DocumentConversionError(f"Could not read PDF {path.name}: {e}") from e

        text = self.clean_text("\n".join(pages))
        if not text:
            raise DocumentConversionError(f"No extractable text in {path.name}")

        logger.info(f"Extracted {len(text)} characters from {len(pages)} pages")
        return text

    def clean_text(self, text: str) -> str:
        """
        Remove encoding artifacts while keeping one source line per line.

        Args:
            text: Raw extracted text

        Returns:
            Cleaned text
        """
        if not text:
            return ""

        # Remove CID encoding artifacts
        text = re.sub(r'\(cid:\d+\)', '', text)

        # Normalize line breaks
        text = text.replace('\r\n', '\n').replace('\r', '\n')

        # Collapse runs of spaces within lines and drop empty lines
        lines = [re.sub(r'[ \t]+', ' ', line).strip() for line in text.split('\n')]
        return '\n'.join(line for line in lines if line)


def extract_document_text(path: Union[str, Path], max_bytes: int = MAX_UPLOAD_BYTES) -> str:
    """
    Convenience function to extract text from an uploaded document.

    Args:
        path: Path to the PDF or text file
        max_bytes: Upload size limit

    Returns:
        Extracted text
    """
    return DocumentTextExtractor(max_bytes).extract_text(path)
