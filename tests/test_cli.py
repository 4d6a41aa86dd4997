#!/usr/bin/env python3
"""
Tests for the command line interface.
"""

import json
import unittest

from click.testing import CliRunner

from quote_extractor.cli import cli


class TestCli(unittest.TestCase):
    """Test cases for the quote-extractor CLI."""

    def setUp(self):
        self.runner = CliRunner()

    def test_extract_to_file(self):
        with self.runner.isolated_filesystem():
            with open("quote.txt", "w", encoding="utf-8") as f:
                f.write("1. Stainless Steel 2.0mm - $25.00\n")

            result = self.runner.invoke(cli, ["extract", "quote.txt", "-o", "out.json", "--include-text"])
            self.assertEqual(result.exit_code, 0, result.output)

            with open("out.json", encoding="utf-8") as f:
                payload = json.load(f)

        self.assertTrue(payload["success"])
        self.assertEqual(payload["totalAmount"], "25.00")
        self.assertEqual(payload["items"][0]["material"], "Stainless Steel")
        self.assertEqual(payload["extractedText"], "1. Stainless Steel 2.0mm - $25.00\n")

    def test_extract_as_table(self):
        with self.runner.isolated_filesystem():
            with open("quote.txt", "w", encoding="utf-8") as f:
                f.write("hello world\n")

            result = self.runner.invoke(cli, ["--verbose", "extract", "quote.txt", "--table"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Extracted Line Items", result.output)
        self.assertIn("A36", result.output)

    def test_unsupported_document(self):
        with self.runner.isolated_filesystem():
            with open("quote.docx", "w") as f:
                f.write("not a pdf")

            result = self.runner.invoke(cli, ["extract", "quote.docx"])

        self.assertNotEqual(result.exit_code, 0)
        self.assertIn("Error reading document", result.output)

    def test_missing_document(self):
        result = self.runner.invoke(cli, ["extract", "does-not-exist.pdf"])
        self.assertEqual(result.exit_code, 2)

    def test_prices(self):
        result = self.runner.invoke(cli, ["prices"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Zintec", result.output)
        self.assertIn("17.50", result.output)


if __name__ == "__main__":
    unittest.main()
