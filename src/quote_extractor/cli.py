#!/usr/bin/env python3
"""
Material Quote Extractor CLI
Extracts manufacturing line items from quote documents.
"""

import json
import logging
from typing import Any, Dict, Optional

import click
from rich.console import Console
from rich.table import Table

from .exceptions import DocumentConversionError
from .extractor import extract_line_items
from .models import ExtractionResult
from .normalizer import format_amount
from .pdf_extractor import extract_document_text
from .pricing import FALLBACK_PRICING

logger = logging.getLogger(__name__)

console = Console()


def build_payload(result: ExtractionResult, text: str, include_text: bool = False) -> Dict[str, Any]:
    """Shape an extraction result like the upload endpoint's response."""
    payload = {"success": True}
    payload.update(result.to_dict())
    if include_text:
        payload["extractedText"] = text
    return payload


def render_items(result: ExtractionResult) -> Table:
    table = Table(title="Extracted Line Items")
    table.add_column("Material", style="cyan")
    table.add_column("Thickness")
    table.add_column("Grade")
    table.add_column("Qty", justify="right")
    table.add_column("Unit Price", justify="right")
    table.add_column("Total", justify="right", style="green")
    table.add_column("Remarks", style="dim")

    for item in result.items:
        table.add_row(
            item.material,
            item.thickness,
            item.grade,
            str(item.quantity),
            format_amount(item.unit_price),
            format_amount(item.total_price),
            item.remarks,
        )
    table.caption = f"Total amount: {format_amount(result.total_amount)}"
    return table


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
def cli(verbose: bool):
    """Extract material, thickness, grade, quantity and price from quotes."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@cli.command()
@click.argument('document_path', type=click.Path(exists=True, dir_okay=False))
@click.option('--output', '-o', type=click.Path(dir_okay=False), help='Output JSON file path')
@click.option('--table', 'as_table', is_flag=True, help='Render line items as a table')
@click.option('--include-text', is_flag=True, help='Include the extracted document text')
def extract(document_path: str, output: Optional[str], as_table: bool, include_text: bool):
    """Extract line items from a PDF or text document."""
    try:
        text = extract_document_text(document_path)
    except DocumentConversionError as e:
        click.echo(f"Error reading document: {e}", err=True)
        raise click.Abort()

    result = extract_line_items(text)
    payload = build_payload(result, text, include_text)

    if output:
        with open(output, 'w', encoding='utf-8') as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
        logger.info(f"Results saved to: {output}")
    elif as_table:
        console.print(render_items(result))
    else:
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@cli.command()
def prices():
    """Show the fallback pricing table."""
    table = Table(title="Fallback Pricing (per piece)")
    table.add_column("Material", style="cyan")
    table.add_column("Thickness")
    table.add_column("Price", justify="right", style="green")

    for material, entries in FALLBACK_PRICING.items():
        for thickness, price in entries.items():
            table.add_row(material, thickness, format_amount(price))
    console.print(table)


if __name__ == '__main__':
    cli()
