"""
Data models for the Material Quote Extractor.
"""

import json
from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Any, Dict, List, Optional

from .normalizer import format_amount


@dataclass(frozen=True)
class ExtractedLineItem:
    """Represents a single manufacturing line item recovered from quote text."""
    material: str
    thickness: str
    grade: str = "Standard"
    quantity: int = 1
    unit_price: Decimal = Decimal("0")
    total_price: Decimal = Decimal("0")
    remarks: str = ""

    @classmethod
    def create(cls, material: str, thickness: str, grade: str, quantity: int,
               unit_price: Decimal, remarks: str) -> "ExtractedLineItem":
        """Build an item with its total derived from unit price and quantity."""
        return cls(
            material=material,
            thickness=thickness,
            grade=grade,
            quantity=quantity,
            unit_price=unit_price,
            total_price=unit_price * quantity,
            remarks=remarks,
        )

    @property
    def is_priced(self) -> bool:
        return self.unit_price != 0

    def with_unit_price(self, unit_price: Decimal, note: Optional[str] = None) -> "ExtractedLineItem":
        """Return a copy carrying a new unit price and a recomputed total."""
        remarks = f"{self.remarks} {note}".strip() if note else self.remarks
        return replace(
            self,
            unit_price=unit_price,
            total_price=unit_price * self.quantity,
            remarks=remarks,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "material": self.material,
            "thickness": self.thickness,
            "grade": self.grade,
            "quantity": self.quantity,
            "unitPrice": format_amount(self.unit_price),
            "totalPrice": format_amount(self.total_price),
            "remarks": self.remarks,
        }


@dataclass(frozen=True)
class ExtractionResult:
    """Line items and order total recovered from one document."""
    items: List[ExtractedLineItem] = field(default_factory=list)
    total_amount: Decimal = Decimal("0")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "items": [item.to_dict() for item in self.items],
            "totalAmount": format_amount(self.total_amount),
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
