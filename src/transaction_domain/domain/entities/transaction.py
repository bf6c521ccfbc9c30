"""Transaction entity."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from .transaction_type import TransactionType

UNKNOWN_PRODUCT = "Unknown Product"


@dataclass
class Transaction:
    """A single stock movement. Not persisted; built per request."""

    transaction_type: TransactionType
    product_id: int
    quantity: int
    unit_price: Decimal
    created_by: Optional[int] = None
    reference_number: Optional[str] = None
    notes: Optional[str] = None
    transaction_id: Optional[int] = None
    transaction_date: datetime = field(default_factory=datetime.now)

    # Display fields, filled from the product read
    product_name: Optional[str] = None
    product_code: Optional[str] = None
    category: Optional[str] = None
    supplier_name: Optional[str] = None

    @property
    def total_amount(self) -> Decimal:
        # Computed on access so it always reflects the current quantity and price
        if self.quantity is None or self.unit_price is None:
            return Decimal("0")
        return Decimal(self.unit_price) * self.quantity

    @property
    def display_product_name(self) -> str:
        name = self.product_name or UNKNOWN_PRODUCT
        if self.product_code and self.product_code.strip():
            return f"{name} ({self.product_code})"
        return name

    @property
    def formatted_reference_number(self) -> str:
        if self.reference_number and self.reference_number.strip():
            return self.reference_number
        return f"TXN-{self.transaction_id or 0:06d}"

    @property
    def has_notes(self) -> bool:
        return bool(self.notes and self.notes.strip())

    @property
    def display_notes(self) -> str:
        return self.notes if self.has_notes else "No notes"
