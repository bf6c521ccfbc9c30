"""Product entity."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from src.common.domain.audit_metadata import AuditMetadata

DEFAULT_REORDER_LEVEL = 10

STOCK_STATUS_OUT = "OUT_OF_STOCK"
STOCK_STATUS_LOW = "LOW_STOCK"
STOCK_STATUS_NORMAL = "NORMAL"


@dataclass
class Product:
    """A stocked item supplied by exactly one supplier."""

    product_name: str
    category: str
    unit_price: Decimal
    supplier_id: int
    product_code: Optional[str] = None
    description: Optional[str] = None
    stock_quantity: Optional[int] = 0
    reorder_level: int = DEFAULT_REORDER_LEVEL
    product_id: Optional[int] = None
    audit: AuditMetadata = field(default_factory=AuditMetadata)

    def __post_init__(self) -> None:
        if self.stock_quantity is not None and self.stock_quantity < 0:
            raise ValueError("Stock quantity cannot be negative.")
        if self.unit_price is not None and self.unit_price < 0:
            raise ValueError("Unit price cannot be negative.")

    @property
    def stock_value(self) -> Decimal:
        if self.stock_quantity is None or self.unit_price is None:
            return Decimal("0")
        return Decimal(self.unit_price) * self.stock_quantity

    @property
    def is_low_stock(self) -> bool:
        return self.stock_quantity is not None and self.reorder_level is not None and self.stock_quantity <= self.reorder_level

    @property
    def is_out_of_stock(self) -> bool:
        return self.stock_quantity is None or self.stock_quantity == 0

    @property
    def stock_status(self) -> str:
        if self.is_out_of_stock:
            return STOCK_STATUS_OUT
        if self.is_low_stock:
            return STOCK_STATUS_LOW
        return STOCK_STATUS_NORMAL

    @property
    def shortage(self) -> int:
        if self.stock_quantity is None or self.reorder_level is None:
            return 0
        return max(0, self.reorder_level - self.stock_quantity)

    @property
    def display_name(self) -> str:
        if self.product_code and self.product_code.strip():
            return f"{self.product_name} ({self.product_code})"
        return self.product_name

    def has_sufficient_stock(self, requested_quantity: int) -> bool:
        return self.stock_quantity is not None and self.stock_quantity >= requested_quantity

    def increase_stock(self, quantity: int) -> None:
        if quantity > 0:
            self.stock_quantity = (self.stock_quantity or 0) + quantity

    def decrease_stock(self, quantity: int) -> bool:
        if quantity > 0 and self.has_sufficient_stock(quantity):
            self.stock_quantity -= quantity
            return True
        return False
