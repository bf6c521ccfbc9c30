"""Data Transfer Objects for inventory reports."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from src.product_domain.domain.entities.product_view import ProductView
from src.supplier_domain.domain.entities.supplier import Supplier


@dataclass
class StockSummaryDTO:
    """All active products with their combined stock figures."""

    products: list[ProductView] = field(default_factory=list)
    total_quantity: int = 0
    total_value: Decimal = Decimal("0")
    low_stock_count: int = 0
    out_of_stock_count: int = 0


@dataclass
class CategoryValuationDTO:
    category: str
    product_count: int = 0
    total_quantity: int = 0
    total_value: Decimal = Decimal("0")


@dataclass
class InventoryValuationDTO:
    total_value: Decimal = Decimal("0")
    total_quantity: int = 0
    product_count: int = 0
    categories: list[CategoryValuationDTO] = field(default_factory=list)


@dataclass
class ReorderItemDTO:
    """One line of the reorder list."""

    product_id: int
    display_name: str
    supplier_name: Optional[str]
    stock_quantity: int
    reorder_level: int
    shortage: int


@dataclass
class SupplierPerformanceItemDTO:
    supplier: Supplier
    active_product_count: int = 0


@dataclass
class SupplierPerformanceDTO:
    items: list[SupplierPerformanceItemDTO] = field(default_factory=list)
    average_rating: Optional[Decimal] = None  # None when no supplier is rated
