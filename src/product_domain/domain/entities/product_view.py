"""Read projection of a product joined with its supplier."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from .product import Product


@dataclass(frozen=True)
class ProductView:
    """A product as read from storage, with the owning supplier's name and rating.

    Repositories only accept Product for writes, so the supplier fields here never
    travel back into the products table.
    """

    product: Product
    supplier_name: Optional[str] = None
    supplier_rating: Optional[Decimal] = None

    @property
    def product_id(self) -> Optional[int]:
        return self.product.product_id

    @property
    def supplier_label(self) -> str:
        return self.supplier_name or "Unknown supplier"
