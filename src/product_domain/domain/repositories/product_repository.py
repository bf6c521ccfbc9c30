# src/product_domain/domain/repositories/product_repository.py
"""Product repository interface."""
from abc import abstractmethod
from typing import Optional

from src.common.repositories.base_repository import IBaseRepository
from src.product_domain.domain.entities.product import Product
from src.product_domain.domain.entities.product_view import ProductView


class IProductRepository(IBaseRepository[Product, ProductView]):

    @abstractmethod
    def find_by_name(self, name: str) -> list[ProductView]:
        """Finds products whose name contains the term."""
        pass

    @abstractmethod
    def find_by_category(self, category: str) -> list[ProductView]:
        """Finds products in exactly this category."""
        pass

    @abstractmethod
    def find_by_supplier(self, supplier_id: int) -> list[ProductView]:
        """Finds products delivered by the supplier."""
        pass

    @abstractmethod
    def find_by_product_code(self, product_code: str) -> Optional[ProductView]:
        """Finds the product with exactly this code, or None."""
        pass

    @abstractmethod
    def get_low_stock_products(self) -> list[ProductView]:
        """Products at or below their reorder level, largest shortage first."""
        pass

    @abstractmethod
    def get_out_of_stock_products(self) -> list[ProductView]:
        """Products with zero stock."""
        pass

    @abstractmethod
    def get_distinct_categories(self) -> list[str]:
        """All categories in use, alphabetically."""
        pass

    @abstractmethod
    def update_stock_quantity(self, product_id: int, new_quantity: int) -> bool:
        """Overwrites only the stock quantity; returns whether a row was affected."""
        pass
