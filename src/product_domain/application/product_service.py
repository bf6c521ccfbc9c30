# src/product_domain/application/product_service.py
"""Application service for Product business rules."""

import logging
from decimal import Decimal
from typing import Optional

from src.common.exceptions.custom_exceptions import ValidationError
from src.product_domain.domain.entities.product import Product
from src.product_domain.domain.entities.product_view import ProductView
from src.product_domain.domain.repositories.product_repository import IProductRepository
from src.supplier_domain.domain.entities.supplier import Supplier
from src.supplier_domain.domain.repositories.supplier_repository import ISupplierRepository

logger = logging.getLogger(__name__)


def _invalid(message: str) -> ValidationError:
    logger.warning(f"Validation failed: {message}")
    return ValidationError(message)


MAX_NAME_LENGTH = 100
MAX_CODE_LENGTH = 50
MAX_CATEGORY_LENGTH = 50


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value.strip()


class ProductApplicationService:
    """Enforces product rules that span products and suppliers before touching storage."""

    def __init__(self, product_repo: IProductRepository, supplier_repo: ISupplierRepository) -> None:
        self.product_repo = product_repo
        self.supplier_repo = supplier_repo

    def create_product(
        self,
        product_name: str,
        product_code: Optional[str],
        category: str,
        description: Optional[str],
        unit_price: Decimal,
        stock_quantity: int,
        reorder_level: int,
        supplier_id: int,
    ) -> Product:
        """
        Creates a new product after validation.

        Raises:
            ValidationError: on the first failed rule, a duplicate product code or an unknown supplier.
            PersistenceError: when the insert fails.
        """
        logger.info(f"Creating new product: {product_name}")

        self._validate_product_data(
            product_name, product_code, category, unit_price, stock_quantity, reorder_level, supplier_id
        )

        product_code = _blank_to_none(product_code)
        if product_code is not None and self.product_repo.find_by_product_code(product_code) is not None:
            raise _invalid(f"Product code already exists: {product_code}")

        self._require_supplier(supplier_id)

        product = Product(
            product_name=product_name.strip(),
            product_code=product_code,
            category=category.strip(),
            description=_blank_to_none(description),
            unit_price=unit_price,
            stock_quantity=stock_quantity,
            reorder_level=reorder_level,
            supplier_id=supplier_id,
        )

        saved_product = self.product_repo.save(product)
        logger.info(f"Product created successfully with ID: {saved_product.product_id}")
        return saved_product

    def update_product(
        self,
        product_id: int,
        product_name: str,
        product_code: Optional[str],
        category: str,
        description: Optional[str],
        unit_price: Decimal,
        stock_quantity: int,
        reorder_level: int,
        supplier_id: int,
    ) -> Product:
        """Updates an existing product; it may keep its own product code."""
        logger.info(f"Updating product: {product_id}")

        self._validate_product_data(
            product_name, product_code, category, unit_price, stock_quantity, reorder_level, supplier_id
        )

        existing_view = self.product_repo.find_by_id(product_id)
        if existing_view is None:
            raise _invalid(f"Product not found with ID: {product_id}")

        product_code = _blank_to_none(product_code)
        if product_code is not None:
            product_with_code = self.product_repo.find_by_product_code(product_code)
            if product_with_code is not None and product_with_code.product_id != product_id:
                raise _invalid(f"Product code already exists: {product_code}")

        self._require_supplier(supplier_id)

        product = existing_view.product
        product.product_name = product_name.strip()
        product.product_code = product_code
        product.category = category.strip()
        product.description = _blank_to_none(description)
        product.unit_price = unit_price
        product.stock_quantity = stock_quantity
        product.reorder_level = reorder_level
        product.supplier_id = supplier_id

        updated_product = self.product_repo.update(product)
        logger.info(f"Product updated successfully: {product_id}")
        return updated_product

    def update_stock_quantity(self, product_id: int, new_quantity: int) -> bool:
        """Overwrites the stock level without re-validating any other field."""
        logger.info(f"Updating stock quantity for product {product_id}: {new_quantity}")

        if new_quantity is None or new_quantity < 0:
            raise _invalid("Stock quantity cannot be negative")

        updated = self.product_repo.update_stock_quantity(product_id, new_quantity)
        if not updated:
            logger.warning(f"Product not found for stock update: {product_id}")
        return updated

    def delete_product(self, product_id: int) -> bool:
        logger.info(f"Deleting product: {product_id}")

        if self.product_repo.find_by_id(product_id) is None:
            raise _invalid(f"Product not found with ID: {product_id}")

        deleted = self.product_repo.delete(product_id)
        if deleted:
            logger.info(f"Product deleted successfully: {product_id}")
        return deleted

    def find_product_by_id(self, product_id: int) -> Optional[ProductView]:
        return self.product_repo.find_by_id(product_id)

    def find_all_products(self) -> list[ProductView]:
        return self.product_repo.find_all()

    def search_products_by_name(self, name: Optional[str]) -> list[ProductView]:
        if name is None or not name.strip():
            return self.find_all_products()
        return self.product_repo.find_by_name(name.strip())

    def find_products_by_category(self, category: str) -> list[ProductView]:
        return self.product_repo.find_by_category(category)

    def find_products_by_supplier(self, supplier_id: int) -> list[ProductView]:
        return self.product_repo.find_by_supplier(supplier_id)

    def find_product_by_code(self, product_code: str) -> Optional[ProductView]:
        return self.product_repo.find_by_product_code(product_code)

    def get_low_stock_products(self) -> list[ProductView]:
        return self.product_repo.get_low_stock_products()

    def get_out_of_stock_products(self) -> list[ProductView]:
        return self.product_repo.get_out_of_stock_products()

    def get_distinct_categories(self) -> list[str]:
        return self.product_repo.get_distinct_categories()

    def get_product_count(self) -> int:
        return self.product_repo.count()

    def product_exists(self, product_id: int) -> bool:
        return self.product_repo.exists(product_id)

    def get_all_suppliers(self) -> list[Supplier]:
        """Suppliers offered when filling in a product form."""
        return self.supplier_repo.find_all()

    def _require_supplier(self, supplier_id: int) -> None:
        if self.supplier_repo.find_by_id(supplier_id) is None:
            raise _invalid(f"Supplier not found with ID: {supplier_id}")

    @staticmethod
    def _validate_product_data(
        product_name: Optional[str],
        product_code: Optional[str],
        category: Optional[str],
        unit_price: Optional[Decimal],
        stock_quantity: Optional[int],
        reorder_level: Optional[int],
        supplier_id: Optional[int],
    ) -> None:
        if product_name is None or not product_name.strip():
            raise _invalid("Product name is required")
        if len(product_name.strip()) > MAX_NAME_LENGTH:
            raise _invalid(f"Product name cannot exceed {MAX_NAME_LENGTH} characters")
        if product_code is not None and len(product_code) > MAX_CODE_LENGTH:
            raise _invalid(f"Product code cannot exceed {MAX_CODE_LENGTH} characters")
        if category is None or not category.strip():
            raise _invalid("Category is required")
        if len(category.strip()) > MAX_CATEGORY_LENGTH:
            raise _invalid(f"Category cannot exceed {MAX_CATEGORY_LENGTH} characters")
        if unit_price is None:
            raise _invalid("Unit price is required")
        if not unit_price.is_finite():
            raise _invalid("Unit price must be a number")
        if unit_price < 0:
            raise _invalid("Unit price cannot be negative")
        if stock_quantity is None:
            raise _invalid("Stock quantity is required")
        if stock_quantity < 0:
            raise _invalid("Stock quantity cannot be negative")
        if reorder_level is None:
            raise _invalid("Reorder level is required")
        if reorder_level < 0:
            raise _invalid("Reorder level cannot be negative")
        if supplier_id is None:
            raise _invalid("Supplier ID is required")
