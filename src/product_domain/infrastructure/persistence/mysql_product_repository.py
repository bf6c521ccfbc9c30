# src/product_domain/infrastructure/persistence/mysql_product_repository.py
"""MySQL implementation of the Product repository."""

import logging
from decimal import Decimal
from typing import Any, Optional

from src.common.domain.audit_metadata import AuditMetadata
from src.common.persistence.mysql_base_repository import MySQLBaseRepository, like_pattern
from src.product_domain.domain.entities.product import Product
from src.product_domain.domain.entities.product_view import ProductView
from src.product_domain.domain.repositories.product_repository import IProductRepository

logger = logging.getLogger(__name__)


class MySQLProductRepository(MySQLBaseRepository, IProductRepository):
    """MySQL implementation of the Product Repository.

    Every read joins the supplier so callers get its name and rating without a
    second query.
    """

    table_name = "products"
    table_alias = "p"
    id_column = "product_id"
    entity_label = "product"
    select_clause = (
        "SELECT p.*, s.company_name AS supplier_name, s.rating AS supplier_rating "
        "FROM products p LEFT JOIN suppliers s ON p.supplier_id = s.supplier_id"
    )
    default_order_by = "p.product_name"

    def create_tables(self) -> None:
        """Creates the products table. The suppliers table must exist first."""
        create_products_table_query = """
        CREATE TABLE IF NOT EXISTS products (
            product_id INT PRIMARY KEY AUTO_INCREMENT,
            product_name VARCHAR(100) NOT NULL,
            product_code VARCHAR(50),
            category VARCHAR(50) NOT NULL,
            description TEXT,
            unit_price DECIMAL(10,2) NOT NULL CHECK (unit_price >= 0),
            stock_quantity INT NOT NULL DEFAULT 0 CHECK (stock_quantity >= 0),
            reorder_level INT NOT NULL DEFAULT 10 CHECK (reorder_level >= 0),
            supplier_id INT NOT NULL,
            is_active BOOLEAN NOT NULL DEFAULT TRUE,
            created_date TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_date TIMESTAMP DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP,
            CONSTRAINT fk_products_supplier FOREIGN KEY (supplier_id) REFERENCES suppliers (supplier_id),
            INDEX idx_products_name (product_name),
            INDEX idx_products_code (product_code),
            INDEX idx_products_category (category),
            INDEX idx_products_supplier (supplier_id)
        ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4;
        """
        self._execute_ddl(create_products_table_query, "Error creating products table")
        logger.info("Products table checked/created.")

    def save(self, product: Product) -> Product:
        logger.debug(f"Saving new product: {product.product_name}")
        insert_query = """
        INSERT INTO products
        (product_name, product_code, category, description, unit_price, stock_quantity, reorder_level, supplier_id)
        VALUES (%s, %s, %s, %s, %s, %s, %s, %s)
        """
        product.product_id = self._insert(insert_query, self._product_params(product), product.product_name)
        logger.info(f"Product saved successfully with ID: {product.product_id}")
        return product

    def update(self, product: Product) -> Product:
        logger.debug(f"Updating product: {product.product_id}")
        update_query = """
        UPDATE products
        SET product_name = %s, product_code = %s, category = %s, description = %s, unit_price = %s,
            stock_quantity = %s, reorder_level = %s, supplier_id = %s, updated_date = CURRENT_TIMESTAMP
        WHERE product_id = %s AND is_active = TRUE
        """
        self._update_row(update_query, (*self._product_params(product), product.product_id), product.product_id)
        product.audit.touch()
        logger.info(f"Product updated successfully: {product.product_id}")
        return product

    def find_by_name(self, name: str) -> list[ProductView]:
        logger.debug(f"Finding products by name: {name}")
        query = self._build_select("LOWER(p.product_name) LIKE LOWER(%s)")
        rows = self._fetch_all(query, (like_pattern(name),), f"Error finding products by name: {name}")
        logger.info(f"Found {len(rows)} products matching name: {name}")
        return [self._map_row(row) for row in rows]

    def find_by_category(self, category: str) -> list[ProductView]:
        logger.debug(f"Finding products by category: {category}")
        query = self._build_select("p.category = %s")
        rows = self._fetch_all(query, (category,), f"Error finding products by category: {category}")
        logger.info(f"Found {len(rows)} products in category: {category}")
        return [self._map_row(row) for row in rows]

    def find_by_supplier(self, supplier_id: int) -> list[ProductView]:
        logger.debug(f"Finding products by supplier: {supplier_id}")
        query = self._build_select("p.supplier_id = %s")
        rows = self._fetch_all(query, (supplier_id,), f"Error finding products by supplier: {supplier_id}")
        logger.info(f"Found {len(rows)} products for supplier: {supplier_id}")
        return [self._map_row(row) for row in rows]

    def find_by_product_code(self, product_code: str) -> Optional[ProductView]:
        logger.debug(f"Finding product by code: {product_code}")
        query = self._build_select("p.product_code = %s", order_by="")
        row = self._fetch_one(query, (product_code,), f"Error finding product by code: {product_code}")
        if row is None:
            logger.debug(f"No product found with code: {product_code}")
            return None
        return self._map_row(row)

    def get_low_stock_products(self) -> list[ProductView]:
        logger.debug("Finding low stock products")
        query = self._build_select(
            "p.stock_quantity <= p.reorder_level",
            order_by="(p.reorder_level - p.stock_quantity) DESC, p.product_name",
        )
        rows = self._fetch_all(query, (), "Error finding low stock products")
        logger.info(f"Found {len(rows)} low stock products")
        return [self._map_row(row) for row in rows]

    def get_out_of_stock_products(self) -> list[ProductView]:
        logger.debug("Finding out of stock products")
        query = self._build_select("p.stock_quantity = 0")
        rows = self._fetch_all(query, (), "Error finding out of stock products")
        logger.info(f"Found {len(rows)} out of stock products")
        return [self._map_row(row) for row in rows]

    def get_distinct_categories(self) -> list[str]:
        logger.debug("Getting distinct categories")
        query = "SELECT DISTINCT p.category FROM products p WHERE p.is_active = TRUE ORDER BY p.category"
        rows = self._fetch_all(query, (), "Error getting distinct categories")
        return [row["category"] for row in rows]

    def update_stock_quantity(self, product_id: int, new_quantity: int) -> bool:
        logger.debug(f"Updating stock quantity for product {product_id}: {new_quantity}")
        update_stock_query = (
            "UPDATE products SET stock_quantity = %s, updated_date = CURRENT_TIMESTAMP "
            "WHERE product_id = %s AND is_active = TRUE"
        )
        rowcount, _ = self._execute_write(
            update_stock_query,
            (new_quantity, product_id),
            f"Error updating stock quantity for product: {product_id}",
        )
        updated = rowcount > 0
        if updated:
            logger.info(f"Stock quantity updated for product {product_id}: {new_quantity}")
        else:
            logger.warning(f"No product found to update stock for ID: {product_id}")
        return updated

    @staticmethod
    def _product_params(product: Product) -> tuple:
        return (
            product.product_name,
            product.product_code,
            product.category,
            product.description,
            product.unit_price,
            product.stock_quantity,
            product.reorder_level,
            product.supplier_id,
        )

    def _map_row(self, row: dict[str, Any]) -> ProductView:
        supplier_rating = row.get("supplier_rating")
        product = Product(
            product_id=row["product_id"],
            product_name=row["product_name"],
            product_code=row.get("product_code"),
            category=row["category"],
            description=row.get("description"),
            unit_price=Decimal(str(row["unit_price"])),
            stock_quantity=row.get("stock_quantity"),
            reorder_level=row.get("reorder_level"),
            supplier_id=row["supplier_id"],
            audit=AuditMetadata.from_row(row),
        )
        return ProductView(
            product=product,
            supplier_name=row.get("supplier_name"),
            supplier_rating=Decimal(str(supplier_rating)) if supplier_rating is not None else None,
        )
