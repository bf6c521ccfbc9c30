# src/supplier_domain/infrastructure/persistence/mysql_supplier_repository.py
"""MySQL implementation of the Supplier repository."""

import logging
from decimal import Decimal
from typing import Any, Optional

from src.common.domain.audit_metadata import AuditMetadata
from src.common.persistence.mysql_base_repository import MySQLBaseRepository, like_pattern
from src.supplier_domain.domain.entities.supplier import Supplier
from src.supplier_domain.domain.repositories.supplier_repository import ISupplierRepository

logger = logging.getLogger(__name__)


class MySQLSupplierRepository(MySQLBaseRepository, ISupplierRepository):
    """MySQL implementation of the Supplier Repository."""

    table_name = "suppliers"
    table_alias = "s"
    id_column = "supplier_id"
    entity_label = "supplier"
    select_clause = "SELECT s.* FROM suppliers s"
    default_order_by = "s.company_name"

    def create_tables(self) -> None:
        """Creates the suppliers table."""
        # active_email keeps the email only while the row is active, so a
        # deactivated supplier does not block its address from being reused
        create_suppliers_table_query = """
        CREATE TABLE IF NOT EXISTS suppliers (
            supplier_id INT PRIMARY KEY AUTO_INCREMENT,
            company_name VARCHAR(100) NOT NULL,
            contact_person VARCHAR(100),
            phone VARCHAR(20),
            email VARCHAR(100),
            address TEXT,
            rating DECIMAL(2,1) CHECK (rating >= 1.0 AND rating <= 5.0),
            is_active BOOLEAN NOT NULL DEFAULT TRUE,
            created_date TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_date TIMESTAMP DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP,
            active_email VARCHAR(100) GENERATED ALWAYS AS (CASE WHEN is_active THEN email END) STORED,
            UNIQUE KEY uk_suppliers_active_email (active_email),
            INDEX idx_suppliers_company_name (company_name),
            INDEX idx_suppliers_rating (rating)
        ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4;
        """
        self._execute_ddl(create_suppliers_table_query, "Error creating suppliers table")
        logger.info("Suppliers table checked/created.")

    def save(self, supplier: Supplier) -> Supplier:
        logger.debug(f"Saving new supplier: {supplier.company_name}")
        insert_query = """
        INSERT INTO suppliers (company_name, contact_person, phone, email, address, rating)
        VALUES (%s, %s, %s, %s, %s, %s)
        """
        supplier.supplier_id = self._insert(insert_query, self._supplier_params(supplier), supplier.company_name)
        logger.info(f"Supplier saved successfully with ID: {supplier.supplier_id}")
        return supplier

    def update(self, supplier: Supplier) -> Supplier:
        logger.debug(f"Updating supplier: {supplier.supplier_id}")
        update_query = """
        UPDATE suppliers
        SET company_name = %s, contact_person = %s, phone = %s, email = %s, address = %s, rating = %s,
            updated_date = CURRENT_TIMESTAMP
        WHERE supplier_id = %s AND is_active = TRUE
        """
        self._update_row(update_query, (*self._supplier_params(supplier), supplier.supplier_id), supplier.supplier_id)
        supplier.audit.touch()
        logger.info(f"Supplier updated successfully: {supplier.supplier_id}")
        return supplier

    def find_by_name(self, name: str) -> list[Supplier]:
        logger.debug(f"Finding suppliers by name: {name}")
        query = self._build_select("LOWER(s.company_name) LIKE LOWER(%s)")
        rows = self._fetch_all(query, (like_pattern(name),), f"Error finding suppliers by name: {name}")
        logger.debug(f"Found {len(rows)} suppliers matching name: {name}")
        return [self._map_row(row) for row in rows]

    def find_by_email(self, email: str) -> Optional[Supplier]:
        logger.debug(f"Finding supplier by email: {email}")
        query = self._build_select("s.email = %s", order_by="")
        row = self._fetch_one(query, (email,), f"Error finding supplier by email: {email}")
        if row is None:
            logger.debug(f"No supplier found with email: {email}")
            return None
        return self._map_row(row)

    def find_by_rating_range(self, min_rating: Decimal, max_rating: Decimal) -> list[Supplier]:
        logger.debug(f"Finding suppliers by rating range: {min_rating} - {max_rating}")
        query = self._build_select("s.rating BETWEEN %s AND %s", order_by="s.rating DESC")
        rows = self._fetch_all(
            query,
            (min_rating, max_rating),
            f"Error finding suppliers by rating range: {min_rating} - {max_rating}",
        )
        return [self._map_row(row) for row in rows]

    def get_top_suppliers(self, limit: int) -> list[Supplier]:
        logger.debug(f"Getting top {limit} suppliers")
        query = self._build_select(order_by="s.rating DESC, s.company_name ASC", with_limit=True)
        rows = self._fetch_all(query, (limit,), "Error getting top suppliers")
        return [self._map_row(row) for row in rows]

    def has_products(self, supplier_id: int) -> bool:
        query = "SELECT COUNT(*) AS total FROM products p WHERE p.supplier_id = %s AND p.is_active = TRUE"
        row = self._fetch_one(query, (supplier_id,), f"Error checking if supplier has products: {supplier_id}")
        return bool(row and row["total"] > 0)

    @staticmethod
    def _supplier_params(supplier: Supplier) -> tuple:
        return (
            supplier.company_name,
            supplier.contact_person,
            supplier.phone,
            supplier.email,
            supplier.address,
            supplier.rating,
        )

    def _map_row(self, row: dict[str, Any]) -> Supplier:
        rating = row.get("rating")
        return Supplier(
            supplier_id=row["supplier_id"],
            company_name=row["company_name"],
            contact_person=row.get("contact_person"),
            phone=row.get("phone"),
            email=row.get("email"),
            address=row.get("address"),
            rating=Decimal(str(rating)) if rating is not None else None,
            audit=AuditMetadata.from_row(row),
        )
