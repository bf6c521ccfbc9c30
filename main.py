"""Main application entry point for the inventory management console."""

import logging
import sys

from src.common.config.settings import DatabaseConfig
from src.common.database.connection_provider import MySQLConnectionProvider
from src.common.exceptions.custom_exceptions import PersistenceError
from src.common.logger_config import setup_logging
from src.presentation.console_ui import ConsoleUI
from src.product_domain.application.product_service import ProductApplicationService
from src.product_domain.application.report_service import InventoryReportService
from src.product_domain.infrastructure.persistence.mysql_product_repository import MySQLProductRepository
from src.supplier_domain.application.supplier_service import SupplierApplicationService
from src.supplier_domain.infrastructure.persistence.mysql_supplier_repository import MySQLSupplierRepository
from src.transaction_domain.application.stock_movement_service import StockMovementService

logger = logging.getLogger(__name__)


def create_db_tables(supplier_repo: MySQLSupplierRepository, product_repo: MySQLProductRepository) -> None:
    """Creates tables for all domains. Suppliers first, products reference them."""
    supplier_repo.create_tables()
    product_repo.create_tables()


def build_console(connection_provider: MySQLConnectionProvider) -> ConsoleUI:
    """Initializes and wires up repositories and services."""
    supplier_repo = MySQLSupplierRepository(connection_provider)
    product_repo = MySQLProductRepository(connection_provider)
    create_db_tables(supplier_repo, product_repo)

    supplier_service = SupplierApplicationService(supplier_repo=supplier_repo)
    product_service = ProductApplicationService(product_repo=product_repo, supplier_repo=supplier_repo)
    return ConsoleUI(
        supplier_service=supplier_service,
        product_service=product_service,
        stock_service=StockMovementService(product_service=product_service),
        report_service=InventoryReportService(product_repo=product_repo, supplier_repo=supplier_repo),
        connection_provider=connection_provider,
    )


def main() -> int:
    setup_logging()
    config = DatabaseConfig.from_settings()
    logger.info(f"Starting Inventory Management System with {config}")

    connection_provider = MySQLConnectionProvider(config)
    if not connection_provider.test_connection():
        logger.error("Failed to connect to database. Please check your configuration.")
        return 1

    try:
        console = build_console(connection_provider)
    except PersistenceError as e:
        logger.error(f"Error creating database tables: {e}")
        return 1

    try:
        console.start()
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    return 0


if __name__ == "__main__":
    sys.exit(main())
