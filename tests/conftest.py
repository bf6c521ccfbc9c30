# tests/conftest.py
from datetime import datetime
from decimal import Decimal
from unittest.mock import Mock

import pytest

from src.common.config.settings import DatabaseConfig, settings
from src.common.database.connection_provider import MySQLConnectionProvider
from src.common.domain.audit_metadata import AuditMetadata
from src.product_domain.application.product_service import ProductApplicationService
from src.product_domain.application.report_service import InventoryReportService
from src.product_domain.domain.entities.product import Product
from src.product_domain.domain.entities.product_view import ProductView
from src.product_domain.infrastructure.persistence.mysql_product_repository import MySQLProductRepository
from src.supplier_domain.application.supplier_service import SupplierApplicationService
from src.supplier_domain.domain.entities.supplier import Supplier
from src.supplier_domain.infrastructure.persistence.mysql_supplier_repository import MySQLSupplierRepository
from src.transaction_domain.application.stock_movement_service import StockMovementService


@pytest.fixture(autouse=True)
def mock_settings_display_timezone(mocker) -> None:
    """Pins the display timezone so formatted timestamps are predictable."""
    mocker.patch.object(settings, "APP_TIMEZONE", "Europe/Berlin")


@pytest.fixture
def db_config() -> DatabaseConfig:
    return DatabaseConfig(host="localhost", port=3306, database="inventory_test", user="tester", password="secret")


@pytest.fixture
def connection_provider(db_config) -> MySQLConnectionProvider:
    return MySQLConnectionProvider(db_config)


@pytest.fixture
def mock_connect(mocker) -> Mock:
    """Patches mysql.connector.connect; the cursor is reachable as mock_connect.cursor."""
    connect = mocker.patch("mysql.connector.connect")
    cursor = Mock()
    cursor.rowcount = 1
    cursor.lastrowid = None
    connect.return_value.cursor.return_value = cursor
    connect.cursor = cursor
    return connect


@pytest.fixture
def mock_supplier_repository() -> Mock:
    """Mock for MySQLSupplierRepository."""
    return Mock(spec=MySQLSupplierRepository)


@pytest.fixture
def mock_product_repository() -> Mock:
    """Mock for MySQLProductRepository."""
    return Mock(spec=MySQLProductRepository)


@pytest.fixture
def supplier_service(mock_supplier_repository) -> SupplierApplicationService:
    return SupplierApplicationService(supplier_repo=mock_supplier_repository)


@pytest.fixture
def product_service(mock_product_repository, mock_supplier_repository) -> ProductApplicationService:
    """Instance of ProductApplicationService with mocked repositories."""
    return ProductApplicationService(product_repo=mock_product_repository, supplier_repo=mock_supplier_repository)


@pytest.fixture
def report_service(mock_product_repository, mock_supplier_repository) -> InventoryReportService:
    return InventoryReportService(product_repo=mock_product_repository, supplier_repo=mock_supplier_repository)


@pytest.fixture
def mock_product_service() -> Mock:
    return Mock(spec=ProductApplicationService)


@pytest.fixture
def stock_service(mock_product_service) -> StockMovementService:
    return StockMovementService(product_service=mock_product_service)


@pytest.fixture
def sample_audit() -> AuditMetadata:
    return AuditMetadata(
        is_active=True,
        created_date=datetime(2024, 1, 15, 9, 30),
        updated_date=datetime(2024, 2, 1, 12, 0),
    )


@pytest.fixture
def sample_supplier(sample_audit) -> Supplier:
    """An active, rated supplier with id 1."""
    return Supplier(
        supplier_id=1,
        company_name="Acme Corp",
        contact_person="Jane Doe",
        phone="+49 30 123456",
        email="sales@acme.example",
        address="Hauptstrasse 1, Berlin",
        rating=Decimal("4.5"),
        audit=sample_audit,
    )


@pytest.fixture
def sample_product(sample_audit) -> Product:
    return Product(
        product_id=10,
        product_name="Widget",
        product_code="W-001",
        category="Hardware",
        description="Standard widget",
        unit_price=Decimal("2.50"),
        stock_quantity=100,
        reorder_level=20,
        supplier_id=1,
        audit=sample_audit,
    )


@pytest.fixture
def sample_product_view(sample_product) -> ProductView:
    return ProductView(product=sample_product, supplier_name="Acme Corp", supplier_rating=Decimal("4.5"))


@pytest.fixture
def sample_supplier_row() -> dict:
    """A suppliers row as returned by a dictionary cursor."""
    return {
        "supplier_id": 1,
        "company_name": "Acme Corp",
        "contact_person": "Jane Doe",
        "phone": "+49 30 123456",
        "email": "sales@acme.example",
        "address": "Hauptstrasse 1, Berlin",
        "rating": Decimal("4.5"),
        "is_active": 1,
        "created_date": datetime(2024, 1, 15, 9, 30),
        "updated_date": datetime(2024, 2, 1, 12, 0),
    }


@pytest.fixture
def sample_product_row() -> dict:
    """A products row joined with its supplier."""
    return {
        "product_id": 10,
        "product_name": "Widget",
        "product_code": "W-001",
        "category": "Hardware",
        "description": "Standard widget",
        "unit_price": Decimal("2.50"),
        "stock_quantity": 100,
        "reorder_level": 20,
        "supplier_id": 1,
        "is_active": 1,
        "created_date": datetime(2024, 1, 15, 9, 30),
        "updated_date": datetime(2024, 2, 1, 12, 0),
        "supplier_name": "Acme Corp",
        "supplier_rating": Decimal("4.5"),
    }


@pytest.fixture
def make_view():
    """Factory building ProductViews for report and listing tests."""
    return _make_view


def _make_view(
    product_id: int,
    name: str,
    category: str = "Hardware",
    unit_price: str = "1.00",
    stock_quantity: int = 50,
    reorder_level: int = 10,
    supplier_id: int = 1,
    supplier_name: str | None = "Acme Corp",
    product_code: str | None = None,
) -> ProductView:
    product = Product(
        product_id=product_id,
        product_name=name,
        product_code=product_code,
        category=category,
        unit_price=Decimal(unit_price),
        stock_quantity=stock_quantity,
        reorder_level=reorder_level,
        supplier_id=supplier_id,
    )
    return ProductView(product=product, supplier_name=supplier_name)
