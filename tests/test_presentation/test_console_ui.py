# tests/test_presentation/test_console_ui.py

import io
from decimal import Decimal
from unittest.mock import Mock

import pytest
from rich.console import Console

from src.common.config.settings import settings
from src.common.database.connection_provider import MySQLConnectionProvider
from src.common.dtos.report_dtos import SupplierPerformanceDTO, SupplierPerformanceItemDTO
from src.common.exceptions.custom_exceptions import PersistenceError, ValidationError
from src.presentation.console_ui import ConsoleUI
from src.product_domain.application.product_service import ProductApplicationService
from src.product_domain.application.report_service import InventoryReportService
from src.supplier_domain.application.supplier_service import SupplierApplicationService
from src.transaction_domain.application.stock_movement_service import StockMovementService
from src.transaction_domain.domain.entities.transaction import Transaction
from src.transaction_domain.domain.entities.transaction_type import TransactionType


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def ui(output, db_config) -> ConsoleUI:
    provider = Mock(spec=MySQLConnectionProvider)
    provider.config = db_config
    return ConsoleUI(
        supplier_service=Mock(spec=SupplierApplicationService),
        product_service=Mock(spec=ProductApplicationService),
        stock_service=Mock(spec=StockMovementService),
        report_service=Mock(spec=InventoryReportService),
        connection_provider=provider,
        console=Console(file=output, width=200, color_system=None),
    )


def _answers(mocker, ui: ConsoleUI, *answers: str) -> Mock:
    return mocker.patch.object(ui, "_ask", side_effect=list(answers))


def test_exit_from_main_menu(ui, output, mocker) -> None:
    _answers(mocker, ui, "0")

    ui.start()

    assert ui.running is False
    assert "Thank you for using the Inventory Management System!" in output.getvalue()


def test_invalid_menu_input_is_reprompted(ui, output, mocker) -> None:
    _answers(mocker, ui, "abc", "9", "1", "0", "0")

    ui.start()

    text = output.getvalue()
    assert "Invalid input. Please enter a number between 0-6." in text
    assert "Invalid choice. Please enter a number between 0-6." in text
    assert "SUPPLIER MANAGEMENT" in text


def test_add_supplier_parses_rating(ui, output, mocker, sample_supplier) -> None:
    _answers(mocker, ui, "Acme Corp", "Jane Doe", "", "sales@acme.example", "", "4.5")
    ui.supplier_service.create_supplier.return_value = sample_supplier

    ui.add_supplier()

    ui.supplier_service.create_supplier.assert_called_once_with(
        company_name="Acme Corp",
        contact_person="Jane Doe",
        phone="",
        email="sales@acme.example",
        address="",
        rating=Decimal("4.5"),
    )
    assert "Supplier added successfully! ID: 1" in output.getvalue()


def test_validation_error_does_not_end_session(ui, output, mocker) -> None:
    _answers(mocker, ui, "", "", "", "", "", "")
    ui.supplier_service.create_supplier.side_effect = ValidationError("Company name is required")

    ui._run_action(ui.add_supplier)

    assert "Company name is required" in output.getvalue()


def test_persistence_error_is_reported(ui, output) -> None:
    ui.supplier_service.find_all_suppliers.side_effect = PersistenceError("Error finding all suppliers")

    ui._run_action(ui.view_all_suppliers)

    assert "Persistence Error: Error finding all suppliers" in output.getvalue()


def test_bad_number_is_reported(ui, output, mocker) -> None:
    _answers(mocker, ui, "ten")

    ui._run_action(ui.set_stock_quantity)

    assert "Invalid number: ten" in output.getvalue()
    ui.product_service.update_stock_quantity.assert_not_called()


def test_view_all_suppliers_renders_table(ui, output, sample_supplier) -> None:
    ui.supplier_service.find_all_suppliers.return_value = [sample_supplier]

    ui.view_all_suppliers()

    text = output.getvalue()
    assert "Acme Corp" in text
    assert "4.5" in text
    assert "Found 1 supplier(s)" in text


def test_delete_supplier_with_products_warns(ui, output, mocker, sample_supplier) -> None:
    _answers(mocker, ui, "1")
    confirm = mocker.patch.object(ui, "_confirm", return_value=True)
    ui.supplier_service.find_supplier_by_id.return_value = sample_supplier
    ui.supplier_service.supplier_has_products.return_value = True
    ui.supplier_service.delete_supplier.return_value = True

    ui.delete_supplier()

    assert "This will deactivate the supplier" in confirm.call_args[0][0]
    ui.supplier_service.delete_supplier.assert_called_once_with(1)
    assert "Supplier deleted successfully!" in output.getvalue()


def test_delete_product_cancelled(ui, output, mocker, sample_product_view) -> None:
    _answers(mocker, ui, "10")
    mocker.patch.object(ui, "_confirm", return_value=False)
    ui.product_service.find_product_by_id.return_value = sample_product_view

    ui.delete_product()

    ui.product_service.delete_product.assert_not_called()
    assert "Delete operation cancelled." in output.getvalue()


def test_update_product_keeps_defaults(ui, mocker, sample_product_view) -> None:
    product = sample_product_view.product
    ask = mocker.patch.object(ui, "_ask", side_effect=lambda prompt, default=None: default or "10")
    ui.product_service.find_product_by_id.return_value = sample_product_view
    ui.product_service.update_product.return_value = product

    ui.update_product()

    assert ask.call_count == 9
    ui.product_service.update_product.assert_called_once_with(
        10,
        product_name="Widget",
        product_code="W-001",
        category="Hardware",
        description="Standard widget",
        unit_price=Decimal("2.50"),
        stock_quantity=100,
        reorder_level=20,
        supplier_id=1,
    )


def test_record_adjustment(ui, output, mocker) -> None:
    _answers(mocker, ui, "10", "-5", "", "", "Cycle count")
    ui.stock_service.record_movement.return_value = Transaction(
        transaction_type=TransactionType.ADJUSTMENT,
        product_id=10,
        quantity=-5,
        unit_price=Decimal("2.50"),
        notes="Cycle count",
        product_name="Widget",
    )

    ui.record_movement(TransactionType.ADJUSTMENT)

    ui.stock_service.record_movement.assert_called_once_with(
        10, TransactionType.ADJUSTMENT, -5, unit_price=None, reference_number=None, notes="Cycle count"
    )
    assert "Adjustment recorded for Widget" in output.getvalue()


def test_low_stock_view_shows_shortage(ui, output, make_view) -> None:
    ui.product_service.get_low_stock_products.return_value = [make_view(1, "Bolt", stock_quantity=2, reorder_level=10)]

    ui.view_low_stock()

    text = output.getvalue()
    assert "Shortage" in text
    assert "LOW_STOCK" in text


def test_supplier_performance_report(ui, output, sample_supplier) -> None:
    ui.report_service.get_supplier_performance.return_value = SupplierPerformanceDTO(
        items=[SupplierPerformanceItemDTO(supplier=sample_supplier, active_product_count=3)],
        average_rating=Decimal("4.50"),
    )

    ui.supplier_performance_report()

    text = output.getvalue()
    assert "Supplier Performance Summary" in text
    assert "Average Rating: ⭐ 4.50" in text


def test_database_connection_check(ui, output) -> None:
    ui.connection_provider.test_connection.return_value = True

    ui.test_database_connection()

    assert "Connected to inventory_test" in output.getvalue()


def test_bracketed_names_are_printed_literally(ui, output, mocker, sample_supplier, make_view) -> None:
    sample_supplier.company_name = "Acme [/] Ltd"
    sample_supplier.contact_person = "[bold]Jane"
    ui.supplier_service.find_all_suppliers.return_value = [sample_supplier]
    ui.product_service.find_all_products.return_value = [
        make_view(1, "Bolt [/red]", category="[x]", supplier_name="Acme [/] Ltd")
    ]

    ui._run_action(ui.view_all_suppliers)
    ui._run_action(ui.view_all_products)

    text = output.getvalue()
    assert "Acme [/] Ltd" in text
    assert "[bold]Jane" in text
    assert "Bolt [/red]" in text


def test_bracketed_name_in_supplier_details(ui, output, mocker, sample_supplier) -> None:
    sample_supplier.company_name = "Acme [/] Ltd"
    _answers(mocker, ui, "1")
    mocker.patch.object(ui, "_confirm", return_value=False)
    ui.supplier_service.find_supplier_by_id.return_value = sample_supplier
    ui.supplier_service.supplier_has_products.return_value = False

    ui._run_action(ui.delete_supplier)

    text = output.getvalue()
    assert "Company Name: Acme [/] Ltd (Jane Doe)" in text
    assert "Delete operation cancelled." in text


@pytest.mark.parametrize("raw", ["NaN", "Infinity", "-inf", "sNaN"])
def test_non_finite_price_is_refused(ui, output, mocker, raw) -> None:
    _answers(mocker, ui, "Widget", "", "Tools", "", raw, "5", "10", "1")
    ui.product_service.get_all_suppliers.return_value = []

    ui._run_action(ui.add_product)

    assert f"Invalid number: {raw}" in output.getvalue()
    ui.product_service.create_product.assert_not_called()


def test_top_suppliers_zero_limit_reaches_validation(ui, output, mocker) -> None:
    _answers(mocker, ui, "0")
    ui.supplier_service.get_top_suppliers.side_effect = ValidationError("Limit must be a positive number")

    ui._run_action(ui.view_top_suppliers)

    ui.supplier_service.get_top_suppliers.assert_called_once_with(0)
    assert "Limit must be a positive number" in output.getvalue()


def test_top_suppliers_blank_limit_uses_default(ui, mocker) -> None:
    mocker.patch.object(ui, "_ask", return_value="")
    ui.supplier_service.get_top_suppliers.return_value = []

    ui.view_top_suppliers()

    ui.supplier_service.get_top_suppliers.assert_called_once_with(settings.TOP_SUPPLIERS_LIMIT)


def test_long_run_of_invalid_menu_input(ui, mocker) -> None:
    _answers(mocker, ui, *(["x"] * 3000), "0")

    assert ui._choose("MENU", [("Only", ui.view_all_suppliers)]) is None
    assert ui._ask.call_count == 3001
