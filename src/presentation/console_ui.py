# src/presentation/console_ui.py
"""Menu-driven console for the inventory system."""

import logging
from decimal import Decimal, InvalidOperation
from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt
from rich.table import Table

from src.common.config.settings import settings
from src.common.database.connection_provider import MySQLConnectionProvider
from src.common.exceptions.custom_exceptions import ApplicationError, ValidationError
from src.common.utils.date_utils import format_datetime_for_display
from src.product_domain.application.product_service import ProductApplicationService
from src.product_domain.application.report_service import InventoryReportService
from src.product_domain.domain.entities.product_view import ProductView
from src.supplier_domain.application.supplier_service import SupplierApplicationService
from src.supplier_domain.domain.entities.supplier import Supplier
from src.transaction_domain.application.stock_movement_service import StockMovementService
from src.transaction_domain.domain.entities.transaction_type import TransactionType

logger = logging.getLogger(__name__)

MenuEntry = tuple[str, Callable[[], None]]


class InputCancelled(Exception):
    """Raised when the user enters something that cannot be parsed."""


def _format_rating(rating: Optional[Decimal]) -> str:
    return f"{rating:.1f}" if rating is not None else "N/A"


def _format_money(amount: Optional[Decimal]) -> str:
    return f"{amount:,.2f}" if amount is not None else "N/A"


class ConsoleUI:
    """Blocks on input, runs one service call, prints the result, repeats."""

    def __init__(
        self,
        supplier_service: SupplierApplicationService,
        product_service: ProductApplicationService,
        stock_service: StockMovementService,
        report_service: InventoryReportService,
        connection_provider: MySQLConnectionProvider,
        console: Console | None = None,
    ) -> None:
        self.supplier_service = supplier_service
        self.product_service = product_service
        self.stock_service = stock_service
        self.report_service = report_service
        self.connection_provider = connection_provider
        self.console = console or Console()
        self.running = False

    # --- main loop -------------------------------------------------------

    def start(self) -> None:
        logger.info("Starting Console UI")
        self.running = True
        main_menu: list[MenuEntry] = [
            ("Manage Suppliers", self.manage_suppliers),
            ("Manage Products", self.manage_products),
            ("Record Stock Movements", self.record_stock_movements),
            ("Stock Management", self.stock_management),
            ("View Reports", self.view_reports),
            ("System", self.system_menu),
        ]
        while self.running:
            choice = self._choose("INVENTORY MANAGEMENT MENU", main_menu, back_label="Exit")
            if choice is None:
                self.exit_application()
            else:
                self._run_action(choice)
        logger.info("Console UI stopped")

    def exit_application(self) -> None:
        self.console.print("\nThank you for using the Inventory Management System!")
        self.running = False

    def _submenu(self, title: str, entries: list[MenuEntry]) -> None:
        while True:
            choice = self._choose(title, entries)
            if choice is None:
                return
            self._run_action(choice)

    def _choose(self, title: str, entries: list[MenuEntry], back_label: str = "Back") -> Optional[Callable[[], None]]:
        while True:
            self.console.rule(f"[bold]{title}")
            for index, (label, _) in enumerate(entries, 1):
                self.console.print(f"{index}. {label}")
            self.console.print(f"0. {back_label}")
            raw = self._ask(f"Enter your choice (0-{len(entries)})")
            try:
                number = int(raw)
            except ValueError:
                self.console.print(f"[red]Invalid input. Please enter a number between 0-{len(entries)}.")
                continue
            if number == 0:
                return None
            if 1 <= number <= len(entries):
                return entries[number - 1][1]
            self.console.print(f"[red]Invalid choice. Please enter a number between 0-{len(entries)}.")

    def _run_action(self, action: Callable[[], None]) -> None:
        """Runs one menu action; errors are reported and the session continues."""
        try:
            action()
        except InputCancelled as e:
            self.console.print(str(e), style="yellow", markup=False)
        except ValidationError as e:
            self.console.print(f"❌ {e}", style="red", markup=False)
        except ApplicationError as e:
            logger.error(f"Operation failed: {e}")
            self.console.print(f"❌ {e}", style="red", markup=False)

    # --- input helpers -----------------------------------------------------

    def _ask(self, prompt: str, default: Optional[str] = None) -> str:
        if default is None:
            return Prompt.ask(prompt, console=self.console, default="", show_default=False).strip()
        return Prompt.ask(prompt, console=self.console, default=default).strip()

    def _confirm(self, prompt: str) -> bool:
        return Confirm.ask(prompt, console=self.console, default=False)

    def _ask_int(self, prompt: str, default: Optional[int] = None) -> Optional[int]:
        raw = self._ask(prompt, None if default is None else str(default))
        if not raw:
            return None
        try:
            return int(raw)
        except ValueError:
            raise InputCancelled(f"Invalid number: {raw}")

    def _ask_decimal(self, prompt: str, default: Optional[Decimal] = None) -> Optional[Decimal]:
        raw = self._ask(prompt, None if default is None else str(default))
        if not raw:
            return None
        try:
            value = Decimal(raw)
        except InvalidOperation:
            raise InputCancelled(f"Invalid number: {raw}")
        if not value.is_finite():
            raise InputCancelled(f"Invalid number: {raw}")
        return value

    def _ask_id(self, entity: str) -> int:
        value = self._ask_int(f"Enter {entity} ID")
        if value is None:
            raise InputCancelled(f"Invalid {entity} ID!")
        return value

    # --- suppliers ---------------------------------------------------------

    def manage_suppliers(self) -> None:
        self._submenu(
            "SUPPLIER MANAGEMENT",
            [
                ("Add New Supplier", self.add_supplier),
                ("View All Suppliers", self.view_all_suppliers),
                ("Search Suppliers by Name", self.search_suppliers_by_name),
                ("Search Suppliers by Rating", self.search_suppliers_by_rating),
                ("Top Rated Suppliers", self.view_top_suppliers),
                ("Update Supplier", self.update_supplier),
                ("Delete Supplier", self.delete_supplier),
            ],
        )

    def add_supplier(self) -> None:
        self.console.print("\n--- Add New Supplier ---")
        supplier = self.supplier_service.create_supplier(
            company_name=self._ask("Company Name"),
            contact_person=self._ask("Contact Person"),
            phone=self._ask("Phone"),
            email=self._ask("Email"),
            address=self._ask("Address"),
            rating=self._ask_decimal("Rating (1.0 - 5.0, blank for none)"),
        )
        self.console.print(f"[green]✅ Supplier added successfully! ID: {supplier.supplier_id}")

    def view_all_suppliers(self) -> None:
        self._print_suppliers(self.supplier_service.find_all_suppliers(), "All Suppliers")

    def search_suppliers_by_name(self) -> None:
        term = self._ask("Enter company name (partial match allowed)")
        self._print_suppliers(self.supplier_service.search_suppliers_by_name(term), f"Suppliers matching '{escape(term)}'")

    def search_suppliers_by_rating(self) -> None:
        min_rating = self._ask_decimal("Enter minimum rating (1.0-5.0)")
        max_rating = self._ask_decimal("Enter maximum rating (1.0-5.0)")
        if min_rating is None or max_rating is None:
            raise InputCancelled("Both ratings are required!")
        suppliers = self.supplier_service.find_suppliers_by_rating_range(min_rating, max_rating)
        self._print_suppliers(suppliers, f"Suppliers rated {min_rating} - {max_rating}")

    def view_top_suppliers(self) -> None:
        limit = self._ask_int("How many suppliers", default=settings.TOP_SUPPLIERS_LIMIT)
        if limit is None:
            limit = settings.TOP_SUPPLIERS_LIMIT
        suppliers = self.supplier_service.get_top_suppliers(limit)
        self._print_suppliers(suppliers, "Top Rated Suppliers")

    def update_supplier(self) -> None:
        supplier_id = self._ask_id("Supplier")
        supplier = self.supplier_service.find_supplier_by_id(supplier_id)
        if supplier is None:
            raise ValidationError(f"Supplier not found with ID: {supplier_id}")
        self._print_supplier_details(supplier)
        self.console.print("\nEnter new values (press Enter to keep current value):")
        updated = self.supplier_service.update_supplier(
            supplier_id,
            company_name=self._ask("Company Name", supplier.company_name),
            contact_person=self._ask("Contact Person", supplier.contact_person or ""),
            phone=self._ask("Phone", supplier.phone or ""),
            email=self._ask("Email", supplier.email or ""),
            address=self._ask("Address", supplier.address or ""),
            rating=self._ask_decimal("Rating", supplier.rating),
        )
        self.console.print("[green]✅ Supplier updated successfully!")
        self._print_supplier_details(updated)

    def delete_supplier(self) -> None:
        supplier_id = self._ask_id("Supplier")
        supplier = self.supplier_service.find_supplier_by_id(supplier_id)
        if supplier is None:
            raise ValidationError(f"Supplier not found with ID: {supplier_id}")
        self._print_supplier_details(supplier)

        if self.supplier_service.supplier_has_products(supplier_id):
            self.console.print("[yellow]⚠️  Warning: This supplier has products associated with it.")
            prompt = "Are you sure you want to delete? This will deactivate the supplier"
        else:
            prompt = "Are you sure you want to delete this supplier?"

        if not self._confirm(prompt):
            self.console.print("Delete operation cancelled.")
            return
        if self.supplier_service.delete_supplier(supplier_id):
            self.console.print("[green]✅ Supplier deleted successfully!")
        else:
            self.console.print("[red]❌ Failed to delete supplier.")

    def _print_suppliers(self, suppliers: list[Supplier], title: str) -> None:
        if not suppliers:
            self.console.print("No suppliers found.")
            return
        table = Table(title=title)
        for column in ("ID", "Company Name", "Contact Person", "Phone", "Email", "Rating"):
            table.add_column(column)
        for supplier in suppliers:
            table.add_row(
                str(supplier.supplier_id),
                escape(supplier.company_name),
                escape(supplier.contact_person or ""),
                escape(supplier.phone or ""),
                escape(supplier.email or ""),
                _format_rating(supplier.rating),
            )
        self.console.print(table)
        self.console.print(f"Found {len(suppliers)} supplier(s)")

    def _print_supplier_details(self, supplier: Supplier) -> None:
        self.console.print(f"Supplier ID: {supplier.supplier_id}")
        self.console.print(f"Company Name: {escape(supplier.display_name)}")
        self.console.print(f"Phone: {escape(supplier.phone or 'N/A')}")
        self.console.print(f"Email: {escape(supplier.email or 'N/A')}")
        self.console.print(f"Address: {escape(supplier.address or 'N/A')}")
        self.console.print(f"Rating: {_format_rating(supplier.rating)}")
        self.console.print(f"Created: {format_datetime_for_display(supplier.audit.created_date)}")
        self.console.print(f"Updated: {format_datetime_for_display(supplier.audit.updated_date)}")

    # --- products ----------------------------------------------------------

    def manage_products(self) -> None:
        self._submenu(
            "PRODUCT MANAGEMENT",
            [
                ("Add New Product", self.add_product),
                ("View All Products", self.view_all_products),
                ("Search Products by Name", self.search_products_by_name),
                ("Find Products by Category", self.find_products_by_category),
                ("Find Product by Code", self.find_product_by_code),
                ("Find Products by Supplier", self.find_products_by_supplier),
                ("Update Product", self.update_product),
                ("Delete Product", self.delete_product),
            ],
        )

    def add_product(self) -> None:
        self.console.print("\n--- Add New Product ---")
        self._print_suppliers(self.product_service.get_all_suppliers(), "Available Suppliers")
        product = self.product_service.create_product(
            product_name=self._ask("Product Name"),
            product_code=self._ask("Product Code (optional)"),
            category=self._ask("Category"),
            description=self._ask("Description (optional)"),
            unit_price=self._ask_decimal("Unit Price"),
            stock_quantity=self._ask_int("Stock Quantity", default=0),
            reorder_level=self._ask_int("Reorder Level", default=10),
            supplier_id=self._ask_int("Supplier ID"),
        )
        self.console.print(f"[green]✅ Product added successfully! ID: {product.product_id}")

    def view_all_products(self) -> None:
        self._print_products(self.product_service.find_all_products(), "All Products")

    def search_products_by_name(self) -> None:
        term = self._ask("Enter product name (partial match allowed)")
        self._print_products(self.product_service.search_products_by_name(term), f"Products matching '{escape(term)}'")

    def find_products_by_category(self) -> None:
        categories = self.product_service.get_distinct_categories()
        if categories:
            self.console.print("Categories: " + ", ".join(escape(category) for category in categories))
        category = self._ask("Category")
        self._print_products(self.product_service.find_products_by_category(category), f"Category '{escape(category)}'")

    def find_product_by_code(self) -> None:
        code = self._ask("Product Code")
        view = self.product_service.find_product_by_code(code)
        if view is None:
            self.console.print(f"No product found with code: {escape(code)}")
            return
        self._print_product_details(view)

    def find_products_by_supplier(self) -> None:
        supplier_id = self._ask_id("Supplier")
        self._print_products(
            self.product_service.find_products_by_supplier(supplier_id), f"Products from supplier {supplier_id}"
        )

    def update_product(self) -> None:
        product_id = self._ask_id("Product")
        view = self.product_service.find_product_by_id(product_id)
        if view is None:
            raise ValidationError(f"Product not found with ID: {product_id}")
        self._print_product_details(view)
        product = view.product
        self.console.print("\nEnter new values (press Enter to keep current value):")
        updated = self.product_service.update_product(
            product_id,
            product_name=self._ask("Product Name", product.product_name),
            product_code=self._ask("Product Code", product.product_code or ""),
            category=self._ask("Category", product.category),
            description=self._ask("Description", product.description or ""),
            unit_price=self._ask_decimal("Unit Price", product.unit_price),
            stock_quantity=self._ask_int("Stock Quantity", product.stock_quantity),
            reorder_level=self._ask_int("Reorder Level", product.reorder_level),
            supplier_id=self._ask_int("Supplier ID", product.supplier_id),
        )
        self.console.print(f"[green]✅ Product updated successfully: {escape(updated.display_name)}")

    def delete_product(self) -> None:
        product_id = self._ask_id("Product")
        view = self.product_service.find_product_by_id(product_id)
        if view is None:
            raise ValidationError(f"Product not found with ID: {product_id}")
        self._print_product_details(view)
        if not self._confirm("Are you sure you want to delete this product?"):
            self.console.print("Delete operation cancelled.")
            return
        if self.product_service.delete_product(product_id):
            self.console.print("[green]✅ Product deleted successfully!")

    def _print_products(self, views: list[ProductView], title: str, show_shortage: bool = False) -> None:
        if not views:
            self.console.print("No products found.")
            return
        table = Table(title=title)
        columns = ["ID", "Product", "Category", "Price", "Stock", "Reorder", "Status", "Supplier"]
        if show_shortage:
            columns.append("Shortage")
        for column in columns:
            table.add_column(column)
        for view in views:
            product = view.product
            row = [
                str(product.product_id),
                escape(product.display_name),
                escape(product.category),
                _format_money(product.unit_price),
                str(product.stock_quantity),
                str(product.reorder_level),
                product.stock_status,
                escape(view.supplier_label),
            ]
            if show_shortage:
                row.append(str(product.shortage))
            table.add_row(*row)
        self.console.print(table)
        self.console.print(f"Found {len(views)} product(s)")

    def _print_product_details(self, view: ProductView) -> None:
        product = view.product
        self.console.print(f"Product ID: {product.product_id}")
        self.console.print(f"Name: {escape(product.display_name)}")
        self.console.print(f"Category: {escape(product.category)}")
        self.console.print(f"Description: {escape(product.description or 'N/A')}")
        self.console.print(f"Unit Price: {_format_money(product.unit_price)}")
        self.console.print(f"Stock: {product.stock_quantity} (reorder at {product.reorder_level}) - {product.stock_status}")
        self.console.print(f"Stock Value: {_format_money(product.stock_value)}")
        self.console.print(f"Supplier: {escape(view.supplier_label)} (rating {_format_rating(view.supplier_rating)})")
        self.console.print(f"Updated: {format_datetime_for_display(product.audit.updated_date)}")

    # --- stock -------------------------------------------------------------

    def record_stock_movements(self) -> None:
        entries: list[MenuEntry] = [
            (f"Record {transaction_type.display_name}", self._movement_action(transaction_type))
            for transaction_type in TransactionType
        ]
        self._submenu("STOCK MOVEMENTS", entries)

    def _movement_action(self, transaction_type: TransactionType) -> Callable[[], None]:
        return lambda: self.record_movement(transaction_type)

    def record_movement(self, transaction_type: TransactionType) -> None:
        self.console.print(f"\n--- Record {transaction_type.display_name} ---")
        self.console.print(transaction_type.description)
        product_id = self._ask_id("Product")
        quantity_prompt = "Quantity (negative to remove)" if transaction_type.is_adjustment else "Quantity"
        quantity = self._ask_int(quantity_prompt)
        if quantity is None:
            raise InputCancelled("Quantity is required!")
        transaction = self.stock_service.record_movement(
            product_id,
            transaction_type,
            quantity,
            unit_price=self._ask_decimal("Unit Price (blank for current price)"),
            reference_number=self._ask("Reference Number (optional)") or None,
            notes=self._ask("Notes (optional)") or None,
        )
        self.console.print(
            f"[green]✅ {transaction.transaction_type} recorded for {escape(transaction.display_product_name)}: "
            f"{transaction.quantity} x {_format_money(transaction.unit_price)} = {_format_money(transaction.total_amount)}"
        )
        self.console.print(f"Notes: {escape(transaction.display_notes)}")

    def stock_management(self) -> None:
        self._submenu(
            "STOCK MANAGEMENT",
            [
                ("View Current Stock Levels", self.view_all_products),
                ("Set Stock Quantity", self.set_stock_quantity),
                ("Low Stock Alerts", self.view_low_stock),
                ("Out of Stock Products", self.view_out_of_stock),
                ("Generate Reorder List", self.view_reorder_list),
                ("List Categories", self.view_categories),
            ],
        )

    def set_stock_quantity(self) -> None:
        product_id = self._ask_id("Product")
        quantity = self._ask_int("New Stock Quantity")
        if quantity is None:
            raise InputCancelled("Quantity is required!")
        if self.product_service.update_stock_quantity(product_id, quantity):
            self.console.print("[green]✅ Stock quantity updated.")
        else:
            self.console.print(f"Product not found with ID: {product_id}")

    def view_low_stock(self) -> None:
        self._print_products(self.product_service.get_low_stock_products(), "Low Stock Alerts", show_shortage=True)

    def view_out_of_stock(self) -> None:
        self._print_products(self.product_service.get_out_of_stock_products(), "Out of Stock Products")

    def view_categories(self) -> None:
        categories = self.product_service.get_distinct_categories()
        if not categories:
            self.console.print("No categories found.")
            return
        for category in categories:
            self.console.print(f"- {escape(category)}")

    # --- reports -----------------------------------------------------------

    def view_reports(self) -> None:
        self._submenu(
            "REPORTS",
            [
                ("Stock Summary Report", self.stock_summary_report),
                ("Low Stock Alerts", self.view_low_stock),
                ("Supplier Performance Report", self.supplier_performance_report),
                ("Inventory Valuation Report", self.valuation_report),
                ("Reorder List", self.view_reorder_list),
            ],
        )

    def stock_summary_report(self) -> None:
        summary = self.report_service.get_stock_summary()
        self._print_products(summary.products, "Stock Summary")
        self.console.print(
            f"Total units: {summary.total_quantity} | Total value: {_format_money(summary.total_value)} | "
            f"Low stock: {summary.low_stock_count} | Out of stock: {summary.out_of_stock_count}"
        )

    def supplier_performance_report(self) -> None:
        report = self.report_service.get_supplier_performance()
        if not report.items:
            self.console.print("No suppliers found.")
            return
        table = Table(title="Supplier Performance Summary")
        for column in ("Company Name", "Contact Person", "Phone", "Rating", "Active Products"):
            table.add_column(column)
        for item in report.items:
            table.add_row(
                escape(item.supplier.company_name),
                escape(item.supplier.contact_person or ""),
                escape(item.supplier.phone or ""),
                _format_rating(item.supplier.rating),
                str(item.active_product_count),
            )
        self.console.print(table)
        average = f"{report.average_rating:.2f}" if report.average_rating is not None else "N/A"
        self.console.print(f"Total Suppliers: {len(report.items)} | Average Rating: ⭐ {average}")

    def valuation_report(self) -> None:
        valuation = self.report_service.get_inventory_valuation()
        if not valuation.categories:
            self.console.print("No products found.")
            return
        table = Table(title="Inventory Valuation")
        for column in ("Category", "Products", "Units", "Value"):
            table.add_column(column)
        for entry in valuation.categories:
            table.add_row(escape(entry.category), str(entry.product_count), str(entry.total_quantity), _format_money(entry.total_value))
        table.add_row(
            "[bold]Total", str(valuation.product_count), str(valuation.total_quantity), _format_money(valuation.total_value)
        )
        self.console.print(table)

    def view_reorder_list(self) -> None:
        items = self.report_service.get_reorder_list()
        if not items:
            self.console.print("No products need reordering.")
            return
        table = Table(title="Reorder List")
        for column in ("ID", "Product", "Supplier", "Stock", "Reorder Level", "Shortage"):
            table.add_column(column)
        for item in items:
            table.add_row(
                str(item.product_id),
                escape(item.display_name),
                escape(item.supplier_name or ""),
                str(item.stock_quantity),
                str(item.reorder_level),
                str(item.shortage),
            )
        self.console.print(table)

    # --- system ------------------------------------------------------------

    def system_menu(self) -> None:
        self._submenu(
            "SYSTEM",
            [
                ("Test Database Connection", self.test_database_connection),
                ("Show Statistics", self.show_statistics),
            ],
        )

    def test_database_connection(self) -> None:
        if self.connection_provider.test_connection():
            self.console.print(f"[green]✅ Connected to {escape(self.connection_provider.config.database)}")
        else:
            self.console.print("[red]❌ Database connection failed.")

    def show_statistics(self) -> None:
        stats = self.report_service.get_stock_statistics()
        for key, value in stats.items():
            self.console.print(f"{key.replace('_', ' ').capitalize()}: {value}")
