# src/product_domain/application/report_service.py
"""Application service for inventory reports."""

import logging
from collections import Counter
from decimal import ROUND_HALF_UP, Decimal

from src.common.dtos.report_dtos import (
    CategoryValuationDTO,
    InventoryValuationDTO,
    ReorderItemDTO,
    StockSummaryDTO,
    SupplierPerformanceDTO,
    SupplierPerformanceItemDTO,
)
from src.product_domain.domain.repositories.product_repository import IProductRepository
from src.supplier_domain.domain.repositories.supplier_repository import ISupplierRepository

logger = logging.getLogger(__name__)


class InventoryReportService:
    """Aggregates repository reads into report DTOs. Nothing here writes."""

    def __init__(self, product_repo: IProductRepository, supplier_repo: ISupplierRepository) -> None:
        self.product_repo = product_repo
        self.supplier_repo = supplier_repo

    def get_stock_summary(self) -> StockSummaryDTO:
        views = self.product_repo.find_all()
        summary = StockSummaryDTO(products=views)
        for view in views:
            product = view.product
            summary.total_quantity += product.stock_quantity or 0
            summary.total_value += product.stock_value
            if product.is_out_of_stock:
                summary.out_of_stock_count += 1
            if product.is_low_stock:
                summary.low_stock_count += 1
        logger.info(f"Stock summary built for {len(views)} products")
        return summary

    def get_inventory_valuation(self) -> InventoryValuationDTO:
        """Total stock value with a per-category breakdown, sorted by category."""
        valuation = InventoryValuationDTO()
        by_category: dict[str, CategoryValuationDTO] = {}

        for view in self.product_repo.find_all():
            product = view.product
            entry = by_category.setdefault(product.category, CategoryValuationDTO(category=product.category))
            entry.product_count += 1
            entry.total_quantity += product.stock_quantity or 0
            entry.total_value += product.stock_value

            valuation.product_count += 1
            valuation.total_quantity += product.stock_quantity or 0
            valuation.total_value += product.stock_value

        valuation.categories = [by_category[name] for name in sorted(by_category)]
        return valuation

    def get_reorder_list(self) -> list[ReorderItemDTO]:
        """Low stock products in the repository's order (largest shortage first)."""
        return [
            ReorderItemDTO(
                product_id=view.product.product_id,
                display_name=view.product.display_name,
                supplier_name=view.supplier_name,
                stock_quantity=view.product.stock_quantity or 0,
                reorder_level=view.product.reorder_level,
                shortage=view.product.shortage,
            )
            for view in self.product_repo.get_low_stock_products()
        ]

    def get_supplier_performance(self) -> SupplierPerformanceDTO:
        suppliers = self.supplier_repo.find_all()
        product_counts = Counter(view.product.supplier_id for view in self.product_repo.find_all())

        report = SupplierPerformanceDTO(
            items=[
                SupplierPerformanceItemDTO(supplier=supplier, active_product_count=product_counts[supplier.supplier_id])
                for supplier in suppliers
            ]
        )

        ratings = [supplier.rating for supplier in suppliers if supplier.rating is not None]
        if ratings:
            average = sum(ratings, Decimal("0")) / len(ratings)
            report.average_rating = average.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        return report

    def get_stock_statistics(self) -> dict:
        """Returns headline figures about the inventory."""
        summary = self.get_stock_summary()
        return {
            "total_products": len(summary.products),
            "total_suppliers": self.supplier_repo.count(),
            "total_categories": len(self.product_repo.get_distinct_categories()),
            "low_stock_products": summary.low_stock_count,
            "out_of_stock_products": summary.out_of_stock_count,
            "total_stock_value": summary.total_value,
        }
