# src/transaction_domain/application/stock_movement_service.py
"""Application service applying stock movements to products."""

import logging
from decimal import Decimal
from typing import Optional

from src.common.exceptions.custom_exceptions import ValidationError
from src.product_domain.application.product_service import ProductApplicationService
from src.transaction_domain.domain.entities.transaction import Transaction
from src.transaction_domain.domain.entities.transaction_type import TransactionType

logger = logging.getLogger(__name__)


def _invalid(message: str) -> ValidationError:
    logger.warning(f"Validation failed: {message}")
    return ValidationError(message)


class StockMovementService:
    """
    Turns a purchase, sale, return or adjustment into a new stock level.

    The movement itself is returned to the caller but not stored; the only write is
    the stock quantity overwrite on the product.
    """

    def __init__(self, product_service: ProductApplicationService) -> None:
        self.product_service = product_service

    def record_movement(
        self,
        product_id: int,
        transaction_type: TransactionType,
        quantity: int,
        unit_price: Optional[Decimal] = None,
        reference_number: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> Transaction:
        """
        Applies a movement and returns it as a Transaction.

        Args:
            quantity: units moved; for ADJUSTMENT a signed correction (negative removes stock)
            unit_price: defaults to the product's current unit price

        Raises:
            ValidationError: for an unknown product, a bad quantity or insufficient stock.
        """
        logger.info(f"Recording {transaction_type.display_name} of {quantity} for product {product_id}")

        view = self.product_service.find_product_by_id(product_id)
        if view is None:
            raise _invalid(f"Product not found with ID: {product_id}")
        product = view.product

        if quantity is None:
            raise _invalid("Quantity is required")
        if transaction_type.is_adjustment:
            if quantity == 0:
                raise _invalid("Adjustment quantity cannot be zero")
        elif quantity <= 0:
            raise _invalid("Quantity must be greater than zero")
        if unit_price is not None and not unit_price.is_finite():
            raise _invalid("Unit price must be a number")
        if unit_price is not None and unit_price < 0:
            raise _invalid("Unit price cannot be negative")

        current_quantity = product.stock_quantity or 0
        if transaction_type.increases_stock:
            new_quantity = current_quantity + quantity
        elif transaction_type.decreases_stock:
            new_quantity = current_quantity - quantity
        else:
            new_quantity = current_quantity + quantity

        if new_quantity < 0:
            requested = quantity if quantity > 0 else -quantity
            raise _invalid(
                f"Insufficient stock for {product.display_name}: available {current_quantity}, requested {requested}"
            )

        if not self.product_service.update_stock_quantity(product_id, new_quantity):
            raise _invalid(f"Product not found with ID: {product_id}")

        logger.info(f"Stock for product {product_id} changed from {current_quantity} to {new_quantity}")
        return Transaction(
            transaction_type=transaction_type,
            product_id=product_id,
            quantity=quantity,
            unit_price=unit_price if unit_price is not None else product.unit_price,
            reference_number=reference_number,
            notes=notes,
            product_name=product.product_name,
            product_code=product.product_code,
            category=product.category,
            supplier_name=view.supplier_name,
        )
