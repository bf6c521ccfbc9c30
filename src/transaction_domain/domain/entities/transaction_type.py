"""Kinds of stock movement."""

from enum import Enum


class TransactionType(Enum):
    PURCHASE = ("Purchase", "Stock increase from supplier")
    SALE = ("Sale", "Stock decrease due to sale")
    RETURN_IN = ("Return In", "Stock increase due to return from customer")
    RETURN_OUT = ("Return Out", "Stock decrease due to return to supplier")
    ADJUSTMENT = ("Adjustment", "Stock adjustment for correction")

    def __init__(self, display_name: str, description: str) -> None:
        self.display_name = display_name
        self.description = description

    @property
    def increases_stock(self) -> bool:
        return self in (TransactionType.PURCHASE, TransactionType.RETURN_IN)

    @property
    def decreases_stock(self) -> bool:
        return self in (TransactionType.SALE, TransactionType.RETURN_OUT)

    @property
    def is_adjustment(self) -> bool:
        return self is TransactionType.ADJUSTMENT

    def __str__(self) -> str:
        return self.display_name
