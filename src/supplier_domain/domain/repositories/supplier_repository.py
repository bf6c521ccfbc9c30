# src/supplier_domain/domain/repositories/supplier_repository.py
"""Supplier repository interface."""
from abc import abstractmethod
from decimal import Decimal
from typing import Optional

from src.common.repositories.base_repository import IBaseRepository
from src.supplier_domain.domain.entities.supplier import Supplier


class ISupplierRepository(IBaseRepository[Supplier, Supplier]):

    @abstractmethod
    def find_by_name(self, name: str) -> list[Supplier]:
        """Finds suppliers whose company name contains the term, ignoring case."""
        pass

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[Supplier]:
        """Finds the supplier with exactly this email."""
        pass

    @abstractmethod
    def find_by_rating_range(self, min_rating: Decimal, max_rating: Decimal) -> list[Supplier]:
        """Finds suppliers rated within the inclusive range, best first."""
        pass

    @abstractmethod
    def get_top_suppliers(self, limit: int) -> list[Supplier]:
        """Returns the best rated suppliers, ties broken by company name."""
        pass

    @abstractmethod
    def has_products(self, supplier_id: int) -> bool:
        """Checks whether the supplier still has active products."""
        pass
