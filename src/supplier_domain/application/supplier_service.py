# src/supplier_domain/application/supplier_service.py
"""Application service for Supplier operations."""

import logging
from decimal import Decimal
from typing import Optional

from src.common.exceptions.custom_exceptions import ValidationError
from src.supplier_domain.domain.entities.supplier import MAX_RATING, MIN_RATING, Supplier
from src.supplier_domain.domain.repositories.supplier_repository import ISupplierRepository

logger = logging.getLogger(__name__)


def _invalid(message: str) -> ValidationError:
    logger.warning(f"Validation failed: {message}")
    return ValidationError(message)


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value.strip()


class SupplierApplicationService:
    """Validates supplier input before handing it to the repository."""

    def __init__(self, supplier_repo: ISupplierRepository) -> None:
        self.supplier_repo = supplier_repo

    def create_supplier(
        self,
        company_name: str,
        contact_person: Optional[str] = None,
        phone: Optional[str] = None,
        email: Optional[str] = None,
        address: Optional[str] = None,
        rating: Optional[Decimal] = None,
    ) -> Supplier:
        """
        Creates a supplier after validation.

        Email uniqueness is left to the storage constraint; a duplicate surfaces as
        a PersistenceError raised by the repository.
        """
        logger.info(f"Creating new supplier: {company_name}")
        self._validate_supplier_data(company_name, contact_person, phone, email, rating)

        supplier = Supplier(
            company_name=company_name.strip(),
            contact_person=_blank_to_none(contact_person),
            phone=_blank_to_none(phone),
            email=_blank_to_none(email),
            address=_blank_to_none(address),
            rating=rating,
        )
        saved_supplier = self.supplier_repo.save(supplier)
        logger.info(f"Supplier created successfully with ID: {saved_supplier.supplier_id}")
        return saved_supplier

    def update_supplier(
        self,
        supplier_id: int,
        company_name: str,
        contact_person: Optional[str] = None,
        phone: Optional[str] = None,
        email: Optional[str] = None,
        address: Optional[str] = None,
        rating: Optional[Decimal] = None,
    ) -> Supplier:
        logger.info(f"Updating supplier: {supplier_id}")
        self._validate_supplier_data(company_name, contact_person, phone, email, rating)

        supplier = self.supplier_repo.find_by_id(supplier_id)
        if supplier is None:
            raise _invalid(f"Supplier not found with ID: {supplier_id}")

        supplier.company_name = company_name.strip()
        supplier.contact_person = _blank_to_none(contact_person)
        supplier.phone = _blank_to_none(phone)
        supplier.email = _blank_to_none(email)
        supplier.address = _blank_to_none(address)
        supplier.rating = rating

        updated_supplier = self.supplier_repo.update(supplier)
        logger.info(f"Supplier updated successfully: {supplier_id}")
        return updated_supplier

    def delete_supplier(self, supplier_id: int) -> bool:
        """Soft deletes a supplier. Existing products keep pointing at it."""
        logger.info(f"Deleting supplier: {supplier_id}")
        if self.supplier_repo.find_by_id(supplier_id) is None:
            raise _invalid(f"Supplier not found with ID: {supplier_id}")
        return self.supplier_repo.delete(supplier_id)

    def find_supplier_by_id(self, supplier_id: int) -> Optional[Supplier]:
        return self.supplier_repo.find_by_id(supplier_id)

    def find_all_suppliers(self) -> list[Supplier]:
        return self.supplier_repo.find_all()

    def search_suppliers_by_name(self, name: Optional[str]) -> list[Supplier]:
        if name is None or not name.strip():
            return self.find_all_suppliers()
        return self.supplier_repo.find_by_name(name.strip())

    def find_supplier_by_email(self, email: str) -> Optional[Supplier]:
        return self.supplier_repo.find_by_email(email.strip())

    def find_suppliers_by_rating_range(self, min_rating: Decimal, max_rating: Decimal) -> list[Supplier]:
        for value in (min_rating, max_rating):
            if not value.is_finite() or not (MIN_RATING <= value <= MAX_RATING):
                raise _invalid("Rating must be between 1.0 and 5.0")
        if min_rating > max_rating:
            raise _invalid("Minimum rating cannot be greater than maximum rating")
        return self.supplier_repo.find_by_rating_range(min_rating, max_rating)

    def get_top_suppliers(self, limit: int) -> list[Supplier]:
        if limit <= 0:
            raise _invalid("Limit must be a positive number")
        return self.supplier_repo.get_top_suppliers(limit)

    def supplier_has_products(self, supplier_id: int) -> bool:
        return self.supplier_repo.has_products(supplier_id)

    def supplier_exists(self, supplier_id: int) -> bool:
        return self.supplier_repo.exists(supplier_id)

    def get_supplier_count(self) -> int:
        return self.supplier_repo.count()

    @staticmethod
    def _validate_supplier_data(
        company_name: Optional[str],
        contact_person: Optional[str],
        phone: Optional[str],
        email: Optional[str],
        rating: Optional[Decimal],
    ) -> None:
        if company_name is None or not company_name.strip():
            raise _invalid("Company name is required")
        if len(company_name.strip()) > 100:
            raise _invalid("Company name cannot exceed 100 characters")
        if contact_person and len(contact_person.strip()) > 100:
            raise _invalid("Contact person cannot exceed 100 characters")
        if phone and len(phone.strip()) > 20:
            raise _invalid("Phone cannot exceed 20 characters")
        if email and len(email.strip()) > 100:
            raise _invalid("Email cannot exceed 100 characters")
        if rating is not None and (not rating.is_finite() or not (MIN_RATING <= rating <= MAX_RATING)):
            raise _invalid("Rating must be between 1.0 and 5.0")
