# tests/test_supplier_domain/test_application/test_supplier_service.py
"""Tests for the Supplier Application Service."""

from decimal import Decimal

import pytest

from src.common.exceptions.custom_exceptions import PersistenceError, ValidationError
from src.supplier_domain.domain.entities.supplier import Supplier


def _save_with_id(supplier: Supplier) -> Supplier:
    supplier.supplier_id = 1
    return supplier


def test_create_supplier_success(supplier_service, mock_supplier_repository) -> None:
    mock_supplier_repository.save.side_effect = _save_with_id

    supplier = supplier_service.create_supplier(
        company_name="  Acme Corp  ",
        contact_person="Jane Doe",
        phone="",
        email="sales@acme.example",
        address="   ",
        rating=Decimal("4.5"),
    )

    assert supplier.supplier_id == 1
    assert supplier.company_name == "Acme Corp"
    assert supplier.phone is None
    assert supplier.address is None
    assert supplier.audit.is_active is True
    mock_supplier_repository.save.assert_called_once()


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"company_name": ""}, "Company name is required"),
        ({"company_name": "   "}, "Company name is required"),
        ({"company_name": "A" * 101}, "Company name cannot exceed 100 characters"),
        ({"company_name": "Acme", "contact_person": "C" * 101}, "Contact person cannot exceed 100 characters"),
        ({"company_name": "Acme", "phone": "1" * 21}, "Phone cannot exceed 20 characters"),
        ({"company_name": "Acme", "email": "e" * 101}, "Email cannot exceed 100 characters"),
        ({"company_name": "Acme", "rating": Decimal("0.5")}, "Rating must be between 1.0 and 5.0"),
        ({"company_name": "Acme", "rating": Decimal("5.1")}, "Rating must be between 1.0 and 5.0"),
    ],
)
def test_create_supplier_validation(supplier_service, mock_supplier_repository, kwargs, message) -> None:
    with pytest.raises(ValidationError) as exc_info:
        supplier_service.create_supplier(**kwargs)

    assert str(exc_info.value) == message
    mock_supplier_repository.save.assert_not_called()


def test_create_supplier_duplicate_email_propagates(supplier_service, mock_supplier_repository) -> None:
    mock_supplier_repository.save.side_effect = PersistenceError("Error saving supplier: Acme Corp")

    with pytest.raises(PersistenceError):
        supplier_service.create_supplier(company_name="Acme Corp", email="sales@acme.example")


def test_update_supplier_success(supplier_service, mock_supplier_repository, sample_supplier) -> None:
    mock_supplier_repository.find_by_id.return_value = sample_supplier
    mock_supplier_repository.update.side_effect = lambda supplier: supplier

    updated = supplier_service.update_supplier(1, company_name="Acme GmbH", email="", rating=Decimal("3.0"))

    assert updated.company_name == "Acme GmbH"
    assert updated.email is None
    assert updated.rating == Decimal("3.0")
    mock_supplier_repository.update.assert_called_once_with(sample_supplier)


def test_update_supplier_not_found(supplier_service, mock_supplier_repository) -> None:
    mock_supplier_repository.find_by_id.return_value = None

    with pytest.raises(ValidationError, match="Supplier not found with ID: 9"):
        supplier_service.update_supplier(9, company_name="Acme")

    mock_supplier_repository.update.assert_not_called()


def test_delete_supplier(supplier_service, mock_supplier_repository, sample_supplier) -> None:
    mock_supplier_repository.find_by_id.return_value = sample_supplier
    mock_supplier_repository.delete.return_value = True

    assert supplier_service.delete_supplier(1) is True
    mock_supplier_repository.delete.assert_called_once_with(1)


def test_delete_supplier_not_found(supplier_service, mock_supplier_repository) -> None:
    mock_supplier_repository.find_by_id.return_value = None

    with pytest.raises(ValidationError, match="Supplier not found with ID: 3"):
        supplier_service.delete_supplier(3)

    mock_supplier_repository.delete.assert_not_called()


def test_search_with_blank_name_returns_all(supplier_service, mock_supplier_repository, sample_supplier) -> None:
    mock_supplier_repository.find_all.return_value = [sample_supplier]

    assert supplier_service.search_suppliers_by_name("  ") == [sample_supplier]
    mock_supplier_repository.find_by_name.assert_not_called()


def test_search_trims_name(supplier_service, mock_supplier_repository) -> None:
    mock_supplier_repository.find_by_name.return_value = []

    supplier_service.search_suppliers_by_name(" acme ")

    mock_supplier_repository.find_by_name.assert_called_once_with("acme")


def test_rating_range_validation(supplier_service, mock_supplier_repository) -> None:
    with pytest.raises(ValidationError, match="Minimum rating cannot be greater than maximum rating"):
        supplier_service.find_suppliers_by_rating_range(Decimal("4.0"), Decimal("2.0"))

    with pytest.raises(ValidationError, match="Rating must be between 1.0 and 5.0"):
        supplier_service.find_suppliers_by_rating_range(Decimal("0.0"), Decimal("2.0"))

    mock_supplier_repository.find_by_rating_range.assert_not_called()


def test_rating_range_delegates(supplier_service, mock_supplier_repository) -> None:
    mock_supplier_repository.find_by_rating_range.return_value = []

    supplier_service.find_suppliers_by_rating_range(Decimal("3.0"), Decimal("5.0"))

    mock_supplier_repository.find_by_rating_range.assert_called_once_with(Decimal("3.0"), Decimal("5.0"))


def test_get_top_suppliers_requires_positive_limit(supplier_service, mock_supplier_repository) -> None:
    with pytest.raises(ValidationError, match="Limit must be a positive number"):
        supplier_service.get_top_suppliers(0)

    supplier_service.get_top_suppliers(5)
    mock_supplier_repository.get_top_suppliers.assert_called_once_with(5)


def test_pass_through_queries(supplier_service, mock_supplier_repository) -> None:
    mock_supplier_repository.has_products.return_value = True
    mock_supplier_repository.exists.return_value = False
    mock_supplier_repository.count.return_value = 4
    mock_supplier_repository.find_by_email.return_value = None

    assert supplier_service.supplier_has_products(1) is True
    assert supplier_service.supplier_exists(1) is False
    assert supplier_service.get_supplier_count() == 4
    assert supplier_service.find_supplier_by_email(" a@b.example ") is None
    mock_supplier_repository.find_by_email.assert_called_once_with("a@b.example")


@pytest.mark.parametrize("rating", [Decimal("NaN"), Decimal("Infinity")])
def test_non_finite_rating_is_rejected(supplier_service, mock_supplier_repository, rating) -> None:
    with pytest.raises(ValidationError) as exc_info:
        supplier_service.create_supplier(company_name="Acme", rating=rating)

    assert str(exc_info.value) == "Rating must be between 1.0 and 5.0"
    mock_supplier_repository.save.assert_not_called()

    with pytest.raises(ValidationError, match="Rating must be between 1.0 and 5.0"):
        supplier_service.find_suppliers_by_rating_range(Decimal("1.0"), rating)

    mock_supplier_repository.find_by_rating_range.assert_not_called()
