"""Supplier entity."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from src.common.domain.audit_metadata import AuditMetadata

MIN_RATING = Decimal("1.0")
MAX_RATING = Decimal("5.0")


@dataclass
class Supplier:
    """A supplier/vendor delivering products into the inventory."""

    company_name: str
    contact_person: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    rating: Optional[Decimal] = None  # 1.0 to 5.0
    supplier_id: Optional[int] = None
    audit: AuditMetadata = field(default_factory=AuditMetadata)

    def __post_init__(self) -> None:
        if self.rating is not None and not (MIN_RATING <= self.rating <= MAX_RATING):
            raise ValueError("Rating must be between 1.0 and 5.0.")

    @property
    def has_contact(self) -> bool:
        return bool(self.contact_person and self.contact_person.strip())

    @property
    def has_email(self) -> bool:
        return bool(self.email and self.email.strip())

    @property
    def has_phone(self) -> bool:
        return bool(self.phone and self.phone.strip())

    @property
    def display_name(self) -> str:
        if self.has_contact:
            return f"{self.company_name} ({self.contact_person})"
        return self.company_name
