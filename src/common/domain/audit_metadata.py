"""Audit metadata value object embedded in every entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping


@dataclass
class AuditMetadata:
    """Activity flag and lifecycle timestamps shared by suppliers and products."""

    is_active: bool = True
    created_date: datetime = field(default_factory=datetime.now)
    updated_date: datetime = field(default_factory=datetime.now)

    def touch(self) -> None:
        self.updated_date = datetime.now()

    def deactivate(self) -> None:
        self.is_active = False
        self.touch()

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "AuditMetadata":
        """Builds metadata from a database row, keeping defaults for missing timestamps."""
        audit = cls(is_active=bool(row.get("is_active", True)))
        if row.get("created_date") is not None:
            audit.created_date = row["created_date"]
        if row.get("updated_date") is not None:
            audit.updated_date = row["updated_date"]
        return audit
