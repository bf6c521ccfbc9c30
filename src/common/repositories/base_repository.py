# src/common/repositories/base_repository.py
"""Generic repository interface shared by every entity store."""
from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

EntityT = TypeVar("EntityT")
ReadT = TypeVar("ReadT")


class IBaseRepository(ABC, Generic[EntityT, ReadT]):
    """CRUD contract. Reads only ever see active rows; delete is a soft delete."""

    @abstractmethod
    def save(self, entity: EntityT) -> EntityT:
        """Inserts a new row and returns the entity with its generated id."""
        pass

    @abstractmethod
    def update(self, entity: EntityT) -> EntityT:
        """Updates the full row by primary key."""
        pass

    @abstractmethod
    def find_by_id(self, entity_id: int) -> Optional[ReadT]:
        """Returns the active row with this id, or None."""
        pass

    @abstractmethod
    def find_all(self) -> list[ReadT]:
        """Returns all active rows ordered by name."""
        pass

    @abstractmethod
    def delete(self, entity_id: int) -> bool:
        """Deactivates the row; returns whether a row was affected."""
        pass

    @abstractmethod
    def exists(self, entity_id: int) -> bool:
        """Checks whether an active row with this id exists."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Counts active rows."""
        pass
