from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from .models import Order, Product

T = TypeVar('T')
ID = TypeVar('ID')


class CrudRepository(ABC, Generic[T, ID]):
    """Abstract CRUD repository for an entity type keyed by ID.

    Every operation is one call against the store. Store failures surface
    as PersistenceError; a missing record is a normal result, never an error.
    """

    @abstractmethod
    def save(self, entity: T) -> T:
        """Insert the entity, or overwrite the record with the same ID.

        An entity without an ID gets a new one assigned and written back.
        """
        pass

    @abstractmethod
    def find_by_id(self, entity_id: ID) -> Optional[T]:
        """Get an entity by ID, or None if absent."""
        pass

    @abstractmethod
    def find_all(self) -> List[T]:
        """List all entities."""
        pass

    @abstractmethod
    def delete_by_id(self, entity_id: ID) -> None:
        """Delete an entity by ID. Absent IDs are ignored."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Count persisted entities."""
        pass

    @abstractmethod
    def exists_by_id(self, entity_id: ID) -> bool:
        """Check whether an entity with the ID is persisted."""
        pass


class OrderRepository(CrudRepository[Order, int]):
    """Repository for Order entity."""


class ProductRepository(CrudRepository[Product, int]):
    """Repository for Product entity."""
