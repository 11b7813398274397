"""Dict-backed repositories for running without a database."""

from dataclasses import replace
from typing import Dict, List, Optional, TypeVar

from domain.models import Order, Product
from domain.repositories import CrudRepository, OrderRepository, ProductRepository

T = TypeVar('T')


class InMemoryCrudRepository(CrudRepository[T, int]):
    """In-memory implementation of CrudRepository with sequential IDs.

    Stored and returned entities are copies, so callers never hold a
    reference into the store. Not thread-safe.
    """

    def __init__(self):
        self._records: Dict[int, T] = {}
        self._next_id = 1

    def save(self, entity: T) -> T:
        if entity.id is None:
            entity.id = self._next_id
        self._next_id = max(self._next_id, entity.id + 1)
        self._records[entity.id] = replace(entity)
        return entity

    def find_by_id(self, entity_id: int) -> Optional[T]:
        record = self._records.get(entity_id)
        if record is None:
            return None
        return replace(record)

    def find_all(self) -> List[T]:
        return [replace(self._records[key]) for key in sorted(self._records)]

    def delete_by_id(self, entity_id: int) -> None:
        self._records.pop(entity_id, None)

    def count(self) -> int:
        return len(self._records)

    def exists_by_id(self, entity_id: int) -> bool:
        return entity_id in self._records


class InMemoryOrderRepository(InMemoryCrudRepository[Order], OrderRepository):
    """In-memory implementation of OrderRepository."""


class InMemoryProductRepository(InMemoryCrudRepository[Product], ProductRepository):
    """In-memory implementation of ProductRepository."""
