"""Infrastructure layer package."""

from .database import init_db, get_engine, get_session_factory
from .unit_of_work import SqlAlchemyUnitOfWork
from .repositories import (
    SqlAlchemyCrudRepository,
    SqlAlchemyOrderRepository,
    SqlAlchemyProductRepository,
)
from .memory import InMemoryCrudRepository, InMemoryOrderRepository, InMemoryProductRepository

__all__ = [
    'init_db',
    'get_engine',
    'get_session_factory',
    'SqlAlchemyUnitOfWork',
    'SqlAlchemyCrudRepository',
    'SqlAlchemyOrderRepository',
    'SqlAlchemyProductRepository',
    'InMemoryCrudRepository',
    'InMemoryOrderRepository',
    'InMemoryProductRepository',
]
