import logging
from dataclasses import asdict, fields
from functools import wraps
from typing import List, Optional, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from domain.exceptions import PersistenceError
from domain.models import Order, Product
from domain.repositories import CrudRepository, OrderRepository, ProductRepository
from .orm import Base, OrderORM, ProductORM

T = TypeVar('T')
ID = TypeVar('ID')

logger = logging.getLogger(__name__)


def translate_errors(method):
    """Re-raise SQLAlchemy errors from a repository method as PersistenceError."""

    @wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except SQLAlchemyError as e:
            table = self.model.__tablename__
            logger.error(f"{method.__name__} on '{table}' failed: {e}")
            raise PersistenceError(f"{method.__name__} on '{table}' failed: {e}") from e

    return wrapper


class SqlAlchemyCrudRepository(CrudRepository[T, ID]):
    """SQLAlchemy implementation of CrudRepository.

    Subclasses bind it to an entity by setting ``model`` (the ORM class) and
    ``entity_type`` (the domain dataclass). Both must share field names and
    expose the primary key as ``id``.
    """

    model: Optional[Type[Base]] = None
    entity_type: Optional[type] = None

    def __init__(self, session: Session):
        self.session = session

    def _to_domain(self, row) -> T:
        try:
            return self.entity_type(**{f.name: getattr(row, f.name) for f in fields(self.entity_type)})
        except ValueError as e:
            table = self.model.__tablename__
            logger.error(f"Invalid row in '{table}' id={row.id}: {e}")
            raise PersistenceError(f"Invalid row in '{table}' id={row.id}: {e}") from e

    @translate_errors
    def save(self, entity: T) -> T:
        """Insert a new entity or overwrite the one with the same ID."""
        if entity.id is None:
            row = self.model(**asdict(entity))
            self.session.add(row)
        else:
            row = self.session.merge(self.model(**asdict(entity)))
        self.session.flush()
        entity.id = row.id
        logger.debug(f"Saved {self.entity_type.__name__} id={entity.id}")
        return entity

    @translate_errors
    def find_by_id(self, entity_id: ID) -> Optional[T]:
        row = self.session.query(self.model).filter_by(id=entity_id).first()
        if not row:
            return None
        return self._to_domain(row)

    @translate_errors
    def find_all(self) -> List[T]:
        rows = self.session.query(self.model).order_by(self.model.id).all()
        return [self._to_domain(row) for row in rows]

    @translate_errors
    def delete_by_id(self, entity_id: ID) -> None:
        row = self.session.query(self.model).filter_by(id=entity_id).first()
        if row:
            self.session.delete(row)
            self.session.flush()
            logger.debug(f"Deleted {self.entity_type.__name__} id={entity_id}")

    @translate_errors
    def count(self) -> int:
        return self.session.query(self.model).count()

    @translate_errors
    def exists_by_id(self, entity_id: ID) -> bool:
        return self.session.query(self.model.id).filter_by(id=entity_id).first() is not None


class SqlAlchemyOrderRepository(SqlAlchemyCrudRepository[Order, int], OrderRepository):
    """SQLAlchemy implementation of OrderRepository."""
    model = OrderORM
    entity_type = Order


class SqlAlchemyProductRepository(SqlAlchemyCrudRepository[Product, int], ProductRepository):
    """SQLAlchemy implementation of ProductRepository."""
    model = ProductORM
    entity_type = Product
