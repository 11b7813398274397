import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from domain.exceptions import PersistenceError
from domain.unit_of_work import UnitOfWork
from .repositories import SqlAlchemyOrderRepository, SqlAlchemyProductRepository

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of Unit of Work pattern."""

    def __init__(self, session_factory):
        self.session_factory = session_factory
        self.session: Session = None
        self.orders: SqlAlchemyOrderRepository = None
        self.products: SqlAlchemyProductRepository = None

    def __enter__(self) -> 'SqlAlchemyUnitOfWork':
        """Enter the context manager."""
        self.session = self.session_factory()
        self.orders = SqlAlchemyOrderRepository(self.session)
        self.products = SqlAlchemyProductRepository(self.session)
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit the context manager."""
        try:
            if exc_type:
                logger.warning(f"Rolling back after {exc_type.__name__}: {exc_val}")
                try:
                    self.rollback()
                except PersistenceError:
                    # the block's own exception propagates
                    pass
            else:
                self.commit()
        finally:
            self.session.close()

    def commit(self) -> None:
        """Commit the current transaction."""
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Commit failed: {e}")
            self.session.rollback()
            raise PersistenceError(f"Commit failed: {e}") from e

    def rollback(self) -> None:
        """Rollback the current transaction."""
        try:
            self.session.rollback()
        except SQLAlchemyError as e:
            logger.error(f"Rollback failed: {e}")
            raise PersistenceError(f"Rollback failed: {e}") from e
