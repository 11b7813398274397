"""Tests for Unit of Work pattern."""

from unittest.mock import Mock

import pytest
from sqlalchemy.exc import OperationalError

from domain.exceptions import PersistenceError
from domain.models import Order, Product
from infrastructure.unit_of_work import SqlAlchemyUnitOfWork


class TestSqlAlchemyUnitOfWork:
    """Test SQLAlchemy Unit of Work."""

    def test_uow_commit(self, session_factory):
        """Test that unit of work commits changes."""
        uow = SqlAlchemyUnitOfWork(session_factory)

        with uow:
            product = uow.products.save(Product(name="Test", price=99.99))
            assert product.id is not None

        # Verify in new session
        with uow:
            retrieved = uow.products.find_by_id(product.id)
            assert retrieved == Product(id=product.id, name="Test", price=99.99)

    def test_uow_rollback_on_exception(self, uow):
        """Test that unit of work rolls back on exception."""
        with pytest.raises(ValueError):
            with uow:
                order = uow.orders.save(Order(amount=10))
                order_id = order.id
                raise ValueError("Test exception")

        # Verify order was not persisted
        with uow:
            assert uow.orders.find_by_id(order_id) is None
            assert uow.orders.count() == 0

    def test_uow_manual_rollback(self, uow):
        """Test manual rollback."""
        with uow:
            order = uow.orders.save(Order(amount=10))
            uow.rollback()

            # Should not be persisted after rollback
            assert uow.orders.exists_by_id(order.id) is False

    def test_uow_upsert_across_sessions(self, uow):
        """Test that a later unit of work overwrites an earlier record."""
        with uow:
            order = uow.orders.save(Order(amount=10))

        with uow:
            uow.orders.save(Order(id=order.id, amount=20))

        with uow:
            assert uow.orders.find_all() == [Order(id=order.id, amount=20)]

    def test_uow_separate_instances(self, session_factory):
        """Test handling of separate unit of work contexts."""
        uow1 = SqlAlchemyUnitOfWork(session_factory)
        uow2 = SqlAlchemyUnitOfWork(session_factory)

        with uow1:
            uow1.products.save(Product(name="Product1", price=100.0))

        with uow2:
            uow2.products.save(Product(name="Product2", price=50.0))

        # Both products should be persisted
        with uow1:
            names = [p.name for p in uow1.products.find_all()]
            assert names == ["Product1", "Product2"]

    def test_commit_failure_raises_persistence_error(self):
        session = Mock()
        session.commit.side_effect = OperationalError("COMMIT", {}, Exception("database is locked"))
        uow = SqlAlchemyUnitOfWork(lambda: session)

        with pytest.raises(PersistenceError):
            with uow:
                pass

        session.rollback.assert_called_once()
        session.close.assert_called_once()

    def test_rollback_failure_keeps_original_exception(self):
        session = Mock()
        session.rollback.side_effect = OperationalError("ROLLBACK", {}, Exception("disk I/O error"))
        uow = SqlAlchemyUnitOfWork(lambda: session)

        with pytest.raises(ValueError, match="block failed"):
            with uow:
                raise ValueError("block failed")

        session.close.assert_called_once()

    def test_manual_rollback_failure_raises_persistence_error(self):
        session = Mock()
        session.rollback.side_effect = OperationalError("ROLLBACK", {}, Exception("disk I/O error"))
        uow = SqlAlchemyUnitOfWork(lambda: session)
        uow.__enter__()

        with pytest.raises(PersistenceError) as exc_info:
            uow.rollback()

        assert isinstance(exc_info.value.__cause__, OperationalError)
