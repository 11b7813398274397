"""Main application entry point."""

import logging

from domain.models import Order, Product
from infrastructure.config import LOG_LEVEL
from infrastructure.database import init_db, get_session_factory
from infrastructure.unit_of_work import SqlAlchemyUnitOfWork

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main():
    """Main function demonstrating repository operations."""
    # Initialize database
    engine = init_db()
    session_factory = get_session_factory(engine)

    # Create unit of work
    uow = SqlAlchemyUnitOfWork(session_factory)

    with uow:
        order = uow.orders.save(Order(amount=10))
        logger.info(f"Created order: {order}")

        uow.orders.save(Order(id=order.id, amount=20))
        logger.info(f"Updated order: {uow.orders.find_by_id(order.id)}")
        logger.info(f"Orders stored: {uow.orders.count()}")

        first = uow.products.save(Product(name="A"))
        uow.products.save(Product(name="B"))
        logger.info(f"Products stored: {uow.products.count()}")

        uow.products.delete_by_id(first.id)
        logger.info(f"Products after deleting {first.id}: {uow.products.find_all()}")


if __name__ == "__main__":
    main()
