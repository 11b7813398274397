"""Domain layer package."""

from .models import Order, Product
from .repositories import CrudRepository, OrderRepository, ProductRepository
from .exceptions import PersistenceError

__all__ = [
    'Order',
    'Product',
    'CrudRepository',
    'OrderRepository',
    'ProductRepository',
    'PersistenceError',
]
