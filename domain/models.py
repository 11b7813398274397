from dataclasses import dataclass
from typing import Optional


@dataclass
class Order:
    """Order entity."""
    id: Optional[int] = None
    amount: float = 0.0

    def __post_init__(self):
        if self.amount < 0:
            raise ValueError("Order amount cannot be negative")


@dataclass
class Product:
    """Product entity."""
    id: Optional[int] = None
    name: str = ""
    price: float = 0.0

    def __post_init__(self):
        if self.price < 0:
            raise ValueError("Product price cannot be negative")
