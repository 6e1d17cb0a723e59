"""Repository interfaces (ports)."""

from .customer_repository import CustomerRepository
from .order_repository import OrderRepository
from .product_repository import ProductRepository

__all__ = ["CustomerRepository", "OrderRepository", "ProductRepository"]
