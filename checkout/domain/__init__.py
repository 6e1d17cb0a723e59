"""Domain layer - pure domain models and interfaces."""

from .entities import Customer, Order, OrderItem, Product
from .exceptions import DomainError, NotFoundError, PersistenceError, ValidationError
from .repositories import CustomerRepository, OrderRepository, ProductRepository
from .value_objects import Address

__all__ = [
    "Address",
    "Customer",
    "CustomerRepository",
    "DomainError",
    "NotFoundError",
    "Order",
    "OrderItem",
    "OrderRepository",
    "PersistenceError",
    "Product",
    "ProductRepository",
    "ValidationError",
]
