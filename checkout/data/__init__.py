"""Data layer - infrastructure persistence and mapping."""

from .mappers import (
    CustomerMapper,
    ItemReconciliation,
    OrderItemMapper,
    OrderMapper,
    ProductMapper,
)
from .models import Base, CustomerModel, OrderItemModel, OrderModel, ProductModel
from .repositories import (
    SqlAlchemyCustomerRepository,
    SqlAlchemyOrderRepository,
    SqlAlchemyProductRepository,
)
from .uow import UnitOfWork, create_uow

__all__ = [
    "Base",
    "create_uow",
    "CustomerMapper",
    "CustomerModel",
    "ItemReconciliation",
    "OrderItemMapper",
    "OrderItemModel",
    "OrderMapper",
    "OrderModel",
    "ProductMapper",
    "ProductModel",
    "SqlAlchemyCustomerRepository",
    "SqlAlchemyOrderRepository",
    "SqlAlchemyProductRepository",
    "UnitOfWork",
]
