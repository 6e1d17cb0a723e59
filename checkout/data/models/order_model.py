"""SQLAlchemy ORM models for Order aggregate."""

from sqlalchemy import Column, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from .base import Base


class OrderModel(Base):
    """SQLAlchemy ORM model for orders table."""

    __tablename__ = "orders"

    id = Column(String(50), primary_key=True)
    customer_id = Column(String(50), ForeignKey("customers.id"), nullable=False, index=True)
    # Stored copy of sum(price * quantity) over the order's items
    total = Column(Numeric(15, 2), nullable=False)

    # Relationship to items
    items = relationship(
        "OrderItemModel", back_populates="order", cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<OrderModel(id={self.id}, customer_id={self.customer_id}, total={self.total})>"


class OrderItemModel(Base):
    """SQLAlchemy ORM model for order_items table.

    Item ids are unique within their order only, so the primary key is
    the (order_id, id) pair.
    """

    __tablename__ = "order_items"

    order_id = Column(
        String(50),
        ForeignKey("orders.id", ondelete="CASCADE"),
        primary_key=True,
    )
    id = Column(String(50), primary_key=True)
    product_id = Column(String(50), ForeignKey("products.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    quantity = Column(Integer, nullable=False)

    # Relationship back to order
    order = relationship("OrderModel", back_populates="items")

    def __repr__(self):
        return (
            f"<OrderItemModel(order_id={self.order_id}, id={self.id}, "
            f"product_id={self.product_id}, quantity={self.quantity})>"
        )
