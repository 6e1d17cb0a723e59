"""SQLAlchemy ORM model for Product aggregate."""

from sqlalchemy import Column, Numeric, String

from .base import Base


class ProductModel(Base):
    """SQLAlchemy ORM model for products table."""

    __tablename__ = "products"

    id = Column(String(50), primary_key=True)
    name = Column(String(255), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)

    def __repr__(self):
        return f"<ProductModel(id={self.id}, name={self.name}, price={self.price})>"
