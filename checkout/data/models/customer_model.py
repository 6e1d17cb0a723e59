"""SQLAlchemy ORM model for Customer aggregate."""

from sqlalchemy import Boolean, Column, Integer, String

from .base import Base


class CustomerModel(Base):
    """SQLAlchemy ORM model for customers table. Address columns are flattened."""

    __tablename__ = "customers"

    id = Column(String(50), primary_key=True)
    name = Column(String(255), nullable=False)
    street = Column(String(255), nullable=True)
    number = Column(Integer, nullable=True)
    zipcode = Column(String(20), nullable=True)
    city = Column(String(255), nullable=True)
    active = Column(Boolean, nullable=False, default=False)
    reward_points = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<CustomerModel(id={self.id}, name={self.name}, active={self.active})>"
