"""SQLAlchemy implementation of CustomerRepository."""

from typing import List
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from checkout.domain.entities.customer import Customer
from checkout.domain.exceptions import NotFoundError, PersistenceError
from checkout.domain.repositories.customer_repository import CustomerRepository

from ..mappers import CustomerMapper
from ..models.customer_model import CustomerModel
from .base import savepoint


logger = logging.getLogger(__name__)


class SqlAlchemyCustomerRepository(CustomerRepository):
    """Concrete implementation of CustomerRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, customer: Customer) -> None:
        """Insert a customer row.

        Raises:
            PersistenceError: If the id is already taken
        """
        logger.info(f"Creating customer: {customer.id}")

        if await self._session.get(CustomerModel, customer.id) is not None:
            raise PersistenceError(
                f"Customer already exists: {customer.id}", entity_id=customer.id
            )

        async with savepoint(self._session, "customer", customer.id):
            self._session.add(CustomerMapper.to_persistence(customer))

    async def update(self, customer: Customer) -> None:
        """Overwrite every customer column.

        Raises:
            NotFoundError: If the customer does not exist
        """
        existing = await self._session.get(CustomerModel, customer.id)
        if existing is None:
            logger.warning(f"Customer not found for update: {customer.id}")
            raise NotFoundError("Customer", customer.id)

        async with savepoint(self._session, "customer", customer.id):
            CustomerMapper.update_persistence(customer, existing)

    async def find(self, customer_id: str) -> Customer:
        model = await self._session.get(CustomerModel, customer_id)
        if model is None:
            raise NotFoundError("Customer", customer_id)
        return CustomerMapper.to_domain(model)

    async def find_all(self) -> List[Customer]:
        result = await self._session.execute(select(CustomerModel))
        return [CustomerMapper.to_domain(model) for model in result.scalars().all()]
