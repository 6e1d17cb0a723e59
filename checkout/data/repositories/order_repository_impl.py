"""
SQLAlchemy Order Repository Implementation.

Implements OrderRepository interface using SQLAlchemy async sessions.
"""
from typing import List, Optional
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from checkout.domain.entities.order import Order
from checkout.domain.exceptions import NotFoundError, PersistenceError
from checkout.domain.repositories.order_repository import OrderRepository

from ..mappers import OrderMapper
from ..models.order_model import OrderModel
from .base import savepoint


logger = logging.getLogger(__name__)


class SqlAlchemyOrderRepository(OrderRepository):
    """
    SQLAlchemy implementation of OrderRepository.

    Writes are flushed, never committed: the surrounding UnitOfWork owns
    the transaction. Each write runs in its own savepoint, so a rejected
    write leaves no part of the aggregate behind and keeps earlier work
    in the same transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
        """
        self._session = session

    async def create(self, order: Order) -> None:
        """Insert the order row and one row per item.

        Args:
            order: Order domain aggregate

        Raises:
            PersistenceError: Duplicate id or dangling customer/product reference
        """
        logger.info(f"Creating order: {order.id} ({len(order.items)} items)")

        if await self.exists(order.id):
            logger.error(f"Order already exists: {order.id}")
            raise PersistenceError(f"Order already exists: {order.id}", entity_id=order.id)

        order_model = OrderMapper.to_persistence(order)
        async with savepoint(self._session, "order", order.id):
            self._session.add(order_model)

        logger.info(f"✅ Created order: {order.id} (total: {order.total()})")

    async def update(self, order: Order) -> None:
        """Rewrite customer and total, then reconcile item rows.

        Args:
            order: Order domain aggregate carrying the new state

        Raises:
            NotFoundError: If the order does not exist
            PersistenceError: If storage rejects the write
        """
        logger.info(f"Updating order: {order.id}")

        existing = await self._load(order.id)
        if existing is None:
            logger.warning(f"Order not found for update: {order.id}")
            raise NotFoundError("Order", order.id)

        async with savepoint(self._session, "order", order.id):
            changes = OrderMapper.update_persistence(order, existing)

        logger.info(
            f"✅ Updated order: {order.id} "
            f"(inserted: {changes.inserted}, updated: {changes.updated}, "
            f"deleted: {changes.deleted})"
        )

    async def find(self, order_id: str) -> Order:
        """Retrieve order by unique identifier.

        Args:
            order_id: Order identifier

        Returns:
            Order aggregate with items eagerly loaded

        Raises:
            NotFoundError: If no order has this id
        """
        logger.info(f"Getting order: {order_id}")

        order_model = await self._load(order_id)
        if order_model is None:
            logger.info(f"Order not found: {order_id}")
            raise NotFoundError("Order", order_id)

        return OrderMapper.to_domain(order_model)

    async def find_all(self) -> List[Order]:
        """List every stored order in storage order.

        Returns:
            List of Order aggregates
        """
        logger.info("Finding all orders")

        result = await self._session.execute(
            select(OrderModel).options(selectinload(OrderModel.items))
        )
        order_models = result.scalars().all()

        orders = [OrderMapper.to_domain(om) for om in order_models]

        logger.info(f"✅ Found {len(orders)} orders")
        return orders

    async def exists(self, order_id: str) -> bool:
        """Check if order already exists.

        Args:
            order_id: Order identifier

        Returns:
            True if order exists, False otherwise
        """
        result = await self._session.execute(
            select(OrderModel.id).where(OrderModel.id == order_id)
        )
        return result.scalar_one_or_none() is not None

    # =========================================================================
    # PRIVATE METHODS
    # =========================================================================

    async def _load(self, order_id: str) -> Optional[OrderModel]:
        """Fetch the order row with its item rows."""
        result = await self._session.execute(
            select(OrderModel)
            .options(selectinload(OrderModel.items))
            .where(OrderModel.id == order_id)
        )
        return result.scalar_one_or_none()
