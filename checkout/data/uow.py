"""Unit of Work pattern for atomic transactions."""

from typing import Optional
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from checkout.domain.exceptions import PersistenceError

from .repositories.customer_repository_impl import SqlAlchemyCustomerRepository
from .repositories.order_repository_impl import SqlAlchemyOrderRepository
from .repositories.product_repository_impl import SqlAlchemyProductRepository


logger = logging.getLogger(__name__)


class UnitOfWork:
    """
    Unit of Work pattern for atomic transactions.

    Responsibilities:
    1. Manage SQLAlchemy session lifecycle
    2. Atomic commit/rollback of all repository operations
    3. Lazy initialization of repositories

    Usage:
        async with create_uow(session_factory) as uow:
            await uow.orders.create(order)
            await uow.commit()
    """

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """Initialize Unit of Work.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None

        # Lazy-loaded repositories
        self._order_repository: Optional[SqlAlchemyOrderRepository] = None
        self._customer_repository: Optional[SqlAlchemyCustomerRepository] = None
        self._product_repository: Optional[SqlAlchemyProductRepository] = None

    async def __aenter__(self) -> "UnitOfWork":
        """Start transaction scope."""
        self._session = self._session_factory()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Rollback on exception, then close the session."""
        if exc_type is not None:
            logger.error(f"Transaction failed: {exc_val}")
            await self._session.rollback()
        await self._session.close()
        self._session = None
        self._order_repository = None
        self._customer_repository = None
        self._product_repository = None

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        return self._session

    @property
    def orders(self) -> SqlAlchemyOrderRepository:
        """Lazy-load order repository.

        Returns:
            SqlAlchemyOrderRepository instance
        """
        if self._order_repository is None:
            self._order_repository = SqlAlchemyOrderRepository(self.session)
        return self._order_repository

    @property
    def customers(self) -> SqlAlchemyCustomerRepository:
        """Lazy-load customer repository."""
        if self._customer_repository is None:
            self._customer_repository = SqlAlchemyCustomerRepository(self.session)
        return self._customer_repository

    @property
    def products(self) -> SqlAlchemyProductRepository:
        """Lazy-load product repository."""
        if self._product_repository is None:
            self._product_repository = SqlAlchemyProductRepository(self.session)
        return self._product_repository

    async def commit(self) -> None:
        """Commit all pending changes.

        Raises:
            PersistenceError: If the database rejects the commit
        """
        try:
            await self.session.commit()
            logger.info("✅ Transaction committed")
        except SQLAlchemyError as e:
            logger.error(f"❌ Commit failed: {e}")
            await self.rollback()
            raise PersistenceError("Commit failed") from e

    async def rollback(self) -> None:
        """Rollback all pending changes."""
        await self.session.rollback()
        logger.warning("Transaction rolled back")


def create_uow(session_factory: async_sessionmaker) -> UnitOfWork:
    """Create a new Unit of Work instance.

    Args:
        session_factory: SQLAlchemy async session factory

    Returns:
        UnitOfWork instance
    """
    return UnitOfWork(session_factory)
