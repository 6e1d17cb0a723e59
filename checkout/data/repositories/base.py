"""Shared write handling for SQLAlchemy repositories."""
from contextlib import asynccontextmanager
from typing import AsyncIterator
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from checkout.domain.exceptions import PersistenceError


logger = logging.getLogger(__name__)


@asynccontextmanager
async def savepoint(session: AsyncSession, entity: str, entity_id: str) -> AsyncIterator[None]:
    """
    Run one aggregate's writes inside a SAVEPOINT and flush them.

    Session changes for the aggregate must be made inside the block.
    On failure only the savepoint is rolled back: work done earlier in
    the same transaction is kept and can still be committed.

    Usage:
        async with savepoint(self._session, "order", order.id):
            self._session.add(order_model)

    Raises:
        PersistenceError: Wrapping the SQLAlchemy error
    """
    try:
        async with session.begin_nested():
            yield
            await session.flush()
    except SQLAlchemyError as e:
        logger.error(f"❌ Failed to persist {entity} {entity_id}: {e}")
        raise PersistenceError(
            f"Failed to persist {entity} {entity_id}", entity_id=entity_id
        ) from e
