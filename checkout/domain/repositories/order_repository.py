"""Repository interfaces for Order aggregate."""

from abc import ABC, abstractmethod
from typing import List

from ..entities.order import Order


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence."""

    @abstractmethod
    async def create(self, order: Order) -> None:
        """Persist a new order with all of its items.

        Args:
            order: Order aggregate to persist

        Raises:
            PersistenceError: On duplicate id or unknown customer/product
        """
        pass

    @abstractmethod
    async def update(self, order: Order) -> None:
        """Rewrite an existing order and reconcile its items.

        Args:
            order: Order aggregate carrying the new state

        Raises:
            NotFoundError: If the order does not exist
            PersistenceError: If storage rejects the write
        """
        pass

    @abstractmethod
    async def find(self, order_id: str) -> Order:
        """Retrieve order by unique identifier.

        Args:
            order_id: Order identifier

        Returns:
            Rebuilt Order aggregate

        Raises:
            NotFoundError: If no order has this id
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Order]:
        """List every stored order.

        Returns:
            List of Order aggregates, empty when nothing is stored
        """
        pass

    @abstractmethod
    async def exists(self, order_id: str) -> bool:
        """Check if order already exists.

        Args:
            order_id: Order identifier

        Returns:
            True if order exists, False otherwise
        """
        pass
