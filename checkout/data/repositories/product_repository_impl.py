"""SQLAlchemy implementation of ProductRepository."""

from typing import List
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from checkout.domain.entities.product import Product
from checkout.domain.exceptions import NotFoundError, PersistenceError
from checkout.domain.repositories.product_repository import ProductRepository

from ..mappers import ProductMapper
from ..models.product_model import ProductModel
from .base import savepoint


logger = logging.getLogger(__name__)


class SqlAlchemyProductRepository(ProductRepository):
    """Concrete implementation of ProductRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, product: Product) -> None:
        """Insert a product row.

        Raises:
            PersistenceError: If the id is already taken
        """
        logger.info(f"Creating product: {product.id}")

        if await self._session.get(ProductModel, product.id) is not None:
            raise PersistenceError(
                f"Product already exists: {product.id}", entity_id=product.id
            )

        async with savepoint(self._session, "product", product.id):
            self._session.add(ProductMapper.to_persistence(product))

    async def update(self, product: Product) -> None:
        """Overwrite name and price. Existing order items keep their snapshot.

        Raises:
            NotFoundError: If the product does not exist
        """
        existing = await self._session.get(ProductModel, product.id)
        if existing is None:
            logger.warning(f"Product not found for update: {product.id}")
            raise NotFoundError("Product", product.id)

        async with savepoint(self._session, "product", product.id):
            ProductMapper.update_persistence(product, existing)

    async def find(self, product_id: str) -> Product:
        model = await self._session.get(ProductModel, product_id)
        if model is None:
            raise NotFoundError("Product", product_id)
        return ProductMapper.to_domain(model)

    async def find_all(self) -> List[Product]:
        result = await self._session.execute(select(ProductModel))
        return [ProductMapper.to_domain(model) for model in result.scalars().all()]
