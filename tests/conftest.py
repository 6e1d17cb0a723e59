"""Pytest configuration and shared fixtures."""

from decimal import Decimal

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from checkout.data.models import Base
from checkout.data.uow import UnitOfWork, create_uow
from checkout.domain.entities import Customer, Product
from checkout.domain.value_objects import Address
from checkout.infrastructure.database import DatabaseSettings, create_engine


# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create test database engine with foreign keys enforced."""
    engine = create_engine(
        DatabaseSettings(database_url=TEST_DATABASE_URL),
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine):
    """Create test session factory."""
    session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )
    yield session_factory


@pytest.fixture
def uow_factory(test_session_factory):
    """Build a fresh UnitOfWork per call, each with its own session."""

    def factory() -> UnitOfWork:
        return create_uow(test_session_factory)

    return factory


@pytest.fixture
def customer1() -> Customer:
    customer = Customer(id="123", name="Customer 1")
    customer.change_address(Address("Street 1", 1, "Zipcode 1", "City 1"))
    return customer


@pytest.fixture
def customer2() -> Customer:
    customer = Customer(id="456", name="Customer 2")
    customer.change_address(Address("Street 2", 2, "Zipcode 2", "City 2"))
    return customer


@pytest.fixture
def product1() -> Product:
    return Product(id="123", name="Product 1", price=Decimal("10"))


@pytest.fixture
def product2() -> Product:
    return Product(id="456", name="Product 2", price=Decimal("50"))


@pytest_asyncio.fixture
async def catalog(uow_factory, customer1, customer2, product1, product2):
    """Store the customers and products orders refer to."""
    async with uow_factory() as uow:
        await uow.customers.create(customer1)
        await uow.customers.create(customer2)
        await uow.products.create(product1)
        await uow.products.create(product2)
        await uow.commit()
    return {
        "customers": [customer1, customer2],
        "products": [product1, product2],
    }
