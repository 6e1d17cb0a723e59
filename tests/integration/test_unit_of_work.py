"""Integration tests for UnitOfWork transaction handling."""
from decimal import Decimal

import pytest

from checkout.data.uow import UnitOfWork
from checkout.domain.entities import Customer, Order, OrderItem
from checkout.domain.exceptions import NotFoundError, PersistenceError


def order(order_id="1") -> Order:
    return Order(
        id=order_id,
        customer_id="123",
        items=[OrderItem(id="1", name="Product 1", price=Decimal("10"), product_id="123", quantity=1)],
    )


@pytest.mark.asyncio
async def test_uncommitted_work_is_discarded(uow_factory, catalog):
    async with uow_factory() as uow:
        await uow.orders.create(order())
        # no commit

    async with uow_factory() as uow:
        with pytest.raises(NotFoundError):
            await uow.orders.find("1")


@pytest.mark.asyncio
async def test_exception_inside_scope_rolls_back(uow_factory, catalog):
    with pytest.raises(RuntimeError):
        async with uow_factory() as uow:
            await uow.orders.create(order())
            raise RuntimeError("boom")

    async with uow_factory() as uow:
        assert await uow.orders.exists("1") is False


@pytest.mark.asyncio
async def test_several_orders_commit_together(uow_factory, catalog):
    async with uow_factory() as uow:
        await uow.orders.create(order("1"))
        await uow.orders.create(order("2"))
        await uow.commit()

    async with uow_factory() as uow:
        assert {o.id for o in await uow.orders.find_all()} == {"1", "2"}


@pytest.mark.asyncio
async def test_repositories_are_lazy_and_shared(uow_factory):
    async with uow_factory() as uow:
        assert uow.orders is uow.orders
        assert uow.customers is uow.customers
        assert uow.products is uow.products


@pytest.mark.asyncio
async def test_repository_access_outside_scope_raises(test_session_factory):
    uow = UnitOfWork(test_session_factory)
    with pytest.raises(RuntimeError, match="not initialized"):
        uow.orders


@pytest.mark.asyncio
async def test_failed_write_keeps_earlier_work_in_same_scope(uow_factory, catalog):
    dangling = Order(
        id="2",
        customer_id="123",
        items=[OrderItem(id="1", name="Ghost", price=Decimal("1"), product_id="nope", quantity=1)],
    )

    async with uow_factory() as uow:
        await uow.customers.create(Customer(id="999", name="Customer 999"))
        await uow.orders.create(order("1"))
        with pytest.raises(PersistenceError):
            await uow.orders.create(dangling)
        await uow.commit()

    async with uow_factory() as uow:
        assert {c.id for c in await uow.customers.find_all()} == {"123", "456", "999"}
        assert await uow.orders.find("1") == order("1")
        assert await uow.orders.exists("2") is False
