"""Integration tests for the customer and product repositories."""
from decimal import Decimal

import pytest

from checkout.domain.entities import Customer, Product
from checkout.domain.exceptions import NotFoundError, PersistenceError
from checkout.domain.value_objects import Address


@pytest.mark.asyncio
async def test_customer_create_and_find(uow_factory, customer1):
    customer1.activate()
    customer1.add_reward_points(10)

    async with uow_factory() as uow:
        await uow.customers.create(customer1)
        await uow.commit()

    async with uow_factory() as uow:
        found = await uow.customers.find("123")

    assert found == customer1
    assert found.address == Address("Street 1", 1, "Zipcode 1", "City 1")


@pytest.mark.asyncio
async def test_customer_update(uow_factory, customer1):
    async with uow_factory() as uow:
        await uow.customers.create(customer1)
        await uow.commit()

    customer1.change_name("Customer Renamed")
    customer1.change_address(Address("Street 9", 9, "Zipcode 9", "City 9"))
    async with uow_factory() as uow:
        await uow.customers.update(customer1)
        await uow.commit()

    async with uow_factory() as uow:
        assert await uow.customers.find("123") == customer1


@pytest.mark.asyncio
async def test_customer_not_found(uow_factory):
    async with uow_factory() as uow:
        with pytest.raises(NotFoundError):
            await uow.customers.find("missing")
        with pytest.raises(NotFoundError):
            await uow.customers.update(Customer(id="missing", name="Nobody"))


@pytest.mark.asyncio
async def test_duplicate_customer_is_rejected(uow_factory, customer1):
    async with uow_factory() as uow:
        await uow.customers.create(customer1)
        await uow.commit()

    with pytest.raises(PersistenceError):
        async with uow_factory() as uow:
            await uow.customers.create(Customer(id="123", name="Other"))


@pytest.mark.asyncio
async def test_find_all_catalog(uow_factory, catalog):
    async with uow_factory() as uow:
        customers = await uow.customers.find_all()
        products = await uow.products.find_all()

    assert {c.id for c in customers} == {"123", "456"}
    assert {p.id: p.price for p in products} == {"123": Decimal("10"), "456": Decimal("50")}


@pytest.mark.asyncio
async def test_product_update_and_not_found(uow_factory, product1):
    async with uow_factory() as uow:
        await uow.products.create(product1)
        await uow.commit()

    product1.change_price(Decimal("12.25"))
    async with uow_factory() as uow:
        await uow.products.update(product1)
        await uow.commit()

    async with uow_factory() as uow:
        assert (await uow.products.find("123")).price == Decimal("12.25")
        with pytest.raises(NotFoundError):
            await uow.products.find("missing")
        with pytest.raises(NotFoundError):
            await uow.products.update(Product(id="missing", name="P", price=Decimal("1")))
