"""Static mappers for domain entities ↔ database models."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

from checkout.domain.entities import Customer, Order, OrderItem, Product
from checkout.domain.value_objects import Address

from .models import CustomerModel, OrderItemModel, OrderModel, ProductModel


@dataclass
class ItemReconciliation:
    """Item ids touched while syncing an order's item rows."""
    inserted: List[str] = field(default_factory=list)
    updated: List[str] = field(default_factory=list)
    deleted: List[str] = field(default_factory=list)


class OrderItemMapper:
    """Static mapper for OrderItem ↔ OrderItemModel transformation."""

    @staticmethod
    def to_domain(model: OrderItemModel) -> OrderItem:
        """Convert ORM model to domain entity.

        Args:
            model: OrderItemModel instance

        Returns:
            OrderItem domain entity
        """
        return OrderItem(
            id=model.id,
            name=model.name,
            price=Decimal(str(model.price)),
            product_id=model.product_id,
            quantity=model.quantity,
        )

    @staticmethod
    def to_persistence(entity: OrderItem, order_id: str) -> OrderItemModel:
        """Convert domain entity to ORM model.

        Args:
            entity: OrderItem domain entity
            order_id: Owning order id

        Returns:
            OrderItemModel instance
        """
        return OrderItemModel(
            id=entity.id,
            order_id=order_id,
            product_id=entity.product_id,
            name=entity.name,
            price=entity.price,
            quantity=entity.quantity,
        )

    @staticmethod
    def update_persistence(entity: OrderItem, model: OrderItemModel) -> OrderItemModel:
        """Copy the mutable item fields onto an existing row."""
        model.product_id = entity.product_id
        model.name = entity.name
        model.price = entity.price
        model.quantity = entity.quantity
        return model


class OrderMapper:
    """Static mapper for Order ↔ OrderModel transformation with nested items."""

    @staticmethod
    def to_domain(model: OrderModel) -> Order:
        """Convert ORM model to domain aggregate (with nested items).

        The ``items`` relationship must already be loaded.

        Args:
            model: OrderModel instance

        Returns:
            Order domain aggregate
        """
        items = [OrderItemMapper.to_domain(item_model) for item_model in model.items]

        return Order(
            id=model.id,
            customer_id=model.customer_id,
            items=items,
        )

    @staticmethod
    def to_persistence(entity: Order) -> OrderModel:
        """Convert domain aggregate to ORM model (with nested items).

        Args:
            entity: Order domain aggregate

        Returns:
            OrderModel instance
        """
        order_model = OrderModel(
            id=entity.id,
            customer_id=entity.customer_id,
            total=entity.total(),
        )

        order_model.items = [
            OrderItemMapper.to_persistence(item, entity.id)
            for item in entity.items
        ]

        return order_model

    @staticmethod
    def update_persistence(entity: Order, model: OrderModel) -> ItemReconciliation:
        """Update existing ORM model from domain entity.

        Rewrites customer and total, then diffs item rows against the
        aggregate's items keyed by item id: new ids are inserted, ids
        no longer present are dropped from the relationship (the
        delete-orphan cascade removes the rows), shared ids get their
        fields refreshed.

        Args:
            entity: Order domain aggregate
            model: Existing OrderModel instance with ``items`` loaded

        Returns:
            ItemReconciliation listing inserted, updated and deleted ids
        """
        model.customer_id = entity.customer_id
        model.total = entity.total()

        wanted = entity.items_by_id()
        stored = {item_model.id: item_model for item_model in model.items}
        changes = ItemReconciliation()

        for item_id, item_model in stored.items():
            if item_id not in wanted:
                model.items.remove(item_model)
                changes.deleted.append(item_id)

        for item_id, item in wanted.items():
            existing: Optional[OrderItemModel] = stored.get(item_id)
            if existing is None:
                model.items.append(OrderItemMapper.to_persistence(item, entity.id))
                changes.inserted.append(item_id)
            else:
                OrderItemMapper.update_persistence(item, existing)
                changes.updated.append(item_id)

        return changes


class CustomerMapper:
    """Static mapper for Customer ↔ CustomerModel transformation."""

    @staticmethod
    def to_domain(model: CustomerModel) -> Customer:
        address = None
        if model.street is not None:
            address = Address(
                street=model.street,
                number=model.number,
                zipcode=model.zipcode,
                city=model.city,
            )

        return Customer(
            id=model.id,
            name=model.name,
            address=address,
            active=model.active,
            reward_points=model.reward_points,
        )

    @staticmethod
    def to_persistence(entity: Customer) -> CustomerModel:
        model = CustomerModel(id=entity.id)
        return CustomerMapper.update_persistence(entity, model)

    @staticmethod
    def update_persistence(entity: Customer, model: CustomerModel) -> CustomerModel:
        address = entity.address
        model.name = entity.name
        model.street = address.street if address else None
        model.number = address.number if address else None
        model.zipcode = address.zipcode if address else None
        model.city = address.city if address else None
        model.active = entity.active
        model.reward_points = entity.reward_points
        return model


class ProductMapper:
    """Static mapper for Product ↔ ProductModel transformation."""

    @staticmethod
    def to_domain(model: ProductModel) -> Product:
        return Product(
            id=model.id,
            name=model.name,
            price=Decimal(str(model.price)),
        )

    @staticmethod
    def to_persistence(entity: Product) -> ProductModel:
        return ProductModel(id=entity.id, name=entity.name, price=entity.price)

    @staticmethod
    def update_persistence(entity: Product, model: ProductModel) -> ProductModel:
        model.name = entity.name
        model.price = entity.price
        return model
