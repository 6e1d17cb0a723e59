"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List

from ..exceptions import ValidationError
from ..value_objects.price import to_price


@dataclass
class OrderItem:
    """
    Individual line item within an order.

    ``name`` and ``price`` are a snapshot of the product taken when the
    order was placed; later product changes never reach an existing item.
    """
    id: str
    name: str
    price: Decimal
    product_id: str
    quantity: int

    def __post_init__(self):
        self.price = to_price(self.price, "Item price")
        self.validate()

    def validate(self) -> None:
        """Check item invariants."""
        if not self.id:
            raise ValidationError("Item id is required")
        if not self.name:
            raise ValidationError("Item name is required")
        if not self.product_id:
            raise ValidationError("Product id is required")
        to_price(self.price, "Item price")
        if (
            isinstance(self.quantity, bool)
            or not isinstance(self.quantity, int)
            or self.quantity <= 0
        ):
            raise ValidationError(
                f"Item quantity must be a positive integer: {self.quantity}"
            )

    def total(self) -> Decimal:
        """Price times quantity."""
        return self.price * self.quantity


@dataclass(eq=False)
class Order:
    """
    Order aggregate root.

    Owns its items exclusively. The total is never stored on the
    aggregate, it is derived from the current items on every call.
    Two orders are equal when id, customer and the item set match;
    item collection order is irrelevant.
    """
    id: str
    customer_id: str
    items: List[OrderItem] = field(default_factory=list)

    def __post_init__(self):
        self.items = list(self.items)
        self.validate()

    def validate(self) -> None:
        """
        Check aggregate invariants.

        Raises:
            ValidationError: If id or customer is missing, items are
                empty, or two items share an id
        """
        if not self.id:
            raise ValidationError("Order id is required")
        if not self.customer_id:
            raise ValidationError("Customer id is required")
        if not self.items:
            raise ValidationError("Order must have at least one item")

        item_ids = [item.id for item in self.items]
        if len(set(item_ids)) != len(item_ids):
            raise ValidationError(f"Duplicate item ids in order {self.id}: {item_ids}")

    def total(self) -> Decimal:
        """Sum of price x quantity across items."""
        return sum((item.total() for item in self.items), Decimal("0"))

    def add_item(self, item: OrderItem) -> None:
        """Append an item; its id must not already be in the order."""
        if any(existing.id == item.id for existing in self.items):
            raise ValidationError(f"Item {item.id} already in order {self.id}")
        self.items.append(item)

    def remove_item(self, item_id: str) -> OrderItem:
        """
        Remove an item by id.

        Returns:
            The removed item

        Raises:
            ValidationError: If the item is unknown or is the last one
        """
        for index, item in enumerate(self.items):
            if item.id == item_id:
                if len(self.items) == 1:
                    raise ValidationError("Order must have at least one item")
                return self.items.pop(index)
        raise ValidationError(f"Item {item_id} not in order {self.id}")

    def change_customer_id(self, customer_id: str) -> None:
        if not customer_id:
            raise ValidationError("Customer id is required")
        self.customer_id = customer_id

    def items_by_id(self) -> Dict[str, OrderItem]:
        return {item.id: item for item in self.items}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Order):
            return NotImplemented
        return (
            self.id == other.id
            and self.customer_id == other.customer_id
            and self.items_by_id() == other.items_by_id()
        )

    def __repr__(self) -> str:
        return (
            f"Order(id={self.id!r}, customer_id={self.customer_id!r}, "
            f"items={self.items!r}, total={self.total()})"
        )
