"""Customer aggregate - referenced by orders through its id."""
from dataclasses import dataclass
from typing import Optional

from ..exceptions import ValidationError
from ..value_objects import Address


@dataclass
class Customer:
    """Customer with an optional address; activation needs an address."""
    id: str
    name: str
    address: Optional[Address] = None
    active: bool = False
    reward_points: int = 0

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        if not self.id:
            raise ValidationError("Customer id is required")
        if not self.name:
            raise ValidationError("Customer name is required")
        if self.active and self.address is None:
            raise ValidationError("Address is mandatory to activate a customer")
        if self.reward_points < 0:
            raise ValidationError("Reward points must not be negative")

    def change_name(self, name: str) -> None:
        if not name:
            raise ValidationError("Customer name is required")
        self.name = name

    def change_address(self, address: Address) -> None:
        self.address = address

    def activate(self) -> None:
        """Business rule: a customer without an address cannot be activated."""
        if self.address is None:
            raise ValidationError("Address is mandatory to activate a customer")
        self.active = True

    def deactivate(self) -> None:
        self.active = False

    def add_reward_points(self, points: int) -> None:
        if points < 0:
            raise ValidationError(f"Reward points must not be negative: {points}")
        self.reward_points += points
