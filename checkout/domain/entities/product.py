"""Product aggregate - source of the name/price snapshot copied into order items."""
from dataclasses import dataclass
from decimal import Decimal

from ..exceptions import ValidationError
from ..value_objects.price import to_price


@dataclass
class Product:
    id: str
    name: str
    price: Decimal

    def __post_init__(self):
        self.price = to_price(self.price, "Product price")
        self.validate()

    def validate(self) -> None:
        if not self.id:
            raise ValidationError("Product id is required")
        if not self.name:
            raise ValidationError("Product name is required")
        to_price(self.price, "Product price")

    def change_name(self, name: str) -> None:
        if not name:
            raise ValidationError("Product name is required")
        self.name = name

    def change_price(self, price: Decimal) -> None:
        self.price = to_price(price, "Product price")
