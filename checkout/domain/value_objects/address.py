"""Address value object."""
from dataclasses import dataclass

from ..exceptions import ValidationError


@dataclass(frozen=True)
class Address:
    """
    Immutable postal address of a customer.

    All fields are required; number must be positive.
    """
    street: str
    number: int
    zipcode: str
    city: str

    def __post_init__(self):
        if not self.street:
            raise ValidationError("Street is required")
        if not isinstance(self.number, int) or self.number <= 0:
            raise ValidationError(f"Number must be a positive integer, got: {self.number}")
        if not self.zipcode:
            raise ValidationError("Zipcode is required")
        if not self.city:
            raise ValidationError("City is required")

    def __str__(self) -> str:
        return f"{self.street}, {self.number}, {self.zipcode} {self.city}"
