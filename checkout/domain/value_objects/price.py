"""Price rules shared by products and order items."""
from decimal import Decimal, InvalidOperation

from ..exceptions import ValidationError


# Prices are stored as Numeric(10, 2)
PRICE_PLACES = 2
PRICE_DIGITS = 10
MAX_PRICE = Decimal(10) ** (PRICE_DIGITS - PRICE_PLACES)


def to_price(value, label: str = "Price") -> Decimal:
    """
    Coerce a value to Decimal and check it is a storable price.

    Raises:
        ValidationError: If the value is not a finite number, is
            negative, has more than two decimal places or does not
            fit in ten digits
    """
    try:
        price = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        raise ValidationError(f"{label} must be a number: {value!r}")

    if not price.is_finite():
        raise ValidationError(f"{label} must be a finite number: {price}")
    if price < 0:
        raise ValidationError(f"{label} must not be negative: {price}")
    if price >= MAX_PRICE:
        raise ValidationError(f"{label} must be below {MAX_PRICE}: {price}")
    if price != price.quantize(Decimal(1).scaleb(-PRICE_PLACES)):
        raise ValidationError(
            f"{label} must have at most {PRICE_PLACES} decimal places: {price}"
        )
    return price
