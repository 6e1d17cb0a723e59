"""Domain value objects - pure Python immutable types."""

from .address import Address
from .price import MAX_PRICE, PRICE_PLACES, to_price

__all__ = ["Address", "MAX_PRICE", "PRICE_PLACES", "to_price"]
