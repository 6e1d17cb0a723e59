"""Checkout order persistence - Order aggregate mapped onto relational storage."""

__version__ = "0.1.0"
