"""
Domain errors.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
"""
from typing import Optional


class DomainError(Exception):
    """Base class for every error raised by the checkout package."""


class ValidationError(DomainError):
    """Raised when an entity or value object is built in an invalid state."""


class NotFoundError(DomainError):
    """Raised when a repository lookup target does not exist."""

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found: {entity_id}")


class PersistenceError(DomainError):
    """
    Raised when the storage layer rejects a write.

    Covers constraint violations (duplicate id, dangling foreign key)
    and driver failures. The original driver exception is kept as
    ``__cause__``.
    """

    def __init__(self, message: str, entity_id: Optional[str] = None):
        self.entity_id = entity_id
        super().__init__(message)
