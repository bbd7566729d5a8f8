"""Domain-specific exceptions — framework-independent."""

from uuid import UUID


class ArticleValidationError(ValueError):
    """Raised when an article payload breaks one of the field rules."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")


class StorageError(Exception):
    """Raised by a news store when an operation cannot be completed."""


class EntityNotFoundError(StorageError):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: UUID | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")
