"""Error taxonomy shared by the validator, the store and the API layer."""

from typing import Optional


class PotluckError(Exception):
    """Base class for all domain errors."""

    message = "Unexpected error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)

    @property
    def detail(self) -> str:
        return str(self)


class ValidationError(PotluckError):
    """Caller sent a malformed item. Reported as 400."""


class NameRequired(ValidationError):
    message = "Name is required"


class DishRequired(ValidationError):
    message = "Dish is required"


class InvalidSection(ValidationError):
    message = "Section must be one of appetizers, entree, dessert, beverages"


class NotFound(PotluckError):
    """Caller referenced an id the store does not hold. Reported as 404."""

    message = "Not found"


class PersistenceError(PotluckError):
    """Durable backend read or write failed. Reported as 500."""

    message = "Persistence failure"
