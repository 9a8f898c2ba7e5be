class BookingError(Exception):
    """Base class for booking workflow errors."""


class ValidationError(BookingError):
    """A booking breaks a business rule (empty name, missing date, date out of range)."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class NotFoundError(BookingError):
    """A referenced class or booking does not exist."""

    def __init__(self, entity: str, entity_id, message: str | None = None):
        self.entity = entity
        self.entity_id = entity_id
        self.message = message or f"{entity} not found with ID: {entity_id}"
        super().__init__(self.message)
