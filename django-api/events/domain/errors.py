"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"
    CORRUPT_STORAGE = "CORRUPT_STORAGE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Raised when a required field is empty on add or update."""

    def __init__(self, missing_fields: tuple[str, ...]) -> None:
        super().__init__(
            code=ErrorCode.MISSING_REQUIRED_FIELD,
            message="Please fill required fields!",
        )
        self.missing_fields = missing_fields


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: object) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class DeserializationError(DomainError):
    """Raised when persisted event data cannot be decoded."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            code=ErrorCode.CORRUPT_STORAGE,
            message="Stored events could not be read",
        )
        self.reason = reason
