from events.domain.errors import (
    DeserializationError,
    DomainError,
    ErrorCode,
    EventNotFoundError,
    InvalidEventIdError,
    ValidationError,
)
from events.domain.models import Event
from events.domain.value_objects import (
    ALL_CATEGORIES,
    Category,
    EventId,
    SortOrder,
    parse_event_date,
)

__all__ = [
    "Event",
    "EventId",
    "Category",
    "SortOrder",
    "ALL_CATEGORIES",
    "parse_event_date",
    "DomainError",
    "ErrorCode",
    "ValidationError",
    "EventNotFoundError",
    "InvalidEventIdError",
    "DeserializationError",
]
