"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Self

ALL_CATEGORIES = "all"


@dataclass(frozen=True, order=True)
class EventId:
    """Unique identifier for an Event."""

    value: int

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=int(value.strip()))

    def __str__(self) -> str:
        return str(self.value)


class Category(Enum):
    """Known event categories."""

    ENTERTAINMENT = "Entertainment"
    NETWORKING = "Networking"
    WORKSHOP = "Workshop"
    CONFERENCE = "Conference"
    UNCATEGORIZED = "uncategorized"


class SortOrder(Enum):
    """Presentation order of the event list by date."""

    ASCENDING = "date-asc"
    DESCENDING = "date-desc"

    @classmethod
    def from_string(cls, value: str | None) -> Self:
        if value == cls.ASCENDING.value:
            return cls.ASCENDING
        return cls.DESCENDING


def parse_event_date(value: str | None) -> date | None:
    """Parse an ISO-8601 date (or the date part of a datetime).

    Returns None for anything that is not a calendar date.
    """
    if not value:
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None
