"""Domain models representing persisted state.

These are pure domain objects with no input rules.
The Django ORM model in events/models.py only holds raw key-value strings.
"""

from dataclasses import dataclass

from events.domain.value_objects import Category, EventId


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    title: str
    date: str
    category: str = Category.UNCATEGORIZED.value
    description: str = ""
