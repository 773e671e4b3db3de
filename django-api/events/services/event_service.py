"""Event service - all business logic lives here.

Services:
- Depend only on stores
- Validate domain invariants
- Own the edit session (at most one event being edited)
- Return domain models or domain errors
"""

import logging
from dataclasses import dataclass
from typing import Self

from events.domain import Category, Event, EventId, EventNotFoundError, InvalidEventIdError
from events.services.projection import EventView, ViewQuery, build_view
from events.services.samples import SAMPLE_EVENTS
from events.stores.event_store import EventStore
from events.stores.factory import get_key_value_store
from events.stores.interfaces import KeyValueStore

logger = logging.getLogger("events.service")


@dataclass
class EventForm:
    """Values of the event input fields."""

    title: str = ""
    date: str = ""
    category: str = Category.UNCATEGORIZED.value
    description: str = ""

    @classmethod
    def blank(cls) -> Self:
        return cls()

    @classmethod
    def from_event(cls, event: Event) -> Self:
        return cls(
            title=event.title,
            date=event.date,
            category=event.category,
            description=event.description,
        )


class EventService:
    """Service for event list operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store
        self._editing_id: EventId | None = None

    @classmethod
    def from_settings(cls, storage: KeyValueStore | None = None) -> Self:
        """Build a service over the configured key-value store."""
        return cls(EventStore(storage or get_key_value_store()))

    @property
    def editing_id(self) -> EventId | None:
        return self._editing_id

    @property
    def is_editing(self) -> bool:
        return self._editing_id is not None

    def submit(self, form: EventForm) -> Event:
        """Save the form as a new event, or over the event being edited.

        Raises:
            ValidationError: If title or date is empty. An open edit
                session stays open.
            EventNotFoundError: If the edited event no longer exists.
        """
        title = (form.title or "").strip()
        description = (form.description or "").strip()

        if self._editing_id is None:
            return self._store.add(title, form.date, form.category, description)

        event = self._store.update(self._editing_id, title, form.date, form.category, description)
        self._editing_id = None
        return event

    def start_edit(self, event_id: EventId | str) -> EventForm:
        """Open an edit session and return the form populated from the event.

        Raises:
            InvalidEventIdError: If the event_id is malformed.
            EventNotFoundError: If the event does not exist.
        """
        event_id = self._parse_id(event_id)
        event = self._store.get(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        self._editing_id = event_id
        return EventForm.from_event(event)

    def cancel_edit(self) -> EventForm:
        self._editing_id = None
        return EventForm.blank()

    def delete(self, event_id: EventId | str) -> bool:
        """Delete an event. Deleting an unknown id is a no-op.

        Raises:
            InvalidEventIdError: If the event_id is malformed.
        """
        event_id = self._parse_id(event_id)
        removed = self._store.remove(event_id)
        if removed and self._editing_id == event_id:
            self._editing_id = None
        return removed

    def clear_all(self) -> None:
        self._store.clear()
        self._editing_id = None

    def load_sample_events(self) -> list[Event]:
        events = self._store.add_batch(SAMPLE_EVENTS)
        logger.info("Loaded %d sample events", len(events))
        return events

    def event_count(self) -> int:
        return len(self._store)

    def view(self, view_query: ViewQuery | None = None) -> EventView:
        return build_view(self._store.all(), view_query)

    @staticmethod
    def _parse_id(event_id: EventId | str | int) -> EventId:
        if isinstance(event_id, EventId):
            return event_id
        try:
            return EventId.from_string(str(event_id))
        except ValueError as exc:
            raise InvalidEventIdError() from exc
