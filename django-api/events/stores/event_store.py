"""The event list store.

EventStore owns the canonical, insertion-ordered list of events and mirrors
it to a KeyValueStore after every mutation. Presentation order is not its
concern; see events.services.projection.
"""

import dataclasses
import logging
import time
from collections.abc import Callable, Iterable, Mapping

from events.conf import get_setting
from events.domain import (
    Category,
    DeserializationError,
    Event,
    EventId,
    EventNotFoundError,
    ValidationError,
)
from events.serializers import decode_events, encode_events
from events.signals import events_changed
from events.stores.interfaces import KeyValueStore

logger = logging.getLogger("events.store")


def _missing_required(title: str | None, date: str | None) -> tuple[str, ...]:
    missing = []
    if not title or not title.strip():
        missing.append("title")
    if not date or not date.strip():
        missing.append("date")
    return tuple(missing)


class EventStore:
    """Authoritative in-memory event list with write-through persistence."""

    def __init__(
        self,
        storage: KeyValueStore,
        key: str | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._storage = storage
        self._key = key or get_setting("EVENTS_KEY")
        self._clock = clock
        self._events: list[Event] = self._restore()
        self._last_issued = max((event.id.value for event in self._events), default=0)

    def __len__(self) -> int:
        return len(self._events)

    def __contains__(self, event_id: object) -> bool:
        return self.get(event_id) is not None

    def all(self) -> tuple[Event, ...]:
        """Return all events in insertion order."""
        return tuple(self._events)

    def get(self, event_id: object) -> Event | None:
        """Return an event by ID, or None if not found."""
        for event in self._events:
            if event.id == event_id:
                return event
        return None

    def add(
        self,
        title: str,
        date: str,
        category: str = Category.UNCATEGORIZED.value,
        description: str = "",
    ) -> Event:
        """Create, append and persist a new event.

        Raises:
            ValidationError: If title or date is empty.
        """
        missing = _missing_required(title, date)
        if missing:
            raise ValidationError(missing_fields=missing)

        event = Event(
            id=self._next_id(),
            title=title,
            date=date,
            category=category,
            description=description,
        )
        self._commit([*self._events, event], "add")
        return event

    def add_batch(self, records: Iterable[Mapping[str, str]]) -> list[Event]:
        """Append trusted records in one write. Fields are not validated."""
        created = [
            Event(
                id=self._next_id(),
                title=record.get("title", ""),
                date=record.get("date", ""),
                category=record.get("category", Category.UNCATEGORIZED.value),
                description=record.get("description", ""),
            )
            for record in records
        ]
        if not created:
            return created

        self._commit([*self._events, *created], "add_batch")
        return created

    def update(
        self,
        event_id: EventId,
        title: str,
        date: str,
        category: str = Category.UNCATEGORIZED.value,
        description: str = "",
    ) -> Event:
        """Replace an event's fields, keeping its id and position.

        Raises:
            ValidationError: If title or date is empty.
            EventNotFoundError: If no event has this id.
        """
        missing = _missing_required(title, date)
        if missing:
            raise ValidationError(missing_fields=missing)

        for index, event in enumerate(self._events):
            if event.id == event_id:
                updated = dataclasses.replace(
                    event,
                    title=title,
                    date=date,
                    category=category,
                    description=description,
                )
                events = list(self._events)
                events[index] = updated
                self._commit(events, "update")
                return updated
        raise EventNotFoundError(event_id)

    def remove(self, event_id: EventId) -> bool:
        """Delete an event. Returns False, without writing, if it is absent."""
        remaining = [event for event in self._events if event.id != event_id]
        if len(remaining) == len(self._events):
            return False

        self._commit(remaining, "remove")
        return True

    def clear(self) -> None:
        """Delete every event."""
        self._commit([], "clear")

    def _next_id(self) -> EventId:
        candidate = int(self._clock() * 1000)
        self._last_issued = max(candidate, self._last_issued + 1)
        return EventId(value=self._last_issued)

    def _commit(self, events: list[Event], action: str) -> None:
        # Memory only changes once the write has gone through.
        self._storage.set(self._key, encode_events(events))
        self._events = events
        logger.debug("Persisted %d events under %r after %s", len(self._events), self._key, action)
        events_changed.send(sender=self.__class__, store=self, action=action)

    def _restore(self) -> list[Event]:
        raw = self._storage.get(self._key)
        if not raw:
            return []
        try:
            return decode_events(raw)
        except DeserializationError as exc:
            logger.warning("Ignoring unreadable events under %r: %s", self._key, exc.reason)
            return []
