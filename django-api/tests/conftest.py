"""Pytest configuration and shared fixtures."""

import pytest

from events.services.event_service import EventService
from events.signals import events_changed
from events.stores import EventStore, InMemoryKeyValueStore

FIXED_NOW = 1_767_225_600.0


@pytest.fixture
def storage() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture
def store(storage, clock) -> EventStore:
    return EventStore(storage, clock=clock)


@pytest.fixture
def service(store) -> EventService:
    return EventService(store)


@pytest.fixture
def change_log():
    """Collect (action, count) for every events_changed notification."""
    received = []

    def handler(sender, store, action, **kwargs):
        received.append((action, len(store)))

    events_changed.connect(handler)
    yield received
    events_changed.disconnect(handler)


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()
