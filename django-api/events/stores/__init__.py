from events.stores.event_store import EventStore
from events.stores.interfaces import KeyValueStore
from events.stores.memory import InMemoryKeyValueStore

__all__ = [
    "EventStore",
    "KeyValueStore",
    "InMemoryKeyValueStore",
]
