"""Tests for the KeyValueStore backends.

Run with: pytest tests/test_key_value_stores.py -v
"""

import pytest
from django.core.exceptions import ImproperlyConfigured

from events.models import StoredValue
from events.services.event_service import EventService
from events.services.theme import ThemePreference
from events.stores import EventStore, InMemoryKeyValueStore
from events.stores.cache_store import CacheKeyValueStore
from events.stores.django_store import DjangoKeyValueStore
from events.stores.factory import get_key_value_store


class TestInMemoryKeyValueStore:
    """Tests for the in-memory backend."""

    def test_get_missing(self):
        assert InMemoryKeyValueStore().get("events") is None

    def test_set_replaces(self):
        storage = InMemoryKeyValueStore()
        storage.set("events", "[]")
        storage.set("events", "[1]")
        assert storage.get("events") == "[1]"

    def test_initial_values_are_copied(self):
        initial = {"theme-dark": "1"}
        storage = InMemoryKeyValueStore(initial)
        storage.set("theme-dark", "0")
        assert initial == {"theme-dark": "1"}


@pytest.mark.django_db
class TestDjangoKeyValueStore:
    """Tests for the ORM-backed backend."""

    def test_get_missing(self):
        assert DjangoKeyValueStore().get("events") is None

    def test_set_creates_then_updates_one_row(self):
        storage = DjangoKeyValueStore()
        storage.set("events", "[]")
        storage.set("events", "[{}]")
        assert storage.get("events") == "[{}]"
        assert StoredValue.objects.count() == 1

    def test_event_store_round_trip(self):
        """Events written through the ORM are visible to a new store."""
        store = EventStore(DjangoKeyValueStore())
        store.add("Database Day", "2026-08-08", "Conference", "Tables")
        assert EventStore(DjangoKeyValueStore()).all() == store.all()

    def test_theme_and_events_use_separate_rows(self):
        storage = DjangoKeyValueStore()
        EventStore(storage).add("Both", "2026-01-01")
        ThemePreference(storage).toggle()
        assert set(StoredValue.objects.values_list("key", flat=True)) == {"events", "theme-dark"}


class TestCacheKeyValueStore:
    """Tests for the cache-backed backend."""

    def test_get_missing(self):
        assert CacheKeyValueStore().get("events") is None

    def test_keys_are_prefixed(self):
        from django.core.cache import cache

        CacheKeyValueStore(key_prefix="tests").set("theme-dark", "1")
        assert cache.get("tests:theme-dark") == "1"

    def test_event_store_round_trip(self):
        store = EventStore(CacheKeyValueStore())
        store.add("Cached", "2026-02-02")
        assert EventStore(CacheKeyValueStore()).all() == store.all()


class TestGetKeyValueStore:
    """Tests for building the configured backend."""

    def test_default_is_database(self):
        assert isinstance(get_key_value_store(), DjangoKeyValueStore)

    def test_setting_selects_backend_with_options(self, settings):
        settings.EVENT_LIST = {
            "STORAGE": "events.stores.cache_store.CacheKeyValueStore",
            "STORAGE_OPTIONS": {"key_prefix": "configured"},
        }
        storage = get_key_value_store()
        assert isinstance(storage, CacheKeyValueStore)
        storage.set("events", "[]")

        from django.core.cache import cache

        assert cache.get("configured:events") == "[]"

    def test_explicit_backend(self):
        storage = get_key_value_store("events.stores.memory.InMemoryKeyValueStore")
        assert isinstance(storage, InMemoryKeyValueStore)

    @pytest.mark.parametrize("backend", ["events.stores.nowhere.Store", "events.models.StoredValue"])
    def test_bad_backend(self, backend):
        with pytest.raises(ImproperlyConfigured):
            get_key_value_store(backend)

    @pytest.mark.django_db
    def test_services_from_settings_share_durable_storage(self):
        """Events and theme written by one session are read by the next."""
        service = EventService.from_settings()
        service.load_sample_events()
        ThemePreference.from_settings().toggle()

        assert EventService.from_settings().event_count() == 4
        assert ThemePreference.from_settings().get() is True
