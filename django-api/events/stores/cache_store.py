"""Django cache framework implementation of the KeyValueStore."""

from django.core.cache import caches

from events.stores.interfaces import KeyValueStore


class CacheKeyValueStore(KeyValueStore):
    """Key-value store on top of a configured Django cache.

    Values never expire; durability is whatever the cache backend offers
    (file-based and database caches survive restarts, locmem does not).
    """

    def __init__(self, alias: str = "default", key_prefix: str = "event-list") -> None:
        self._cache = caches[alias]
        self._key_prefix = key_prefix

    def _make_key(self, key: str) -> str:
        return f"{self._key_prefix}:{key}"

    def get(self, key: str) -> str | None:
        return self._cache.get(self._make_key(key))

    def set(self, key: str, value: str) -> None:
        self._cache.set(self._make_key(key), value, timeout=None)
