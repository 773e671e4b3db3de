"""Builds the configured KeyValueStore from settings."""

from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from events.conf import get_setting
from events.stores.interfaces import KeyValueStore


def get_key_value_store(backend: str | None = None, **options) -> KeyValueStore:
    """Instantiate a KeyValueStore by dotted path.

    Defaults to ``EVENT_LIST["STORAGE"]`` with ``EVENT_LIST["STORAGE_OPTIONS"]``
    as constructor arguments.
    """
    if backend is None:
        backend = get_setting("STORAGE")
        options = {**get_setting("STORAGE_OPTIONS"), **options}
    try:
        backend_cls = import_string(backend)
    except ImportError as exc:
        raise ImproperlyConfigured(f"Could not import key-value store {backend!r}: {exc}") from exc
    if not (isinstance(backend_cls, type) and issubclass(backend_cls, KeyValueStore)):
        raise ImproperlyConfigured(f"{backend!r} is not a KeyValueStore")
    return backend_cls(**options)
