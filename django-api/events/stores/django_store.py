"""Django ORM implementation of the KeyValueStore."""

from events.models import StoredValue
from events.stores.interfaces import KeyValueStore


class DjangoKeyValueStore(KeyValueStore):
    """Database-backed key-value store using Django ORM."""

    def get(self, key: str) -> str | None:
        return StoredValue.objects.filter(key=key).values_list("value", flat=True).first()

    def set(self, key: str, value: str) -> None:
        StoredValue.objects.update_or_create(key=key, defaults={"value": value})
