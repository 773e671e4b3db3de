"""Settings lookup for the events app.

Values come from the ``EVENT_LIST`` dict in Django settings, falling back
to the defaults below for any key that is not set.
"""

from django.conf import settings

DEFAULTS = {
    "EVENTS_KEY": "events",
    "THEME_KEY": "theme-dark",
    "STORAGE": "events.stores.django_store.DjangoKeyValueStore",
    "STORAGE_OPTIONS": {},
}


def get_setting(name: str):
    overrides = getattr(settings, "EVENT_LIST", None) or {}
    return overrides.get(name, DEFAULTS[name])
