"""Dark/light display preference, persisted independently of events."""

import logging
from typing import Self

from events.conf import get_setting
from events.signals import theme_changed
from events.stores.factory import get_key_value_store
from events.stores.interfaces import KeyValueStore

logger = logging.getLogger("events.theme")

DARK = "1"
LIGHT = "0"


class ThemePreference:
    """Boolean dark-theme flag, read once at startup and written on toggle."""

    def __init__(self, storage: KeyValueStore, key: str | None = None) -> None:
        self._storage = storage
        self._key = key or get_setting("THEME_KEY")
        self._dark = self._storage.get(self._key) == DARK

    @classmethod
    def from_settings(cls, storage: KeyValueStore | None = None) -> Self:
        return cls(storage or get_key_value_store())

    def get(self) -> bool:
        return self._dark

    def toggle(self) -> bool:
        self._dark = not self._dark
        self._storage.set(self._key, DARK if self._dark else LIGHT)
        logger.info("Theme set to %s", "dark" if self._dark else "light")
        theme_changed.send(sender=self.__class__, dark=self._dark)
        return self._dark

    @property
    def toggle_label(self) -> str:
        """Text for the control that switches to the other theme."""
        return "Light Theme" if self._dark else "Dark Theme"
