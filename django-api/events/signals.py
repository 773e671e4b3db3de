"""Django signals for state-change notifications.

Presentation adapters connect to these to re-render after a change.
"""

import logging

from django.dispatch import Signal, receiver

logger = logging.getLogger("events.signals")

# Sent after every successful event list mutation.
# Arguments: store, action ("add", "add_batch", "update", "remove", "clear").
events_changed = Signal()

# Sent after the theme preference is toggled.
# Arguments: dark.
theme_changed = Signal()


@receiver(events_changed)
def log_events_changed(sender, store, action, **kwargs):
    """Log each event list mutation."""
    logger.debug("Event list changed (%s): %d events", action, len(store))


@receiver(theme_changed)
def log_theme_changed(sender, dark, **kwargs):
    """Log each theme toggle."""
    logger.debug("Theme changed: %s", "dark" if dark else "light")
