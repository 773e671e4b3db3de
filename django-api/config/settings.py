"""
Event List - Django Settings
============================
Django is the container: it provides the ORM-backed key-value store,
the cache framework, signals and logging configuration.
"""

import os
from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Security ──────────────────────────────────────────────────
SECRET_KEY = os.environ.get("EVENT_LIST_SECRET_KEY", "event-list-dev-key")

DEBUG = os.environ.get("EVENT_LIST_DEBUG", "1") == "1"

ALLOWED_HOSTS = []

# ── Installed Apps ────────────────────────────────────────────
INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "rest_framework",
    "events",
]

# ── Database ──────────────────────────────────────────────────
# The StoredValue table is the durable key-value store.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("EVENT_LIST_DB", BASE_DIR / "db.sqlite3"),
    }
}

# ── Cache ─────────────────────────────────────────────────────
CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "event-list",
    }
}

# ── Event list ────────────────────────────────────────────────
EVENT_LIST = {
    "EVENTS_KEY": "events",
    "THEME_KEY": "theme-dark",
    # Any KeyValueStore subclass, e.g. events.stores.cache_store.CacheKeyValueStore
    "STORAGE": os.environ.get(
        "EVENT_LIST_STORAGE", "events.stores.django_store.DjangoKeyValueStore"
    ),
    "STORAGE_OPTIONS": {},
}

# ── Logging ───────────────────────────────────────────────────
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "events": {
            "handlers": ["console"],
            "level": os.environ.get("EVENT_LIST_LOG_LEVEL", "INFO"),
        },
    },
}

# ── Internationalization ──────────────────────────────────────
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
