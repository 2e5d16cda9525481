from django.conf import settings
from django.contrib.sessions.backends.base import SessionBase
from django.core.exceptions import ImproperlyConfigured
from django.http import HttpRequest

from core.store import KeyValueStore
from core.tracker import CorrelationTracker
from samples.orm.stored_value_orm import (
    delete_stored_value,
    get_stored_value,
    set_stored_value,
)

SESSION_KEY_PREFIX = "tracker."


class SessionKeyValueStore:
    """Keeps entries in the Django session, scoped to one browser."""

    def __init__(self, session: SessionBase):
        self.session = session

    def get(self, key: str) -> str | None:
        return self.session.get(SESSION_KEY_PREFIX + key)

    def set(self, key: str, value: str) -> None:
        self.session[SESSION_KEY_PREFIX + key] = value

    def delete(self, key: str) -> None:
        self.session.pop(SESSION_KEY_PREFIX + key, None)


class DatabaseKeyValueStore:
    """Keeps entries as StoredValue rows under one namespace."""

    def __init__(self, namespace: str):
        self.namespace = namespace

    def get(self, key: str) -> str | None:
        return get_stored_value(self.namespace, key)

    def set(self, key: str, value: str) -> None:
        set_stored_value(self.namespace, key, value)

    def delete(self, key: str) -> None:
        delete_stored_value(self.namespace, key)


def get_store(request: HttpRequest) -> KeyValueStore:
    backend = settings.SAMPLE_STORE_BACKEND
    if backend == "session":
        return SessionKeyValueStore(request.session)

    if backend == "database":
        # Anonymous browsers only get a session key once the session is saved
        if request.session.session_key is None:
            request.session.create()
        return DatabaseKeyValueStore(request.session.session_key)

    raise ImproperlyConfigured(f"Unknown SAMPLE_STORE_BACKEND: {backend}")


def build_tracker(request: HttpRequest) -> CorrelationTracker:
    return CorrelationTracker(
        get_store(request), max_entries=settings.TRACKER_MAX_ENTRIES
    )
