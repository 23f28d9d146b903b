"""Durable key-value storage used for per-user communication state."""

from __future__ import annotations

from typing import Protocol

from sqlalchemy.orm import Session

from alumni_portal.infrastructure.models import KeyValueEntryModel

ANONYMOUS_NAMESPACE = "anonymous"

COMMUNICATIONS_KEY = "communications"
LAST_RUN_KEY = "communications:lastRun"
LOCAL_DONATIONS_KEY = "localDonations"
DONATION_GOAL_KEY = "donationGoal"
MENTOR_OFFERS_KEY = "mentorOffers"
MENTOR_OFFERS_GLOBAL_KEY = "mentorOffersGlobal"


class KeyValueStore(Protocol):
    """Minimal string key-value contract shared by every storage backend."""

    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> None:
        ...


def normalize_email(email: str | None) -> str:
    """Return the namespace identifier used for ``email``."""

    normalized = (email or "").strip().lower()
    return normalized or ANONYMOUS_NAMESPACE


def namespace_key(category: str, email: str | None = None) -> str:
    """Return the storage key for ``category``.

    Per-user categories are suffixed with the normalized email. Global
    categories are requested without an email and returned unchanged.
    """

    if email is None:
        return category
    return f"{category}:{normalize_email(email)}"


class InMemoryKeyValueStore:
    """Dictionary-backed store used by tests and one-off scripts."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class SqlKeyValueStore:
    """Persist key-value pairs in the ``key_value_entry`` table."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, key: str) -> str | None:
        model = self.session.get(KeyValueEntryModel, key)
        if model is None:
            return None
        return model.value

    def set(self, key: str, value: str) -> None:
        model = self.session.get(KeyValueEntryModel, key)
        if model is None:
            model = KeyValueEntryModel(key=key, value=value)
        else:
            model.value = value
        self.session.add(model)
        self.session.commit()


__all__ = [
    "ANONYMOUS_NAMESPACE",
    "COMMUNICATIONS_KEY",
    "DONATION_GOAL_KEY",
    "LAST_RUN_KEY",
    "LOCAL_DONATIONS_KEY",
    "MENTOR_OFFERS_GLOBAL_KEY",
    "MENTOR_OFFERS_KEY",
    "InMemoryKeyValueStore",
    "KeyValueStore",
    "SqlKeyValueStore",
    "namespace_key",
    "normalize_email",
]
