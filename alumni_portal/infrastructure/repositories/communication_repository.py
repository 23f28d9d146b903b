"""Persistence helpers for per-user communication feeds."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence

from alumni_portal.domain.entities import Communication
from alumni_portal.infrastructure.key_value_store import (
    COMMUNICATIONS_KEY,
    LAST_RUN_KEY,
    KeyValueStore,
    namespace_key,
)
from alumni_portal.utils import ensure_app_timezone

logger = logging.getLogger(__name__)


class CommunicationRepository:
    """Load and save the message feed and generation watermark of a user."""

    def __init__(self, store: KeyValueStore, *, max_entries: int | None = None) -> None:
        self.store = store
        self.max_entries = max_entries

    def load(self, email: str | None) -> list[Communication]:
        key = namespace_key(COMMUNICATIONS_KEY, email)
        raw = self.store.get(key)
        if not raw:
            return []
        try:
            entries = json.loads(raw)
        except ValueError:
            logger.warning("Unable to parse communications stored under %s", key)
            return []
        if not isinstance(entries, list):
            logger.warning("Communications stored under %s are not a list", key)
            return []

        communications: list[Communication] = []
        for entry in entries:
            try:
                communication = Communication.from_dict(entry)
            except ValueError as exc:
                logger.warning("Skipping malformed communication under %s: %s", key, exc)
                continue
            communication.date = ensure_app_timezone(communication.date)
            communications.append(communication)
        return communications

    def save(
        self, email: str | None, communications: Sequence[Communication]
    ) -> list[Communication]:
        kept = self._enforce_capacity(communications)
        payload = json.dumps([communication.to_dict() for communication in kept])
        self.store.set(namespace_key(COMMUNICATIONS_KEY, email), payload)
        return kept

    def get_last_run(self, email: str | None) -> str | None:
        return self.store.get(namespace_key(LAST_RUN_KEY, email))

    def set_last_run(self, email: str | None, day: str) -> None:
        self.store.set(namespace_key(LAST_RUN_KEY, email), day)

    def _enforce_capacity(
        self, communications: Sequence[Communication]
    ) -> list[Communication]:
        kept = list(communications)
        if self.max_entries is None or len(kept) <= self.max_entries:
            return kept
        newest = sorted(kept, key=lambda item: item.date, reverse=True)[: self.max_entries]
        retained = {id(item) for item in newest}
        logger.info(
            "Dropping %s communications beyond the limit of %s",
            len(kept) - self.max_entries,
            self.max_entries,
        )
        return [item for item in kept if id(item) in retained]


__all__ = ["CommunicationRepository"]
