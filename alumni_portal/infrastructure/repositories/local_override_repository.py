"""Persistence helpers for user-entered overrides of source-of-record data."""

from __future__ import annotations

import json
import logging
import math
from typing import Any

from alumni_portal.domain.entities import LocalDonation, MentorOffer
from alumni_portal.infrastructure.key_value_store import (
    DONATION_GOAL_KEY,
    LOCAL_DONATIONS_KEY,
    MENTOR_OFFERS_GLOBAL_KEY,
    MENTOR_OFFERS_KEY,
    KeyValueStore,
    namespace_key,
)

logger = logging.getLogger(__name__)


class LocalOverrideRepository:
    """Read and write local donations, the donation goal and mentor offers."""

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    def list_local_donations(self, email: str | None) -> list[LocalDonation]:
        entries = self._load_json(namespace_key(LOCAL_DONATIONS_KEY, email), default=[])
        if not isinstance(entries, list):
            return []
        donations: list[LocalDonation] = []
        for entry in entries:
            try:
                donations.append(LocalDonation.from_dict(entry))
            except ValueError:
                logger.warning("Skipping malformed local donation for %s", email)
        return donations

    def add_local_donation(
        self, email: str | None, donation: LocalDonation
    ) -> list[LocalDonation]:
        donations = self.list_local_donations(email)
        donations.append(donation)
        self.store.set(
            namespace_key(LOCAL_DONATIONS_KEY, email),
            json.dumps([item.to_dict() for item in donations]),
        )
        return donations

    def get_donation_goal(self) -> float | None:
        raw = self.store.get(DONATION_GOAL_KEY)
        if raw is None or not raw.strip():
            return None
        try:
            goal = float(raw)
        except ValueError:
            logger.warning("Ignoring unparsable donation goal %r", raw)
            return None
        if not math.isfinite(goal):
            logger.warning("Ignoring non-finite donation goal %r", raw)
            return None
        return goal

    def set_donation_goal(self, goal: float) -> None:
        if not math.isfinite(goal) or goal <= 0:
            raise ValueError("The donation goal must be a positive amount")
        self.store.set(DONATION_GOAL_KEY, repr(float(goal)))

    def get_legacy_mentor_offers(self) -> dict[str, Any]:
        offers = self._load_json(MENTOR_OFFERS_KEY, default={})
        return offers if isinstance(offers, dict) else {}

    def get_global_mentor_offers(self) -> list[Any]:
        offers = self._load_json(MENTOR_OFFERS_GLOBAL_KEY, default=[])
        return offers if isinstance(offers, list) else []

    def add_mentor_offer(self, offer: MentorOffer) -> list[Any]:
        offers = self.get_global_mentor_offers()
        offers.append(offer.to_dict())
        self.store.set(MENTOR_OFFERS_GLOBAL_KEY, json.dumps(offers))
        return offers

    def _load_json(self, key: str, *, default: Any) -> Any:
        raw = self.store.get(key)
        if not raw:
            return default
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning("Unable to parse JSON stored under %s", key)
            return default


__all__ = ["LocalOverrideRepository"]
