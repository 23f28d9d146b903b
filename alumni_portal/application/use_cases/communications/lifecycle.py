"""Use cases for reading and updating a user's communication feed."""

from __future__ import annotations

import logging
from uuid import uuid4

from alumni_portal.domain.entities import COMMUNICATION_CATEGORIES, Communication
from alumni_portal.infrastructure.key_value_store import KeyValueStore
from alumni_portal.infrastructure.repositories import CommunicationRepository
from alumni_portal.utils import now_in_app_timezone

from .generator import Clock
from .merge import newest_first, set_dismissed, set_read, upsert

logger = logging.getLogger(__name__)


def list_communications(
    store: KeyValueStore,
    email: str | None,
    *,
    unread_only: bool = False,
    limit: int | None = None,
    include_dismissed: bool = False,
) -> list[Communication]:
    """Return the user's communications, newest first."""

    communications = newest_first(CommunicationRepository(store).load(email))
    if not include_dismissed:
        communications = [item for item in communications if not item.dismissed]
    if unread_only:
        communications = [item for item in communications if not item.read]
    if limit is not None:
        communications = communications[:limit]
    return communications


def mark_communication_read(
    store: KeyValueStore,
    email: str | None,
    communication_id: str,
    *,
    read: bool = True,
) -> list[Communication]:
    """Set the read flag of a communication; unknown ids leave the feed untouched."""

    repository = CommunicationRepository(store)
    communications = repository.load(email)
    if set_read(communications, communication_id, read):
        repository.save(email, communications)
    else:
        logger.debug("Communication %s not found for %s", communication_id, email)
    return communications


def dismiss_communication(
    store: KeyValueStore, email: str | None, communication_id: str
) -> list[Communication]:
    """Hide a communication from the feed; unknown ids leave the feed untouched."""

    repository = CommunicationRepository(store)
    communications = repository.load(email)
    if set_dismissed(communications, communication_id):
        repository.save(email, communications)
    else:
        logger.debug("Communication %s not found for %s", communication_id, email)
    return communications


def post_communication(
    store: KeyValueStore,
    email: str | None,
    *,
    subject: str,
    body: str,
    category: str,
    clock: Clock | None = None,
    max_entries: int | None = None,
) -> Communication:
    """Append a one-off message triggered by a user action."""

    if category not in COMMUNICATION_CATEGORIES:
        raise ValueError(f"Unsupported communication category '{category}'")

    repository = CommunicationRepository(store, max_entries=max_entries)
    communications = repository.load(email)
    created = upsert(
        communications,
        {
            "id": f"message-{uuid4().hex}",
            "subject": subject,
            "body": body,
            "category": category,
            "date": (clock or now_in_app_timezone)(),
        },
    )
    repository.save(email, communications)
    return created


__all__ = [
    "dismiss_communication",
    "list_communications",
    "mark_communication_read",
    "post_communication",
]
