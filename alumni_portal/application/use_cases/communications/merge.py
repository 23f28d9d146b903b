"""Insert-or-merge helpers operating on an in-memory communication list."""

from __future__ import annotations

from dataclasses import fields, replace
from typing import Any, Mapping

from alumni_portal.domain.entities import Communication

CommunicationDraft = Mapping[str, Any]

_COMMUNICATION_FIELDS = frozenset(field.name for field in fields(Communication))


def find_index(communications: list[Communication], communication_id: str) -> int | None:
    """Return the position of ``communication_id`` in ``communications``."""

    for index, communication in enumerate(communications):
        if communication.id == communication_id:
            return index
    return None


def upsert(
    communications: list[Communication], draft: CommunicationDraft
) -> Communication:
    """Merge ``draft`` into the entry sharing its ``id`` or append a new entry.

    Only the fields present in ``draft`` are overwritten, so an evaluator that
    leaves out ``read`` keeps whatever state the user already chose. New
    entries start unread and not dismissed. The list keeps insertion order.
    """

    unknown = set(draft) - _COMMUNICATION_FIELDS
    if unknown:
        raise ValueError(f"Unknown communication fields: {', '.join(sorted(unknown))}")
    communication_id = draft.get("id")
    if not communication_id:
        raise ValueError("Communication drafts require an id")

    index = find_index(communications, communication_id)
    if index is not None:
        changes = {name: value for name, value in draft.items() if name != "id"}
        merged = replace(communications[index], **changes)
        communications[index] = merged
        return merged

    created = Communication(**draft)
    communications.append(created)
    return created


def set_read(
    communications: list[Communication], communication_id: str, read: bool
) -> bool:
    """Set the read flag of ``communication_id``; return ``False`` when absent."""

    index = find_index(communications, communication_id)
    if index is None:
        return False
    communications[index] = replace(communications[index], read=read)
    return True


def set_dismissed(communications: list[Communication], communication_id: str) -> bool:
    """Tombstone ``communication_id``; return ``False`` when absent."""

    index = find_index(communications, communication_id)
    if index is None:
        return False
    communications[index] = replace(communications[index], dismissed=True)
    return True


def newest_first(communications: list[Communication]) -> list[Communication]:
    return sorted(communications, key=lambda item: item.date, reverse=True)


__all__ = [
    "CommunicationDraft",
    "find_index",
    "newest_first",
    "set_dismissed",
    "set_read",
    "upsert",
]
