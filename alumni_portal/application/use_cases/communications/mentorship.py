"""Mentorship rule: nudge users toward mentor offers or toward becoming one."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Sequence

from alumni_portal.domain.entities import CATEGORY_MENTORSHIP, MENTORSHIP_COMMUNICATION_ID


def has_mentor_offers(
    *, legacy_offers: Mapping[str, Any], global_offers: Sequence[Any]
) -> bool:
    # The global list is authoritative once populated; the per-user map is the
    # older storage format.
    if global_offers:
        return True
    return bool(legacy_offers)


def build_mentorship_prompt(
    *,
    legacy_offers: Mapping[str, Any],
    global_offers: Sequence[Any],
    now: datetime,
) -> dict[str, Any]:
    if has_mentor_offers(legacy_offers=legacy_offers, global_offers=global_offers):
        subject = "Mentors are ready to help"
        body = (
            "New mentor availability has been logged this week. Submit a mentorship "
            "request or connect with a new mentee today."
        )
    else:
        subject = "Become a founding mentor"
        body = (
            "Be among the first mentors in the network. Share your focus area on the "
            "Mentorship page to help newer alumni thrive."
        )

    return {
        "id": MENTORSHIP_COMMUNICATION_ID,
        "subject": subject,
        "body": body,
        "category": CATEGORY_MENTORSHIP,
        "date": now,
        "read": False,
        "dismissed": False,
    }


__all__ = ["build_mentorship_prompt", "has_mentor_offers"]
