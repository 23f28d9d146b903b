"""Donation goal rule: compare a user's giving this year with their goal."""

from __future__ import annotations

import math
import re
from datetime import datetime
from typing import Any, Iterable, Mapping, Sequence

from alumni_portal.domain.entities import (
    CATEGORY_DONATIONS,
    DONATION_GOAL_COMMUNICATION_ID,
    LocalDonation,
)
from alumni_portal.infrastructure.key_value_store import (
    ANONYMOUS_NAMESPACE,
    normalize_email,
)

_LEADING_NUMBER = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def parse_amount(value: Any) -> float:
    """Return the leading numeric value of ``value`` or ``0.0``."""

    if value is None:
        return 0.0
    match = _LEADING_NUMBER.match(str(value).strip())
    if not match:
        return 0.0
    amount = float(match.group(0))
    return amount if math.isfinite(amount) else 0.0


def find_alumni_id(alumni: Iterable[Mapping[str, str]], email: str | None) -> str | None:
    """Return the ``AlumniID`` registered for ``email`` (case-insensitive)."""

    target = normalize_email(email)
    if target == ANONYMOUS_NAMESPACE:
        return None
    for row in alumni:
        if (row.get("Email") or "").strip().lower() == target:
            return row.get("AlumniID") or None
    return None


def total_given(
    email: str | None,
    *,
    donations: Sequence[Mapping[str, str]],
    alumni: Sequence[Mapping[str, str]],
    local_donations: Sequence[LocalDonation],
) -> float:
    """Sum ledger donations of the user's alumni record plus local entries."""

    alumni_id = find_alumni_id(alumni, email)
    ledger = (
        [row.get("DonationAmount") for row in donations if row.get("AlumniID") == alumni_id]
        if alumni_id
        else []
    )
    local = [entry.amount for entry in local_donations]
    return sum(parse_amount(amount) for amount in [*ledger, *local])


def build_donation_prompt(
    email: str | None,
    *,
    donations: Sequence[Mapping[str, str]],
    alumni: Sequence[Mapping[str, str]],
    local_donations: Sequence[LocalDonation],
    goal: float,
    now: datetime,
) -> dict[str, Any]:
    """Return the donation goal draft.

    The draft always resets ``read`` and ``dismissed`` so the goal prompt is
    surfaced again on every daily pass until the goal is met.
    """

    given = total_given(
        email, donations=donations, alumni=alumni, local_donations=local_donations
    )

    if given >= goal:
        subject = "You hit your annual giving goal!"
        body = (
            "Phenomenal generosity, thank you for completing this year's goal. "
            "Consider setting a stretch target or supporting a new campaign."
        )
    else:
        remaining = goal - given
        subject = "Keep your giving goal on track"
        body = (
            f"You're ${remaining:.2f} away from your annual goal. "
            "A quick gift puts you right back on pace."
        )

    return {
        "id": DONATION_GOAL_COMMUNICATION_ID,
        "subject": subject,
        "body": body,
        "category": CATEGORY_DONATIONS,
        "date": now,
        "read": False,
        "dismissed": False,
    }


__all__ = [
    "build_donation_prompt",
    "find_alumni_id",
    "parse_amount",
    "total_given",
]
