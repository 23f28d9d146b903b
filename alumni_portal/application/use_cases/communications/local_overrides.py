"""Use cases for the records users enter on top of the source of record."""

from __future__ import annotations

from alumni_portal.config import Settings, get_settings
from alumni_portal.domain.entities import CATEGORY_DONATIONS, LocalDonation, MentorOffer
from alumni_portal.infrastructure.key_value_store import KeyValueStore, normalize_email
from alumni_portal.infrastructure.repositories import LocalOverrideRepository
from alumni_portal.utils import now_in_app_timezone

from .donations import parse_amount
from .generator import Clock
from .lifecycle import post_communication


def list_local_donations(store: KeyValueStore, email: str | None) -> list[LocalDonation]:
    return LocalOverrideRepository(store).list_local_donations(email)


def record_local_donation(
    store: KeyValueStore,
    email: str | None,
    *,
    amount: str,
    date: str | None = None,
    settings: Settings | None = None,
    clock: Clock | None = None,
) -> list[LocalDonation]:
    """Store a manual donation and thank the donor in their feed."""

    if parse_amount(amount) <= 0:
        raise ValueError("Donation amount must be a positive number")

    settings = settings or get_settings()
    donations = LocalOverrideRepository(store).add_local_donation(
        email, LocalDonation(amount=amount.strip(), date=date)
    )
    post_communication(
        store,
        email,
        subject="Thank you for your gift",
        body=(
            f"We received your donation of ${parse_amount(amount):.2f}. "
            "It now counts toward your annual giving goal."
        ),
        category=CATEGORY_DONATIONS,
        clock=clock,
        max_entries=settings.max_communications,
    )
    return donations


def get_effective_donation_goal(
    store: KeyValueStore, *, settings: Settings | None = None
) -> float:
    """Return the configured donation goal or the application default."""

    goal = LocalOverrideRepository(store).get_donation_goal()
    if goal is None:
        return (settings or get_settings()).default_donation_goal
    return goal


def update_donation_goal(store: KeyValueStore, goal: float) -> float:
    LocalOverrideRepository(store).set_donation_goal(goal)
    return goal


def record_mentor_offer(
    store: KeyValueStore,
    email: str | None,
    *,
    focus_area: str | None = None,
    clock: Clock | None = None,
) -> list[object]:
    """Append the user's mentoring availability to the shared offer list."""

    offer = MentorOffer(
        email=normalize_email(email),
        focus_area=(focus_area or "").strip() or None,
        created_at=(clock or now_in_app_timezone)(),
    )
    return LocalOverrideRepository(store).add_mentor_offer(offer)


__all__ = [
    "get_effective_donation_goal",
    "list_local_donations",
    "record_local_donation",
    "record_mentor_offer",
    "update_donation_goal",
]
