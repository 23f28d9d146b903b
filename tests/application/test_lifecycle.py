"""Tests for listing, reading, dismissing and posting communications."""

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone

import pytest

from alumni_portal.application.use_cases.communications import (
    dismiss_communication,
    get_effective_donation_goal,
    list_communications,
    list_local_donations,
    mark_communication_read,
    post_communication,
    record_local_donation,
    record_mentor_offer,
    update_donation_goal,
)
from alumni_portal.config import Settings
from alumni_portal.domain.entities import Communication
from alumni_portal.infrastructure.key_value_store import InMemoryKeyValueStore
from alumni_portal.infrastructure.repositories import CommunicationRepository

EMAIL = "grace@example.com"
NOW = datetime(2025, 3, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture()
def store():
    store = InMemoryKeyValueStore()
    CommunicationRepository(store).save(
        EMAIL,
        [
            Communication("old", "Old", "", "events", NOW - timedelta(days=2)),
            Communication("new", "New", "", "donations", NOW, read=True),
            Communication("mid", "Mid", "", "mentorship", NOW - timedelta(days=1)),
            Communication("gone", "Gone", "", "events", NOW, dismissed=True),
        ],
    )
    return store


def test_list_is_newest_first_and_hides_dismissed(store):
    assert [item.id for item in list_communications(store, EMAIL)] == ["new", "mid", "old"]


def test_list_can_include_dismissed(store):
    ids = [item.id for item in list_communications(store, EMAIL, include_dismissed=True)]
    assert ids == ["new", "gone", "mid", "old"]


def test_list_filters_unread_and_limits(store):
    communications = list_communications(store, EMAIL, unread_only=True, limit=1)
    assert [item.id for item in communications] == ["mid"]


def test_list_for_unknown_user_is_empty(store):
    assert list_communications(store, "nobody@example.com") == []


def test_mark_read_and_unread(store):
    mark_communication_read(store, EMAIL, "old", read=True)
    assert next(i for i in list_communications(store, EMAIL) if i.id == "old").read is True

    mark_communication_read(store, EMAIL, "old", read=False)
    assert next(i for i in list_communications(store, EMAIL) if i.id == "old").read is False


def test_operations_on_unknown_ids_are_noops(store):
    raw = store.get(f"communications:{EMAIL}")

    marked = mark_communication_read(store, EMAIL, "missing", read=True)
    dismissed = dismiss_communication(store, EMAIL, "missing")

    assert store.get(f"communications:{EMAIL}") == raw
    assert [item.to_dict() for item in marked] == json.loads(raw)
    assert [item.to_dict() for item in dismissed] == json.loads(raw)


def test_dismiss_is_a_tombstone_and_idempotent(store):
    dismiss_communication(store, EMAIL, "mid")
    dismiss_communication(store, EMAIL, "mid")

    visible = [item.id for item in list_communications(store, EMAIL)]
    everything = list_communications(store, EMAIL, include_dismissed=True)

    assert visible == ["new", "old"]
    assert next(item for item in everything if item.id == "mid").dismissed is True


def test_post_communication_appends_unread_message(store):
    created = post_communication(
        store,
        EMAIL,
        subject="Welcome",
        body="Thanks for joining",
        category="events",
        clock=lambda: NOW + timedelta(hours=1),
    )

    assert created.id.startswith("message-")
    assert list_communications(store, EMAIL)[0].id == created.id


def test_post_communication_rejects_unknown_category(store):
    with pytest.raises(ValueError):
        post_communication(store, EMAIL, subject="x", body="y", category="feedback")


def test_record_local_donation_stores_entry_and_thanks_donor():
    store = InMemoryKeyValueStore()

    donations = record_local_donation(
        store,
        EMAIL,
        amount="25.5",
        date="2025-02-14",
        settings=Settings(),
        clock=lambda: NOW,
    )

    assert [(item.amount, item.date) for item in donations] == [("25.5", "2025-02-14")]
    assert [item.amount for item in list_local_donations(store, EMAIL)] == ["25.5"]
    (message,) = list_communications(store, EMAIL)
    assert message.subject == "Thank you for your gift"
    assert "$25.50" in message.body


@pytest.mark.parametrize("amount", ["0", "abc", "-5"])
def test_record_local_donation_rejects_non_positive_amounts(amount):
    with pytest.raises(ValueError):
        record_local_donation(InMemoryKeyValueStore(), EMAIL, amount=amount)


def test_donation_goal_defaults_and_updates():
    store = InMemoryKeyValueStore()
    settings = Settings(default_donation_goal=750)

    assert get_effective_donation_goal(store, settings=settings) == 750

    update_donation_goal(store, 1500)
    assert get_effective_donation_goal(store, settings=settings) == 1500

    with pytest.raises(ValueError):
        update_donation_goal(store, 0)


def test_record_mentor_offer_appends_to_global_list():
    store = InMemoryKeyValueStore()

    record_mentor_offer(store, "Mentor@Example.com", focus_area=" Data ", clock=lambda: NOW)
    offers = record_mentor_offer(store, "second@example.com", clock=lambda: NOW)

    assert len(offers) == 2
    stored = json.loads(store.get("mentorOffersGlobal"))
    assert stored[0]["email"] == "mentor@example.com"
    assert stored[0]["focus_area"] == "Data"
    assert stored[1]["focus_area"] is None
