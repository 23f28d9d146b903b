"""Tests for the donation goal rule."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from alumni_portal.application.use_cases.communications.donations import (
    build_donation_prompt,
    find_alumni_id,
    parse_amount,
    total_given,
)
from alumni_portal.domain.entities import LocalDonation

NOW = datetime(2025, 3, 1, 9, 0, tzinfo=timezone.utc)

ALUMNI = [
    {"AlumniID": "A1", "Email": "Grace@Example.com"},
    {"AlumniID": "A2", "Email": "other@example.com"},
]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("100", 100.0),
        (" 12.50 ", 12.5),
        ("100abc", 100.0),
        (".5", 0.5),
        ("1e2", 100.0),
        ("-20", -20.0),
        ("$5", 0.0),
        ("", 0.0),
        (None, 0.0),
        ("Infinity", 0.0),
    ],
)
def test_parse_amount(value, expected):
    assert parse_amount(value) == expected


def test_find_alumni_id_is_case_insensitive():
    assert find_alumni_id(ALUMNI, "grace@example.COM") == "A1"
    assert find_alumni_id(ALUMNI, "missing@example.com") is None
    assert find_alumni_id(ALUMNI, "") is None


def test_remaining_amount_is_reported_with_two_decimals():
    donations = [
        {"AlumniID": "A1", "DonationAmount": "100"},
        {"AlumniID": "A1", "DonationAmount": "200"},
        {"AlumniID": "A2", "DonationAmount": "999"},
    ]
    local = [LocalDonation(amount="150"), LocalDonation(amount="50")]

    draft = build_donation_prompt(
        "grace@example.com",
        donations=donations,
        alumni=ALUMNI,
        local_donations=local,
        goal=1000,
        now=NOW,
    )

    assert draft["id"] == "donation-goal-reminder"
    assert draft["subject"] == "Keep your giving goal on track"
    assert "$500.00" in draft["body"]
    assert draft["read"] is False
    assert draft["dismissed"] is False
    assert draft["category"] == "donations"


def test_goal_met_when_total_reaches_goal():
    donations = [{"AlumniID": "A1", "DonationAmount": "400"}]
    local = [LocalDonation(amount="100"), LocalDonation(amount="50")]

    draft = build_donation_prompt(
        "grace@example.com",
        donations=donations,
        alumni=ALUMNI,
        local_donations=local,
        goal=500,
        now=NOW,
    )

    assert draft["subject"] == "You hit your annual giving goal!"
    assert "$" not in draft["body"]


def test_unknown_alumni_only_counts_local_donations():
    donations = [{"AlumniID": "A1", "DonationAmount": "400"}]

    total = total_given(
        "stranger@example.com",
        donations=donations,
        alumni=ALUMNI,
        local_donations=[LocalDonation(amount="25"), LocalDonation(amount="oops")],
    )

    assert total == 25.0
