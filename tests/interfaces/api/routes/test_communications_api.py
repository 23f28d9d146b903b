"""Integration tests for the communications and local override endpoints."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

EMAIL = "grace@example.com"
HEADERS = {"X-User-Email": "Grace@Example.com"}


def _write_data_files(directory) -> None:
    today = datetime.now(timezone.utc).date()
    soon = today + timedelta(days=3)
    later = today + timedelta(days=30)
    (directory / "Event.csv").write_text(
        "EventID,EventName,EventDate,Location\n"
        f"1,Networking Night,{soon.isoformat()},Campus Center\n"
        f"2,Annual Gala,{later.isoformat()},City Hall\n",
        encoding="utf-8",
    )
    (directory / "Donation.csv").write_text(
        "DonationID,AlumniID,DonationAmount,DonationDate\n"
        "D1,A1,300,2025-01-05\n"
        "D2,A2,900,2025-01-06\n",
        encoding="utf-8",
    )
    (directory / "Alumni.csv").write_text(
        f"AlumniID,Email\nA1,{EMAIL}\nA2,other@example.com\n",
        encoding="utf-8",
    )


@pytest.fixture()
def client(tmp_path):
    """Return a test client bound to a clean database and data directory."""

    from alumni_portal.infrastructure import database
    from alumni_portal.infrastructure.record_source import FileRecordSource
    from alumni_portal.interfaces.api.dependencies import get_record_source

    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)
    database.initialize_database()
    _write_data_files(tmp_path)

    from main import create_app

    app = create_app()
    app.dependency_overrides[get_record_source] = lambda: FileRecordSource(tmp_path)
    with TestClient(app) as test_client:
        yield test_client


def test_generate_list_read_and_dismiss_flow(client: TestClient) -> None:
    response = client.post("/communications/generate", headers=HEADERS)
    assert response.status_code == 200
    ids = {item["id"] for item in response.json()}
    assert ids == {"event-1", "donation-goal-reminder", "mentorship-offer-reminder"}
    donation = next(item for item in response.json() if item["id"] == "donation-goal-reminder")
    assert "$700.00" in donation["body"]
    assert donation["status"] == "unread"

    again = client.post("/communications/generate", headers=HEADERS)
    assert again.json() == response.json()

    read_response = client.patch(
        "/communications/event-1/read", json={"read": True}, headers=HEADERS
    )
    assert read_response.status_code == 200
    event = next(item for item in read_response.json() if item["id"] == "event-1")
    assert event["read"] is True
    assert event["status"] == "read"

    preview = client.get("/communications/preview", headers=HEADERS)
    assert "event-1" not in {item["id"] for item in preview.json()}

    dismiss_response = client.delete("/communications/mentorship-offer-reminder", headers=HEADERS)
    assert dismiss_response.status_code == 200
    assert "mentorship-offer-reminder" not in {item["id"] for item in dismiss_response.json()}

    listing = client.get("/communications/", headers=HEADERS)
    assert {item["id"] for item in listing.json()} == {"event-1", "donation-goal-reminder"}

    unread = client.get("/communications/", params={"unread_only": True, "limit": 5}, headers=HEADERS)
    assert [item["id"] for item in unread.json()] == ["donation-goal-reminder"]


def test_unknown_ids_are_not_errors(client: TestClient) -> None:
    client.post("/communications/generate", headers=HEADERS)
    before = client.get("/communications/", headers=HEADERS).json()

    assert client.patch("/communications/missing/read", json={"read": True}, headers=HEADERS).status_code == 200
    assert client.delete("/communications/missing", headers=HEADERS).status_code == 200
    assert client.get("/communications/", headers=HEADERS).json() == before


def test_feeds_are_isolated_per_user(client: TestClient) -> None:
    client.post("/communications/generate", headers=HEADERS)

    response = client.get("/communications/", headers={"X-User-Email": "other@example.com"})

    assert response.status_code == 200
    assert response.json() == []


def test_missing_data_files_degrade_to_fewer_messages(client: TestClient, tmp_path) -> None:
    (tmp_path / "Event.csv").unlink()

    response = client.post("/communications/generate")

    assert response.status_code == 200
    assert {item["category"] for item in response.json()} == {"donations", "mentorship"}


def test_local_overrides_endpoints(client: TestClient) -> None:
    goal = client.get("/local-overrides/donation-goal")
    assert goal.json() == {"goal": 1000.0}

    assert client.put("/local-overrides/donation-goal", json={"goal": 400}).json() == {"goal": 400.0}
    assert client.put("/local-overrides/donation-goal", json={"goal": 0}).status_code == 422

    created = client.post(
        "/local-overrides/donations",
        json={"amount": "150", "date": "2025-02-01"},
        headers=HEADERS,
    )
    assert created.status_code == 201
    assert created.json() == [{"amount": "150", "date": "2025-02-01"}]

    rejected = client.post("/local-overrides/donations", json={"amount": "abc"}, headers=HEADERS)
    assert rejected.status_code == 400

    offer = client.post("/local-overrides/mentor-offers", json={"focus_area": "Finance"}, headers=HEADERS)
    assert offer.status_code == 201
    assert offer.json() == {"total_offers": 1}

    feed = client.post("/communications/generate", headers=HEADERS).json()
    by_id = {item["id"]: item for item in feed}
    assert by_id["donation-goal-reminder"]["subject"] == "You hit your annual giving goal!"
    assert by_id["mentorship-offer-reminder"]["subject"] == "Mentors are ready to help"
    assert any(item["subject"] == "Thank you for your gift" for item in feed)
