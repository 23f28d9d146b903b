"""Domain entity representing an automated in-app communication."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Mapping

CATEGORY_EVENTS = "events"
CATEGORY_DONATIONS = "donations"
CATEGORY_MENTORSHIP = "mentorship"
COMMUNICATION_CATEGORIES = (CATEGORY_EVENTS, CATEGORY_DONATIONS, CATEGORY_MENTORSHIP)

DONATION_GOAL_COMMUNICATION_ID = "donation-goal-reminder"
MENTORSHIP_COMMUNICATION_ID = "mentorship-offer-reminder"


class CommunicationStatus(str, Enum):
    """Lifecycle state shown to the user."""

    UNREAD = "unread"
    READ = "read"
    DISMISSED = "dismissed"


def _flag(value: Any) -> bool:
    return value if isinstance(value, bool) else False


@dataclass
class Communication:
    """Notification shown in a user's message feed.

    ``id`` identifies a logical notification slot rather than a single
    delivery, so regenerating a message with the same ``id`` refreshes the
    existing entry instead of adding a new one.
    """

    id: str
    subject: str
    body: str
    category: str
    date: datetime
    read: bool = False
    dismissed: bool = False

    @property
    def status(self) -> CommunicationStatus:
        if self.dismissed:
            return CommunicationStatus.DISMISSED
        if self.read:
            return CommunicationStatus.READ
        return CommunicationStatus.UNREAD

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible representation of the communication."""

        return {
            "id": self.id,
            "subject": self.subject,
            "body": self.body,
            "category": self.category,
            "read": self.read,
            "dismissed": self.dismissed,
            "date": self.date.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Communication":
        """Build a communication from its stored representation.

        Raises ``ValueError`` when a required field is missing or malformed.
        """

        if not isinstance(data, Mapping):
            raise ValueError("Communication entries must be JSON objects")
        identifier = data.get("id")
        if not isinstance(identifier, str) or not identifier:
            raise ValueError("Communication id is required")
        raw_date = data.get("date")
        if not isinstance(raw_date, str):
            raise ValueError(f"Communication {identifier} has no date")
        try:
            parsed_date = datetime.fromisoformat(raw_date.replace("Z", "+00:00"))
        except ValueError as exc:
            raise ValueError(f"Communication {identifier} has an invalid date") from exc

        return cls(
            id=identifier,
            subject=str(data.get("subject") or ""),
            body=str(data.get("body") or ""),
            category=str(data.get("category") or ""),
            date=parsed_date,
            read=_flag(data.get("read")),
            dismissed=_flag(data.get("dismissed")),
        )


__all__ = [
    "CATEGORY_DONATIONS",
    "CATEGORY_EVENTS",
    "CATEGORY_MENTORSHIP",
    "COMMUNICATION_CATEGORIES",
    "DONATION_GOAL_COMMUNICATION_ID",
    "MENTORSHIP_COMMUNICATION_ID",
    "Communication",
    "CommunicationStatus",
]
