"""Domain entities for per-user records kept outside the source of record."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping


@dataclass
class LocalDonation:
    """Donation entered manually by a user and not yet in the donation ledger."""

    amount: str
    date: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"amount": self.amount, "date": self.date}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LocalDonation":
        if not isinstance(data, Mapping):
            raise ValueError("Local donation entries must be JSON objects")
        amount = data.get("amount")
        raw_date = data.get("date")
        return cls(
            amount="" if amount is None else str(amount),
            date=None if raw_date is None else str(raw_date),
        )


@dataclass
class MentorOffer:
    """Availability logged by an alumnus willing to mentor."""

    email: str
    created_at: datetime
    focus_area: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "email": self.email,
            "focus_area": self.focus_area,
            "created_at": self.created_at.isoformat(),
        }


__all__ = ["LocalDonation", "MentorOffer"]
