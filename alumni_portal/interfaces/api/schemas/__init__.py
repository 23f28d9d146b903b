"""Pydantic schemas exposed by the HTTP interface."""

from .communication import CommunicationRead, CommunicationReadUpdate
from .local_override import (
    DonationGoalRead,
    DonationGoalUpdate,
    LocalDonationCreate,
    LocalDonationRead,
    MentorOfferCreate,
    MentorOfferSummary,
)

__all__ = [
    "CommunicationRead",
    "CommunicationReadUpdate",
    "DonationGoalRead",
    "DonationGoalUpdate",
    "LocalDonationCreate",
    "LocalDonationRead",
    "MentorOfferCreate",
    "MentorOfferSummary",
]
