"""Domain entities exposed by the application."""

from .communication import (
    CATEGORY_DONATIONS,
    CATEGORY_EVENTS,
    CATEGORY_MENTORSHIP,
    COMMUNICATION_CATEGORIES,
    DONATION_GOAL_COMMUNICATION_ID,
    MENTORSHIP_COMMUNICATION_ID,
    Communication,
    CommunicationStatus,
)
from .local_override import LocalDonation, MentorOffer

__all__ = [
    "CATEGORY_DONATIONS",
    "CATEGORY_EVENTS",
    "CATEGORY_MENTORSHIP",
    "COMMUNICATION_CATEGORIES",
    "DONATION_GOAL_COMMUNICATION_ID",
    "MENTORSHIP_COMMUNICATION_ID",
    "Communication",
    "CommunicationStatus",
    "LocalDonation",
    "MentorOffer",
]
