"""Automated communications: rule evaluators, merge engine and feed lifecycle."""

from .donations import build_donation_prompt, parse_amount
from .events import build_event_reminders, parse_event_date
from .generator import CommunicationGenerator
from .lifecycle import (
    dismiss_communication,
    list_communications,
    mark_communication_read,
    post_communication,
)
from .local_overrides import (
    get_effective_donation_goal,
    list_local_donations,
    record_local_donation,
    record_mentor_offer,
    update_donation_goal,
)
from .merge import upsert
from .mentorship import build_mentorship_prompt

__all__ = [
    "CommunicationGenerator",
    "build_donation_prompt",
    "build_event_reminders",
    "build_mentorship_prompt",
    "dismiss_communication",
    "get_effective_donation_goal",
    "list_communications",
    "list_local_donations",
    "mark_communication_read",
    "parse_amount",
    "parse_event_date",
    "post_communication",
    "record_local_donation",
    "record_mentor_offer",
    "update_donation_goal",
    "upsert",
]
