"""Event reminder rule: remind users about alumni events in the coming days."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any, Mapping, Sequence

from alumni_portal.domain.entities import CATEGORY_EVENTS
from alumni_portal.utils import start_of_day

DEFAULT_WINDOW_DAYS = 14
DEFAULT_REMINDER_LIMIT = 3


def parse_event_date(value: str | None, tz: tzinfo | None = None) -> datetime | None:
    """Parse ISO-like or ``month/day/year`` strings; return ``None`` otherwise.

    Two-digit years in slash dates are read as 20YY.

    Naive results are interpreted in ``tz``; aware results are converted to it.
    """

    text = (value or "").strip()
    if not text:
        return None

    parsed = _parse_iso(text)
    if parsed is None:
        parsed = _parse_slash_date(text)
    if parsed is None:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=tz)
    try:
        if tz is None:
            return parsed.astimezone(timezone.utc).replace(tzinfo=None)
        return parsed.astimezone(tz)
    except (ValueError, OverflowError):
        return None


def _parse_iso(text: str) -> datetime | None:
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return None


def _parse_slash_date(text: str) -> datetime | None:
    parts = text.split("/")
    if len(parts) != 3:
        return None
    try:
        month, day, year = (int(part.strip()) for part in parts)
        if 0 <= year < 100:
            year += 2000
        return datetime(year, month, day)
    except (ValueError, OverflowError):
        return None


def event_communication_id(event: Mapping[str, str]) -> str:
    """Return the stable identifier of the reminder for ``event``."""

    event_id = event.get("EventID") or ""
    if event_id:
        return f"event-{event_id}"
    return f"event-{event.get('EventName') or ''}-{event.get('EventDate') or ''}"


def upcoming_events(
    events: Sequence[Mapping[str, str]],
    *,
    now: datetime,
    window_days: int = DEFAULT_WINDOW_DAYS,
    limit: int = DEFAULT_REMINDER_LIMIT,
) -> list[tuple[Mapping[str, str], datetime]]:
    """Return up to ``limit`` events dated between today and ``now + window_days``."""

    window_start = start_of_day(now)
    window_end = now + timedelta(days=window_days)
    dated = []
    for event in events:
        event_date = parse_event_date(event.get("EventDate"), now.tzinfo)
        if event_date is None:
            continue
        if window_start <= event_date <= window_end:
            dated.append((event, event_date))
    dated.sort(key=lambda item: item[1])
    return dated[:limit]


def build_event_reminders(
    events: Sequence[Mapping[str, str]],
    *,
    now: datetime,
    window_days: int = DEFAULT_WINDOW_DAYS,
    limit: int = DEFAULT_REMINDER_LIMIT,
) -> list[dict[str, Any]]:
    """Return communication drafts for the soonest upcoming events.

    Drafts never carry ``read`` or ``dismissed`` so refreshing a reminder keeps
    the state the user gave it.
    """

    drafts: list[dict[str, Any]] = []
    for event, event_date in upcoming_events(
        events, now=now, window_days=window_days, limit=limit
    ):
        name = event.get("EventName") or ""
        location = event.get("Location") or ""
        where = f" at {location}" if location else ""
        drafts.append(
            {
                "id": event_communication_id(event),
                "subject": f"Upcoming Event: {name or 'Alumni Event'}",
                "body": (
                    f"Don't miss {name or 'this alumni event'} on "
                    f"{event_date:%B} {event_date.day}{where}. "
                    'Tap "Events" to confirm your spot.'
                ),
                "category": CATEGORY_EVENTS,
                "date": now,
            }
        )
    return drafts


__all__ = [
    "DEFAULT_REMINDER_LIMIT",
    "DEFAULT_WINDOW_DAYS",
    "build_event_reminders",
    "event_communication_id",
    "parse_event_date",
    "upcoming_events",
]
