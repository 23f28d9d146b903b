"""Daily generation of automated communications for a user."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

import anyio

from alumni_portal.config import Settings, get_settings
from alumni_portal.domain.entities import Communication, LocalDonation
from alumni_portal.infrastructure.key_value_store import KeyValueStore, normalize_email
from alumni_portal.infrastructure.record_source import (
    ALUMNI_TABLE,
    DONATION_TABLE,
    EVENT_TABLE,
    Record,
    RecordSource,
    SourceUnavailableError,
    fetch_records,
)
from alumni_portal.infrastructure.repositories import (
    CommunicationRepository,
    LocalOverrideRepository,
)
from alumni_portal.utils import day_key, now_in_app_timezone

from .donations import build_donation_prompt
from .events import build_event_reminders
from .merge import upsert
from .mentorship import build_mentorship_prompt

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


@dataclass
class _OverrideSnapshot:
    """User-entered records read once per generation pass."""

    goal: float
    local_donations: list[LocalDonation] = field(default_factory=list)
    legacy_offers: dict[str, Any] = field(default_factory=dict)
    global_offers: list[Any] = field(default_factory=list)


class CommunicationGenerator:
    """Synthesize event, donation and mentorship messages once per day per user.

    Event and donation data are fetched concurrently, but every merge into
    the user's list happens sequentially after both fetches have joined, in
    the order events, donations, mentorship. A failing record source or rule
    only skips the category that depends on it.

    Storage calls are blocking, so they run in worker threads rather than on
    the event loop. Two concurrent ``generate`` calls for the same user are
    not serialized; the last one to persist wins.
    """

    def __init__(
        self,
        store: KeyValueStore,
        source: RecordSource,
        *,
        settings: Settings | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.clock = clock or now_in_app_timezone
        self.source = source
        self.communications = CommunicationRepository(
            store, max_entries=self.settings.max_communications
        )
        self.overrides = LocalOverrideRepository(store)

    async def generate(self, email: str | None) -> list[Communication]:
        """Refresh the user's messages unless they were already generated today."""

        user = normalize_email(email)
        now = self.clock()
        today = day_key(now)
        last_run, communications = await anyio.to_thread.run_sync(self._load_feed, user)
        if last_run == today:
            logger.debug("Communications for %s already generated on %s", user, today)
            return communications

        overrides = await anyio.to_thread.run_sync(self._load_overrides, user)
        event_drafts: list[dict[str, Any]] = []
        donation_drafts: list[dict[str, Any]] = []
        async with anyio.create_task_group() as task_group:
            task_group.start_soon(self._collect_event_reminders, now, event_drafts)
            task_group.start_soon(
                self._collect_donation_prompt, user, now, overrides, donation_drafts
            )

        drafts = [*event_drafts, *donation_drafts, self._mentorship_prompt(now, overrides)]
        for draft in drafts:
            upsert(communications, draft)

        persisted = await anyio.to_thread.run_sync(
            self._persist, user, communications, today
        )
        logger.info("Generated %s communications for %s", len(drafts), user)
        return persisted

    def _load_feed(self, user: str) -> tuple[str | None, list[Communication]]:
        return self.communications.get_last_run(user), self.communications.load(user)

    def _load_overrides(self, user: str) -> _OverrideSnapshot:
        goal = self.overrides.get_donation_goal()
        return _OverrideSnapshot(
            goal=self.settings.default_donation_goal if goal is None else goal,
            local_donations=self.overrides.list_local_donations(user),
            legacy_offers=self.overrides.get_legacy_mentor_offers(),
            global_offers=self.overrides.get_global_mentor_offers(),
        )

    def _persist(
        self, user: str, communications: list[Communication], today: str
    ) -> list[Communication]:
        self.communications.save(user, communications)
        self.communications.set_last_run(user, today)
        return self.communications.load(user)

    async def _collect_event_reminders(
        self, now: datetime, drafts: list[dict[str, Any]]
    ) -> None:
        try:
            tables = await self._fetch_tables(EVENT_TABLE)
            reminders = build_event_reminders(
                tables[EVENT_TABLE],
                now=now,
                window_days=self.settings.event_window_days,
                limit=self.settings.max_event_reminders,
            )
        except SourceUnavailableError as exc:
            logger.warning("Unable to generate event reminders: %s", exc)
            return
        except Exception:
            logger.exception("Event reminders failed; skipping the category")
            return
        drafts.extend(reminders)

    async def _collect_donation_prompt(
        self,
        user: str,
        now: datetime,
        overrides: _OverrideSnapshot,
        drafts: list[dict[str, Any]],
    ) -> None:
        try:
            tables = await self._fetch_tables(DONATION_TABLE, ALUMNI_TABLE)
            prompt = build_donation_prompt(
                user,
                donations=tables[DONATION_TABLE],
                alumni=tables[ALUMNI_TABLE],
                local_donations=overrides.local_donations,
                goal=overrides.goal,
                now=now,
            )
        except SourceUnavailableError as exc:
            logger.warning("Unable to generate donation prompts: %s", exc)
            return
        except Exception:
            logger.exception("Donation prompt failed; skipping the category")
            return
        drafts.append(prompt)

    def _mentorship_prompt(
        self, now: datetime, overrides: _OverrideSnapshot
    ) -> dict[str, Any]:
        return build_mentorship_prompt(
            legacy_offers=overrides.legacy_offers,
            global_offers=overrides.global_offers,
            now=now,
        )

    async def _fetch_tables(self, *table_names: str) -> dict[str, list[Record]]:
        """Fetch ``table_names`` concurrently; raise the first source failure."""

        results: dict[str, list[Record]] = {}
        failures: list[SourceUnavailableError] = []
        timeout = self.settings.source_fetch_timeout_seconds

        async def _fetch(table_name: str) -> None:
            try:
                results[table_name] = await fetch_records(
                    self.source, table_name, timeout=timeout
                )
            except SourceUnavailableError as exc:
                failures.append(exc)

        async with anyio.create_task_group() as task_group:
            for table_name in table_names:
                task_group.start_soon(_fetch, table_name)

        if failures:
            raise failures[0]
        return results


__all__ = ["Clock", "CommunicationGenerator"]
