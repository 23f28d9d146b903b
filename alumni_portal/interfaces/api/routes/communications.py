"""Endpoints for the automated communications feed."""

from __future__ import annotations

from typing import Sequence

from fastapi import APIRouter, Depends, Query

from alumni_portal.application.use_cases.communications import (
    CommunicationGenerator,
    dismiss_communication as dismiss_communication_uc,
    list_communications as list_communications_uc,
    mark_communication_read as mark_communication_read_uc,
)
from alumni_portal.application.use_cases.communications.merge import newest_first
from alumni_portal.config import Settings, get_settings
from alumni_portal.domain.entities import Communication
from alumni_portal.infrastructure.key_value_store import KeyValueStore
from alumni_portal.interfaces.api.dependencies import (
    get_communication_generator,
    get_current_email,
    get_store,
)
from alumni_portal.interfaces.api.schemas import CommunicationRead, CommunicationReadUpdate

router = APIRouter(prefix="/communications", tags=["communications"])


def _to_read_models(communications: Sequence[Communication]) -> list[CommunicationRead]:
    visible = [item for item in newest_first(list(communications)) if not item.dismissed]
    return [CommunicationRead.model_validate(item) for item in visible]


@router.post("/generate", response_model=list[CommunicationRead])
async def generate_communications(
    email: str = Depends(get_current_email),
    generator: CommunicationGenerator = Depends(get_communication_generator),
) -> list[CommunicationRead]:
    """Run the daily generation pass and return the resulting feed."""

    communications = await generator.generate(email)
    return _to_read_models(communications)


@router.get("/", response_model=list[CommunicationRead])
def list_communications(
    unread_only: bool = False,
    limit: int | None = Query(default=None, ge=1),
    email: str = Depends(get_current_email),
    store: KeyValueStore = Depends(get_store),
) -> list[CommunicationRead]:
    """Return the full feed, newest first."""

    communications = list_communications_uc(
        store, email, unread_only=unread_only, limit=limit
    )
    return [CommunicationRead.model_validate(item) for item in communications]


@router.get("/preview", response_model=list[CommunicationRead])
def preview_communications(
    email: str = Depends(get_current_email),
    store: KeyValueStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> list[CommunicationRead]:
    """Return the few most recent unread communications."""

    communications = list_communications_uc(
        store, email, unread_only=True, limit=settings.preview_limit
    )
    return [CommunicationRead.model_validate(item) for item in communications]


@router.patch("/{communication_id}/read", response_model=list[CommunicationRead])
def mark_communication_read(
    communication_id: str,
    payload: CommunicationReadUpdate,
    email: str = Depends(get_current_email),
    store: KeyValueStore = Depends(get_store),
) -> list[CommunicationRead]:
    """Mark a communication as read or unread."""

    communications = mark_communication_read_uc(
        store, email, communication_id, read=payload.read
    )
    return _to_read_models(communications)


@router.delete("/{communication_id}", response_model=list[CommunicationRead])
def dismiss_communication(
    communication_id: str,
    email: str = Depends(get_current_email),
    store: KeyValueStore = Depends(get_store),
) -> list[CommunicationRead]:
    """Dismiss a communication so it no longer appears in the feed."""

    communications = dismiss_communication_uc(store, email, communication_id)
    return _to_read_models(communications)
