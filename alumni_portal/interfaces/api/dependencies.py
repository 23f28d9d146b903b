"""FastAPI dependency utilities."""

from pathlib import Path

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from alumni_portal.application.use_cases.communications import CommunicationGenerator
from alumni_portal.config import Settings, get_settings
from alumni_portal.infrastructure.database import get_db
from alumni_portal.infrastructure.key_value_store import (
    KeyValueStore,
    SqlKeyValueStore,
    normalize_email,
)
from alumni_portal.infrastructure.record_source import FileRecordSource, RecordSource


def get_current_email(x_user_email: str | None = Header(default=None)) -> str:
    """Return the namespace of the caller identified by ``X-User-Email``."""

    return normalize_email(x_user_email)


def get_store(db: Session = Depends(get_db)) -> KeyValueStore:
    """Return the durable key-value store bound to the request session."""

    return SqlKeyValueStore(db)


def get_record_source(settings: Settings = Depends(get_settings)) -> RecordSource:
    """Return the source-of-record adapter reading the configured data directory."""

    return FileRecordSource(Path(settings.data_directory))


def get_communication_generator(
    store: KeyValueStore = Depends(get_store),
    source: RecordSource = Depends(get_record_source),
    settings: Settings = Depends(get_settings),
) -> CommunicationGenerator:
    return CommunicationGenerator(store, source, settings=settings)
