"""SQLAlchemy model for namespaced key-value entries."""

from sqlalchemy import Column, DateTime, String, Text

from alumni_portal.infrastructure.database import Base
from alumni_portal.utils import ensure_app_naive_datetime, now_in_app_timezone


def _now_naive():
    return ensure_app_naive_datetime(now_in_app_timezone())


class KeyValueEntryModel(Base):
    """Database representation of a single durable key-value pair."""

    __tablename__ = "key_value_entry"

    key = Column(String(320), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime(), nullable=False, default=_now_naive, onupdate=_now_naive)


__all__ = ["KeyValueEntryModel"]
