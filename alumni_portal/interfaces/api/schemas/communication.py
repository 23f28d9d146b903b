"""Pydantic models describing communication payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from alumni_portal.domain.entities import CommunicationStatus


class CommunicationRead(BaseModel):
    """Representation of a communication delivered to the client."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    subject: str
    body: str
    category: str
    read: bool
    dismissed: bool
    status: CommunicationStatus
    date: datetime


class CommunicationReadUpdate(BaseModel):
    """Payload used to toggle the read flag of a communication."""

    read: bool = True


__all__ = ["CommunicationRead", "CommunicationReadUpdate"]
