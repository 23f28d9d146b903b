"""Pydantic models for user-entered donations, goals and mentor offers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LocalDonationCreate(BaseModel):
    """Manual donation entered from the dashboard."""

    amount: str = Field(..., min_length=1, description="Donated amount, e.g. 25.00")
    date: str | None = Field(default=None, description="Donation date as entered")


class LocalDonationRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    amount: str
    date: str | None = None


class DonationGoalUpdate(BaseModel):
    goal: float = Field(..., gt=0, description="Annual giving goal")


class DonationGoalRead(BaseModel):
    goal: float


class MentorOfferCreate(BaseModel):
    focus_area: str | None = Field(default=None, max_length=200)


class MentorOfferSummary(BaseModel):
    total_offers: int


__all__ = [
    "DonationGoalRead",
    "DonationGoalUpdate",
    "LocalDonationCreate",
    "LocalDonationRead",
    "MentorOfferCreate",
    "MentorOfferSummary",
]
