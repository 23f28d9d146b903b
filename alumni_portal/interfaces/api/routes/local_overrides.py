"""Endpoints for donations, goals and mentor offers entered by users."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from alumni_portal.application.use_cases.communications import (
    get_effective_donation_goal,
    list_local_donations as list_local_donations_uc,
    record_local_donation,
    record_mentor_offer,
    update_donation_goal,
)
from alumni_portal.config import Settings, get_settings
from alumni_portal.infrastructure.key_value_store import KeyValueStore
from alumni_portal.interfaces.api.dependencies import get_current_email, get_store
from alumni_portal.interfaces.api.schemas import (
    DonationGoalRead,
    DonationGoalUpdate,
    LocalDonationCreate,
    LocalDonationRead,
    MentorOfferCreate,
    MentorOfferSummary,
)

router = APIRouter(prefix="/local-overrides", tags=["local-overrides"])


@router.get("/donations", response_model=list[LocalDonationRead])
def list_local_donations(
    email: str = Depends(get_current_email),
    store: KeyValueStore = Depends(get_store),
) -> list[LocalDonationRead]:
    """Return the donations the user entered manually."""

    donations = list_local_donations_uc(store, email)
    return [LocalDonationRead.model_validate(item) for item in donations]


@router.post(
    "/donations",
    response_model=list[LocalDonationRead],
    status_code=status.HTTP_201_CREATED,
)
def create_local_donation(
    payload: LocalDonationCreate,
    email: str = Depends(get_current_email),
    store: KeyValueStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> list[LocalDonationRead]:
    """Record a manual donation for the user."""

    try:
        donations = record_local_donation(
            store, email, amount=payload.amount, date=payload.date, settings=settings
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return [LocalDonationRead.model_validate(item) for item in donations]


@router.get("/donation-goal", response_model=DonationGoalRead)
def read_donation_goal(
    store: KeyValueStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> DonationGoalRead:
    """Return the goal used by the donation reminder."""

    return DonationGoalRead(goal=get_effective_donation_goal(store, settings=settings))


@router.put("/donation-goal", response_model=DonationGoalRead)
def set_donation_goal(
    payload: DonationGoalUpdate,
    store: KeyValueStore = Depends(get_store),
) -> DonationGoalRead:
    """Change the annual giving goal."""

    try:
        goal = update_donation_goal(store, payload.goal)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return DonationGoalRead(goal=goal)


@router.post(
    "/mentor-offers",
    response_model=MentorOfferSummary,
    status_code=status.HTTP_201_CREATED,
)
def create_mentor_offer(
    payload: MentorOfferCreate,
    email: str = Depends(get_current_email),
    store: KeyValueStore = Depends(get_store),
) -> MentorOfferSummary:
    """Log the user's availability as a mentor."""

    offers = record_mentor_offer(store, email, focus_area=payload.focus_area)
    return MentorOfferSummary(total_offers=len(offers))
