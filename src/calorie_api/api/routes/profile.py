"""Profile API routes."""

from fastapi import APIRouter

from calorie_api.api.dependencies import TrackerDep
from calorie_api.models.profile import ProfileUpdate, UserProfile

router = APIRouter()


@router.get("", response_model=UserProfile)
async def get_profile(tracker: TrackerDep):
    """Get the current profile."""
    return tracker.profile


@router.patch("", response_model=UserProfile)
async def update_profile(update: ProfileUpdate, tracker: TrackerDep):
    """Update only the provided profile fields."""
    return tracker.update_profile(update)
