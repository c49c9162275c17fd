"""Dashboard API routes."""

from fastapi import APIRouter
from pydantic import BaseModel

from calorie_api.api.dependencies import TrackerDep
from calorie_api.models.dashboard import DailyStats, DashboardSummary

router = APIRouter()


class WaterResponse(BaseModel):
    """Today's water count after a change."""

    water: int


@router.get("", response_model=DashboardSummary)
async def get_dashboard(tracker: TrackerDep):
    """
    Get today's dashboard.

    Calories consumed and remaining, progress against each macro goal,
    water intake, hydration reminder settings and the three most recent
    items (newest first).
    """
    return tracker.dashboard()


@router.get("/stats", response_model=DailyStats)
async def get_daily_stats(tracker: TrackerDep):
    """Raw aggregate of today's log."""
    return tracker.daily_stats()


@router.post("/water", response_model=WaterResponse)
async def add_water(tracker: TrackerDep):
    """Add one glass of water to today's count."""
    return WaterResponse(water=tracker.add_water())


@router.delete("/water", response_model=WaterResponse)
async def remove_water(tracker: TrackerDep):
    """Remove one glass of water from today's count (not below zero)."""
    return WaterResponse(water=tracker.remove_water())
