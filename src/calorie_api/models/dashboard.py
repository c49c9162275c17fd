"""Pydantic models for daily stats and the dashboard view."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from .food import FoodItem


class DailyStats(BaseModel):
    """Aggregate of one day's logged food plus water intake. Derived, never stored."""

    day: date
    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fat: float = 0
    water: int = Field(0, ge=0, description="Glasses of water")
    items: list[FoodItem] = Field(default_factory=list)


class MacroProgress(BaseModel):
    """Consumed amount of one macro against its goal."""

    label: str
    value: float
    goal: float
    percent: float = Field(..., description="Capped at 100")


class HydrationSettings(BaseModel):
    """Water reminder settings shown on the dashboard."""

    model_config = ConfigDict(populate_by_name=True)

    enabled: bool
    interval_minutes: int = Field(..., alias="intervalMinutes")


class DashboardSummary(BaseModel):
    """Everything the home screen renders for today."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    day: date
    calories_consumed: float = Field(..., alias="caloriesConsumed")
    calories_remaining: float = Field(..., alias="caloriesRemaining")
    calorie_percent: float = Field(..., alias="caloriePercent")
    daily_goal: float = Field(..., alias="dailyGoal")
    macros: list[MacroProgress]
    water: int
    hydration: HydrationSettings
    recent_items: list[FoodItem] = Field(..., alias="recentItems")
