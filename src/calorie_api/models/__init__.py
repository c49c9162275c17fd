"""Pydantic models for API schemas."""

from .dashboard import DailyStats, DashboardSummary, HydrationSettings, MacroProgress
from .errors import PipelineErrorDetail
from .food import FoodEstimate, FoodItem, LogFoodRequest, PartialFoodRecord, ScanResponse
from .meal_plan import DailyMealPlan, Meal, MealMacros, MealType, WeeklyMealPlan
from .profile import ProfileUpdate, UserProfile

__all__ = [
    # Food
    "FoodEstimate",
    "FoodItem",
    "LogFoodRequest",
    "PartialFoodRecord",
    "ScanResponse",
    # Meal plans
    "DailyMealPlan",
    "Meal",
    "MealMacros",
    "MealType",
    "WeeklyMealPlan",
    # Profile
    "ProfileUpdate",
    "UserProfile",
    # Errors
    "PipelineErrorDetail",
    # Dashboard
    "DailyStats",
    "DashboardSummary",
    "HydrationSettings",
    "MacroProgress",
]
