"""Pydantic models for generated meal plans."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class MealType(str, Enum):
    """Slot a meal occupies in the day."""

    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACK = "Snack"


class MealMacros(BaseModel):
    """Macronutrient breakdown of a planned meal, in grams."""

    protein: float
    carbs: float
    fat: float


class Meal(BaseModel):
    """A single planned meal."""

    type: MealType
    name: str
    calories: float
    ingredients: list[str]
    macros: MealMacros


class DailyMealPlan(BaseModel):
    """One day of planned meals."""

    model_config = ConfigDict(populate_by_name=True)

    day_name: str = Field(..., alias="dayName")
    date: str
    total_calories: float = Field(..., alias="totalCalories")
    meals: list[Meal]


class WeeklyMealPlan(BaseModel):
    """A week of daily plans, in order. Seven days are requested, not enforced."""

    days: list[DailyMealPlan]
