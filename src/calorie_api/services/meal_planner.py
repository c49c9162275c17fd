"""
Meal plan generation through the hosted model.

Builds a prompt from the user's nutrition profile and asks for either one
day or a full week of meals in a fixed JSON shape. The cuisine restriction
and the seven-day count are requested in the prompt only; the response is
checked for shape, not for content.
"""

import json
import logging
from typing import Any, Callable, TypeVar

from langchain_core.runnables import Runnable
from pydantic import BaseModel, ValidationError

from calorie_api.agents.llm import get_llm, message_text
from calorie_api.core.config import Settings, get_settings
from calorie_api.core.exceptions import PlanGenerationError
from calorie_api.models.meal_plan import DailyMealPlan, MealType, WeeklyMealPlan
from calorie_api.models.profile import UserProfile

logger = logging.getLogger(__name__)

PlanT = TypeVar("PlanT", bound=BaseModel)


DAILY_PLAN_SCHEMA = {
    "type": "object",
    "properties": {
        "dayName": {"type": "string"},
        "date": {"type": "string"},
        "totalCalories": {"type": "number"},
        "meals": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "type": {"type": "string", "enum": [t.value for t in MealType]},
                    "name": {"type": "string"},
                    "calories": {"type": "number"},
                    "ingredients": {"type": "array", "items": {"type": "string"}},
                    "macros": {
                        "type": "object",
                        "properties": {
                            "protein": {"type": "number"},
                            "carbs": {"type": "number"},
                            "fat": {"type": "number"},
                        },
                        "required": ["protein", "carbs", "fat"],
                    },
                },
                "required": ["type", "name", "calories", "ingredients", "macros"],
            },
        },
    },
    "required": ["dayName", "date", "totalCalories", "meals"],
}

WEEKLY_PLAN_SCHEMA = {
    "type": "object",
    "properties": {
        "days": {"type": "array", "items": DAILY_PLAN_SCHEMA},
    },
    "required": ["days"],
}


def _targets(profile: UserProfile) -> str:
    return (
        f"Calories: {profile.daily_goal:g}kcal, Protein: {profile.protein_goal:g}g, "
        f"Carbs: {profile.carbs_goal:g}g, Fat: {profile.fat_goal:g}g"
    )


def _allergies(profile: UserProfile) -> str:
    return ", ".join(profile.allergies) or "None"


def build_daily_prompt(profile: UserProfile, cuisine: str) -> str:
    """Prompt for a single day's plan."""
    return (
        f"STRICT REQUIREMENT: Generate a personalized daily meal plan for today "
        f"consisting ONLY of {cuisine}.\n"
        f"Do not include any other international or global cuisines.\n"
        f"User Health Goal: {profile.goal}.\n"
        f"Daily Nutritional Targets: {_targets(profile)}.\n"
        f"Allergies: {_allergies(profile)}.\n"
        f"Please ensure the portion sizes and ingredients are realistic for a "
        f"healthy diet in this cuisine."
    )


def build_weekly_prompt(profile: UserProfile, cuisine: str) -> str:
    """Prompt for a Monday-to-Sunday plan."""
    return (
        f"Generate a personalized 7-day meal plan (Monday to Sunday) consisting "
        f"primarily of {cuisine}, while ensuring variety within the cuisine.\n"
        f"Goal: {profile.goal}. Daily Targets - {_targets(profile)}.\n"
        f"Allergies: {_allergies(profile)}.\n"
        f"Ensure each day is unique and nutritiously balanced according to the "
        f"macro targets using ingredients typical of this cuisine."
    )


class MealPlanService:
    """
    Generates daily and weekly meal plans from a user profile.

    Each request either returns a complete validated plan or raises
    PlanGenerationError; nothing is retried or partially recovered.
    """

    def __init__(
        self,
        llm_factory: Callable[[dict[str, Any]], Runnable] | None = None,
        settings: Settings | None = None,
    ):
        """
        Args:
            llm_factory: Builds a chat model for a response schema
                (defaults to the configured provider)
            settings: Application settings
        """
        self._settings = settings or get_settings()
        self._llm_factory = llm_factory or (
            lambda schema: get_llm(schema, self._settings)
        )

    async def generate_daily_plan(self, profile: UserProfile) -> DailyMealPlan:
        """Generate today's plan for ``profile``."""
        prompt = build_daily_prompt(profile, self._settings.plan_cuisine)
        return await self._generate(prompt, DAILY_PLAN_SCHEMA, DailyMealPlan, "daily")

    async def generate_weekly_plan(self, profile: UserProfile) -> WeeklyMealPlan:
        """Generate a seven-day plan for ``profile``."""
        prompt = build_weekly_prompt(profile, self._settings.plan_cuisine)
        plan = await self._generate(prompt, WEEKLY_PLAN_SCHEMA, WeeklyMealPlan, "weekly")
        if len(plan.days) != 7:
            # Reported, not enforced.
            logger.warning(f"Weekly plan returned {len(plan.days)} days instead of 7")
        return plan

    async def _generate(
        self,
        prompt: str,
        schema: dict[str, Any],
        model: type[PlanT],
        kind: str,
    ) -> PlanT:
        logger.info(f"Requesting {kind} meal plan")

        try:
            llm = self._llm_factory(schema)
            response = await llm.ainvoke(prompt)
        except Exception as e:
            logger.exception(f"Error generating {kind} plan")
            raise PlanGenerationError(
                message=f"Plan request failed: {e}",
                error_code="PROVIDER_ERROR",
            ) from e

        text = message_text(response).strip()
        if not text:
            logger.error(f"Error generating {kind} plan: no response text from model")
            raise PlanGenerationError(
                message="No response from AI",
                error_code="EMPTY_RESPONSE",
            )

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            logger.error(f"Error generating {kind} plan: invalid JSON ({e})")
            raise PlanGenerationError(
                message=f"Model returned invalid JSON: {e}",
                error_code="INVALID_JSON",
                details={"response": text[:500]},
            ) from e

        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.error(f"Error generating {kind} plan: response does not match schema")
            raise PlanGenerationError(
                message=f"Model response does not match the {kind} plan schema",
                error_code="SCHEMA_MISMATCH",
                details={"errors": e.errors(include_url=False, include_context=False)},
            ) from e
