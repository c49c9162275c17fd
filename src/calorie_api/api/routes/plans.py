"""Meal plan API routes."""

from fastapi import APIRouter, HTTPException, status

from calorie_api.api.dependencies import MealPlanServiceDep, TrackerDep
from calorie_api.core.exceptions import PlanGenerationError
from calorie_api.models.errors import PipelineErrorDetail
from calorie_api.models.meal_plan import DailyMealPlan, WeeklyMealPlan

router = APIRouter()

PLAN_FAILED_MESSAGE = "Failed to generate meal plan. Please try again."

_ERROR_RESPONSES = {
    502: {"model": PipelineErrorDetail, "description": "Plan generation failed"},
}


def _plan_failed(error: PlanGenerationError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_502_BAD_GATEWAY,
        detail=PipelineErrorDetail.from_error(error, message=PLAN_FAILED_MESSAGE).model_dump(),
    )


@router.post("/daily", response_model=DailyMealPlan, responses=_ERROR_RESPONSES)
async def generate_daily_plan(tracker: TrackerDep, service: MealPlanServiceDep):
    """Generate today's meal plan from the current profile."""
    try:
        return await service.generate_daily_plan(tracker.profile)
    except PlanGenerationError as e:
        raise _plan_failed(e) from e


@router.post("/weekly", response_model=WeeklyMealPlan, responses=_ERROR_RESPONSES)
async def generate_weekly_plan(tracker: TrackerDep, service: MealPlanServiceDep):
    """Generate a Monday-to-Sunday meal plan from the current profile."""
    try:
        return await service.generate_weekly_plan(tracker.profile)
    except PlanGenerationError as e:
        raise _plan_failed(e) from e
