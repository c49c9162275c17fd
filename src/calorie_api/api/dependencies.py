"""FastAPI dependency injection factories."""

from typing import Annotated

from fastapi import Depends, Request

from calorie_api.core.config import Settings, get_settings
from calorie_api.services.food_recognition import (
    FoodRecognitionService,
    get_food_recognition_service,
)
from calorie_api.services.meal_planner import MealPlanService
from calorie_api.services.tracker import TrackerState


# Type aliases for cleaner route signatures
SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_tracker(request: Request) -> TrackerState:
    """
    Get the tracker state owned by the running application.

    Created once in the app lifespan and shared by every request.
    """
    return request.app.state.tracker


def get_meal_plan_service(settings: SettingsDep) -> MealPlanService:
    """Get MealPlanService instance."""
    return MealPlanService(settings=settings)


# Type aliases for service dependencies
TrackerDep = Annotated[TrackerState, Depends(get_tracker)]
RecognitionServiceDep = Annotated[
    FoodRecognitionService, Depends(get_food_recognition_service)
]
MealPlanServiceDep = Annotated[MealPlanService, Depends(get_meal_plan_service)]
