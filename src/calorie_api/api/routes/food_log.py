"""Food log API routes."""

from fastapi import APIRouter, status

from calorie_api.api.dependencies import TrackerDep
from calorie_api.models.food import FoodItem, LogFoodRequest
from calorie_api.services.result_mapper import map_to_food_item

router = APIRouter()


@router.post("", response_model=FoodItem, status_code=status.HTTP_201_CREATED)
async def log_food(request: LogFoodRequest, tracker: TrackerDep):
    """
    Confirm a scanned (or hand-edited) estimate into today's log.

    Missing fields are filled with defaults; the id and timestamp are
    always assigned here.
    """
    item = map_to_food_item(request, image_url=request.image_url)
    return tracker.log_food(item)


@router.get("", response_model=list[FoodItem])
async def list_food_log(tracker: TrackerDep):
    """All logged items, oldest first."""
    return tracker.list_log()


@router.get("/{item_id}", response_model=FoodItem)
async def get_food_item(item_id: str, tracker: TrackerDep):
    """Get a single logged item."""
    return tracker.get_item(item_id)
