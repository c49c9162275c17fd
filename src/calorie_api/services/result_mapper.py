"""Map recognition output into a complete, loggable FoodItem."""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel

from calorie_api.models.food import FoodItem, PartialFoodRecord
from calorie_api.utils.dates import epoch_millis

UNKNOWN_FOOD_NAME = "Unknown Food"

_NUMERIC_FIELDS = ("calories", "protein", "carbs", "fat")

_last_id = 0


def _next_id(timestamp_ms: int) -> str:
    """Time-based id, bumped so ids never repeat or go backwards in this process."""
    global _last_id
    _last_id = max(timestamp_ms, _last_id + 1)
    return str(_last_id)


def map_to_food_item(
    partial: BaseModel | Mapping[str, Any],
    image_url: str | None = None,
    now: datetime | None = None,
) -> FoodItem:
    """
    Fill gaps in a partial food record and stamp identity and time.

    Missing numbers become 0, missing ingredients an empty list and a
    missing name ``"Unknown Food"``. Negative numbers are clamped to 0.

    Args:
        partial: FoodEstimate, PartialFoodRecord or plain mapping (validated
            as a PartialFoodRecord, so non-numeric values raise ValidationError)
        image_url: Reference to the captured image, if any
        now: Capture time (defaults to the current time)

    Returns:
        A new FoodItem with a fresh id and timestamp
    """
    if not isinstance(partial, BaseModel):
        partial = PartialFoodRecord.model_validate(partial)
    data = partial.model_dump(exclude_none=True)

    timestamp = epoch_millis(now)

    return FoodItem(
        id=_next_id(timestamp),
        name=data.get("name") or UNKNOWN_FOOD_NAME,
        ingredients=list(data.get("ingredients") or []),
        timestamp=timestamp,
        image_url=image_url or None,
        **{field: max(0.0, float(data.get(field) or 0)) for field in _NUMERIC_FIELDS},
    )
