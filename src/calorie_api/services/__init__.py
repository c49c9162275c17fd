"""Business logic services."""

from .image_normalizer import NormalizedImage, compute_target_size, normalize_image
from .meal_planner import MealPlanService
from .result_mapper import map_to_food_item
from .tracker import TrackerState

__all__ = [
    "MealPlanService",
    "NormalizedImage",
    "TrackerState",
    "compute_target_size",
    "map_to_food_item",
    "normalize_image",
]
