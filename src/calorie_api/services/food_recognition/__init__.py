"""
Food Recognition Service - abstraction over the hosted vision model.
"""

from calorie_api.core.exceptions import RecognitionError

from .base import FOOD_ESTIMATE_SCHEMA, FoodRecognitionService
from .factory import clear_service_cache, get_food_recognition_service
from .llm_provider import FOOD_RECOGNITION_PROMPT, LLMFoodRecognition

__all__ = [
    "FOOD_ESTIMATE_SCHEMA",
    "FOOD_RECOGNITION_PROMPT",
    "FoodRecognitionService",
    "LLMFoodRecognition",
    "RecognitionError",
    "clear_service_cache",
    "get_food_recognition_service",
]
