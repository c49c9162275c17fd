"""
Factory for creating the food recognition service.

Reads configuration from settings and returns the configured provider.
"""

import logging
from functools import lru_cache

from calorie_api.core.config import get_settings

from .base import FoodRecognitionService
from .llm_provider import LLMFoodRecognition

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_food_recognition_service() -> FoodRecognitionService:
    """
    Get the configured food recognition service.

    The chat model itself is built lazily on first use, so a missing API
    key surfaces as a RecognitionError at call time.
    """
    settings = get_settings()
    logger.info(f"Initializing food recognition provider: {settings.llm_provider.value}")
    return LLMFoodRecognition(settings=settings)


def clear_service_cache():
    """Clear the cached service instance (useful for testing)."""
    get_food_recognition_service.cache_clear()
