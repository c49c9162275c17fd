"""
Base interface for food recognition.

Defines the capability every provider implements, plus the JSON schema the
remote model's answer must follow.
"""

from abc import ABC, abstractmethod

from calorie_api.models.food import FoodEstimate


FOOD_ESTIMATE_SCHEMA = {
    "type": "object",
    "properties": {
        "name": {
            "type": "string",
            "description": "Common or traditional name of the food",
        },
        "calories": {"type": "number", "description": "Total calorie estimate"},
        "protein": {"type": "number", "description": "Estimated protein in grams"},
        "carbs": {"type": "number", "description": "Estimated carbohydrates in grams"},
        "fat": {"type": "number", "description": "Estimated fat in grams"},
        "ingredients": {
            "type": "array",
            "items": {"type": "string"},
            "description": "List of identified ingredients, including regional spices or components",
        },
    },
    "required": ["name", "calories", "ingredients", "protein", "carbs", "fat"],
}


class FoodRecognitionService(ABC):
    """
    Abstract base class for food recognition services.

    Implementations call a remote model; nothing here is inferred locally.
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return the name of this provider."""
        ...

    @abstractmethod
    async def recognize(self, image_base64: str) -> FoodEstimate:
        """
        Estimate the food and nutrition shown in an image.

        Args:
            image_base64: Base64 JPEG payload without a data-URL prefix

        Returns:
            FoodEstimate with every schema field present

        Raises:
            RecognitionError: If the call fails, returns no text, or returns
                text that is not a schema-shaped JSON object
        """
        ...

    @abstractmethod
    async def health_check(self) -> bool:
        """
        Check if the provider is configured and ready.

        Returns:
            True if the provider can accept requests
        """
        ...
