"""
Hosted vision-language model provider for food recognition.

Sends the image and a fixed instruction to the configured chat model with a
JSON response schema, then validates the answer.
"""

import json
import logging
import time

from langchain_core.messages import HumanMessage
from langchain_core.runnables import Runnable
from pydantic import ValidationError

from calorie_api.agents.llm import get_llm, message_text
from calorie_api.core.config import LLMProvider, Settings, get_settings
from calorie_api.core.exceptions import RecognitionError
from calorie_api.models.food import FoodEstimate

from .base import FOOD_ESTIMATE_SCHEMA, FoodRecognitionService

logger = logging.getLogger(__name__)


FOOD_RECOGNITION_PROMPT = (
    "Analyze this food image with high cultural awareness. Identify global and "
    "regional specialties precisely (e.g., South Indian/Tamil Nadu dishes like "
    "Dosa, Idli, Sambar, or international foods like Sushi, Tacos, etc.). "
    "Estimate total calories and list the specific main ingredients. Provide "
    "nutritional estimates for Protein, Carbs, and Fat in grams based on "
    "standard preparations of these regional dishes."
)


class LLMFoodRecognition(FoodRecognitionService):
    """
    Food recognition through a schema-constrained chat model.
    """

    def __init__(
        self,
        llm: Runnable | None = None,
        settings: Settings | None = None,
    ):
        """
        Initialize the provider.

        Args:
            llm: Chat model to call (built from settings when omitted)
            settings: Application settings
        """
        self._settings = settings or get_settings()
        self._llm = llm

    @property
    def provider_name(self) -> str:
        settings = self._settings
        if settings.llm_provider == LLMProvider.GEMINI:
            model = settings.gemini_model
        else:
            model = settings.openai_model
        return f"{settings.llm_provider.value}/{model}"

    @property
    def llm(self) -> Runnable:
        if self._llm is None:
            self._llm = get_llm(FOOD_ESTIMATE_SCHEMA, self._settings)
        return self._llm

    def build_message(self, image_base64: str) -> HumanMessage:
        """Build the multimodal request: inline JPEG first, then the instruction."""
        return HumanMessage(
            content=[
                {
                    "type": "image_url",
                    "image_url": {"url": f"data:image/jpeg;base64,{image_base64}"},
                },
                {"type": "text", "text": FOOD_RECOGNITION_PROMPT},
            ]
        )

    async def recognize(self, image_base64: str) -> FoodEstimate:
        """
        Recognize the food in a base64 JPEG.
        """
        start_time = time.time()
        logger.info(f"Sending food recognition request ({self.provider_name})")

        try:
            response = await self.llm.ainvoke([self.build_message(image_base64)])
        except Exception as e:
            logger.exception("Error recognizing food")
            raise RecognitionError(
                message=f"Recognition request failed: {e}",
                error_code="PROVIDER_ERROR",
                provider=self.provider_name,
            ) from e

        text = message_text(response).strip()
        if not text:
            logger.error("Error recognizing food: no response text from model")
            raise RecognitionError(
                message="No response from AI",
                error_code="EMPTY_RESPONSE",
                provider=self.provider_name,
            )

        logger.debug(f"Raw recognition response: {text[:500]}")

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            logger.error(f"Error recognizing food: invalid JSON ({e})")
            raise RecognitionError(
                message=f"Model returned invalid JSON: {e}",
                error_code="INVALID_JSON",
                provider=self.provider_name,
                details={"response": text[:500]},
            ) from e

        try:
            estimate = FoodEstimate.model_validate(data)
        except ValidationError as e:
            logger.error(f"Error recognizing food: response does not match schema ({e})")
            raise RecognitionError(
                message="Model response does not match the food schema",
                error_code="SCHEMA_MISMATCH",
                provider=self.provider_name,
                details={"errors": e.errors(include_url=False, include_context=False)},
            ) from e

        processing_time = int((time.time() - start_time) * 1000)
        logger.info(f"Recognized '{estimate.name}' in {processing_time}ms")
        return estimate

    async def health_check(self) -> bool:
        """The provider is usable once its credential is configured."""
        return self._settings.is_llm_configured
