"""Application configuration using Pydantic Settings."""

from enum import Enum
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_PLAN_CUISINE = (
    "authentic Indian Tamil Nadu regional cuisine "
    "(e.g., Idli, Dosa, Sambar, Rasam, Pongal, Chettinad dishes, Kootu, Poriyal)"
)


class LLMProvider(str, Enum):
    """Supported LLM providers."""
    GEMINI = "gemini"
    OPENAI = "openai"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # LLM Provider Selection
    llm_provider: LLMProvider = LLMProvider.GEMINI

    # Google Gemini Configuration
    # An empty key is passed through as-is; the remote endpoint rejects it.
    google_api_key: str = ""
    gemini_model: str = "gemini-flash-latest"

    # OpenAI Configuration
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"

    # LLM Settings
    llm_temperature: float = 0.0

    # Image preprocessing
    image_max_edge: int = 512
    image_jpeg_quality: int = 90  # Pillow scale (1-95)
    max_upload_bytes: int = 10 * 1024 * 1024

    # Meal planning
    plan_cuisine: str = DEFAULT_PLAN_CUISINE

    # Day boundaries for the food log and water counter
    timezone: str = "UTC"

    # App
    log_level: str = "INFO"
    debug: bool = False
    app_name: str = "Calorie Scan API"
    api_version: str = "1.0.0"

    @property
    def is_llm_configured(self) -> bool:
        """Check if the selected LLM provider has a credential."""
        if self.llm_provider == LLMProvider.GEMINI:
            return bool(self.google_api_key)
        elif self.llm_provider == LLMProvider.OPENAI:
            return bool(self.openai_api_key)
        return False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
