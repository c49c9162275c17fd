"""Unit tests for the LLM factory helpers."""

from langchain_core.messages import AIMessage

from calorie_api.agents.llm import get_llm_info, message_text, strict_schema
from calorie_api.core.config import LLMProvider
from calorie_api.services.meal_planner import WEEKLY_PLAN_SCHEMA


class TestStrictSchema:
    """Tests for strict_schema."""

    def test_every_object_is_closed(self):
        result = strict_schema(WEEKLY_PLAN_SCHEMA)

        day = result["properties"]["days"]["items"]
        meal = day["properties"]["meals"]["items"]
        assert result["additionalProperties"] is False
        assert day["additionalProperties"] is False
        assert meal["additionalProperties"] is False
        assert meal["properties"]["macros"]["additionalProperties"] is False

    def test_input_is_not_mutated(self):
        strict_schema(WEEKLY_PLAN_SCHEMA)
        assert "additionalProperties" not in WEEKLY_PLAN_SCHEMA


class TestMessageText:
    """Tests for message_text."""

    def test_string_content(self):
        assert message_text(AIMessage(content='{"a": 1}')) == '{"a": 1}'

    def test_block_content_skips_non_text(self):
        message = AIMessage(
            content=[
                {"type": "text", "text": "{"},
                {"type": "image_url", "image_url": {"url": "x"}},
                "}",
            ]
        )
        assert message_text(message) == "{}"

    def test_missing_content(self):
        assert message_text(None) == ""


class TestLLMInfo:
    """Tests for get_llm_info."""

    def test_gemini_info(self, settings):
        info = get_llm_info(settings)

        assert info["provider"] == "gemini"
        assert info["model"] == "gemini-flash-latest"
        assert info["configured"] is True

    def test_openai_unconfigured(self, settings):
        info = get_llm_info(settings.model_copy(update={"llm_provider": LLMProvider.OPENAI, "openai_api_key": ""}))

        assert info["provider"] == "openai"
        assert info["configured"] is False
