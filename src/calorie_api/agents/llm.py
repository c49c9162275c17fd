"""LLM factory for multi-provider, schema-constrained JSON generation."""

import copy
from typing import Any

from langchain_core.runnables import Runnable

from calorie_api.core.config import LLMProvider, Settings, get_settings


def get_llm(
    response_schema: dict[str, Any],
    settings: Settings | None = None,
) -> Runnable:
    """
    Get a chat model whose output is constrained to a JSON schema.

    Args:
        response_schema: JSON schema the response text must follow
        settings: Application settings (uses default if not provided)

    Returns:
        Runnable chat model; ``ainvoke`` yields an AIMessage with JSON text

    Raises:
        ValueError: If provider is unsupported
    """
    if settings is None:
        settings = get_settings()

    match settings.llm_provider:
        case LLMProvider.GEMINI:
            return _get_gemini(settings, response_schema)
        case LLMProvider.OPENAI:
            return _get_openai(settings, response_schema)
        case _:
            raise ValueError(f"Unsupported LLM provider: {settings.llm_provider}")


def _get_gemini(settings: Settings, response_schema: dict[str, Any]) -> Runnable:
    """Get Google Gemini chat model in JSON mode."""
    from langchain_google_genai import ChatGoogleGenerativeAI

    # The key is not checked here; an empty key fails at call time.
    return ChatGoogleGenerativeAI(
        model=settings.gemini_model,
        google_api_key=settings.google_api_key,
        temperature=settings.llm_temperature,
        response_mime_type="application/json",
        response_schema=response_schema,
    )


def _get_openai(settings: Settings, response_schema: dict[str, Any]) -> Runnable:
    """Get OpenAI chat model bound to a strict json_schema response format."""
    from langchain_openai import ChatOpenAI

    llm = ChatOpenAI(
        model=settings.openai_model,
        api_key=settings.openai_api_key,
        temperature=settings.llm_temperature,
    )
    return llm.bind(
        response_format={
            "type": "json_schema",
            "json_schema": {
                "name": "response",
                "strict": True,
                "schema": strict_schema(response_schema),
            },
        }
    )


def strict_schema(schema: dict[str, Any]) -> dict[str, Any]:
    """
    Return a copy of ``schema`` with ``additionalProperties: false`` on every object.

    OpenAI strict mode rejects object schemas without it.
    """
    result = copy.deepcopy(schema)

    def _walk(node: Any) -> None:
        if isinstance(node, dict):
            if node.get("type") == "object":
                node["additionalProperties"] = False
            for value in node.values():
                _walk(value)
        elif isinstance(node, list):
            for value in node:
                _walk(value)

    _walk(result)
    return result


def get_llm_info(settings: Settings | None = None) -> dict:
    """
    Get information about the configured LLM.

    Args:
        settings: Application settings

    Returns:
        Dict with provider info
    """
    if settings is None:
        settings = get_settings()

    return {
        "provider": settings.llm_provider.value,
        "model": (
            settings.gemini_model
            if settings.llm_provider == LLMProvider.GEMINI
            else settings.openai_model
        ),
        "configured": settings.is_llm_configured,
        "temperature": settings.llm_temperature,
    }


def message_text(message: Any) -> str:
    """
    Extract the text of a chat model response.

    Providers return either a plain string or a list of content blocks.
    """
    content = getattr(message, "content", message)
    if content is None:
        return ""
    if isinstance(content, str):
        return content

    parts: list[str] = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text") or "")
    return "".join(parts)
