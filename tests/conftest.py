"""Pytest configuration and fixtures."""

import io
import json
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient
from langchain_core.messages import AIMessage
from PIL import Image

from calorie_api.core.config import Settings
from calorie_api.main import app
from calorie_api.services.tracker import TrackerState


IDLI_RESPONSE = {
    "name": "Idli",
    "calories": 120,
    "protein": 3,
    "carbs": 24,
    "fat": 1,
    "ingredients": ["rice", "urad dal"],
}


def make_image(width: int, height: int, fmt: str = "JPEG", mode: str = "RGB") -> bytes:
    """Encode a solid-colour image of the given size."""
    color = (200, 120, 40, 128) if mode == "RGBA" else (200, 120, 40)
    image = Image.new(mode, (width, height), color)
    buffer = io.BytesIO()
    image.save(buffer, format=fmt)
    return buffer.getvalue()


def make_plan_day(day_name: str = "Monday", date: str = "2026-10-19") -> dict:
    """A schema-shaped single day plan."""
    return {
        "dayName": day_name,
        "date": date,
        "totalCalories": 1950,
        "meals": [
            {
                "type": "Breakfast",
                "name": "Ragi Dosa",
                "calories": 350,
                "ingredients": ["ragi flour", "onion"],
                "macros": {"protein": 10, "carbs": 60, "fat": 6},
            },
            {
                "type": "Lunch",
                "name": "Sambar Rice",
                "calories": 650,
                "ingredients": ["rice", "toor dal", "drumstick"],
                "macros": {"protein": 22, "carbs": 110, "fat": 12},
            },
        ],
    }


def fake_llm(content) -> MagicMock:
    """Chat model stand-in whose ``ainvoke`` returns an AIMessage with ``content``."""
    if isinstance(content, dict):
        content = json.dumps(content)
    llm = MagicMock()
    llm.ainvoke = AsyncMock(return_value=AIMessage(content=content))
    return llm


@pytest.fixture
def settings() -> Settings:
    """Settings with a dummy key and no .env influence."""
    return Settings(_env_file=None, google_api_key="test-key")


@pytest.fixture
def tracker() -> TrackerState:
    """Fresh tracker state installed on the app."""
    state = TrackerState()
    app.state.tracker = state
    return state


@pytest.fixture
async def client(tracker: TrackerState) -> AsyncGenerator[AsyncClient, None]:
    """
    Create async test client.

    Usage:
        async def test_endpoint(client: AsyncClient):
            response = await client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
