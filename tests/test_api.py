"""API tests for the HTTP surface.

Recognition and planning are replaced with fakes; nothing reaches the network.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import AsyncClient

from calorie_api.api.dependencies import get_meal_plan_service
from calorie_api.core.exceptions import PlanGenerationError, RecognitionError
from calorie_api.main import app
from calorie_api.models.food import FoodEstimate
from calorie_api.models.meal_plan import WeeklyMealPlan
from calorie_api.services.food_recognition import get_food_recognition_service

from conftest import IDLI_RESPONSE, make_image, make_plan_day


def _recognition(result=None, error=None) -> MagicMock:
    service = MagicMock()
    service.provider_name = "fake/vision"
    service.recognize = AsyncMock(return_value=result, side_effect=error)
    service.health_check = AsyncMock(return_value=True)
    app.dependency_overrides[get_food_recognition_service] = lambda: service
    return service


def _planner(**methods) -> MagicMock:
    service = MagicMock()
    for name, mock in methods.items():
        setattr(service, name, mock)
    app.dependency_overrides[get_meal_plan_service] = lambda: service
    return service


class TestInfoEndpoints:
    """Tests for / and /health."""

    @pytest.mark.asyncio
    async def test_root(self, client: AsyncClient):
        response = await client.get("/")

        assert response.status_code == 200
        assert response.json()["docs"] == "/docs"

    @pytest.mark.asyncio
    async def test_health_reports_llm(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "provider" in data["llm"]


class TestScanEndpoint:
    """Tests for POST /scan."""

    @pytest.mark.asyncio
    async def test_scan_success(self, client: AsyncClient):
        service = _recognition(result=FoodEstimate(**IDLI_RESPONSE))

        response = await client.post(
            "/scan",
            files={"file": ("idli.jpg", make_image(1024, 768), "image/jpeg")},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["estimate"]["name"] == "Idli"
        assert (data["width"], data["height"]) == (512, 384)
        assert data["imageUrl"].startswith("data:image/jpeg;base64,")
        sent = service.recognize.call_args.args[0]
        assert not sent.startswith("data:")
        assert data["imageUrl"].endswith(sent)

    @pytest.mark.asyncio
    async def test_scan_does_not_log(self, client: AsyncClient, tracker):
        _recognition(result=FoodEstimate(**IDLI_RESPONSE))

        await client.post("/scan", files={"file": ("a.png", make_image(64, 64, fmt="PNG"), "image/png")})

        assert tracker.list_log() == []

    @pytest.mark.asyncio
    async def test_scan_undecodable_returns_422(self, client: AsyncClient):
        service = _recognition(result=FoodEstimate(**IDLI_RESPONSE))

        response = await client.post(
            "/scan",
            files={"file": ("notes.txt", b"not an image", "text/plain")},
        )

        assert response.status_code == 422
        assert response.json()["detail"]["error_code"] == "DECODE_ERROR"
        service.recognize.assert_not_called()

    @pytest.mark.asyncio
    async def test_scan_recognition_failure_returns_502(self, client: AsyncClient):
        _recognition(
            error=RecognitionError(
                "No response from AI", error_code="EMPTY_RESPONSE", provider="fake/vision"
            )
        )

        response = await client.post(
            "/scan",
            files={"file": ("idli.jpg", make_image(100, 100), "image/jpeg")},
        )

        assert response.status_code == 502
        detail = response.json()["detail"]
        assert detail["error_code"] == "EMPTY_RESPONSE"
        assert detail["message"] == "Failed to recognize food. Please try again."
        assert detail["details"]["provider"] == "fake/vision"

    @pytest.mark.asyncio
    async def test_scan_health(self, client: AsyncClient):
        _recognition()

        response = await client.get("/scan/health")

        assert response.json() == {"provider": "fake/vision", "healthy": True}


class TestLogAndDashboard:
    """Tests for /log and /dashboard."""

    @pytest.mark.asyncio
    async def test_confirm_scan_into_log(self, client: AsyncClient):
        response = await client.post("/log", json={**IDLI_RESPONSE, "imageUrl": "data:image/jpeg;base64,eA=="})

        assert response.status_code == 201
        item = response.json()
        assert item["name"] == "Idli"
        assert item["calories"] == 120
        assert item["imageUrl"] == "data:image/jpeg;base64,eA=="

        listed = (await client.get("/log")).json()
        assert [i["id"] for i in listed] == [item["id"]]

        fetched = await client.get(f"/log/{item['id']}")
        assert fetched.json() == item

    @pytest.mark.asyncio
    async def test_partial_record_gets_defaults(self, client: AsyncClient):
        response = await client.post("/log", json={"name": "Filter Coffee"})

        item = response.json()
        assert item["calories"] == 0
        assert item["ingredients"] == []

    @pytest.mark.asyncio
    async def test_missing_item_returns_404(self, client: AsyncClient):
        response = await client.get("/log/12345")

        assert response.status_code == 404
        assert response.json()["details"] == {"resource": "Food item", "id": "12345"}

    @pytest.mark.asyncio
    async def test_dashboard_reflects_log_and_water(self, client: AsyncClient):
        await client.post("/log", json={**IDLI_RESPONSE})
        await client.post("/dashboard/water")
        await client.post("/dashboard/water")
        water = await client.delete("/dashboard/water")
        assert water.json() == {"water": 1}

        data = (await client.get("/dashboard")).json()

        assert data["caloriesConsumed"] == 120
        assert data["caloriesRemaining"] == 1880
        assert data["water"] == 1
        assert data["recentItems"][0]["name"] == "Idli"
        assert data["hydration"] == {"enabled": True, "intervalMinutes": 60}

        stats = (await client.get("/dashboard/stats")).json()
        assert stats["calories"] == 120
        assert len(stats["items"]) == 1


class TestProfile:
    """Tests for /profile."""

    @pytest.mark.asyncio
    async def test_patch_profile(self, client: AsyncClient):
        response = await client.patch(
            "/profile", json={"dailyGoal": 1800, "waterReminderInterval": 30}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["dailyGoal"] == 1800
        assert data["waterReminderInterval"] == 30
        assert data["proteinGoal"] == 100

    @pytest.mark.asyncio
    async def test_patch_rejects_wrong_type(self, client: AsyncClient):
        response = await client.patch("/profile", json={"dailyGoal": "lots"})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_empty_patch_returns_422(self, client: AsyncClient):
        response = await client.patch("/profile", json={})

        assert response.status_code == 422
        assert response.json()["error"] == "No profile fields provided"


class TestPlans:
    """Tests for /plans."""

    @pytest.mark.asyncio
    async def test_weekly_plan_uses_current_profile(self, client: AsyncClient, tracker):
        tracker.profile.allergies = ["peanut"]
        plan = WeeklyMealPlan(days=[make_plan_day() for _ in range(7)])
        service = _planner(generate_weekly_plan=AsyncMock(return_value=plan))

        response = await client.post("/plans/weekly")

        assert response.status_code == 200
        days = response.json()["days"]
        assert len(days) == 7
        assert all(day["meals"] for day in days)
        assert days[0]["dayName"] == "Monday"
        profile = service.generate_weekly_plan.call_args.args[0]
        assert profile.allergies == ["peanut"]

    @pytest.mark.asyncio
    async def test_daily_plan_failure_returns_502(self, client: AsyncClient):
        _planner(
            generate_daily_plan=AsyncMock(
                side_effect=PlanGenerationError("No response from AI", error_code="EMPTY_RESPONSE")
            )
        )

        response = await client.post("/plans/daily")

        assert response.status_code == 502
        assert response.json()["detail"]["error_code"] == "EMPTY_RESPONSE"
