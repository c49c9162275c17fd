"""
In-memory tracker state: profile, food log and water intake.

This is the single owned state object the routes share; the recognition
and planning pipeline never holds on to any of it.
"""

import logging
from collections import defaultdict
from datetime import date

from calorie_api.core.exceptions import NotFoundError, ValidationError
from calorie_api.models.dashboard import (
    DailyStats,
    DashboardSummary,
    HydrationSettings,
    MacroProgress,
)
from calorie_api.models.food import FoodItem
from calorie_api.models.profile import ProfileUpdate, UserProfile
from calorie_api.utils.dates import local_day, today

logger = logging.getLogger(__name__)

RECENT_ITEMS = 3


def _percent(value: float, goal: float) -> float:
    if goal <= 0:
        return 100.0 if value > 0 else 0.0
    return min(value / goal * 100, 100.0)


class TrackerState:
    """
    Profile, logged food and per-day water counts for one user.
    """

    def __init__(self, profile: UserProfile | None = None, tz_name: str = "UTC"):
        self.profile = profile or UserProfile()
        self.tz_name = tz_name
        self._items: list[FoodItem] = []
        self._water: dict[date, int] = defaultdict(int)

    # -------------------------------------------------------------------------
    # Food log
    # -------------------------------------------------------------------------

    def log_food(self, item: FoodItem) -> FoodItem:
        """Append a confirmed item to the log."""
        self._items.append(item)
        logger.info(f"Logged '{item.name}' ({item.calories:g} kcal)")
        return item

    def list_log(self) -> list[FoodItem]:
        """All logged items, oldest first."""
        return list(self._items)

    def get_item(self, item_id: str) -> FoodItem:
        """Look up a logged item by id."""
        for item in self._items:
            if item.id == item_id:
                return item
        raise NotFoundError("Food item", item_id)

    # -------------------------------------------------------------------------
    # Water
    # -------------------------------------------------------------------------

    def add_water(self, day: date | None = None) -> int:
        """Add one glass for ``day`` (today by default). Returns the new count."""
        day = day or today(self.tz_name)
        self._water[day] += 1
        return self._water[day]

    def remove_water(self, day: date | None = None) -> int:
        """Remove one glass, never going below zero. Returns the new count."""
        day = day or today(self.tz_name)
        self._water[day] = max(0, self._water[day] - 1)
        return self._water[day]

    # -------------------------------------------------------------------------
    # Profile
    # -------------------------------------------------------------------------

    def update_profile(self, update: ProfileUpdate) -> UserProfile:
        """Apply the provided fields one by one. Types are checked, values are not."""
        fields = {k: v for k, v in update.model_dump(exclude_unset=True).items() if v is not None}
        if not fields:
            raise ValidationError("No profile fields provided")
        for field, value in fields.items():
            setattr(self.profile, field, value)
        return self.profile

    # -------------------------------------------------------------------------
    # Derived views
    # -------------------------------------------------------------------------

    def daily_stats(self, day: date | None = None) -> DailyStats:
        """Aggregate the items captured on ``day`` plus its water count."""
        day = day or today(self.tz_name)
        items = [i for i in self._items if local_day(i.timestamp, self.tz_name) == day]
        return DailyStats(
            day=day,
            calories=sum(i.calories for i in items),
            protein=sum(i.protein for i in items),
            carbs=sum(i.carbs for i in items),
            fat=sum(i.fat for i in items),
            water=self._water.get(day, 0),
            items=items,
        )

    def dashboard(self, day: date | None = None) -> DashboardSummary:
        """Everything the home screen shows for ``day``."""
        stats = self.daily_stats(day)
        profile = self.profile

        macros = [
            MacroProgress(
                label=label,
                value=value,
                goal=goal,
                percent=_percent(value, goal),
            )
            for label, value, goal in (
                ("Protein", stats.protein, profile.protein_goal),
                ("Carbs", stats.carbs, profile.carbs_goal),
                ("Fat", stats.fat, profile.fat_goal),
            )
        ]

        return DashboardSummary(
            name=profile.name,
            day=stats.day,
            calories_consumed=stats.calories,
            calories_remaining=max(0.0, profile.daily_goal - stats.calories),
            calorie_percent=_percent(stats.calories, profile.daily_goal),
            daily_goal=profile.daily_goal,
            macros=macros,
            water=stats.water,
            hydration=HydrationSettings(
                enabled=profile.water_reminder_enabled,
                interval_minutes=profile.water_reminder_interval,
            ),
            recent_items=list(reversed(stats.items[-RECENT_ITEMS:])),
        )
