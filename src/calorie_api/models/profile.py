"""User profile model."""

from pydantic import BaseModel, ConfigDict, Field


class UserProfile(BaseModel):
    """Nutrition goals and preferences for the single app user."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    name: str = "Friend"
    daily_goal: float = Field(2000, alias="dailyGoal", description="Calories per day")
    protein_goal: float = Field(100, alias="proteinGoal", description="Grams per day")
    carbs_goal: float = Field(250, alias="carbsGoal", description="Grams per day")
    fat_goal: float = Field(60, alias="fatGoal", description="Grams per day")
    goal: str = Field("Maintain weight", description="Dietary goal label")
    allergies: list[str] = Field(default_factory=list)
    water_reminder_enabled: bool = Field(True, alias="waterReminderEnabled")
    water_reminder_interval: int = Field(
        60, alias="waterReminderInterval", description="Reminder interval in minutes"
    )


class ProfileUpdate(BaseModel):
    """Partial profile update. Only provided fields are applied."""

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    daily_goal: float | None = Field(None, alias="dailyGoal")
    protein_goal: float | None = Field(None, alias="proteinGoal")
    carbs_goal: float | None = Field(None, alias="carbsGoal")
    fat_goal: float | None = Field(None, alias="fatGoal")
    goal: str | None = None
    allergies: list[str] | None = None
    water_reminder_enabled: bool | None = Field(None, alias="waterReminderEnabled")
    water_reminder_interval: int | None = Field(None, alias="waterReminderInterval")
