"""Pydantic models for recognized and logged food."""

from pydantic import BaseModel, ConfigDict, Field


class FoodEstimate(BaseModel):
    """
    Structured estimate returned by the recognition model.

    Every field is required. Values are not range-checked: the model may
    still return implausible numbers.
    """

    name: str = Field(..., description="Common or traditional name of the food")
    calories: float = Field(..., description="Total calorie estimate")
    protein: float = Field(..., description="Estimated protein in grams")
    carbs: float = Field(..., description="Estimated carbohydrates in grams")
    fat: float = Field(..., description="Estimated fat in grams")
    ingredients: list[str] = Field(..., description="Identified ingredients")


class PartialFoodRecord(BaseModel):
    """A food estimate that may omit any field, pending default-filling."""

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    ingredients: list[str] | None = None


class FoodItem(BaseModel):
    """A logged food entry. Immutable once created."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., description="Opaque identity, time-based")
    name: str
    calories: float = Field(ge=0)
    protein: float = Field(ge=0, description="Protein in grams")
    carbs: float = Field(ge=0, description="Carbohydrates in grams")
    fat: float = Field(ge=0, description="Fat in grams")
    ingredients: list[str] = Field(default_factory=list)
    timestamp: int = Field(..., description="Capture time, epoch milliseconds")
    image_url: str | None = Field(
        default=None, alias="imageUrl", description="Captured image reference"
    )


class LogFoodRequest(PartialFoodRecord):
    """Request body for confirming a scanned (or edited) food into the log."""

    image_url: str | None = Field(default=None, alias="imageUrl")


class ScanResponse(BaseModel):
    """Result of scanning a photo. Not yet logged."""

    model_config = ConfigDict(populate_by_name=True)

    estimate: FoodEstimate
    image_url: str = Field(..., alias="imageUrl", description="JPEG data URL preview")
    width: int = Field(..., description="Normalized image width")
    height: int = Field(..., description="Normalized image height")
