"""Request bodies for the food endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class DetectFoodRequest(BaseModel):
    """Base64 image upload, optionally as a data URL."""

    image: str = Field(min_length=1)


class AnalyzeFoodRequest(BaseModel):
    """Food to analyze and the goal to score it against."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    food_name: str = Field(alias="foodName", min_length=1)
    goal: str | None = None
    detected_label: str | None = Field(default=None, alias="detectedLabel")
