"""Models for image classification results."""

from pydantic import BaseModel, Field


class Prediction(BaseModel):
    """Single label predicted for an image."""

    label: str
    confidence: float = Field(ge=0.0, le=1.0)


class VisionPredictions(BaseModel):
    """Structured output returned by the vision client."""

    predictions: list[Prediction]


class RankedLabel(BaseModel):
    """Prediction with confidence expressed as a percentage."""

    label: str
    confidence: int


class DetectionResult(BaseModel):
    """Top label of an image mapped onto a supported food."""

    label: str
    confidence: int
    mapped_food: str
    is_known: bool
    all_predictions: list[RankedLabel]
