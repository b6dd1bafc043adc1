"""Food image classification through an LLM vision model."""

import base64
import binascii
import re
from dataclasses import dataclass
from typing import Protocol

from food_advisor.domain.errors import InvalidImageError, NoFoodDetectedError
from food_advisor.domain.vision import DetectionResult, RankedLabel, VisionPredictions
from food_advisor.services.labels import is_known_food, map_label

MAX_PREDICTIONS = 10

CLASSIFICATION_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "predictions": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "label": {"type": "string"},
                    "confidence": {"type": "number", "minimum": 0.0, "maximum": 1.0},
                },
                "required": ["label", "confidence"],
                "additionalProperties": False,
            },
        }
    },
    "required": ["predictions"],
    "additionalProperties": False,
}

CLASSIFICATION_PROMPT = (
    "Classify the main dish in the image. "
    "Return up to 10 candidate food names, most likely first, each with a "
    "confidence between 0 and 1. Use short lowercase dish names."
)

_DATA_URL_PREFIX = re.compile(r"^data:image/\w+;base64,")


class VisionClient(Protocol):
    """Interface for LLM image classification."""

    async def classify(
        self,
        *,
        model: str,
        image_data_url: str,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        """Return structured classification data."""


@dataclass
class VisionService:
    """Detects the food in an image and maps it to a supported food."""

    client: VisionClient
    model: str

    async def detect_food(self, image: str) -> DetectionResult:
        """Classify a base64 image, with or without a data URL prefix."""
        image_bytes = _decode_image(image)
        raw = await self.client.classify(
            model=self.model,
            image_data_url=_to_data_url(image_bytes),
            schema=CLASSIFICATION_SCHEMA,
            prompt=CLASSIFICATION_PROMPT,
        )
        predictions = sorted(
            VisionPredictions.model_validate(raw).predictions,
            key=lambda prediction: prediction.confidence,
            reverse=True,
        )[:MAX_PREDICTIONS]
        if not predictions:
            raise NoFoodDetectedError("No food detected in the image")

        top = predictions[0]
        return DetectionResult(
            label=top.label,
            confidence=round(top.confidence * 100),
            mapped_food=map_label(top.label),
            is_known=is_known_food(top.label),
            all_predictions=[
                RankedLabel(
                    label=prediction.label,
                    confidence=round(prediction.confidence * 100),
                )
                for prediction in predictions
            ],
        )


def _decode_image(image: str) -> bytes:
    """Strip a data URL prefix and decode base64 image data."""
    cleaned = _DATA_URL_PREFIX.sub("", image.strip())
    try:
        image_bytes = base64.b64decode(cleaned, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidImageError("Image must be base64 encoded") from exc
    if not image_bytes:
        raise InvalidImageError("Image is empty")
    return image_bytes


def _to_data_url(image_bytes: bytes) -> str:
    """Convert bytes to a base64 data URL for image input."""
    mime_type = _detect_mime_type(image_bytes)
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"


def _detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    if image_bytes[:6] in (b"GIF87a", b"GIF89a"):
        return "image/gif"
    return "image/jpeg"
