"""Detection, analysis and catalog endpoints."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from food_advisor.api.models import AnalyzeFoodRequest, DetectFoodRequest
from food_advisor.domain.errors import InvalidImageError
from food_advisor.services.labels import supported_foods

if TYPE_CHECKING:
    from food_advisor.containers import AppContainer

router = APIRouter(prefix="/api", tags=["food"])
_logger = logging.getLogger(__name__)


@router.post("/detect-food", response_model=None)
async def detect_food(
    body: DetectFoodRequest, request: Request
) -> dict[str, object] | JSONResponse:
    """Detect the food in an uploaded image."""
    container: AppContainer = request.app.state.container
    try:
        result = await container.vision_service.detect_food(body.image)
    except InvalidImageError as exc:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid image", "message": str(exc)},
        )
    except Exception as exc:
        _logger.exception("Food detection failed")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Food detection failed",
                "message": str(exc),
                "supportedFoods": supported_foods(),
            },
        )
    return {
        "success": True,
        "label": result.label,
        "confidence": result.confidence,
        "mappedFood": result.mapped_food,
        "isKnown": result.is_known,
        "allPredictions": [p.model_dump() for p in result.all_predictions],
        "supportedFoods": supported_foods(),
    }


@router.post("/analyze-food")
async def analyze_food(body: AnalyzeFoodRequest, request: Request) -> dict[str, object]:
    """Analyze nutrition, health score and alternatives for a food."""
    container: AppContainer = request.app.state.container
    result = await container.analysis_service.analyze(
        body.food_name, goal=body.goal, detected_label=body.detected_label
    )
    return {
        "success": True,
        "detectedFood": result.detected_food,
        "originalLabel": result.original_label,
        "recipe": result.recipe,
        "nutrition": result.nutrition,
        "healthScore": result.health_score,
        "healthLabel": result.health_label,
        "suitability": result.suitability,
        "alternatives": result.alternatives,
        "flavorData": result.flavor_data,
        "timestamp": result.timestamp.isoformat(),
    }


@router.get("/supported-foods")
async def list_supported_foods() -> dict[str, object]:
    return {"success": True, "foods": supported_foods()}


@router.get("/health")
async def health() -> dict[str, object]:
    """Health check with the data sources in use."""
    return {
        "status": "ok",
        "timestamp": datetime.now(tz=UTC).isoformat(),
        "services": {
            "recipeDB": "Foodoscope API",
            "flavorDB": "Local JSON",
            "vision": "OpenAI",
        },
    }
