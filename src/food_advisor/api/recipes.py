"""Recipe search and per-recipe detail endpoints.

Detail lookups answer 200 with ``success: false`` when data is missing so
clients can hide the section instead of failing the page.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from fastapi import APIRouter, Query, Request, status
from fastapi.responses import JSONResponse

from food_advisor.domain.scoring import DEFAULT_GOAL

if TYPE_CHECKING:
    from food_advisor.containers import AppContainer

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


def _now() -> str:
    return datetime.now(tz=UTC).isoformat()


def _soft(recipe_id: str, key: str, value: object, missing: str) -> dict[str, object]:
    payload: dict[str, object] = {
        "success": bool(value),
        "recipeId": recipe_id,
        key: value or None,
        "timestamp": _now(),
    }
    if not value:
        payload["message"] = f"No {missing} available for recipe {recipe_id}"
    return payload


@router.get("/search", response_model=None)
async def search_recipes(
    request: Request,
    q: str | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=50, ge=1, le=200),
) -> dict[str, object] | JSONResponse:
    """Search recipes by title."""
    if not q or not q.strip():
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": 'Query parameter "q" is required'},
        )
    recipes = await _container(request).recipe_service.search_recipes(q, page, limit)
    return {
        "success": True,
        "query": q,
        "count": len(recipes),
        "recipes": recipes,
        "timestamp": _now(),
    }


@router.get("/method/{method}")
async def recipes_by_method(method: str, request: Request) -> dict[str, object]:
    recipes = await _container(request).recipe_service.search_by_method(method)
    return {"success": True, "recipes": recipes}


@router.get("/{recipe_id}/nutrition")
async def recipe_nutrition(recipe_id: str, request: Request) -> dict[str, object]:
    nutrition = await _container(request).recipe_service.get_detailed_nutrition(
        recipe_id
    )
    return _soft(recipe_id, "nutrition", nutrition, "nutrition data")


@router.get("/{recipe_id}/instructions")
async def recipe_instructions(recipe_id: str, request: Request) -> dict[str, object]:
    instructions = await _container(request).recipe_service.get_instructions(
        recipe_id
    )
    return _soft(recipe_id, "instructions", instructions, "instructions")


@router.get("/{recipe_id}/taste")
async def recipe_taste(recipe_id: str, request: Request) -> dict[str, object]:
    taste = await _container(request).recipe_service.get_taste_profile(recipe_id)
    return _soft(recipe_id, "taste", taste, "taste profile")


@router.get("/{recipe_id}/flavor")
async def recipe_flavor(recipe_id: str, request: Request) -> dict[str, object]:
    flavor = await _container(request).recipe_service.get_flavor_profile(recipe_id)
    return _soft(recipe_id, "flavor", flavor, "flavor profile")


@router.get("/{recipe_id}/utensils")
async def recipe_utensils(recipe_id: str, request: Request) -> dict[str, object]:
    utensils = await _container(request).recipe_service.get_utensils(recipe_id)
    return {"success": True, "recipeId": recipe_id, "utensils": utensils or []}


@router.get("/{recipe_id}/processes")
async def recipe_processes(recipe_id: str, request: Request) -> dict[str, object]:
    processes = await _container(request).recipe_service.get_processes(recipe_id)
    return {"success": True, "recipeId": recipe_id, "processes": processes or []}


@router.get("/{recipe_id}/ingredients-categories")
async def recipe_ingredients(recipe_id: str, request: Request) -> dict[str, object]:
    service = _container(request).recipe_service
    ingredients = await service.get_ingredients_with_categories(recipe_id)
    return {"success": True, "recipeId": recipe_id, "ingredients": ingredients or []}


@router.get("/{recipe_id}/details")
async def recipe_details(recipe_id: str, request: Request) -> dict[str, object]:
    """Fetch every detail resource of a recipe in one call."""
    details = await _container(request).recipe_service.get_recipe_details(recipe_id)
    return {"success": True, "details": details, "timestamp": _now()}


@router.get("/{recipe_id}/health-intel", response_model=None)
async def recipe_health_intel(
    recipe_id: str,
    request: Request,
    title: str | None = None,
    goal: str = DEFAULT_GOAL,
) -> dict[str, object] | JSONResponse:
    """Health score, suitability and alternatives for a recipe title."""
    if not title or not title.strip():
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Title is required"},
        )
    intel = _container(request).analysis_service.health_intel(title, goal)
    if intel is None:
        return {"success": False, "message": "No health data available"}
    return {
        "success": True,
        "recipeId": recipe_id,
        "healthScore": intel.health_score,
        "suitability": intel.suitability,
        "nutrition": intel.nutrition,
        "alternatives": intel.alternatives,
    }


@router.get("/{recipe_id}/precision-health")
async def recipe_precision_health(recipe_id: str, request: Request) -> dict[str, object]:
    """Per-serving health score from the recipe's full nutrition record."""
    report = await _container(request).analysis_service.precision_health(recipe_id)
    if report is None:
        return {"success": False, "message": "Nutrition data unavailable for scoring"}
    return {
        "success": True,
        "healthScore": report.health_score,
        "category": report.category,
        "color": report.color,
        "benefits": report.benefits,
        "riskFactors": report.risk_factors,
        "perServing": report.per_serving,
    }
