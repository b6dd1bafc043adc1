"""Tests for container wiring."""

import asyncio

from food_advisor.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.analysis_service.recipe_service is container.recipe_service
    assert container.recipe_service.retry_attempts == settings.recipedb_retry_attempts
    assert container.vision_service.model == settings.openai_model
    asyncio.run(container.close_resources())
