"""Recipe data aggregation over RecipeDB with caching and local fallback."""

import asyncio
import copy
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeVar

from food_advisor.adapters.recipedb_client import RecipeDbClient
from food_advisor.data.nutrition_facts import NUTRITION_FACTS
from food_advisor.data.recipes import LOCAL_RECIPES
from food_advisor.data.sample_recipes import SAMPLE_RECIPES
from food_advisor.domain.errors import UpstreamUnavailableError
from food_advisor.domain.nutrition import (
    IngredientItem,
    Recipe,
    RecipeDetails,
    RecipeSummary,
)
from food_advisor.services import recipe_payloads as payloads
from food_advisor.services.cache import Cache
from food_advisor.services.lookup import find_entry, normalize_name

_logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

HOUR = 3600

T = TypeVar("T")


@dataclass
class RecipeService:
    """Fetches recipe data, preferring cache, then the API, then local data.

    Lookups never raise for upstream failures: they log, fall back to the
    bundled datasets and return ``None`` (or ``[]``) when nothing matches.
    Cached lists and dicts are handed out as copies.
    """

    client: RecipeDbClient
    cache: Cache
    recipe_ttl_seconds: int = HOUR
    search_ttl_seconds: int = HOUR
    nutrition_ttl_seconds: int = 4 * HOUR
    instructions_ttl_seconds: int = 4 * HOUR
    taste_ttl_seconds: int = 2 * HOUR
    flavor_ttl_seconds: int = 2 * HOUR
    utensils_ttl_seconds: int = 2 * HOUR
    processes_ttl_seconds: int = 2 * HOUR
    ingredients_ttl_seconds: int = 2 * HOUR
    retry_attempts: int = 0
    retry_delay_seconds: float = 0.3
    debug: bool = False
    local_recipes: Mapping[str, Mapping[str, object]] = field(
        default_factory=lambda: LOCAL_RECIPES
    )
    nutrition_facts: Mapping[str, Mapping[str, object]] = field(
        default_factory=lambda: NUTRITION_FACTS
    )
    sample_recipes: list[Mapping[str, object]] = field(
        default_factory=lambda: list(SAMPLE_RECIPES)
    )

    async def get_recipe(self, food_name: str) -> Recipe | None:
        """Find the best recipe for a food name."""
        name = normalize_name(food_name)
        if not name:
            return None
        cache_key = f"recipedb:recipe:{name}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, Recipe):
            self._log_hit(cache_key)
            return cached

        payload = await self._fetch(
            lambda: self.client.search_by_title(name, page=1, limit=1),
            action=f"recipe:{name}",
        )
        records = payloads.extract_records(payload) if payload else []
        if not records:
            _logger.info("No RecipeDB results for %r, using local data", name)
            return self._local_recipe(name)

        recipe = payloads.recipe_from_payload(records[0])
        self.cache.set(cache_key, recipe, ttl_seconds=self.recipe_ttl_seconds)
        if self.debug:
            _logger.info("Found %r via RecipeDB", recipe.title)
        return recipe

    async def search_recipes(
        self, query: str, page: int = 1, limit: int = 50
    ) -> list[RecipeSummary]:
        """Search recipes by title with pagination."""
        normalized = normalize_name(query)
        cache_key = f"recipedb:search:{normalized}:{page}:{limit}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, list) and cached:
            self._log_hit(cache_key)
            return list(cached)

        payload = await self._fetch(
            lambda: self.client.search_by_title(normalized, page=page, limit=limit),
            action=f"search:{normalized}",
        )
        records = payloads.extract_records(payload) if payload else []
        if not records:
            return self._sample_search(
                lambda sample: normalized in sample.title.lower(), limit, page
            )

        results = [payloads.summary_from_payload(record) for record in records]
        self.cache.set(cache_key, list(results), ttl_seconds=self.search_ttl_seconds)
        return results

    async def search_by_method(self, method: str) -> list[RecipeSummary]:
        """Search recipes by cooking method."""
        normalized = normalize_name(method)
        cache_key = f"recipedb:method:{normalized}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, list) and cached:
            self._log_hit(cache_key)
            return list(cached)

        payload = await self._fetch(
            lambda: self.client.search_by_method(normalized),
            action=f"method:{normalized}",
        )
        records = payloads.extract_records(payload) if payload else []
        if not records:
            return self._sample_search(
                lambda sample: any(normalized in step for step in sample.processes),
                limit=None,
            )

        results = [payloads.summary_from_payload(record) for record in records]
        self.cache.set(cache_key, list(results), ttl_seconds=self.search_ttl_seconds)
        return results

    async def get_detailed_nutrition(self, recipe_id: str) -> dict[str, object] | None:
        """Return the full nutrition record of a recipe."""
        return await self._lookup(
            "nutrition",
            recipe_id,
            self.client.get_nutrition,
            payloads.nutrition_record,
            self._local_nutrition,
            self.nutrition_ttl_seconds,
        )

    async def get_instructions(self, recipe_id: str) -> list[str] | None:
        return await self._lookup(
            "instructions",
            recipe_id,
            self.client.get_instructions,
            lambda payload: payloads.instructions_from_payload(payload) or None,
            self._local_instructions,
            self.instructions_ttl_seconds,
        )

    async def get_taste_profile(self, recipe_id: str) -> dict[str, float] | None:
        return await self._lookup(
            "taste",
            recipe_id,
            self.client.get_taste,
            payloads.taste_from_payload,
            lambda _: None,
            self.taste_ttl_seconds,
        )

    async def get_flavor_profile(self, recipe_id: str) -> dict[str, object] | None:
        return await self._lookup(
            "flavor",
            recipe_id,
            self.client.get_flavor,
            payloads.flavor_from_payload,
            lambda _: None,
            self.flavor_ttl_seconds,
        )

    async def get_utensils(self, recipe_id: str) -> list[str] | None:
        return await self._lookup(
            "utensils",
            recipe_id,
            self.client.get_utensils,
            lambda payload: payloads.list_from_payload(
                payload, payloads.UTENSILS_KEYS
            )
            or None,
            lambda sample: list(sample.utensils) or None,
            self.utensils_ttl_seconds,
        )

    async def get_processes(self, recipe_id: str) -> list[str] | None:
        return await self._lookup(
            "processes",
            recipe_id,
            self.client.get_processes,
            lambda payload: payloads.list_from_payload(
                payload, payloads.PROCESSES_KEYS
            )
            or None,
            lambda sample: list(sample.processes) or None,
            self.processes_ttl_seconds,
        )

    async def get_ingredients_with_categories(
        self, recipe_id: str
    ) -> list[IngredientItem] | None:
        return await self._lookup(
            "ingredients",
            recipe_id,
            self.client.get_ingredient_categories,
            lambda payload: payloads.ingredient_items_from_payload(payload) or None,
            lambda sample: [IngredientItem(name=name) for name in sample.ingredients]
            or None,
            self.ingredients_ttl_seconds,
        )

    async def get_recipe_details(self, recipe_id: str) -> RecipeDetails:
        """Fetch every per-recipe resource concurrently.

        A part that fails unexpectedly is logged and left as ``None``.
        """
        names = (
            "nutrition",
            "instructions",
            "taste",
            "flavor",
            "utensils",
            "processes",
            "ingredients",
        )
        results = await asyncio.gather(
            self.get_detailed_nutrition(recipe_id),
            self.get_instructions(recipe_id),
            self.get_taste_profile(recipe_id),
            self.get_flavor_profile(recipe_id),
            self.get_utensils(recipe_id),
            self.get_processes(recipe_id),
            self.get_ingredients_with_categories(recipe_id),
            return_exceptions=True,
        )
        parts: dict[str, object] = {}
        for name, result in zip(names, results, strict=True):
            if isinstance(result, Exception):
                _logger.error(
                    "Recipe %s lookup failed for %s",
                    name,
                    recipe_id,
                    exc_info=result,
                )
                parts[name] = None
            else:
                parts[name] = result
        return RecipeDetails(recipe_id=recipe_id, **parts)

    async def _lookup(  # noqa: PLR0913
        self,
        operation: str,
        recipe_id: str,
        fetch: "Callable[[str], Awaitable[dict[str, object]]]",
        normalize: "Callable[[dict[str, object]], T | None]",
        fallback: "Callable[[RecipeSummary], T | None]",
        ttl_seconds: int,
    ) -> T | None:
        """Cache, fetch and fall back for a resource keyed by recipe id."""
        recipe_id = str(recipe_id).strip()
        cache_key = f"recipedb:{operation}:{normalize_name(recipe_id)}"
        cached = self.cache.get(cache_key)
        if cached is not None:
            self._log_hit(cache_key)
            return copy.deepcopy(cached)  # type: ignore[return-value]

        payload = await self._fetch(
            lambda: fetch(recipe_id), action=f"{operation}:{recipe_id}"
        )
        result = normalize(payload) if payload else None
        if result is None:
            sample = self._sample_by_id(recipe_id)
            return fallback(sample) if sample is not None else None

        self.cache.set(cache_key, copy.deepcopy(result), ttl_seconds=ttl_seconds)
        return result

    async def _fetch(
        self, func: "Callable[[], Awaitable[dict[str, object]]]", *, action: str
    ) -> dict[str, object] | None:
        """Call the API, retrying transient failures; ``None`` on failure."""
        attempt = 0
        while True:
            try:
                return await func()
            except UpstreamUnavailableError as exc:
                attempt += 1
                if exc.is_rate_limited:
                    _logger.warning("RecipeDB rate limit reached (%s)", action)
                    return None
                _logger.warning(
                    "RecipeDB %s failed (attempt %s/%s, status=%s): %s",
                    action,
                    attempt,
                    self.retry_attempts + 1,
                    exc.status_code or "n/a",
                    exc,
                )
                if not exc.is_retryable or attempt > self.retry_attempts:
                    return None
                await asyncio.sleep(self.retry_delay_seconds)

    def _local_recipe(self, name: str) -> Recipe | None:
        match = find_entry(self.local_recipes, name)
        if match is None:
            return None
        key, entry = match
        facts_match = find_entry(self.nutrition_facts, key)
        facts = (
            payloads.facts_from_mapping(*facts_match) if facts_match else None
        )
        _logger.info("Using local recipe data for %r", name)
        return payloads.recipe_from_local(entry, facts)

    def _samples(self) -> list[RecipeSummary]:
        return [
            payloads.summary_from_payload(sample, source=payloads.LOCAL_SOURCE)
            for sample in self.sample_recipes
        ]

    def _sample_search(
        self,
        predicate: "Callable[[RecipeSummary], bool]",
        limit: int | None,
        page: int = 1,
    ) -> list[RecipeSummary]:
        matches = [sample for sample in self._samples() if predicate(sample)]
        if limit is None:
            return matches
        start = (max(page, 1) - 1) * limit
        return matches[start : start + limit]

    def _sample_by_id(self, recipe_id: str) -> RecipeSummary | None:
        for sample in self._samples():
            if sample.id == recipe_id:
                return sample
        return None

    def _local_nutrition(self, sample: RecipeSummary) -> dict[str, object] | None:
        for raw in self.sample_recipes:
            if str(payloads.first_value(raw, payloads.ID_KEYS)) == sample.id:
                return {
                    key: value
                    for key, value in raw.items()
                    if key not in ("Processes", "Utensils", "ingredients")
                }
        return None

    def _local_instructions(self, sample: RecipeSummary) -> list[str] | None:
        return payloads.instructions_from_processes(sample.processes) or None

    def _log_hit(self, cache_key: str) -> None:
        if self.debug:
            _logger.info("Cache hit for %s", cache_key)
