"""Foodoscope RecipeDB API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from food_advisor.domain.errors import UpstreamUnavailableError


class RecipeDbClient(Protocol):
    """Interface for recipe API interactions.

    Every method returns the raw JSON body and raises
    ``UpstreamUnavailableError`` when the call fails.
    """

    async def search_by_title(
        self, title: str, page: int = 1, limit: int = 10
    ) -> dict[str, object]:
        """Search recipes whose title matches."""

    async def search_by_method(self, method: str) -> dict[str, object]:
        """Search recipes cooked with a given method."""

    async def get_nutrition(self, recipe_id: str) -> dict[str, object]:
        """Fetch the full nutrition record of a recipe."""

    async def get_instructions(self, recipe_id: str) -> dict[str, object]:
        """Fetch cooking instructions."""

    async def get_taste(self, recipe_id: str) -> dict[str, object]:
        """Fetch the taste profile."""

    async def get_flavor(self, recipe_id: str) -> dict[str, object]:
        """Fetch the flavor profile."""

    async def get_utensils(self, recipe_id: str) -> dict[str, object]:
        """Fetch the utensils used."""

    async def get_processes(self, recipe_id: str) -> dict[str, object]:
        """Fetch the cooking processes."""

    async def get_ingredient_categories(self, recipe_id: str) -> dict[str, object]:
        """Fetch ingredients with their categories."""


@dataclass
class HttpxRecipeDbClient(RecipeDbClient):
    """HTTPX-backed RecipeDB client."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 10.0

    @classmethod
    def create(
        cls, api_key: str, base_url: str, timeout_seconds: float = 10.0
    ) -> "HttpxRecipeDbClient":
        """Create a RecipeDB client with a managed httpx session."""
        return cls(
            api_key=api_key,
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def search_by_title(
        self, title: str, page: int = 1, limit: int = 10
    ) -> dict[str, object]:
        return await self._get(
            "/recipe-bytitle/recipeByTitle",
            params={"title": title, "page": page, "limit": limit},
        )

    async def search_by_method(self, method: str) -> dict[str, object]:
        return await self._get(f"/recipe-method/{method}")

    async def get_nutrition(self, recipe_id: str) -> dict[str, object]:
        return await self._get(f"/recipe-nutri/nutritioninfo/{recipe_id}")

    async def get_instructions(self, recipe_id: str) -> dict[str, object]:
        return await self._get(f"/instructions/{recipe_id}")

    async def get_taste(self, recipe_id: str) -> dict[str, object]:
        return await self._get(f"/recipe-taste/{recipe_id}")

    async def get_flavor(self, recipe_id: str) -> dict[str, object]:
        return await self._get(f"/recipe-flavor/{recipe_id}")

    async def get_utensils(self, recipe_id: str) -> dict[str, object]:
        return await self._get(f"/recipe-utensils/{recipe_id}")

    async def get_processes(self, recipe_id: str) -> dict[str, object]:
        return await self._get(f"/recipe-processes/{recipe_id}")

    async def get_ingredient_categories(self, recipe_id: str) -> dict[str, object]:
        return await self._get(f"/ingredients-categories/{recipe_id}")

    async def _get(
        self, path: str, params: dict[str, object] | None = None
    ) -> dict[str, object]:
        url = f"{self.base_url}{path}"
        try:
            response = await self.http_client.get(
                url,
                params=params,
                headers={"Authorization": f"Bearer {self.api_key}"},
                timeout=self.timeout_seconds,
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            raise UpstreamUnavailableError(
                f"RecipeDB returned HTTP {exc.response.status_code} for {path}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise UpstreamUnavailableError(
                f"RecipeDB request to {path} failed: {exc!r}"
            ) from exc
        except ValueError as exc:
            raise UpstreamUnavailableError(
                f"RecipeDB returned invalid JSON for {path}"
            ) from exc
        if not isinstance(payload, dict):
            return {"data": payload}
        return payload

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
