"""Tests for HTTP-based adapters."""

import asyncio
import json

import httpx
import pytest

from food_advisor.adapters.openai_vision_client import OpenAIVisionClient
from food_advisor.adapters.recipedb_client import HttpxRecipeDbClient
from food_advisor.domain.errors import UpstreamUnavailableError

BASE_URL = "https://recipedb.test/recipe2-api"


def _recipedb_client(handler) -> HttpxRecipeDbClient:  # type: ignore[no-untyped-def]
    transport = httpx.MockTransport(handler)
    return HttpxRecipeDbClient(
        api_key="recipedb-key",
        base_url=BASE_URL,
        http_client=httpx.AsyncClient(transport=transport),
    )


def test_recipedb_search_sends_auth_and_params() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/recipe2-api/recipe-bytitle/recipeByTitle"
        assert request.url.params["title"] == "samosa"
        assert request.url.params["page"] == "2"
        assert request.url.params["limit"] == "5"
        assert request.headers["Authorization"] == "Bearer recipedb-key"
        return httpx.Response(200, json={"success": True, "data": []})

    client = _recipedb_client(handler)

    payload = asyncio.run(client.search_by_title("samosa", page=2, limit=5))

    assert payload == {"success": True, "data": []}


def test_recipedb_detail_paths() -> None:
    seen_paths: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen_paths.append(request.url.path.removeprefix("/recipe2-api"))
        return httpx.Response(200, json={"data": []})

    client = _recipedb_client(handler)

    async def run() -> None:
        await client.search_by_method("bake")
        await client.get_nutrition("42")
        await client.get_instructions("42")
        await client.get_taste("42")
        await client.get_flavor("42")
        await client.get_utensils("42")
        await client.get_processes("42")
        await client.get_ingredient_categories("42")

    asyncio.run(run())

    assert seen_paths == [
        "/recipe-method/bake",
        "/recipe-nutri/nutritioninfo/42",
        "/instructions/42",
        "/recipe-taste/42",
        "/recipe-flavor/42",
        "/recipe-utensils/42",
        "/recipe-processes/42",
        "/ingredients-categories/42",
    ]


def test_recipedb_wraps_list_bodies() -> None:
    client = _recipedb_client(lambda request: httpx.Response(200, json=[{"a": 1}]))

    payload = asyncio.run(client.get_nutrition("1"))

    assert payload == {"data": [{"a": 1}]}


def test_recipedb_status_errors_carry_status_code() -> None:
    client = _recipedb_client(lambda request: httpx.Response(429, json={}))

    with pytest.raises(UpstreamUnavailableError) as exc_info:
        asyncio.run(client.get_taste("1"))

    assert exc_info.value.status_code == 429
    assert exc_info.value.is_rate_limited
    assert not exc_info.value.is_retryable


def test_recipedb_transport_and_json_errors() -> None:
    def broken(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(UpstreamUnavailableError) as exc_info:
        asyncio.run(_recipedb_client(broken).get_flavor("1"))
    assert exc_info.value.status_code is None
    assert exc_info.value.is_retryable

    not_json = _recipedb_client(lambda request: httpx.Response(200, text="<html>"))
    with pytest.raises(UpstreamUnavailableError):
        asyncio.run(not_json.get_flavor("1"))


def test_recipedb_create_strips_trailing_slash() -> None:
    client = HttpxRecipeDbClient.create("key", f"{BASE_URL}/")

    assert client.base_url == BASE_URL
    asyncio.run(client.close())


class _FakeResponses:
    def __init__(self, output_text: str) -> None:
        self.output_text = output_text
        self.last_payload: dict[str, object] | None = None

    async def create(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        return type("Resp", (), {"output_text": self.output_text})()


class _FakeOpenAI:
    def __init__(self, output_text: str) -> None:
        self.responses = _FakeResponses(output_text)


def test_openai_vision_client_parses_output() -> None:
    fake = _FakeOpenAI(json.dumps({"predictions": [{"label": "dal", "confidence": 1}]}))
    client = OpenAIVisionClient(client=fake)

    result = asyncio.run(
        client.classify(
            model="gpt-4.1-mini",
            image_data_url="data:image/jpeg;base64,ZmFrZQ==",
            schema={"type": "object"},
            prompt="Classify",
        )
    )

    assert result == {"predictions": [{"label": "dal", "confidence": 1}]}
    payload = fake.responses.last_payload
    assert payload is not None
    assert payload["model"] == "gpt-4.1-mini"
    assert payload["store"] is False
    assert payload["text"]["format"]["name"] == "food_classification"


@pytest.mark.parametrize("output_text", ["", "not json"])
def test_openai_vision_client_rejects_bad_output(output_text: str) -> None:
    client = OpenAIVisionClient(client=_FakeOpenAI(output_text))

    with pytest.raises(UpstreamUnavailableError):
        asyncio.run(
            client.classify(
                model="gpt-4.1-mini",
                image_data_url="data:image/jpeg;base64,ZmFrZQ==",
                schema={"type": "object"},
                prompt="Classify",
            )
        )


def test_recipedb_timeout_is_retryable_upstream_error() -> None:
    seen_timeouts: list[dict[str, float]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen_timeouts.append(request.extensions["timeout"])
        raise httpx.ReadTimeout("timed out", request=request)

    client = HttpxRecipeDbClient(
        api_key="recipedb-key",
        base_url=BASE_URL,
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        timeout_seconds=2.5,
    )

    with pytest.raises(UpstreamUnavailableError) as exc_info:
        asyncio.run(client.get_nutrition("1"))

    assert exc_info.value.status_code is None
    assert exc_info.value.is_retryable
    assert seen_timeouts[0]["read"] == 2.5
    assert seen_timeouts[0]["connect"] == 2.5
