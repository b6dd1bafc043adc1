"""Tests for vision service."""

import asyncio

import pytest

from food_advisor.domain.errors import InvalidImageError, NoFoodDetectedError
from food_advisor.services.vision import (
    CLASSIFICATION_SCHEMA,
    VisionService,
    _to_data_url,
)
from tests.conftest import PNG_BASE64, FakeVisionClient


def test_detect_food_ranks_predictions() -> None:
    client = FakeVisionClient()
    service = VisionService(client=client, model="gpt-4.1-mini")

    result = asyncio.run(service.detect_food(PNG_BASE64))

    assert result.label == "samosa"
    assert result.confidence == 91
    assert result.mapped_food == "samosa"
    assert result.is_known is True
    assert [p.label for p in result.all_predictions] == [
        "samosa",
        "french_fries",
        "plate",
    ]
    assert [p.confidence for p in result.all_predictions] == [91, 62, 12]
    assert client.last_request is not None
    assert client.last_request["model"] == "gpt-4.1-mini"
    assert client.last_request["schema"] is CLASSIFICATION_SCHEMA
    assert str(client.last_request["image_data_url"]).startswith(
        "data:image/png;base64,"
    )


def test_detect_food_accepts_data_url() -> None:
    service = VisionService(client=FakeVisionClient(), model="gpt-4.1-mini")

    result = asyncio.run(service.detect_food(f"data:image/png;base64,{PNG_BASE64}"))

    assert result.mapped_food == "samosa"


def test_detect_food_keeps_top_ten() -> None:
    predictions = [
        {"label": f"dish_{index}", "confidence": index / 20} for index in range(15)
    ]
    service = VisionService(
        client=FakeVisionClient(predictions=predictions), model="gpt-4.1-mini"
    )

    result = asyncio.run(service.detect_food(PNG_BASE64))

    assert len(result.all_predictions) == 10
    assert result.label == "dish_14"
    assert result.is_known is False


def test_detect_food_rejects_invalid_base64() -> None:
    service = VisionService(client=FakeVisionClient(), model="gpt-4.1-mini")

    with pytest.raises(InvalidImageError):
        asyncio.run(service.detect_food("not base64!!"))


def test_detect_food_without_predictions() -> None:
    service = VisionService(
        client=FakeVisionClient(predictions=[]), model="gpt-4.1-mini"
    )

    with pytest.raises(NoFoodDetectedError):
        asyncio.run(service.detect_food(PNG_BASE64))


def test_to_data_url_uses_png_header() -> None:
    data = b"\x89PNG\r\n\x1a\n" + b"rest"
    url = _to_data_url(data)

    assert url.startswith("data:image/png;base64,")


def test_to_data_url_defaults_to_jpeg() -> None:
    data = b"unknown"
    url = _to_data_url(data)

    assert url.startswith("data:image/jpeg;base64,")
