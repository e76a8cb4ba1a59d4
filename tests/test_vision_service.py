"""Tests for vision service."""

import asyncio

import pytest
from pydantic import ValidationError

from health_scan.services.vision import VisionService
from tests.conftest import FakeVisionClient


def test_vision_service_returns_structured_product() -> None:
    client = FakeVisionClient()
    service = VisionService(client=client)

    result = asyncio.run(service.analyze("data:image/jpeg;base64,ZmFrZQ=="))

    assert result.name == "Oat Crackers"
    assert result.ingredients[0] == "Whole grain oats"
    assert result.nutrition_facts is not None
    assert result.nutrition_facts.sodium == 180
    assert client.calls == ["data:image/jpeg;base64,ZmFrZQ=="]


def test_vision_service_accepts_missing_nutrition_label() -> None:
    client = FakeVisionClient(
        payload={"name": "Apple", "ingredients": ["Apple"], "nutrition_facts": None}
    )

    result = asyncio.run(
        VisionService(client=client).analyze("https://example.com/apple.jpg")
    )

    assert result.nutrition_facts is None


def test_vision_service_rejects_negative_nutrition() -> None:
    payload = FakeVisionClient().payload
    payload["nutrition_facts"]["sugar"] = -1
    service = VisionService(client=FakeVisionClient(payload=payload))

    with pytest.raises(ValidationError):
        asyncio.run(service.analyze("data:image/jpeg;base64,ZmFrZQ=="))
