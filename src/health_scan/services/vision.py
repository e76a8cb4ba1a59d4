"""Product label extraction using LLM vision."""

from dataclasses import dataclass
from typing import Protocol

from health_scan.domain.vision import ProductExtract
from health_scan.services.analysis import ImageAnalyzer


class VisionClient(Protocol):
    """Interface for reading a product label with a vision model."""

    async def read_product_label(self, image_url: str) -> dict[str, object]:
        """Return the raw name, ingredients and nutrition read from an image."""


@dataclass
class VisionService(ImageAnalyzer):
    """Image analyzer that reads product labels through a vision model."""

    client: VisionClient

    async def analyze(self, image_data: str) -> ProductExtract:
        """Extract product data from a data URL or image URL."""
        raw = await self.client.read_product_label(image_data)
        return ProductExtract.model_validate(raw)
