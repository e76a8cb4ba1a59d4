"""Image analyzer that returns a fixed sample product."""

import asyncio
from dataclasses import dataclass, field

from health_scan.domain.vision import ExtractedNutrition, ProductExtract
from health_scan.services.analysis import ImageAnalyzer


def sample_cookie_product() -> ProductExtract:
    """Return the chocolate chip cookie label used for demos."""
    return ProductExtract(
        name="Chocolate Chip Cookies",
        ingredients=[
            "Wheat flour",
            "Sugar",
            "Palm oil",
            "Eggs",
            "Milk powder",
            "Salt",
            "Baking powder",
            "Vanilla flavoring",
            "Soy lecithin",
        ],
        nutrition_facts=ExtractedNutrition(
            calories=150,
            total_fat=8,
            saturated_fat=4,
            cholesterol=25,
            sodium=200,
            total_carbohydrates=18,
            sugar=12,
            protein=3,
            serving_size="2 cookies (30g)",
        ),
    )


@dataclass
class StaticImageAnalyzer(ImageAnalyzer):
    """Analyzer that ignores the image and returns a fixed product."""

    product: ProductExtract = field(default_factory=sample_cookie_product)
    delay_seconds: float = 0.0

    async def analyze(self, image_data: str) -> ProductExtract:
        """Return the configured product after the simulated delay."""
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)
        return self.product
