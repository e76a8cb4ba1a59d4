"""Food product analysis against a user's health profile."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import uuid4

from health_scan.domain.products import ScannedProduct
from health_scan.domain.profile import UserProfile
from health_scan.domain.vision import ProductExtract
from health_scan.services.alternatives import suggest_alternatives
from health_scan.services.compatibility import (
    calculate_compatibility_score,
    determine_risk_level,
)
from health_scan.services.rules import evaluate_ingredients

_logger = logging.getLogger(__name__)


class ImageAnalyzer(Protocol):
    """Interface for extracting product data from an image."""

    async def analyze(self, image_data: str) -> ProductExtract:
        """Return the product name, ingredients and nutrition in an image."""


@dataclass
class FoodAnalysisService:
    """Service that extracts a product from an image and scores it."""

    analyzer: ImageAnalyzer
    debug: bool = False

    async def analyze(self, image_data: str, profile: UserProfile) -> ScannedProduct:
        """Analyze a product image for the given profile."""
        extract = await self.analyzer.analyze(image_data)
        product = build_scanned_product(extract, profile, image_url=image_data)
        if self.debug:
            _logger.info(
                "Analyzed product: name=%s score=%s warnings=%s",
                product.name,
                product.compatibility_score,
                len(product.warnings),
            )
        return product


def build_scanned_product(
    extract: ProductExtract,
    profile: UserProfile,
    image_url: str,
    scanned_at: datetime | None = None,
) -> ScannedProduct:
    """Run the rule engine and scorers over extracted product data."""
    nutrition = (
        extract.nutrition_facts.to_domain() if extract.nutrition_facts else None
    )
    warnings = evaluate_ingredients(extract.ingredients, nutrition, profile)
    score = calculate_compatibility_score(warnings, nutrition, profile)
    return ScannedProduct(
        id=uuid4(),
        name=extract.name,
        image_url=image_url,
        ingredients=list(extract.ingredients),
        nutrition_facts=nutrition,
        risk_level=determine_risk_level(warnings, score),
        compatibility_score=score,
        scanned_at=scanned_at or datetime.now(tz=UTC),
        warnings=warnings,
        alternatives=suggest_alternatives(warnings, profile),
    )
