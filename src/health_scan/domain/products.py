"""Domain models for scanned products."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal
from uuid import UUID

Severity = Literal["low", "medium", "high"]
RiskLevel = Literal["low", "medium", "high"]
WarningType = Literal["allergy", "health_condition", "dietary_restriction"]


@dataclass(frozen=True)
class NutritionFacts:
    """Nutrition label values for one serving."""

    calories: float
    total_fat: float
    saturated_fat: float
    cholesterol: float
    sodium: float
    total_carbohydrates: float
    sugar: float
    protein: float
    serving_size: str


@dataclass(frozen=True)
class ProductWarning:
    """Conflict between a product and the user's profile."""

    type: WarningType
    ingredient: str
    reason: str
    severity: Severity


@dataclass(frozen=True)
class ScannedProduct:
    """A product analyzed against a user profile."""

    id: UUID
    name: str
    image_url: str
    ingredients: list[str]
    nutrition_facts: NutritionFacts | None
    risk_level: RiskLevel
    compatibility_score: int
    scanned_at: datetime
    warnings: list[ProductWarning] = field(default_factory=list)
    alternatives: list[str] = field(default_factory=list)
