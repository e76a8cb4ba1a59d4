"""Domain models for user health profiles."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal
from uuid import UUID

WeightUnit = Literal["kg", "lbs"]

HEALTH_CONDITIONS = (
    "Diabetes",
    "Hypertension",
    "Heart Disease",
    "High Cholesterol",
    "Kidney Disease",
    "Celiac Disease",
    "Lactose Intolerance",
    "GERD",
    "Irritable Bowel Syndrome",
)

COMMON_ALLERGIES = (
    "Peanuts",
    "Tree Nuts",
    "Milk",
    "Eggs",
    "Wheat",
    "Soy",
    "Fish",
    "Shellfish",
    "Sesame",
)

DIETARY_RESTRICTIONS = (
    "Vegetarian",
    "Vegan",
    "Gluten-Free",
    "Dairy-Free",
    "Low-Sodium",
    "Low-Sugar",
    "Keto",
    "Paleo",
    "Halal",
    "Kosher",
)


@dataclass(frozen=True)
class UserProfile:
    """Health profile a product is evaluated against."""

    id: UUID
    weight: float
    weight_unit: WeightUnit
    created_at: datetime
    updated_at: datetime
    health_conditions: list[str] = field(default_factory=list)
    allergies: list[str] = field(default_factory=list)
    dietary_restrictions: list[str] = field(default_factory=list)
