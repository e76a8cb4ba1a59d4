"""Pydantic models for API request payloads."""

from datetime import UTC, datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from health_scan.domain.products import ProductWarning, ScannedProduct
from health_scan.domain.profile import UserProfile
from health_scan.domain.vision import ExtractedNutrition


class ProfilePayload(BaseModel):
    """Health profile fields editable by the user."""

    weight: float = Field(gt=0)
    weight_unit: Literal["kg", "lbs"] = "kg"
    health_conditions: list[str] = Field(default_factory=list)
    allergies: list[str] = Field(default_factory=list)
    dietary_restrictions: list[str] = Field(default_factory=list)

    def to_domain(self, user_id: UUID, now: datetime) -> UserProfile:
        """Build a profile record for a user."""
        return UserProfile(
            id=user_id,
            weight=self.weight,
            weight_unit=self.weight_unit,
            health_conditions=list(self.health_conditions),
            allergies=list(self.allergies),
            dietary_restrictions=list(self.dietary_restrictions),
            created_at=now,
            updated_at=now,
        )


class OnboardingRequest(BaseModel):
    """Onboarding result; a missing profile means onboarding was skipped."""

    profile: ProfilePayload | None = None


class ScanRequest(BaseModel):
    """Image submitted for analysis."""

    image_data: str = Field(min_length=1)


class WarningPayload(BaseModel):
    """Product warning payload."""

    type: Literal["allergy", "health_condition", "dietary_restriction"]
    ingredient: str
    reason: str
    severity: Literal["low", "medium", "high"]


class ProductPayload(BaseModel):
    """Analyzed product saved to history."""

    id: UUID
    name: str
    image_url: str
    ingredients: list[str]
    nutrition_facts: ExtractedNutrition | None = None
    risk_level: Literal["low", "medium", "high"]
    compatibility_score: int = Field(ge=0, le=100)
    warnings: list[WarningPayload] = Field(default_factory=list)
    alternatives: list[str] = Field(default_factory=list)
    scanned_at: datetime

    @field_validator("scanned_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        return value if value.tzinfo else value.replace(tzinfo=UTC)

    def to_domain(self) -> ScannedProduct:
        """Build the domain product record."""
        return ScannedProduct(
            id=self.id,
            name=self.name,
            image_url=self.image_url,
            ingredients=list(self.ingredients),
            nutrition_facts=(
                self.nutrition_facts.to_domain() if self.nutrition_facts else None
            ),
            risk_level=self.risk_level,
            compatibility_score=self.compatibility_score,
            scanned_at=self.scanned_at,
            warnings=[ProductWarning(**w.model_dump()) for w in self.warnings],
            alternatives=list(self.alternatives),
        )
