"""Models for image analysis results."""

from pydantic import BaseModel, Field

from health_scan.domain.products import NutritionFacts


class ExtractedNutrition(BaseModel):
    """Nutrition label values read from a product image."""

    calories: float = Field(ge=0.0)
    total_fat: float = Field(ge=0.0)
    saturated_fat: float = Field(ge=0.0)
    cholesterol: float = Field(ge=0.0)
    sodium: float = Field(ge=0.0)
    total_carbohydrates: float = Field(ge=0.0)
    sugar: float = Field(ge=0.0)
    protein: float = Field(ge=0.0)
    serving_size: str

    def to_domain(self) -> NutritionFacts:
        """Convert to the domain nutrition record."""
        return NutritionFacts(**self.model_dump())


class ProductExtract(BaseModel):
    """Structured output for product image analysis."""

    name: str
    ingredients: list[str]
    nutrition_facts: ExtractedNutrition | None = None
