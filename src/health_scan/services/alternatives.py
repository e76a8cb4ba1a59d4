"""Suggestions for healthier product alternatives."""

from health_scan.domain.products import ProductWarning
from health_scan.domain.profile import UserProfile

FALLBACK_ALTERNATIVES = (
    "Organic or whole grain alternatives",
    "Fresh fruits for natural sweetness",
)


def suggest_alternatives(
    warnings: list[ProductWarning], profile: UserProfile
) -> list[str]:
    """Map warning patterns to alternative product suggestions."""
    alternatives: list[str] = []

    if any("sugar" in warning.ingredient.lower() for warning in warnings):
        alternatives.append("Sugar-free or low-sugar alternatives")

    if any(
        warning.type == "allergy" and warning.ingredient == "Wheat"
        for warning in warnings
    ):
        alternatives.append("Gluten-free cookies or crackers")

    if any("milk" in warning.ingredient.lower() for warning in warnings):
        alternatives.append("Dairy-free or plant-based alternatives")

    if "Vegan" in profile.dietary_restrictions:
        alternatives.append("Certified vegan cookies and snacks")

    if not alternatives:
        alternatives.extend(FALLBACK_ALTERNATIVES)

    return alternatives
