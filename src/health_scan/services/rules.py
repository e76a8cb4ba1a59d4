"""Ingredient and nutrition rules evaluated against a health profile."""

from health_scan.domain.products import NutritionFacts, ProductWarning
from health_scan.domain.profile import UserProfile

_ALLERGY_SYNONYMS = {
    "Wheat": ("flour",),
    "Milk": ("milk",),
}

_NON_VEGAN_TERMS = ("egg", "milk", "butter", "honey")
_GLUTEN_TERMS = ("wheat", "flour", "barley", "rye")

DIABETES_SUGAR_LIMIT_G = 10
HYPERTENSION_SODIUM_LIMIT_MG = 150
CHOLESTEROL_SATURATED_FAT_LIMIT_G = 3


def evaluate_ingredients(
    ingredients: list[str],
    nutrition: NutritionFacts | None,
    profile: UserProfile,
) -> list[ProductWarning]:
    """Return every warning raised by the product for the given profile.

    Allergy, health-condition and dietary-restriction rules are evaluated
    independently, so a single ingredient may trigger more than one warning.
    Condition rules need nutrition facts and are skipped without them.
    """
    warnings = _check_allergies(ingredients, profile.allergies)
    if nutrition is not None:
        warnings.extend(_check_conditions(nutrition, profile.health_conditions))
    warnings.extend(_check_restrictions(ingredients, profile.dietary_restrictions))
    return warnings


def _check_allergies(
    ingredients: list[str], allergies: list[str]
) -> list[ProductWarning]:
    warnings = []
    lowered = [ingredient.lower() for ingredient in ingredients]
    for allergy in allergies:
        terms = (allergy.lower(), *_ALLERGY_SYNONYMS.get(allergy, ()))
        if any(term in ingredient for ingredient in lowered for term in terms):
            warnings.append(
                ProductWarning(
                    type="allergy",
                    ingredient=allergy,
                    reason=f"Contains {allergy} which is in your allergy list",
                    severity="high",
                )
            )
    return warnings


def _check_conditions(
    nutrition: NutritionFacts, conditions: list[str]
) -> list[ProductWarning]:
    warnings = []
    for condition in conditions:
        if condition == "Diabetes" and nutrition.sugar > DIABETES_SUGAR_LIMIT_G:
            warnings.append(
                ProductWarning(
                    type="health_condition",
                    ingredient="Sugar",
                    reason="High sugar content may affect blood glucose levels",
                    severity="medium",
                )
            )
        if (
            condition == "Hypertension"
            and nutrition.sodium > HYPERTENSION_SODIUM_LIMIT_MG
        ):
            warnings.append(
                ProductWarning(
                    type="health_condition",
                    ingredient="Sodium",
                    reason="High sodium content may increase blood pressure",
                    severity="medium",
                )
            )
        if (
            condition == "High Cholesterol"
            and nutrition.saturated_fat > CHOLESTEROL_SATURATED_FAT_LIMIT_G
        ):
            warnings.append(
                ProductWarning(
                    type="health_condition",
                    ingredient="Saturated Fat",
                    reason="High saturated fat may increase cholesterol levels",
                    severity="medium",
                )
            )
    return warnings


def _check_restrictions(
    ingredients: list[str], restrictions: list[str]
) -> list[ProductWarning]:
    warnings = []
    for restriction in restrictions:
        if restriction == "Vegan":
            warnings.extend(
                ProductWarning(
                    type="dietary_restriction",
                    ingredient=ingredient,
                    reason="Contains animal products (not vegan)",
                    severity="low",
                )
                for ingredient in _matching(ingredients, _NON_VEGAN_TERMS)
            )
        if restriction == "Gluten-Free":
            warnings.extend(
                ProductWarning(
                    type="dietary_restriction",
                    ingredient=ingredient,
                    reason="Contains gluten",
                    severity="medium",
                )
                for ingredient in _matching(ingredients, _GLUTEN_TERMS)
            )
    return warnings


def _matching(ingredients: list[str], terms: tuple[str, ...]) -> list[str]:
    """Return ingredients containing any of the lowercase terms."""
    return [
        ingredient
        for ingredient in ingredients
        if any(term in ingredient.lower() for term in terms)
    ]
