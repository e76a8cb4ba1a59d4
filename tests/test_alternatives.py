"""Tests for alternative suggestions."""

from health_scan.domain.products import ProductWarning
from health_scan.services.alternatives import suggest_alternatives
from tests.conftest import make_profile, make_warning


def _allergy(label: str) -> ProductWarning:
    return ProductWarning(
        type="allergy",
        ingredient=label,
        reason=f"Contains {label} which is in your allergy list",
        severity="high",
    )


def test_fallback_when_nothing_matches() -> None:
    assert suggest_alternatives([], make_profile()) == [
        "Organic or whole grain alternatives",
        "Fresh fruits for natural sweetness",
    ]


def test_vegan_profile_without_warnings() -> None:
    profile = make_profile(dietary_restrictions=["Vegan"])

    assert suggest_alternatives([], profile) == ["Certified vegan cookies and snacks"]


def test_suggestions_follow_check_order() -> None:
    profile = make_profile(dietary_restrictions=["Vegan"])
    warnings = [_allergy("Milk"), _allergy("Wheat"), make_warning("medium", "Sugar")]

    assert suggest_alternatives(warnings, profile) == [
        "Sugar-free or low-sugar alternatives",
        "Gluten-free cookies or crackers",
        "Dairy-free or plant-based alternatives",
        "Certified vegan cookies and snacks",
    ]


def test_gluten_suggestion_requires_wheat_allergy() -> None:
    warnings = [make_warning("medium", "Wheat flour")]

    assert "Gluten-free cookies or crackers" not in suggest_alternatives(
        warnings, make_profile()
    )


def test_milk_ingredient_warning_suggests_dairy_free() -> None:
    warnings = [make_warning("low", "Milk powder")]

    assert suggest_alternatives(warnings, make_profile()) == [
        "Dairy-free or plant-based alternatives"
    ]
