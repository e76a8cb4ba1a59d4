"""Compatibility scoring and risk classification."""

from health_scan.domain.products import (
    NutritionFacts,
    ProductWarning,
    RiskLevel,
    Severity,
)
from health_scan.domain.profile import UserProfile

SEVERITY_PENALTIES: dict[Severity, int] = {"high": 30, "medium": 15, "low": 5}
CONDITION_PENALTY = 10
HIGH_RISK_BELOW = 40
MEDIUM_RISK_BELOW = 70


def calculate_compatibility_score(
    warnings: list[ProductWarning],
    nutrition: NutritionFacts | None,
    profile: UserProfile,
) -> int:
    """Return a 0-100 score of how well a product suits the profile.

    Condition penalties use higher limits than the rule engine and stack on
    top of the warning penalties.
    """
    score = 100
    for warning in warnings:
        score -= SEVERITY_PENALTIES[warning.severity]

    if nutrition is not None:
        for condition in profile.health_conditions:
            if condition == "Diabetes" and nutrition.sugar > 15:
                score -= CONDITION_PENALTY
            if condition == "Hypertension" and nutrition.sodium > 200:
                score -= CONDITION_PENALTY
            if condition == "High Cholesterol" and nutrition.saturated_fat > 5:
                score -= CONDITION_PENALTY

    return max(0, min(100, score))


def determine_risk_level(
    warnings: list[ProductWarning], compatibility_score: int
) -> RiskLevel:
    """Classify a product as low, medium or high risk."""
    has_high_severity = any(warning.severity == "high" for warning in warnings)
    if has_high_severity or compatibility_score < HIGH_RISK_BELOW:
        return "high"
    if warnings or compatibility_score < MEDIUM_RISK_BELOW:
        return "medium"
    return "low"
