"""Health scoring over a user's scan history."""

import math
import random
from datetime import UTC, datetime, timedelta

from health_scan.domain.health_score import (
    Achievement,
    HealthScoreEntry,
    ScoreCategory,
    UserHealthStats,
)
from health_scan.domain.products import ScannedProduct

NEUTRAL_SCORE = 50
SCORE_WINDOW = timedelta(days=30)
MAX_CONSISTENCY_BONUS = 10
HIGH_SCORE_THRESHOLD = 80
GOOD_SCORE_THRESHOLD = 60

_DEFAULT_RNG = random.Random()

_MESSAGES = {
    "excellent": (
        "🌟 You're crushing it! Keep up the amazing work!",
        "🏆 Health champion status unlocked!",
        "💪 Your dedication is inspiring!",
    ),
    "good": (
        "👍 Great job maintaining healthy choices!",
        "🎯 You're on the right track!",
        "🌱 Your health journey is flourishing!",
    ),
    "improving": (
        "📈 Every scan makes you healthier!",
        "🔥 Building that streak, one choice at a time!",
        "💚 Small steps lead to big changes!",
    ),
}


def calculate_product_score(product: ScannedProduct) -> int:
    """Return the signed health score (-50..50) contributed by one scan."""
    score = round_half_up((product.compatibility_score - 50) * 0.8)

    high_count = sum(1 for w in product.warnings if w.severity == "high")
    medium_count = sum(1 for w in product.warnings if w.severity == "medium")
    score -= high_count * 15
    score -= medium_count * 8

    nutrition = product.nutrition_facts
    if nutrition is not None:
        if nutrition.sodium < 100:
            score += 5
        if nutrition.sugar < 5:
            score += 5
        if nutrition.protein > 10:
            score += 3
        if nutrition.saturated_fat < 2:
            score += 3

    if not product.warnings:
        score += 10

    return max(-50, min(50, score))


def categorize_score(score: int) -> ScoreCategory:
    """Bucket a per-scan score into a category."""
    if score >= 30:
        return "excellent"
    if score >= 10:
        return "good"
    if score >= -10:
        return "neutral"
    if score >= -30:
        return "poor"
    return "harmful"


def build_health_entries(products: list[ScannedProduct]) -> list[HealthScoreEntry]:
    """Derive health score entries from scanned products."""
    entries = []
    for product in products:
        score = calculate_product_score(product)
        entries.append(
            HealthScoreEntry(
                id=f"{product.id}-score",
                product_id=product.id,
                product_name=product.name,
                score=score,
                scanned_at=product.scanned_at,
                category=categorize_score(score),
            )
        )
    return entries


def calculate_overall_health_score(
    entries: list[HealthScoreEntry], now: datetime | None = None
) -> int:
    """Return the 0-100 health score for the trailing 30 days.

    Entries scanned at or before the window cutoff are ignored. Without recent
    entries the neutral score of 50 is returned.
    """
    current = now or datetime.now(tz=UTC)
    cutoff = current - SCORE_WINDOW
    recent = [entry for entry in entries if entry.scanned_at > cutoff]
    if not recent:
        return NEUTRAL_SCORE

    average = sum(entry.score for entry in recent) / len(recent)
    consistency_bonus = min(MAX_CONSISTENCY_BONUS, len(recent) * 0.5)
    score = round_half_up(NEUTRAL_SCORE + average + consistency_bonus)
    return max(0, min(100, score))


def calculate_streak(
    entries: list[HealthScoreEntry], now: datetime | None = None
) -> int:
    """Count consecutive positive scans walking back from the newest one.

    The first entry that is not positive, or that falls more than one day
    past the current streak length from the previous scan, ends the streak.
    """
    ordered = sorted(entries, key=lambda entry: entry.scanned_at, reverse=True)
    streak = 0
    cursor = now or datetime.now(tz=UTC)
    for entry in ordered:
        days_diff = math.floor((cursor - entry.scanned_at) / timedelta(days=1))
        if days_diff <= streak + 1 and entry.score > 0:
            streak += 1
            cursor = entry.scanned_at
        else:
            break
    return streak


def check_achievements(
    stats: UserHealthStats,
    entries: list[HealthScoreEntry],
    now: datetime | None = None,
) -> list[Achievement]:
    """Return the achievements whose conditions hold for these stats.

    Nothing is remembered between calls; callers that want one-time unlocks
    must keep their own record of what was already shown.
    """
    unlocked_at = now or datetime.now(tz=UTC)
    achievements = []

    if stats.total_scans == 1:
        achievements.append(
            Achievement(
                id="first-scan",
                title="Health Journey Begins!",
                description="Completed your first food scan",
                icon="🎯",
                unlocked_at=unlocked_at,
                type="scans",
            )
        )

    if stats.streak == 7:
        achievements.append(
            Achievement(
                id="week-streak",
                title="Week Warrior",
                description="7 days of healthy choices!",
                icon="🔥",
                unlocked_at=unlocked_at,
                type="streak",
            )
        )

    if stats.streak == 30:
        achievements.append(
            Achievement(
                id="month-streak",
                title="Health Champion",
                description="30 days of consistent healthy eating!",
                icon="👑",
                unlocked_at=unlocked_at,
                type="streak",
            )
        )

    if stats.current_score >= HIGH_SCORE_THRESHOLD:
        achievements.append(
            Achievement(
                id="high-score",
                title="Health Master",
                description="Achieved 80+ health score!",
                icon="⭐",
                unlocked_at=unlocked_at,
                type="score",
            )
        )

    return achievements


def message_category(stats: UserHealthStats) -> str:
    """Pick the motivational message category for the stats."""
    if stats.current_score >= HIGH_SCORE_THRESHOLD:
        return "excellent"
    if stats.current_score >= GOOD_SCORE_THRESHOLD:
        return "good"
    if stats.weekly_change > 0:
        return "improving"
    return "encouraging"


def generate_motivational_message(
    stats: UserHealthStats, rng: random.Random | None = None
) -> str:
    """Return a random message from the category matching the stats."""
    category = message_category(stats)
    if category == "encouraging":
        pool: tuple[str, ...] = (
            f"🎯 Just {100 - stats.current_score} points to reach 100!",
            f"🔥 {stats.streak} day streak - don't break it now!",
            "🌟 Your next healthy choice could be your best yet!",
        )
    else:
        pool = _MESSAGES[category]
    return (rng or _DEFAULT_RNG).choice(pool)


def round_half_up(value: float) -> int:
    """Round with halves going up, so -2.5 becomes -2 and 2.5 becomes 3."""
    return math.floor(value + 0.5)
