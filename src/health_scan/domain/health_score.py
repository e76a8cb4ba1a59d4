"""Domain models for health scoring."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Literal
from uuid import UUID

ScoreCategory = Literal["excellent", "good", "neutral", "poor", "harmful"]
AchievementType = Literal["streak", "score", "scans", "improvement"]


@dataclass(frozen=True)
class HealthScoreEntry:
    """Per-scan health score derived from a scanned product."""

    id: str
    product_id: UUID
    product_name: str
    score: int
    scanned_at: datetime
    category: ScoreCategory


@dataclass(frozen=True)
class Achievement:
    """Unlocked achievement."""

    id: str
    title: str
    description: str
    icon: str
    unlocked_at: datetime
    type: AchievementType


@dataclass(frozen=True)
class UserHealthStats:
    """Aggregate health statistics for a user."""

    current_score: int
    weekly_change: int
    monthly_change: int
    total_scans: int
    streak: int
    best_score: int
    rank: int
    achievements: list[Achievement] = field(default_factory=list)


@dataclass(frozen=True)
class DailyHealthScore:
    """Health score summary for a single day."""

    day: date
    score: int
    scans_count: int
    average_score: float
