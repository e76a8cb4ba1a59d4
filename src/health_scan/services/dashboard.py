"""Health score dashboard service."""

import random
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from health_scan.domain.health_score import (
    Achievement,
    DailyHealthScore,
    HealthScoreEntry,
    UserHealthStats,
)
from health_scan.domain.products import ScannedProduct
from health_scan.services.health_scoring import (
    build_health_entries,
    generate_motivational_message,
)
from health_scan.services.stats import build_user_stats, daily_scores

WEEKLY_TREND_DAYS = 7
MONTHLY_TREND_DAYS = 30


class FriendRepository(Protocol):
    """Persistence interface for the friends leaderboard."""

    def list_friend_scores(self, user_id: UUID) -> list[int]:
        """Return the current health scores of the user's friends."""


@dataclass
class DashboardSummary:
    """Everything the health dashboard renders."""

    entries: list[HealthScoreEntry]
    stats: UserHealthStats
    achievements: list[Achievement]
    message: str
    trend: list[DailyHealthScore]


@dataclass
class HealthDashboardService:
    """Service that turns scan history into dashboard data."""

    friend_repository: FriendRepository
    rng: random.Random = field(default_factory=random.Random)

    def build(
        self,
        user_id: UUID,
        products: list[ScannedProduct],
        trend_days: int = WEEKLY_TREND_DAYS,
        timezone_name: str = "UTC",
        now: datetime | None = None,
    ) -> DashboardSummary:
        """Compute entries, stats, achievements and a message for a user."""
        current = now or datetime.now(tz=UTC)
        entries = build_health_entries(products)
        stats = build_user_stats(
            entries,
            now=current,
            friend_scores=self.friend_repository.list_friend_scores(user_id),
        )
        return DashboardSummary(
            entries=entries,
            stats=stats,
            achievements=stats.achievements,
            message=generate_motivational_message(stats, rng=self.rng),
            trend=daily_scores(
                entries, trend_days, now=current, timezone_name=timezone_name
            ),
        )
