"""Aggregate health statistics and daily trends."""

from collections.abc import Iterable
from dataclasses import replace
from datetime import UTC, date, datetime, time, timedelta
from zoneinfo import ZoneInfo

from health_scan.domain.health_score import (
    DailyHealthScore,
    HealthScoreEntry,
    UserHealthStats,
)
from health_scan.services.health_scoring import (
    NEUTRAL_SCORE,
    calculate_overall_health_score,
    calculate_streak,
    check_achievements,
    round_half_up,
)

WEEK = timedelta(days=7)
MONTH = timedelta(days=30)
BEST_SCORE_LOOKBACK_DAYS = 30


def build_user_stats(
    entries: list[HealthScoreEntry],
    now: datetime | None = None,
    friend_scores: Iterable[int] = (),
) -> UserHealthStats:
    """Compute the user's dashboard statistics from health entries."""
    current = now or datetime.now(tz=UTC)
    current_score = calculate_overall_health_score(entries, now=current)
    stats = UserHealthStats(
        current_score=current_score,
        weekly_change=current_score - _score_as_of(entries, current - WEEK),
        monthly_change=current_score - _score_as_of(entries, current - MONTH),
        total_scans=len(entries),
        streak=calculate_streak(entries, now=current),
        best_score=_best_score(entries, current, current_score),
        rank=rank_among(current_score, friend_scores),
    )
    return replace(
        stats, achievements=check_achievements(stats, entries, now=current)
    )


def rank_among(score: int, friend_scores: Iterable[int]) -> int:
    """Return the 1-based leaderboard position of a score among friends."""
    return 1 + sum(1 for friend_score in friend_scores if friend_score > score)


def daily_scores(
    entries: list[HealthScoreEntry],
    days: int,
    now: datetime | None = None,
    timezone_name: str = "UTC",
) -> list[DailyHealthScore]:
    """Return one score per day for the last ``days`` days, oldest first."""
    tz = ZoneInfo(timezone_name)
    today = (now or datetime.now(tz=UTC)).astimezone(tz).date()
    start = today - timedelta(days=days - 1)
    return [
        _aggregate_day(start + timedelta(days=offset), entries, tz)
        for offset in range(days)
    ]


def _aggregate_day(
    day: date, entries: list[HealthScoreEntry], tz: ZoneInfo
) -> DailyHealthScore:
    start = datetime.combine(day, time.min, tzinfo=tz)
    end = datetime.combine(day + timedelta(days=1), time.min, tzinfo=tz)
    day_entries = [entry for entry in entries if start <= entry.scanned_at < end]
    if not day_entries:
        return DailyHealthScore(
            day=day, score=NEUTRAL_SCORE, scans_count=0, average_score=0.0
        )
    average = sum(entry.score for entry in day_entries) / len(day_entries)
    return DailyHealthScore(
        day=day,
        score=round_half_up(average + NEUTRAL_SCORE),
        scans_count=len(day_entries),
        average_score=average,
    )


def _score_as_of(entries: list[HealthScoreEntry], moment: datetime) -> int:
    """Return the health score using only entries scanned up to a moment."""
    visible = [entry for entry in entries if entry.scanned_at <= moment]
    return calculate_overall_health_score(visible, now=moment)


def _best_score(
    entries: list[HealthScoreEntry], now: datetime, current_score: int
) -> int:
    best = current_score
    for offset in range(1, BEST_SCORE_LOOKBACK_DAYS + 1):
        moment = now - timedelta(days=offset)
        best = max(best, _score_as_of(entries, moment))
    return best
