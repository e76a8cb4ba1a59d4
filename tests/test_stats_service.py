"""Tests for health stats and trends."""

from datetime import UTC, date, datetime, timedelta

from health_scan.services.stats import build_user_stats, daily_scores, rank_among
from tests.conftest import NOW, make_entry


def test_build_user_stats_without_history() -> None:
    stats = build_user_stats([], now=NOW)

    assert stats.current_score == 50
    assert stats.weekly_change == 0
    assert stats.monthly_change == 0
    assert stats.total_scans == 0
    assert stats.streak == 0
    assert stats.best_score == 50
    assert stats.rank == 1
    assert stats.achievements == []


def test_build_user_stats_tracks_change_against_earlier_score() -> None:
    entries = [make_entry(20, NOW - timedelta(hours=hour + 1)) for hour in range(10)]

    stats = build_user_stats(entries, now=NOW)

    assert stats.current_score == 75
    assert stats.weekly_change == 25
    assert stats.monthly_change == 25
    assert stats.total_scans == 10
    assert stats.streak == 10
    assert stats.best_score == 75


def test_build_user_stats_best_score_looks_back() -> None:
    entries = [
        make_entry(30, NOW - timedelta(days=3)),
        make_entry(-40, NOW - timedelta(hours=1)),
    ]

    stats = build_user_stats(entries, now=NOW)

    assert stats.current_score == 46
    assert stats.best_score == 81
    assert stats.weekly_change == -4


def test_build_user_stats_includes_achievements() -> None:
    entries = [make_entry(50, NOW - timedelta(hours=1))]

    stats = build_user_stats(entries, now=NOW)

    assert [achievement.id for achievement in stats.achievements] == [
        "first-scan",
        "high-score",
    ]


def test_rank_among_friends() -> None:
    assert rank_among(70, [80, 70, 90, 10]) == 3
    assert rank_among(70, []) == 1


def test_build_user_stats_ranks_against_friends() -> None:
    stats = build_user_stats([], now=NOW, friend_scores=[90, 40, 51])

    assert stats.rank == 3


def test_daily_scores_aggregates_by_day() -> None:
    entries = [
        make_entry(10, NOW - timedelta(hours=1)),
        make_entry(20, NOW - timedelta(hours=2)),
        make_entry(-10, NOW - timedelta(days=2)),
    ]

    days = daily_scores(entries, 3, now=NOW)

    assert [day.day for day in days] == [
        date(2024, 5, 8),
        date(2024, 5, 9),
        date(2024, 5, 10),
    ]
    assert [day.score for day in days] == [40, 50, 65]
    assert [day.scans_count for day in days] == [1, 0, 2]
    assert days[2].average_score == 15


def test_daily_scores_uses_timezone() -> None:
    scanned = datetime(2024, 5, 10, 2, 0, tzinfo=UTC)
    entries = [make_entry(10, scanned)]

    days = daily_scores(entries, 2, now=NOW, timezone_name="America/Los_Angeles")

    assert [day.day for day in days] == [date(2024, 5, 9), date(2024, 5, 10)]
    assert [day.scans_count for day in days] == [1, 0]


def test_best_score_counts_days_before_first_scan_as_neutral() -> None:
    stats = build_user_stats([make_entry(-50, NOW - timedelta(hours=1))], now=NOW)

    assert stats.current_score == 1
    assert stats.best_score == 50
    assert stats.weekly_change == -49


def test_daily_scores_ignores_entries_without_scan_time() -> None:
    entries = [
        make_entry(10, datetime.min.replace(tzinfo=UTC)),
        make_entry(20, NOW - timedelta(hours=1)),
    ]

    days = daily_scores(entries, 2, now=NOW, timezone_name="America/Los_Angeles")

    assert [day.scans_count for day in days] == [0, 1]
    assert days[1].score == 70
