"""Logging consistency score."""

from collections.abc import Sequence

from .numbers import clamp, round_int


LOG_RATE_WEIGHT = 0.4
ADHERENCE_WEIGHT = 0.6


def calculate_consistency_score(daily_calories: Sequence[float], target_calories: float) -> int:
    """Score how often and how closely the user hits their calorie target.

    40% of the score is the share of days with a log, 60% is the average
    closeness to target on logged days (each day's relative deviation is
    capped at 100%).

    Args:
        daily_calories: Per-day kcal totals, 0 = nothing logged
        target_calories: Daily kcal target

    Returns:
        Integer score 0-100
    """
    if not daily_calories or target_calories <= 0:
        return 0

    logged = [cal for cal in daily_calories if cal > 0]
    if not logged:
        return 0

    log_rate = len(logged) / len(daily_calories) * 100
    adherence = sum(
        1 - min(abs(cal - target_calories) / target_calories, 1) for cal in logged
    )
    adherence_score = adherence / len(logged) * 100

    return int(clamp(round_int(log_rate * LOG_RATE_WEIGHT + adherence_score * ADHERENCE_WEIGHT), 0, 100))
