"""Energy Balance - Pure functions for weight projection and weekly balance.

All functions are pure: same input always produces same output, no side effects.
"""

from collections.abc import Sequence

from .models import WeightProjection, WeeklyBalance, MetabolicSplit
from .numbers import non_negative, round_half_up, round_int


# 7,700 kcal is roughly 1 kg of adipose tissue
CALORIES_PER_KG_FAT = 7700
PROJECTION_DAYS = 30
# Daily deficits inside +/- this band count as logging noise
MAINTENANCE_BAND_KCAL = 200
# Weekly balances inside +/- this band count as balanced
WEEKLY_BALANCE_BAND_KCAL = 1000
BMR_SHARE = 0.7
BMR_PERCENT = 70


def calculate_weight_projection(tdee: float, avg_daily_intake: float) -> WeightProjection:
    """Project the body-mass trend over the next 30 days.

    Args:
        tdee: Maintenance energy target in kcal/day
        avg_daily_intake: Observed average intake in kcal/day

    Returns:
        WeightProjection; positive daily_deficit means eating under target
    """
    if tdee <= 0:
        return WeightProjection(
            daily_deficit=0,
            projected_weight_change_kg=0,
            status="maintaining",
            message="Not enough data yet",
        )

    daily_deficit = tdee - non_negative(avg_daily_intake)
    projected_change = daily_deficit * PROJECTION_DAYS / CALORIES_PER_KG_FAT
    magnitude = abs(round_half_up(projected_change, 1))

    if daily_deficit > MAINTENANCE_BAND_KCAL:
        status = "losing"
        message = f"Losing weight nicely! Expect about {magnitude:.1f} kg less in 30 days"
    elif daily_deficit < -MAINTENANCE_BAND_KCAL:
        status = "gaining"
        message = f"Careful! Eating over target, could gain {magnitude:.1f} kg in 30 days"
    else:
        status = "maintaining"
        message = "Weight is holding steady. Excellent!"

    return WeightProjection(
        daily_deficit=daily_deficit,
        projected_weight_change_kg=round_half_up(projected_change, 2),
        status=status,
        message=message,
    )


def calculate_weekly_balance(daily_calories: Sequence[float], daily_target: float) -> WeeklyBalance:
    """Sum the calorie balance over logged days.

    Unlogged days (0 kcal) are excluded from both intake and target, so a
    missed day does not read as a huge deficit.

    Args:
        daily_calories: Per-day kcal totals, 0 = nothing logged
        daily_target: Daily kcal target

    Returns:
        WeeklyBalance with signed total and equivalent fat mass
    """
    logged = [cal for cal in daily_calories if cal > 0]

    if not logged:
        return WeeklyBalance(
            total_balance=0,
            status="balanced",
            fat_change_kg=0,
            message="Awaiting your first log",
        )

    total_target = non_negative(daily_target) * len(logged)
    balance = sum(logged) - total_target
    fat_change = round_half_up(balance / CALORIES_PER_KG_FAT, 1)

    if balance < -WEEKLY_BALANCE_BAND_KCAL:
        status = "deficit"
        message = f"Trending down {abs(fat_change):.1f} kg this week"
    elif balance > WEEKLY_BALANCE_BAND_KCAL:
        status = "surplus"
        message = f"Trending up {abs(fat_change):.1f} kg this week"
    else:
        status = "balanced"
        message = "Weight steady this week"

    return WeeklyBalance(
        total_balance=balance,
        status=status,
        fat_change_kg=fat_change,
        message=message,
    )


def calculate_metabolic_split(tdee: float) -> MetabolicSplit:
    """Split TDEE into a fixed 70% resting share and the remaining activity.

    This is an illustration for the insights screen, not a BMR formula.
    """
    tdee = round_int(non_negative(tdee))
    bmr = round_int(tdee * BMR_SHARE)
    return MetabolicSplit(bmr=bmr, activity=tdee - bmr, bmr_percent=BMR_PERCENT)
