"""Report Generation - Functions for generating reports.

Everything here is deterministic for explicit arguments. The only implicit
input is the clock, read when generate_weekly_insights gets no week_start.
"""

from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from .models import DailyNutrientTotals, FoodEntry, UserProfile, WeeklyInsights
from .consistency import calculate_consistency_score
from .grade import calculate_scientific_health_grade
from .macros import KCAL_PER_G_PROTEIN, analyze_macro_balance, entry_calories
from .numbers import round_half_up
from .projection import calculate_metabolic_split, calculate_weekly_balance, calculate_weight_projection
from .tips import generate_health_tip


WEEK_DAYS = 7
# Default protein target: 30% of TDEE at 4 kcal/g
DEFAULT_PROTEIN_SHARE = 0.3

_NUTRIENTS = ("protein", "carbs", "fat", "sugar", "sodium", "cholesterol", "fiber")


def calculate_daily_totals(entries: list[FoodEntry], day: date) -> DailyNutrientTotals:
    """Sum a day's food entries into one totals record.

    Args:
        entries: Food entries already known to belong to ``day``
        day: The local calendar day

    Returns:
        DailyNutrientTotals for the day (all zeros if no entries)
    """
    totals = {name: sum(getattr(e, name) for e in entries) for name in _NUTRIENTS}
    calories = sum(entry_calories(e) for e in entries)
    return DailyNutrientTotals(day=day, calories=calories, **totals)


def bucket_daily_totals(
    entries: list[FoodEntry],
    start: date,
    days: int = WEEK_DAYS,
    timezone: str = "UTC",
) -> list[DailyNutrientTotals]:
    """Group entries by local calendar day over a fixed window.

    Args:
        entries: Food entries with timezone-aware logged_at
        start: First day of the window (local date)
        days: Window length
        timezone: IANA timezone name used for day boundaries

    Returns:
        One DailyNutrientTotals per day in date order; unlogged days are zeros
    """
    tz = ZoneInfo(timezone)
    window = [start + timedelta(days=offset) for offset in range(days)]
    by_day: dict[date, list[FoodEntry]] = {day: [] for day in window}

    for entry in entries:
        logged_at = entry.logged_at
        if logged_at.tzinfo is None:
            logged_at = logged_at.replace(tzinfo=ZoneInfo("UTC"))
        local_day = logged_at.astimezone(tz).date()
        if local_day in by_day:
            by_day[local_day].append(entry)

    return [calculate_daily_totals(by_day[day], day) for day in window]


def default_protein_target(tdee: float) -> float:
    return tdee * DEFAULT_PROTEIN_SHARE / KCAL_PER_G_PROTEIN


def generate_weekly_insights(
    entries: list[FoodEntry],
    profile: UserProfile,
    week_start: date | None = None,
    timezone: str = "UTC",
) -> WeeklyInsights:
    """Run every scoring function over a 7-day window of food entries.

    The projection and tip use the average over all seven days (unlogged
    days count as zero); the health grade uses averages over logged days.

    Args:
        entries: Food entries (may include entries outside the window)
        profile: User's energy and protein targets
        week_start: First day of the window (defaults to 6 days before today
            in ``timezone``)
        timezone: IANA timezone name used for day boundaries

    Returns:
        WeeklyInsights with every computed figure the insights screen shows
    """
    if week_start is None:
        today = datetime.now(ZoneInfo(timezone)).date()
        week_start = today - timedelta(days=WEEK_DAYS - 1)

    daily = bucket_daily_totals(entries, week_start, WEEK_DAYS, timezone)
    daily_calories = [d.calories for d in daily]
    logged = [d for d in daily if d.is_logged]
    days_logged = len(logged)

    tdee = profile.tdee
    target_protein = profile.protein_target
    if target_protein is None:
        target_protein = default_protein_target(tdee)

    avg_calories = sum(daily_calories) / WEEK_DAYS

    def logged_average(name: str) -> float:
        if not logged:
            return 0.0
        return sum(getattr(d, name) for d in logged) / days_logged

    avg_logged_calories = logged_average("calories")

    projection = calculate_weight_projection(tdee, avg_calories)

    return WeeklyInsights(
        week_start=week_start,
        week_end=week_start + timedelta(days=WEEK_DAYS - 1),
        daily_totals=daily,
        days_logged=days_logged,
        avg_calories=round_half_up(avg_calories, 1),
        avg_logged_calories=round_half_up(avg_logged_calories, 1),
        projection=projection,
        weekly_balance=calculate_weekly_balance(daily_calories, tdee),
        metabolic_split=calculate_metabolic_split(tdee),
        macro_analysis=analyze_macro_balance(
            sum(d.protein for d in daily),
            sum(d.carbs for d in daily),
            sum(d.fat for d in daily),
        ),
        consistency_score=calculate_consistency_score(daily_calories, tdee),
        health_tip=generate_health_tip(projection, avg_calories, tdee),
        health_grade=calculate_scientific_health_grade(
            avg_logged_calories,
            tdee,
            logged_average("protein"),
            target_protein,
            logged_average("sugar"),
            logged_average("sodium"),
            days_logged,
        ),
    )
