"""Health Grade - Composite 0-100 score built from five quests.

All functions are pure: same input always produces same output, no side effects.

Points: calorie balance 40, protein 15, sugar 15, sodium 10, consistency 20.
Sub-scores are kept unrounded while scoring; total_score is rounded once from
their sum, and every displayed figure (quest score, breakdown, gaps) is
rounded once on its own. The breakdown may therefore differ from the total
by a point.
"""

import math

from .models import HealthGradeResult, NutritionGap, QuestItem, QuestStatus, ScoreBreakdown
from .numbers import clamp, non_negative, round_half_up, round_int


CALORIE_MAX = 40
PROTEIN_MAX = 15
SUGAR_MAX = 15
SODIUM_MAX = 10
CONSISTENCY_MAX = 20

CALORIE_LOWER_FACTOR = 0.8
CALORIE_UPPER_FACTOR = 1.1
PROTEIN_PASS_FACTOR = 0.8
SUGAR_LIMIT_G = 30
SUGAR_G_PER_POINT = 2
SODIUM_LIMIT_MG = 2300
SODIUM_MG_PER_POINT = 200
FULL_CONSISTENCY_DAYS = 5
PROTEIN_G_PER_EGG = 6

GRADE_THRESHOLDS = (
    (80, "A"),
    (70, "B"),
    (50, "C"),
    (40, "D"),
)

ALL_CLEAR_ADVICE = "Excellent! Keep it up"


def _quest(name: str, icon: str, score: float, max_score: int, status: QuestStatus, message: str) -> QuestItem:
    score = clamp(score, 0, max_score)
    return QuestItem(
        name=name,
        icon=icon,
        score=round_int(score),
        max_score=max_score,
        progress_percent=clamp(round_half_up(score / max_score * 100, 1), 0, 100),
        status=status,
        message=message,
    )


def _score_calories(avg_calories: float, tdee: float) -> tuple[float, QuestItem, str | None]:
    name = "Quest: Energy balance (TDEE -20%/+10%)"
    icon = "⚖️"

    if tdee <= 0:
        message = "Set a daily energy target to unlock this quest"
        return 0.0, _quest(name, icon, 0, CALORIE_MAX, "warning", message), message

    lower_bound = tdee * CALORIE_LOWER_FACTOR
    upper_bound = tdee * CALORIE_UPPER_FACTOR

    if lower_bound <= avg_calories <= upper_bound:
        return float(CALORIE_MAX), _quest(name, icon, CALORIE_MAX, CALORIE_MAX, "success", "Great! Energy is balanced"), None

    diff = min(abs(avg_calories - tdee), tdee)
    score = max(0.0, CALORIE_MAX - diff / tdee * CALORIE_MAX)

    if avg_calories < lower_bound:
        message = f"Eat {round_int(lower_bound - avg_calories)} kcal more to reach the target range"
        advice = "Eating far below target, watch out for the yo-yo effect"
    else:
        message = f"Cut {round_int(avg_calories - upper_bound)} kcal to be right on target"
        advice = "Eating over target, watch out for weight gain"

    return score, _quest(name, icon, score, CALORIE_MAX, "warning", message), advice


def _score_protein(avg_protein: float, target_protein: float) -> tuple[float, float, QuestItem, str | None]:
    name = "Quest: Hit your protein (> 80%)"
    icon = "🥩"

    if avg_protein >= target_protein * PROTEIN_PASS_FACTOR:
        return float(PROTEIN_MAX), 0.0, _quest(name, icon, PROTEIN_MAX, PROTEIN_MAX, "success", "Protein target reached. Nice!"), None

    # target_protein > 0 here, since avg_protein >= 0 passes a zero target
    score = avg_protein / target_protein * PROTEIN_MAX
    missing = max(0.0, target_protein - avg_protein)
    eggs = math.ceil(missing / PROTEIN_G_PER_EGG)
    message = f"{round_int(missing)}g short (about {eggs} boiled eggs)"
    advice = f"Protein below target ({round_int(missing)}g short)"
    return score, missing, _quest(name, icon, score, PROTEIN_MAX, "warning", message), advice


def _score_sugar(avg_sugar: float) -> tuple[float, float, QuestItem, str | None]:
    name = f"Quest: Limit sugar (< {SUGAR_LIMIT_G}g)"
    icon = "🍬"

    if avg_sugar <= SUGAR_LIMIT_G:
        return float(SUGAR_MAX), 0.0, _quest(name, icon, SUGAR_MAX, SUGAR_MAX, "success", "Sugar well under control!"), None

    excess = avg_sugar - SUGAR_LIMIT_G
    score = max(0.0, SUGAR_MAX - excess / SUGAR_G_PER_POINT)
    message = f"{round_int(excess)}g over (ease off the sweets)"
    advice = f"Sugar above the limit ({round_int(excess)}g over)"
    return score, excess, _quest(name, icon, score, SUGAR_MAX, "danger", message), advice


def _score_sodium(avg_sodium: float) -> tuple[float, float, QuestItem, str | None]:
    name = f"Quest: Limit sodium (< {SODIUM_LIMIT_MG}mg)"
    icon = "🧂"

    if avg_sodium <= SODIUM_LIMIT_MG:
        return float(SODIUM_MAX), 0.0, _quest(name, icon, SODIUM_MAX, SODIUM_MAX, "success", "Salt kept in check. Excellent!"), None

    excess = avg_sodium - SODIUM_LIMIT_MG
    score = max(0.0, SODIUM_MAX - excess / SODIUM_MG_PER_POINT)
    message = f"{round_int(excess)}mg over (skip the soup broth)"
    advice = f"High sodium strains the kidneys ({round_int(excess)}mg over)"
    return score, excess, _quest(name, icon, score, SODIUM_MAX, "danger", message), advice


def _score_consistency(logged_days: int) -> tuple[float, QuestItem, str | None]:
    name = f"Quest: Log consistently ({FULL_CONSISTENCY_DAYS} days/week)"
    icon = "📅"

    if logged_days >= FULL_CONSISTENCY_DAYS:
        return float(CONSISTENCY_MAX), _quest(name, icon, CONSISTENCY_MAX, CONSISTENCY_MAX, "success", "Outstanding discipline!"), None

    score = logged_days / FULL_CONSISTENCY_DAYS * CONSISTENCY_MAX
    message = f"Log {FULL_CONSISTENCY_DAYS - logged_days} more days for full points"
    advice = "Logging is patchy, try to log more often"
    return score, _quest(name, icon, score, CONSISTENCY_MAX, "warning", message), advice


def grade_for_score(total_score: int) -> str:
    """Map a 0-100 score to a letter grade."""
    for threshold, grade in GRADE_THRESHOLDS:
        if total_score >= threshold:
            return grade
    return "F"


def calculate_scientific_health_grade(
    avg_calories: float,
    tdee: float,
    avg_protein: float,
    target_protein: float,
    avg_sugar: float,
    avg_sodium: float,
    logged_days: int,
) -> HealthGradeResult:
    """Score a week of eating against energy, nutrient and logging goals.

    Args:
        avg_calories: Average kcal per logged day
        tdee: Daily energy target in kcal
        avg_protein: Average protein per logged day in grams
        target_protein: Daily protein target in grams
        avg_sugar: Average sugar per logged day in grams
        avg_sodium: Average sodium per logged day in mg
        logged_days: Days with any log in the window (0-7)

    Returns:
        HealthGradeResult with five quests and at least one advice line
    """
    avg_calories = non_negative(avg_calories)
    tdee = non_negative(tdee)
    avg_protein = non_negative(avg_protein)
    target_protein = non_negative(target_protein)
    avg_sugar = non_negative(avg_sugar)
    avg_sodium = non_negative(avg_sodium)
    logged_days = max(0, int(logged_days))

    calorie_score, calorie_quest, calorie_advice = _score_calories(avg_calories, tdee)
    protein_score, missing_protein, protein_quest, protein_advice = _score_protein(avg_protein, target_protein)
    sugar_score, excess_sugar, sugar_quest, sugar_advice = _score_sugar(avg_sugar)
    sodium_score, excess_sodium, sodium_quest, sodium_advice = _score_sodium(avg_sodium)
    consistency_score, consistency_quest, consistency_advice = _score_consistency(logged_days)

    nutrient_score = protein_score + sugar_score + sodium_score
    total_score = int(clamp(round_int(calorie_score + nutrient_score + consistency_score), 0, 100))

    advice = [
        line
        for line in (calorie_advice, protein_advice, sugar_advice, sodium_advice, consistency_advice)
        if line is not None
    ]
    if not advice:
        advice = [ALL_CLEAR_ADVICE]

    return HealthGradeResult(
        total_score=total_score,
        grade=grade_for_score(total_score),
        breakdown=ScoreBreakdown(
            calorie_score=round_int(calorie_score),
            nutrient_score=round_int(nutrient_score),
            consistency_score=round_int(consistency_score),
        ),
        nutrition_gap=NutritionGap(
            missing_protein=round_int(missing_protein),
            excess_sugar=round_int(excess_sugar),
            excess_sodium=round_int(excess_sodium),
        ),
        quests=[calorie_quest, protein_quest, sugar_quest, sodium_quest, consistency_quest],
        advice=advice,
    )
