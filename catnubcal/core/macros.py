"""Macro Calculations - Pure functions for nutrition math.

All functions are pure: same input always produces same output, no side effects.
"""

from .models import FoodEntry, MacroAnalysis
from .numbers import non_negative, round_int


LOW_PROTEIN_PERCENT = 15
HIGH_FAT_PERCENT = 40
HIGH_CARB_PERCENT = 65

KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9


def analyze_macro_balance(protein: float, carbs: float, fat: float) -> MacroAnalysis:
    """Judge the protein/carb/fat split of a period's intake.

    Ratios are shares of total macro *grams*, not of calories, so a gram of
    fat weighs the same as a gram of carbs here. Only the first matching rule
    is reported: low protein, then high fat, then high carbs.

    Args:
        protein: Grams of protein
        carbs: Grams of carbohydrates
        fat: Grams of fat

    Returns:
        MacroAnalysis with integer percentages and one advice string
    """
    protein, carbs, fat = non_negative(protein), non_negative(carbs), non_negative(fat)
    total = protein + carbs + fat

    if total == 0:
        return MacroAnalysis(p_ratio=0, c_ratio=0, f_ratio=0, quality="warning", advice="No data yet")

    p_ratio = protein / total * 100
    c_ratio = carbs / total * 100
    f_ratio = fat / total * 100

    if p_ratio < LOW_PROTEIN_PERCENT:
        quality = "warning"
        advice = "Protein is too low. Add meat, eggs or beans"
    elif f_ratio > HIGH_FAT_PERCENT:
        quality = "danger"
        advice = "Fat is very high. Cut back on fried and oily food"
    elif c_ratio > HIGH_CARB_PERCENT:
        quality = "warning"
        advice = "Carbs are high. Watch out for blood sugar spikes"
    else:
        quality = "good"
        advice = "Macros are well balanced!"

    return MacroAnalysis(
        p_ratio=round_int(p_ratio),
        c_ratio=round_int(c_ratio),
        f_ratio=round_int(f_ratio),
        quality=quality,
        advice=advice,
    )


def calculate_calories_from_macros(protein: float, carbs: float, fat: float) -> int:
    """Estimate kcal from macro grams at 4/4/9 kcal per gram, rounded half up."""
    return round_int(protein * KCAL_PER_G_PROTEIN + carbs * KCAL_PER_G_CARBS + fat * KCAL_PER_G_FAT)


def entry_calories(entry: FoodEntry) -> float:
    """Calories of a logged food, derived from its macros when none were given.

    Photo estimates and manual overrides sometimes carry macros but no
    calorie figure; those are counted from protein/carbs/fat instead of as
    zero.
    """
    if entry.calories > 0:
        return entry.calories
    return calculate_calories_from_macros(entry.protein, entry.carbs, entry.fat)
