"""Food Score - Per-food health score and mascot mood.

All functions are pure: same input always produces same output, no side effects.
"""

from .macros import entry_calories
from .models import FoodEntry, PetState
from .numbers import clamp, round_int


BASELINE_SCORE = 50


def calculate_food_health_score(entry: FoodEntry) -> int:
    """Score a single food 0-100 by nutrient density.

    Protein and fiber per calorie raise the score; sugar and fat per calorie
    and absolute sodium lower it. Entries without a calorie figure use the
    calories implied by their macros; items with neither are scored on
    sodium only.

    Args:
        entry: The logged food

    Returns:
        Integer score 0-100
    """
    score = BASELINE_SCORE
    calories = entry_calories(entry)

    if calories > 0:
        score += entry.protein / calories * 200
        score += entry.fiber / calories * 500
        score -= entry.sugar / calories * 300
        score -= entry.fat / calories * 100

    score -= entry.sodium / 1000 * 10

    return int(clamp(round_int(score), 0, 100))


def determine_pet_state(calories_eaten: float, target: float, average_health_score: float) -> PetState:
    """Pick the mascot mood from today's intake and food quality."""
    if calories_eaten <= target + 100 and average_health_score > 75:
        return PetState.HAPPY
    if calories_eaten > target + 500 or average_health_score < 40:
        return PetState.SAD
    return PetState.NORMAL
