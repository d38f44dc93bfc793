"""Core Data Models - Pydantic models for type safety.

All models are immutable value objects with no behavior beyond validation.
"""

from datetime import date as DateType
from datetime import datetime, timezone
from enum import Enum
from typing import Literal, Optional
import uuid

from pydantic import BaseModel, ConfigDict, Field


QuestStatus = Literal["success", "warning", "danger"]


class FrozenModel(BaseModel):
    """Base for immutable records."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)


class UserProfile(FrozenModel):
    """Profile fields the engine needs from the persistence layer."""

    tdee: int = Field(ge=0, description="Target daily energy expenditure in kcal")
    protein_target: Optional[float] = Field(
        default=None, ge=0, description="Daily protein target in grams (None = 30% of TDEE)"
    )


class FoodEntry(BaseModel):
    """A single food item logged by the user (manual or photo estimate)."""

    model_config = ConfigDict(allow_inf_nan=False)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str = Field(min_length=1, description="Name of the food")
    calories: float = Field(default=0, ge=0, description="Total calories (0 = derive from macros)")
    protein: float = Field(default=0, ge=0, description="Protein in grams")
    carbs: float = Field(default=0, ge=0, description="Carbohydrates in grams")
    fat: float = Field(default=0, ge=0, description="Fat in grams")
    fiber: float = Field(default=0, ge=0, description="Fiber in grams")
    sugar: float = Field(default=0, ge=0, description="Sugar in grams")
    sodium: float = Field(default=0, ge=0, description="Sodium in mg")
    cholesterol: float = Field(default=0, ge=0, description="Cholesterol in mg")
    serving_size: Optional[str] = Field(default=None, description="e.g. '1 bowl'")
    logged_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class DailyNutrientTotals(FrozenModel):
    """Nutrient totals for one local calendar day."""

    day: DateType
    calories: float = Field(ge=0)
    protein: float = Field(ge=0, description="grams")
    carbs: float = Field(ge=0, description="grams")
    fat: float = Field(ge=0, description="grams")
    sugar: float = Field(ge=0, description="grams")
    sodium: float = Field(ge=0, description="mg")
    cholesterol: float = Field(ge=0, description="mg")
    fiber: float = Field(ge=0, description="grams")

    @property
    def is_logged(self) -> bool:
        return self.calories > 0


class WeightProjection(FrozenModel):
    """30-day body-mass trend from an average calorie balance."""

    daily_deficit: float = Field(description="tdee - intake; positive = under target")
    projected_weight_change_kg: float = Field(description="Signed change over 30 days")
    status: Literal["losing", "gaining", "maintaining"]
    message: str


class MacroAnalysis(FrozenModel):
    """Gram-share split of protein/carbs/fat with a quality verdict."""

    p_ratio: int = Field(ge=0, le=100)
    c_ratio: int = Field(ge=0, le=100)
    f_ratio: int = Field(ge=0, le=100)
    quality: Literal["good", "warning", "danger"]
    advice: str


class WeeklyBalance(FrozenModel):
    """Calorie balance over the logged days of a period."""

    total_balance: float = Field(description="intake - target over logged days")
    status: Literal["deficit", "surplus", "balanced"]
    fat_change_kg: float = Field(description="Equivalent fat mass, one decimal")
    message: str


class MetabolicSplit(FrozenModel):
    """Illustrative resting vs activity split of TDEE."""

    bmr: int
    activity: int
    bmr_percent: int


class QuestItem(FrozenModel):
    """One gamified sub-score of the health grade."""

    name: str
    icon: str
    score: int = Field(ge=0)
    max_score: int = Field(gt=0)
    progress_percent: float = Field(ge=0, le=100)
    status: QuestStatus
    message: str


class ScoreBreakdown(FrozenModel):
    calorie_score: int = Field(ge=0, le=40)
    nutrient_score: int = Field(ge=0, le=40)
    consistency_score: int = Field(ge=0, le=20)


class NutritionGap(FrozenModel):
    missing_protein: int = Field(ge=0, description="grams")
    excess_sugar: int = Field(ge=0, description="grams")
    excess_sodium: int = Field(ge=0, description="mg")


class HealthGradeResult(FrozenModel):
    """Composite 0-100 health grade with quest breakdown."""

    total_score: int = Field(ge=0, le=100)
    grade: Literal["A", "B", "C", "D", "F"]
    breakdown: ScoreBreakdown
    nutrition_gap: NutritionGap
    quests: list[QuestItem] = Field(min_length=5, max_length=5)
    advice: list[str] = Field(min_length=1)


class HealthTip(FrozenModel):
    tip: str
    icon: str
    type: Literal["success", "warning", "info"]


class PetState(str, Enum):
    """Mood of the mascot shown on the dashboard."""

    HAPPY = "HAPPY"
    NORMAL = "NORMAL"
    SAD = "SAD"


class WeeklyInsights(FrozenModel):
    """Everything the insights screen renders for one 7-day window."""

    week_start: DateType
    week_end: DateType
    daily_totals: list[DailyNutrientTotals]
    days_logged: int
    avg_calories: float = Field(description="Average over the full window")
    avg_logged_calories: float = Field(description="Average over logged days only")
    projection: WeightProjection
    weekly_balance: WeeklyBalance
    metabolic_split: MetabolicSplit
    macro_analysis: MacroAnalysis
    consistency_score: int = Field(ge=0, le=100)
    health_tip: HealthTip
    health_grade: HealthGradeResult
