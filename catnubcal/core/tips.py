"""Health Tips - Pick one tip for the insights banner.

All functions are pure: same input always produces same output, no side effects.
"""

from .models import HealthTip, WeightProjection


GAINING_ALERT_KG = 1
LOSING_ALERT_KG = -2
UNDER_EATING_FACTOR = 0.5


def generate_health_tip(projection: WeightProjection, avg_calories: float, target_calories: float) -> HealthTip:
    """Return the highest-priority tip for the current trend.

    Rules are checked in order and the first match wins. The alerts compare
    the signed projected change, which is positive while losing, so they
    only fire for hand-built projections; computed trends fall through to
    the under-eating, maintaining and hydration tips.

    Args:
        projection: Result of calculate_weight_projection
        avg_calories: Average daily intake in kcal
        target_calories: Daily kcal target

    Returns:
        HealthTip with text, icon and severity
    """
    if avg_calories <= 0:
        return HealthTip(tip="Start logging your meals to get personal tips!", icon="📝", type="info")

    if projection.status == "gaining" and projection.projected_weight_change_kg > GAINING_ALERT_KG:
        return HealthTip(tip="Try making dinner 20% smaller to keep your weight in check", icon="🍽️", type="warning")

    if projection.status == "losing" and projection.projected_weight_change_kg < LOSING_ALERT_KG:
        return HealthTip(tip="You're eating too little! Add protein to protect your muscle", icon="💪", type="warning")

    if avg_calories < target_calories * UNDER_EATING_FACTOR:
        return HealthTip(tip="Eat enough so your body doesn't run short of energy", icon="⚡", type="warning")

    if projection.status == "maintaining":
        return HealthTip(tip="Great consistency! Keep going!", icon="🎯", type="success")

    return HealthTip(tip="Drink at least 8 glasses of water a day to help your metabolism", icon="💧", type="info")
