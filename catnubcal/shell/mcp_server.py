"""MCP Server - Tool definitions for Claude integration.

Exposes the scoring engine as MCP tools. Every tool is stateless: callers
pass the already-aggregated numbers or raw food entries with each call.
"""

import logging
from datetime import date
from zoneinfo import ZoneInfoNotFoundError

from mcp.server.fastmcp import FastMCP
from mcp.server.transport_security import TransportSecuritySettings
from pydantic import ValidationError

from ..core.models import FoodEntry, UserProfile
from ..core.food_score import calculate_food_health_score
from ..core.grade import calculate_scientific_health_grade
from ..core.macros import analyze_macro_balance
from ..core.projection import calculate_weight_projection
from ..core.reports import generate_weekly_insights
from .config import ServerConfig


logger = logging.getLogger(__name__)

config = ServerConfig.from_env()

transport_security = TransportSecuritySettings(
    enable_dns_rebinding_protection=True,
    allowed_hosts=[
        "localhost:*",
        "127.0.0.1:*",
    ],
)

# Initialize FastMCP server with stateless HTTP for cloud deployments
mcp = FastMCP(
    "catnubcal",
    instructions="""catnubcal - Nutrition scoring assistant.

Use these tools to turn a user's logged meals into feedback: a 30-day weight
projection, macro balance, a 0-100 health grade with quests, and one tip.

Pass food entries with ISO-8601 logged_at timestamps and the user's TDEE.
Show the grade, the failing quests and the advice list to the user.""",
    stateless_http=True,
    transport_security=transport_security,
)


def _error(message: str, exc: Exception) -> dict:
    logger.warning("%s: %s", message, str(exc))
    return {"error": f"{message}: {exc}"}


# ==================== Report Tools ====================


@mcp.tool()
def weekly_insights(
    entries: list[dict],
    tdee: int,
    protein_target: float | None = None,
    week_start: str | None = None,
    timezone: str | None = None,
) -> dict:
    """Score a 7-day window of food entries.

    Args:
        entries: Food entries, each with name, calories and optional protein,
            carbs, fat, fiber, sugar, sodium, cholesterol, logged_at
        tdee: Daily energy target in kcal (e.g., 2000)
        protein_target: Daily protein target in grams (default: 30% of TDEE)
        week_start: First day of the window, YYYY-MM-DD (default: 6 days ago)
        timezone: IANA timezone for day boundaries (e.g., Asia/Bangkok)

    Returns:
        Dictionary with daily totals, projection, balance, macro analysis,
        consistency score, health tip and health grade
    """
    try:
        profile = UserProfile(tdee=tdee, protein_target=protein_target)
        foods = [FoodEntry(**e) for e in entries]
        start = date.fromisoformat(week_start) if week_start else None
        report = generate_weekly_insights(foods, profile, start, timezone or config.default_timezone)
    except ValidationError as e:
        return _error("Invalid input", e)
    except ZoneInfoNotFoundError as e:
        return _error("Unknown timezone", e)
    except ValueError as e:
        return _error("Invalid date format. Use YYYY-MM-DD", e)

    logger.info("Weekly insights: %d entries, grade %s", len(foods), report.health_grade.grade)
    return report.model_dump(mode="json")


# ==================== Scoring Tools ====================


@mcp.tool()
def health_grade(
    avg_calories: float,
    tdee: float,
    avg_protein: float,
    target_protein: float,
    avg_sugar: float,
    avg_sodium: float,
    logged_days: int,
) -> dict:
    """Compute the 0-100 health grade from weekly averages.

    Args:
        avg_calories: Average kcal per logged day
        tdee: Daily energy target in kcal
        avg_protein: Average protein per logged day in grams
        target_protein: Daily protein target in grams
        avg_sugar: Average sugar per logged day in grams
        avg_sodium: Average sodium per logged day in mg
        logged_days: Days with any log in the last 7 (0-7)

    Returns:
        Dictionary with total_score, grade, breakdown, nutrition_gap, quests, advice
    """
    result = calculate_scientific_health_grade(
        avg_calories, tdee, avg_protein, target_protein, avg_sugar, avg_sodium, logged_days
    )
    return result.model_dump(mode="json")


@mcp.tool()
def weight_projection(tdee: float, avg_daily_intake: float) -> dict:
    """Project weight change over 30 days from average intake vs TDEE."""
    return calculate_weight_projection(tdee, avg_daily_intake).model_dump(mode="json")


@mcp.tool()
def macro_balance(protein: float, carbs: float, fat: float) -> dict:
    """Judge the protein/carbs/fat split (grams) and give one advice line."""
    return analyze_macro_balance(protein, carbs, fat).model_dump(mode="json")


@mcp.tool()
def food_health_score(entry: dict) -> dict:
    """Score a single food 0-100 by nutrient density.

    Args:
        entry: Food with name, calories and optional nutrient fields

    Returns:
        Dictionary with name and score, or error
    """
    try:
        food = FoodEntry(**entry)
    except ValidationError as e:
        return _error("Invalid food entry", e)

    return {"name": food.name, "score": calculate_food_health_score(food)}
