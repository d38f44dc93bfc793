"""catnubcal Scoring Server - Entry point.

Runs the scoring engine behind a small JSON API and an MCP endpoint.
Uses Starlette with the MCP HTTP app for maximum compatibility.
"""

import json
import logging
import math
from datetime import date
from zoneinfo import ZoneInfoNotFoundError

import uvicorn
from pydantic import ValidationError
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route, Mount

from .core.grade import calculate_scientific_health_grade
from .core.models import FoodEntry, UserProfile
from .core.reports import generate_weekly_insights
from .shell.config import ServerConfig
from .shell.mcp_server import mcp


config = ServerConfig.from_env()

logging.basicConfig(
    level=config.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

GRADE_FIELDS = (
    "avg_calories",
    "tdee",
    "avg_protein",
    "target_protein",
    "avg_sugar",
    "avg_sodium",
    "logged_days",
)


# ==================== Route Handlers ====================


async def health_check(request: Request) -> JSONResponse:
    """Health check endpoint."""
    return JSONResponse({"status": "healthy", "service": "catnubcal"})


async def weekly_insights(request: Request) -> JSONResponse:
    """Score a 7-day window of food entries."""
    try:
        body = await request.json()
        profile = UserProfile(**body.get("profile", {}))
        entries = [FoodEntry(**e) for e in body.get("entries", [])]
        week_start = body.get("week_start")
        start = date.fromisoformat(week_start) if week_start else None
        timezone = body.get("timezone") or config.default_timezone
        report = generate_weekly_insights(entries, profile, start, timezone)
    except json.JSONDecodeError:
        return JSONResponse({"error": "Request body must be JSON"}, status_code=400)
    except ValidationError as e:
        return JSONResponse({"error": "Invalid input", "details": e.errors(include_url=False)}, status_code=400)
    except ZoneInfoNotFoundError:
        return JSONResponse({"error": "Unknown timezone"}, status_code=400)
    except (ValueError, TypeError, AttributeError) as e:
        logger.warning("Rejected insights request: %s", str(e))
        return JSONResponse({"error": "Malformed request"}, status_code=400)
    except Exception as e:
        logger.error("Insights failed: %s", str(e))
        return JSONResponse({"error": "Insights failed."}, status_code=500)

    logger.info("Insights for %d entries: grade %s", len(entries), report.health_grade.grade)
    return JSONResponse(report.model_dump(mode="json"))


async def health_grade(request: Request) -> JSONResponse:
    """Compute the health grade from weekly averages."""
    try:
        body = await request.json()
    except json.JSONDecodeError:
        return JSONResponse({"error": "Request body must be JSON"}, status_code=400)

    if not isinstance(body, dict):
        return JSONResponse({"error": "Request body must be a JSON object"}, status_code=400)

    missing = [name for name in GRADE_FIELDS if name not in body]
    if missing:
        return JSONResponse({"error": f"Missing fields: {', '.join(missing)}"}, status_code=400)

    try:
        values = {name: float(body[name]) for name in GRADE_FIELDS}
    except (TypeError, ValueError):
        return JSONResponse({"error": "All fields must be numbers"}, status_code=400)

    if not all(math.isfinite(value) for value in values.values()):
        return JSONResponse({"error": "All fields must be finite numbers"}, status_code=400)

    values["logged_days"] = int(values["logged_days"])
    result = calculate_scientific_health_grade(**values)
    return JSONResponse(result.model_dump(mode="json"))


# ==================== Create ASGI App ====================


def create_app() -> Starlette:
    """Create the Starlette application with MCP at root.

    The MCP streamable_http_app() handles /mcp/ internally when mounted at root.
    We use its lifespan context to ensure proper initialization.
    """
    mcp_app = mcp.streamable_http_app()

    routes = [
        Route("/health", health_check, methods=["GET"]),
        Route("/insights", weekly_insights, methods=["POST"]),
        Route("/grade", health_grade, methods=["POST"]),
        # Mount MCP app at root - it handles /mcp/ path internally
        Mount("/", app=mcp_app),
    ]

    app = Starlette(
        routes=routes,
        middleware=[
            Middleware(
                CORSMiddleware,
                allow_origins=config.allowed_origins,
                allow_methods=["GET", "POST", "OPTIONS"],
                allow_headers=["*"],
            ),
        ],
        lifespan=mcp_app.router.lifespan_context,
    )

    return app


app = create_app()


def main() -> None:
    """Run the server."""
    logger.info("Starting catnubcal server on %s:%d", config.host, config.port)

    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    main()
