"""Integration tests for API endpoints using Starlette TestClient."""

import pytest
from starlette.testclient import TestClient

from catnubcal.main import create_app


@pytest.fixture
def client():
    """Create test client."""
    app = create_app()
    return TestClient(app)


def week_of_entries():
    return [
        {
            "name": "Khao man gai",
            "calories": 2000,
            "protein": 100,
            "carbs": 200,
            "fat": 50,
            "sugar": 20,
            "sodium": 2000,
            "logged_at": f"2024-12-{22 + i}T12:00:00+00:00",
        }
        for i in range(7)
    ]


class TestHealthEndpoint:
    """Tests for /health endpoint."""

    def test_health_returns_200(self, client):
        """Health endpoint returns 200 OK."""
        response = client.get("/health")
        assert response.status_code == 200

    def test_health_returns_json(self, client):
        """Health endpoint returns JSON with status."""
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["service"] == "catnubcal"


class TestInsightsEndpoint:
    """Tests for /insights endpoint."""

    def test_full_week(self, client):
        """A full on-target week returns the complete report."""
        response = client.post(
            "/insights",
            json={
                "profile": {"tdee": 2000, "protein_target": 100},
                "entries": week_of_entries(),
                "week_start": "2024-12-22",
                "timezone": "UTC",
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["days_logged"] == 7
        assert data["health_grade"]["grade"] == "A"
        assert len(data["health_grade"]["quests"]) == 5
        assert data["projection"]["status"] == "maintaining"
        assert len(data["daily_totals"]) == 7

    def test_negative_calories_rejected(self, client):
        """Invalid entries return 400 with details."""
        response = client.post(
            "/insights",
            json={"profile": {"tdee": 2000}, "entries": [{"name": "Bad", "calories": -5}]},
        )

        assert response.status_code == 400
        assert "details" in response.json()

    def test_missing_profile(self, client):
        """A body without profile is rejected."""
        response = client.post("/insights", json={"entries": []})
        assert response.status_code == 400

    def test_unknown_timezone(self, client):
        """Unknown timezones are rejected."""
        response = client.post(
            "/insights",
            json={"profile": {"tdee": 2000}, "entries": [], "timezone": "Mars/Olympus_Mons"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Unknown timezone"

    def test_bad_date(self, client):
        """Malformed week_start is rejected."""
        response = client.post(
            "/insights",
            json={"profile": {"tdee": 2000}, "entries": [], "week_start": "yesterday"},
        )
        assert response.status_code == 400

    def test_not_json(self, client):
        """Non-JSON body is rejected."""
        response = client.post("/insights", content=b"not json")
        assert response.status_code == 400


class TestGradeEndpoint:
    """Tests for /grade endpoint."""

    def test_failing_week(self, client):
        """Grade inputs are scored like the core function."""
        response = client.post(
            "/grade",
            json={
                "avg_calories": 1000,
                "tdee": 2000,
                "avg_protein": 0,
                "target_protein": 100,
                "avg_sugar": 60,
                "avg_sodium": 3000,
                "logged_days": 2,
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["total_score"] == 35
        assert data["grade"] == "F"
        assert len(data["advice"]) == 5

    def test_missing_fields(self, client):
        """Missing inputs are listed in the error."""
        response = client.post("/grade", json={"avg_calories": 1000})

        assert response.status_code == 400
        assert "tdee" in response.json()["error"]

    def test_non_numeric(self, client):
        """Non-numeric inputs are rejected."""
        body = dict.fromkeys(
            ["avg_calories", "tdee", "avg_protein", "target_protein", "avg_sugar", "avg_sodium", "logged_days"],
            "lots",
        )
        response = client.post("/grade", json=body)
        assert response.status_code == 400

    @pytest.mark.parametrize("value", ["NaN", "inf", "-Infinity"])
    def test_non_finite_rejected(self, client, value):
        """NaN and infinite inputs are rejected instead of crashing."""
        body = {
            "avg_calories": 2000,
            "tdee": 2000,
            "avg_protein": 100,
            "target_protein": 100,
            "avg_sugar": 20,
            "avg_sodium": 2000,
            "logged_days": value,
        }
        response = client.post("/grade", json=body)

        assert response.status_code == 400
        assert "finite" in response.json()["error"]

    def test_non_finite_in_any_field_rejected(self, client):
        """Non-finite values are rejected in scoring fields too."""
        body = {
            "avg_calories": "nan",
            "tdee": 2000,
            "avg_protein": 100,
            "target_protein": 100,
            "avg_sugar": 20,
            "avg_sodium": 2000,
            "logged_days": 7,
        }
        assert client.post("/grade", json=body).status_code == 400


class TestCORS:
    """Tests for CORS configuration."""

    def test_cors_preflight_localhost(self, client):
        """CORS preflight from localhost is allowed for dev."""
        response = client.options(
            "/insights",
            headers={
                "Origin": "http://localhost:5173",
                "Access-Control-Request-Method": "POST",
            }
        )
        assert response.status_code == 200
        assert response.headers.get("access-control-allow-origin") == "http://localhost:5173"

    def test_cors_unknown_origin(self, client):
        """Unknown origins get no CORS header."""
        response = client.get("/health", headers={"Origin": "https://evil.example"})
        assert response.headers.get("access-control-allow-origin") is None
