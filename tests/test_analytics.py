"""Tests for analytics endpoints."""

from datetime import timedelta
from decimal import Decimal

from fastapi.testclient import TestClient

from app.database import utcnow


def _add_trip(client: TestClient, user: dict, date: str, origin: str, destination: str, km: int, fuel: str) -> None:
    response = client.post(
        "/api/trips/",
        json={
            "date": date,
            "origin": origin,
            "destination": destination,
            "kilometers": km,
            "fuelCost": fuel,
        },
        headers=user["headers"],
    )
    assert response.status_code == 201, response.text


class TestStats:
    """Tests for the headline statistics."""

    def test_empty_stats(self, client: TestClient, test_user: dict):
        response = client.get("/api/analytics/stats", headers=test_user["headers"])
        assert response.status_code == 200
        data = response.json()
        assert data["monthlyTrips"] == 0
        assert data["totalKm"] == 0
        assert Decimal(data["totalExpenses"]) == Decimal("0")
        assert data["totalRoutes"] == 0

    def test_stats_counts_current_month(self, client: TestClient, test_user: dict, other_user: dict):
        now = utcnow()
        month_start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
        last_month = (month_start - timedelta(days=3)).isoformat()

        _add_trip(client, test_user, now.isoformat(), "A", "B", 100, "50.00")
        _add_trip(client, test_user, last_month, "A", "B", 40, "20.00")
        _add_trip(client, other_user, now.isoformat(), "X", "Y", 500, "300.00")
        client.post(
            "/api/routes/", json={"origin": "A", "destination": "B", "kilometers": 100}, headers=test_user["headers"]
        )

        data = client.get("/api/analytics/stats", headers=test_user["headers"]).json()
        assert data["monthlyTrips"] == 1
        assert data["totalKm"] == 140
        assert Decimal(data["totalExpenses"]) == Decimal("70.00")
        assert data["totalRoutes"] == 1

    def test_stats_excludes_future_months(self, client: TestClient, test_user: dict):
        month_start = utcnow().replace(day=1, hour=0, minute=0, second=0, microsecond=0)
        next_month = (month_start + timedelta(days=40)).isoformat()

        _add_trip(client, test_user, next_month, "A", "B", 25, "10.00")

        data = client.get("/api/analytics/stats", headers=test_user["headers"]).json()
        assert data["monthlyTrips"] == 0
        assert data["totalKm"] == 25

    def test_requires_auth(self, client: TestClient):
        assert client.get("/api/analytics/stats").status_code == 401


class TestMonthly:
    """Tests for per-month aggregation."""

    def test_monthly_groups_by_year_and_month(self, client: TestClient, test_user: dict):
        _add_trip(client, test_user, "2024-01-05T10:00:00", "A", "B", 10, "5.00")
        _add_trip(client, test_user, "2024-01-25T10:00:00", "A", "C", 20, "7.50")
        _add_trip(client, test_user, "2024-03-01T10:00:00", "A", "B", 30, "12.00")
        _add_trip(client, test_user, "2025-01-15T10:00:00", "A", "B", 5, "1.00")

        data = client.get("/api/analytics/monthly", headers=test_user["headers"]).json()

        assert data["trips"] == [
            {"month": "2024-01", "count": 2},
            {"month": "2024-03", "count": 1},
            {"month": "2025-01", "count": 1},
        ]
        assert [(e["month"], Decimal(e["amount"])) for e in data["expenses"]] == [
            ("2024-01", Decimal("12.50")),
            ("2024-03", Decimal("12.00")),
            ("2025-01", Decimal("1.00")),
        ]
        assert data["kilometers"] == [
            {"month": "2024-01", "total": 30},
            {"month": "2024-03", "total": 30},
            {"month": "2025-01", "total": 5},
        ]

    def test_monthly_empty(self, client: TestClient, test_user: dict):
        data = client.get("/api/analytics/monthly", headers=test_user["headers"]).json()
        assert data == {"trips": [], "expenses": [], "kilometers": []}


class TestTopRoutes:
    """Tests for the most travelled routes."""

    def test_top_routes_ranked_and_limited(self, client: TestClient, test_user: dict, other_user: dict):
        pairs = [("A", "B", 3), ("C", "D", 5), ("E", "F", 1), ("G", "H", 2), ("I", "J", 4), ("K", "L", 1)]
        for origin, destination, count in pairs:
            for i in range(count):
                _add_trip(client, test_user, f"2024-02-{i + 1:02d}T09:00:00", origin, destination, 10 + i, "1.00")
        for _ in range(6):
            _add_trip(client, other_user, "2024-02-01T09:00:00", "X", "Y", 1, "1.00")

        rows = client.get("/api/analytics/top-routes", headers=test_user["headers"]).json()

        assert len(rows) == 5
        assert [(r["origin"], r["destination"], r["tripCount"]) for r in rows] == [
            ("C", "D", 5),
            ("I", "J", 4),
            ("A", "B", 3),
            ("G", "H", 2),
            ("E", "F", 1),
        ]
        # Average of 10..14
        assert rows[0]["kilometers"] == 12
