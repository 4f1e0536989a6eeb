"""Analytics service: aggregate queries over a user's trips."""

from datetime import timedelta

from sqlalchemy import Integer, and_, case, cast, func
from sqlalchemy.orm import Session

from app.database import utcnow
from app.models.route import Route
from app.models.trip import Trip
from app.services.costs import to_money

TOP_ROUTES_LIMIT = 5


def _month_bucket(db: Session):
    """SQL expression rendering a trip date as YYYY-MM in the bound dialect."""
    dialect = db.get_bind().dialect.name
    if dialect == "postgresql":
        return func.to_char(Trip.date, "YYYY-MM")
    if dialect in ("mysql", "mariadb"):
        return func.date_format(Trip.date, "%Y-%m")
    return func.strftime("%Y-%m", Trip.date)


class AnalyticsService:
    """Computes dashboard statistics. All grouping happens in the database."""

    def get_stats(self, db: Session, user_id: int) -> dict:
        """Headline numbers: trips this month, total distance, total spend and saved routes."""
        month_start = utcnow().replace(day=1, hour=0, minute=0, second=0, microsecond=0)
        next_month = (month_start + timedelta(days=32)).replace(day=1)
        in_month = and_(Trip.date >= month_start, Trip.date < next_month)

        monthly_trips, total_km, total_expenses = (
            db.query(
                func.coalesce(func.sum(case((in_month, 1), else_=0)), 0),
                func.coalesce(func.sum(Trip.kilometers), 0),
                func.sum(Trip.total_cost),
            )
            .filter(Trip.user_id == user_id)
            .one()
        )
        total_routes = db.query(func.count(Route.id)).filter(Route.user_id == user_id).scalar() or 0

        return {
            "monthly_trips": int(monthly_trips),
            "total_km": int(total_km),
            "total_expenses": to_money(total_expenses),
            "total_routes": total_routes,
        }

    def get_monthly_data(self, db: Session, user_id: int) -> dict:
        """Trip count, spend and distance per calendar month, oldest month first."""
        month = _month_bucket(db).label("month")
        rows = (
            db.query(
                month,
                func.count(Trip.id),
                func.sum(Trip.total_cost),
                func.sum(Trip.kilometers),
            )
            .filter(Trip.user_id == user_id)
            .group_by(month)
            .order_by(month)
            .all()
        )

        return {
            "trips": [{"month": m, "count": count} for m, count, _, _ in rows],
            "expenses": [{"month": m, "amount": to_money(amount)} for m, _, amount, _ in rows],
            "kilometers": [{"month": m, "total": int(km or 0)} for m, _, _, km in rows],
        }

    def get_top_routes(self, db: Session, user_id: int, limit: int = TOP_ROUTES_LIMIT) -> list[dict]:
        """Most travelled origin/destination pairs by trip count."""
        trip_count = func.count(Trip.id).label("trip_count")
        rows = (
            db.query(
                Trip.origin,
                Trip.destination,
                cast(func.round(func.avg(Trip.kilometers)), Integer),
                trip_count,
            )
            .filter(Trip.user_id == user_id)
            .group_by(Trip.origin, Trip.destination)
            .order_by(trip_count.desc(), Trip.origin, Trip.destination)
            .limit(limit)
            .all()
        )

        return [
            {"origin": origin, "destination": destination, "kilometers": int(km or 0), "trip_count": count}
            for origin, destination, km, count in rows
        ]


_analytics_service: AnalyticsService | None = None


def get_analytics_service() -> AnalyticsService:
    """Get singleton analytics service instance."""
    global _analytics_service
    if _analytics_service is None:
        _analytics_service = AnalyticsService()
    return _analytics_service
