"""Saved route service."""

from typing import Any

from sqlalchemy.orm import Session

from app.models.route import Route
from app.models.trip import Trip


class RouteService:
    """Handles CRUD for a user's frequent routes."""

    def get_user_routes(self, db: Session, user_id: int) -> list[Route]:
        """Get all routes for a user, newest first."""
        return db.query(Route).filter(Route.user_id == user_id).order_by(Route.created_at.desc(), Route.id.desc()).all()

    def get_route(self, db: Session, route_id: int) -> Route | None:
        """Get a route by ID regardless of owner. Callers check ownership."""
        return db.get(Route, route_id)

    def create_route(self, db: Session, user_id: int, origin: str, destination: str, kilometers: int) -> Route:
        route = Route(
            user_id=user_id,
            origin=origin.strip(),
            destination=destination.strip(),
            kilometers=kilometers,
        )
        db.add(route)
        db.commit()
        db.refresh(route)
        return route

    def update_route(self, db: Session, route: Route, changes: dict[str, Any]) -> Route:
        for key in ("origin", "destination", "kilometers"):
            if key in changes and changes[key] is not None:
                value = changes[key]
                setattr(route, key, value.strip() if isinstance(value, str) else value)
        db.commit()
        db.refresh(route)
        return route

    def delete_route(self, db: Session, route: Route) -> None:
        """Delete a route. Trips that referenced it keep their own origin/destination."""
        db.query(Trip).filter(Trip.route_id == route.id).update({Trip.route_id: None}, synchronize_session=False)
        db.delete(route)
        db.commit()


_route_service: RouteService | None = None


def get_route_service() -> RouteService:
    """Get singleton route service instance."""
    global _route_service
    if _route_service is None:
        _route_service = RouteService()
    return _route_service
