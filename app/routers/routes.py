"""Saved route API endpoints."""

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import CurrentUser, get_current_user, require_owner
from app.schemas.route import RouteCreate, RouteResponse, RouteUpdate
from app.services.route import get_route_service

router = APIRouter(prefix="/api/routes", tags=["Routes"])


@router.get("/", response_model=list[RouteResponse])
def list_routes(
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[RouteResponse]:
    """List the current user's saved routes."""
    routes = get_route_service().get_user_routes(db, user.user_id)
    return [RouteResponse.model_validate(r) for r in routes]


@router.post("/", response_model=RouteResponse, status_code=201)
def create_route(
    body: RouteCreate,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> RouteResponse:
    """Save a new route for the current user."""
    route = get_route_service().create_route(db, user.user_id, body.origin, body.destination, body.kilometers)
    return RouteResponse.model_validate(route)


@router.put("/{route_id}", response_model=RouteResponse)
def update_route(
    route_id: int,
    body: RouteUpdate,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> RouteResponse:
    service = get_route_service()
    route = require_owner(service.get_route(db, route_id), user, "Route")
    route = service.update_route(db, route, body.model_dump(exclude_unset=True))
    return RouteResponse.model_validate(route)


@router.delete("/{route_id}", status_code=204)
def delete_route(
    route_id: int,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Response:
    """Delete a saved route."""
    service = get_route_service()
    route = require_owner(service.get_route(db, route_id), user, "Route")
    service.delete_route(db, route)
    return Response(status_code=204)
