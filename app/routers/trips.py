"""Trip API endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Response
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import CurrentUser, get_current_user, require_owner
from app.schemas.trip import TripCreate, TripResponse, TripUpdate
from app.services.auth import USER_NOT_FOUND, get_auth_service
from app.services.route import get_route_service
from app.services.trip import get_trip_service

router = APIRouter(prefix="/api/trips", tags=["Trips"])


def _check_route(db: Session, route_id: int | None, user: CurrentUser) -> None:
    """A trip may only reference one of the caller's own saved routes."""
    if route_id is not None:
        require_owner(get_route_service().get_route(db, route_id), user, "Route")


@router.get("/", response_model=list[TripResponse])
def list_trips(
    start_date: date | None = None,
    end_date: date | None = None,
    origin: str | None = None,
    destination: str | None = None,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[TripResponse]:
    """List trips with optional date range and place filters."""
    trips = get_trip_service().get_user_trips(db, user.user_id, start_date, end_date, origin, destination)
    return [TripResponse.model_validate(t) for t in trips]


@router.get("/export")
def export_trips(
    start_date: date | None = None,
    end_date: date | None = None,
    origin: str | None = None,
    destination: str | None = None,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> PlainTextResponse:
    """Download the filtered trip list as CSV."""
    service = get_trip_service()
    trips = service.get_user_trips(db, user.user_id, start_date, end_date, origin, destination)

    return PlainTextResponse(
        content=service.generate_csv(trips),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="trips.csv"'},
    )


@router.get("/{trip_id}", response_model=TripResponse)
def get_trip(
    trip_id: int,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> TripResponse:
    trip = require_owner(get_trip_service().get_trip(db, trip_id), user, "Trip")
    return TripResponse.model_validate(trip)


@router.post("/", response_model=TripResponse, status_code=201)
def create_trip(
    body: TripCreate,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> TripResponse:
    """Record a trip. Fuel cost defaults to an estimate from the user's fuel price."""
    owner = get_auth_service().get_user(db, user.user_id)
    if not owner:
        raise HTTPException(status_code=404, detail=USER_NOT_FOUND)
    _check_route(db, body.route_id, user)

    trip = get_trip_service().create_trip(db, user.user_id, owner.fuel_price_per_liter, body.model_dump())
    return TripResponse.model_validate(trip)


@router.put("/{trip_id}", response_model=TripResponse)
def update_trip(
    trip_id: int,
    body: TripUpdate,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> TripResponse:
    """Partially update a trip. An explicit null routeId detaches it from its route."""
    service = get_trip_service()
    trip = require_owner(service.get_trip(db, trip_id), user, "Trip")

    changes = body.model_dump(exclude_unset=True)
    changes = {key: value for key, value in changes.items() if value is not None or key in ("route_id", "notes")}
    _check_route(db, changes.get("route_id"), user)

    trip = service.update_trip(db, trip, changes)
    return TripResponse.model_validate(trip)


@router.delete("/{trip_id}", status_code=204)
def delete_trip(
    trip_id: int,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Response:
    """Delete a trip."""
    service = get_trip_service()
    trip = require_owner(service.get_trip(db, trip_id), user, "Trip")
    service.delete_trip(db, trip)
    return Response(status_code=204)
