"""Trip service for expense records, filtering and CSV export."""

import csv
import io
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any

from sqlalchemy.orm import Session

from app.models.trip import Trip
from app.services import costs

CSV_HEADER = [
    "Date",
    "Origin",
    "Destination",
    "Kilometers",
    "Fuel",
    "Parking",
    "Tolls",
    "Other",
    "Total",
    "Notes",
]

COST_FIELDS = ("fuel_cost", "parking_cost", "toll_cost", "other_cost")
EDITABLE_FIELDS = {"date", "origin", "destination", "kilometers", "notes", "route_id", *COST_FIELDS}


class TripService:
    """Handles trip storage, cost totals and export."""

    def get_user_trips(
        self,
        db: Session,
        user_id: int,
        start_date: date | None = None,
        end_date: date | None = None,
        origin: str | None = None,
        destination: str | None = None,
    ) -> list[Trip]:
        """Get a user's trips, newest first. Date bounds are inclusive whole days."""
        query = db.query(Trip).filter(Trip.user_id == user_id)

        if start_date:
            query = query.filter(Trip.date >= datetime.combine(start_date, time.min))
        if end_date:
            query = query.filter(Trip.date < datetime.combine(end_date + timedelta(days=1), time.min))
        if origin:
            query = query.filter(Trip.origin == origin)
        if destination:
            query = query.filter(Trip.destination == destination)

        return query.order_by(Trip.date.desc(), Trip.id.desc()).all()

    def get_trip(self, db: Session, trip_id: int) -> Trip | None:
        """Get a trip by ID regardless of owner. Callers check ownership."""
        return db.get(Trip, trip_id)

    def create_trip(self, db: Session, user_id: int, fuel_price_per_liter: Decimal, data: dict[str, Any]) -> Trip:
        """Create a trip. Fuel cost is estimated from the fuel price when not given."""
        fuel = data.get("fuel_cost")
        if fuel is None:
            fuel = costs.fuel_cost(data["kilometers"], fuel_price_per_liter)

        trip = Trip(
            user_id=user_id,
            route_id=data.get("route_id"),
            date=data["date"],
            origin=data["origin"].strip(),
            destination=data["destination"].strip(),
            kilometers=data["kilometers"],
            fuel_cost=costs.to_money(fuel),
            parking_cost=costs.to_money(data.get("parking_cost")),
            toll_cost=costs.to_money(data.get("toll_cost")),
            other_cost=costs.to_money(data.get("other_cost")),
            notes=data.get("notes"),
        )
        self._update_total(trip)
        db.add(trip)
        db.commit()
        db.refresh(trip)
        return trip

    def update_trip(self, db: Session, trip: Trip, changes: dict[str, Any]) -> Trip:
        """Apply a partial update and recompute the total."""
        for key, value in changes.items():
            if key not in EDITABLE_FIELDS:
                continue
            if key in COST_FIELDS:
                value = costs.to_money(value)
            elif isinstance(value, str) and key != "notes":
                value = value.strip()
            setattr(trip, key, value)

        self._update_total(trip)
        db.commit()
        db.refresh(trip)
        return trip

    def delete_trip(self, db: Session, trip: Trip) -> None:
        db.delete(trip)
        db.commit()

    def _update_total(self, trip: Trip) -> None:
        trip.total_cost = costs.total_cost(trip.fuel_cost, trip.parking_cost, trip.toll_cost, trip.other_cost)

    def generate_csv(self, trips: list[Trip]) -> str:
        """Render trips as CSV with a header row."""
        buffer = io.StringIO()
        writer = csv.writer(buffer)
        writer.writerow(CSV_HEADER)
        for trip in trips:
            writer.writerow(
                [
                    trip.date.strftime("%Y-%m-%d"),
                    trip.origin,
                    trip.destination,
                    trip.kilometers,
                    costs.to_money(trip.fuel_cost),
                    costs.to_money(trip.parking_cost),
                    costs.to_money(trip.toll_cost),
                    costs.to_money(trip.other_cost),
                    costs.to_money(trip.total_cost),
                    trip.notes or "",
                ]
            )
        return buffer.getvalue()


_trip_service: TripService | None = None


def get_trip_service() -> TripService:
    """Get singleton trip service instance."""
    global _trip_service
    if _trip_service is None:
        _trip_service = TripService()
    return _trip_service
