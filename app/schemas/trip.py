"""Pydantic schemas for trip and analytics endpoints."""

from datetime import datetime
from decimal import Decimal

from pydantic import Field

from app.schemas.base import CamelModel


class TripCreate(CamelModel):
    date: datetime
    origin: str = Field(min_length=1, max_length=256)
    destination: str = Field(min_length=1, max_length=256)
    kilometers: int = Field(gt=0)
    fuel_cost: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    parking_cost: Decimal = Field(default=Decimal("0.00"), ge=0, max_digits=10, decimal_places=2)
    toll_cost: Decimal = Field(default=Decimal("0.00"), ge=0, max_digits=10, decimal_places=2)
    other_cost: Decimal = Field(default=Decimal("0.00"), ge=0, max_digits=10, decimal_places=2)
    notes: str | None = Field(default=None, max_length=2000)
    route_id: int | None = None


class TripUpdate(CamelModel):
    date: datetime | None = None
    origin: str | None = Field(default=None, min_length=1, max_length=256)
    destination: str | None = Field(default=None, min_length=1, max_length=256)
    kilometers: int | None = Field(default=None, gt=0)
    fuel_cost: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    parking_cost: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    toll_cost: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    other_cost: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    notes: str | None = Field(default=None, max_length=2000)
    route_id: int | None = None


class TripResponse(CamelModel):
    id: int
    user_id: int
    route_id: int | None
    date: datetime
    origin: str
    destination: str
    kilometers: int
    fuel_cost: Decimal
    parking_cost: Decimal
    toll_cost: Decimal
    other_cost: Decimal
    total_cost: Decimal
    notes: str | None
    created_at: datetime


class StatsResponse(CamelModel):
    monthly_trips: int
    total_km: int
    total_expenses: Decimal
    total_routes: int


class MonthlyCount(CamelModel):
    month: str
    count: int


class MonthlyAmount(CamelModel):
    month: str
    amount: Decimal


class MonthlyTotal(CamelModel):
    month: str
    total: int


class MonthlyDataResponse(CamelModel):
    trips: list[MonthlyCount]
    expenses: list[MonthlyAmount]
    kilometers: list[MonthlyTotal]


class TopRouteResponse(CamelModel):
    origin: str
    destination: str
    kilometers: int
    trip_count: int
