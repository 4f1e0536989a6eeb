"""Pydantic schemas for saved route endpoints."""

from datetime import datetime

from pydantic import Field

from app.schemas.base import CamelModel


class RouteCreate(CamelModel):
    origin: str = Field(min_length=1, max_length=256)
    destination: str = Field(min_length=1, max_length=256)
    kilometers: int = Field(gt=0)


class RouteUpdate(CamelModel):
    origin: str | None = Field(default=None, min_length=1, max_length=256)
    destination: str | None = Field(default=None, min_length=1, max_length=256)
    kilometers: int | None = Field(default=None, gt=0)


class RouteResponse(CamelModel):
    id: int
    user_id: int
    origin: str
    destination: str
    kilometers: int
    created_at: datetime
