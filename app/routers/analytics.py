"""Analytics API endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import CurrentUser, get_current_user
from app.schemas.trip import MonthlyDataResponse, StatsResponse, TopRouteResponse
from app.services.analytics import get_analytics_service

router = APIRouter(prefix="/api/analytics", tags=["Analytics"])


@router.get("/stats", response_model=StatsResponse)
def get_stats(
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> StatsResponse:
    """Dashboard headline numbers for the current user."""
    return StatsResponse(**get_analytics_service().get_stats(db, user.user_id))


@router.get("/monthly", response_model=MonthlyDataResponse)
def get_monthly(
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> MonthlyDataResponse:
    """Trips, expenses and kilometers per month."""
    return MonthlyDataResponse(**get_analytics_service().get_monthly_data(db, user.user_id))


@router.get("/top-routes", response_model=list[TopRouteResponse])
def get_top_routes(
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[TopRouteResponse]:
    """Five most travelled origin/destination pairs."""
    rows = get_analytics_service().get_top_routes(db, user.user_id)
    return [TopRouteResponse(**row) for row in rows]
