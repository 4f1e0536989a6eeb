"""API routers."""

from app.routers.analytics import router as analytics_router
from app.routers.auth import router as auth_router
from app.routers.routes import router as routes_router
from app.routers.trips import router as trips_router

__all__ = ["auth_router", "routes_router", "trips_router", "analytics_router"]
