"""
Central API router that aggregates all route modules.
"""

from fastapi import APIRouter
from trainbook.api.routes import auth, stations, fares, bookings
from trainbook.core.config import get_settings

api_router = APIRouter(prefix=get_settings().API_PREFIX)
api_router.include_router(auth.router)
api_router.include_router(stations.router)
api_router.include_router(fares.router)
api_router.include_router(bookings.router)
