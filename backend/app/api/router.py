"""
Central API router that aggregates all route modules.
"""

from fastapi import APIRouter
from app.api.routes import auth, events, enrollments, tickets, hotels, bookings, payments
from app.core.config import get_settings

api_router = APIRouter(prefix=get_settings().API_PREFIX)
api_router.include_router(auth.users_router)
api_router.include_router(auth.router)
api_router.include_router(events.router)
api_router.include_router(enrollments.router)
api_router.include_router(tickets.router)
api_router.include_router(hotels.router)
api_router.include_router(bookings.router)
api_router.include_router(payments.router)
