"""
Central API router that aggregates all route modules.
"""

from fastapi import APIRouter
from hotel_booking.api.routes import auth, hotels, bookings

api_router = APIRouter()
api_router.include_router(auth.router)
api_router.include_router(hotels.router)
api_router.include_router(bookings.router)
