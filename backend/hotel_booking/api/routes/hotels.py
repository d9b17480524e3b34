"""
Hotel endpoints, available only to users whose ticket includes the hotel.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_booking.db.session import get_db
from hotel_booking.schemas.hotel import HotelResponse, HotelWithRoomsResponse
from hotel_booking.services.hotel_service import list_hotels, get_hotel_with_rooms
from hotel_booking.core.security import get_current_user_id

router = APIRouter(prefix="/hotels", tags=["Hotels"])


@router.get("", response_model=list[HotelResponse])
async def list_hotels_endpoint(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await list_hotels(db, user_id)


@router.get("/{hotel_id}", response_model=HotelWithRoomsResponse)
async def get_hotel_endpoint(
    hotel_id: int,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Get a hotel with all of its rooms."""
    return await get_hotel_with_rooms(db, user_id, hotel_id)
