"""
Booking endpoints: view, create and change the caller's room booking.

Write routes commit before building the response, so a failed commit is
reported as an error instead of a bookingId for a row that was never stored.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_booking.db.session import get_db
from hotel_booking.schemas.booking import BookingRequest, BookingIdResponse, BookingWithRoomResponse
from hotel_booking.services.booking_service import list_bookings, create_booking, update_room
from hotel_booking.core.security import get_current_user_id

router = APIRouter(prefix="/booking", tags=["Booking"])


@router.get("", response_model=BookingWithRoomResponse)
async def get_booking(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Get the authenticated user's booking with its room."""
    return await list_bookings(db, user_id)


@router.post("", response_model=BookingIdResponse)
async def post_booking(
    booking_data: BookingRequest,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """
    Book a room.

    404 without enrollment or when the room does not exist, 402 when the
    ticket does not grant hotel access, 403 when the room is full or the
    user already has a booking.
    """
    booking_id = await create_booking(db, user_id, booking_data.room_id)
    await db.commit()
    return BookingIdResponse(booking_id=booking_id)


@router.put("/{booking_id}", response_model=BookingIdResponse)
async def change_room(
    booking_id: int,
    booking_data: BookingRequest,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Move the caller's booking to another room. Same error mapping as POST."""
    await update_room(db, booking_id, user_id, booking_data.room_id)
    await db.commit()
    return BookingIdResponse(booking_id=booking_id)
