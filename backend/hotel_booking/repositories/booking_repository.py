"""
Booking persistence.
"""

from typing import Optional

from sqlalchemy import select, update, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from hotel_booking.core.errors import ForbiddenError, NotFoundError
from hotel_booking.models.booking import Booking


async def create_booking(db: AsyncSession, user_id: int, room_id: int) -> Booking:
    """
    Insert a booking.

    The service checks for an existing booking first, but that check is not
    covered by the room lock when the same user books two different rooms at
    once; uq_booking_user catches the loser here.
    """
    booking = Booking(user_id=user_id, room_id=room_id)
    db.add(booking)
    try:
        await db.flush()
    except IntegrityError:
        raise ForbiddenError("User already has a booking")
    await db.refresh(booking)
    return booking


async def count_bookings_by_room_id(db: AsyncSession, room_id: int) -> int:
    result = await db.execute(
        select(func.count()).select_from(Booking).where(Booking.room_id == room_id)
    )
    return result.scalar_one()


async def find_booking_by_user_id_with_room(db: AsyncSession, user_id: int) -> Optional[Booking]:
    """Get the user's booking with its room eagerly loaded."""
    result = await db.execute(
        select(Booking)
        .options(selectinload(Booking.room))
        .where(Booking.user_id == user_id)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def update_booking_by_id(
    db: AsyncSession,
    booking_id: int,
    user_id: int,
    room_id: int,
) -> None:
    """
    Point an existing booking at a new room.
    Raises NotFoundError when no booking has this id.
    """
    result = await db.execute(
        update(Booking)
        .where(Booking.id == booking_id)
        .values(user_id=user_id, room_id=room_id)
    )
    if result.rowcount == 0:
        raise NotFoundError(f"Booking {booking_id} not found")
