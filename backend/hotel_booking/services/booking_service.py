"""
Booking service: view, create and change a user's room booking.

CAPACITY STRATEGY: Pessimistic row lock on the room
====================================================

Problem:
  Capacity is checked by counting existing bookings for the room and then
  inserting/updating. Two requests for the last free slot can both count
  capacity - 1 and both write. Result: an overfull room.

Solution:
  Before counting, the room row is read with SELECT ... FOR UPDATE. A second
  request for the same room blocks on that lock until the first transaction
  commits (write routes commit before responding), then counts again and
  sees the new booking.

  This serializes writers per room only. Contention is low: a room holds a
  handful of guests, and reads (GET /booking) never take the lock.

  The one-booking-per-user rule is backed by a unique constraint on
  bookings.user_id; the explicit check below gives a readable error before
  the constraint fires, and the repository turns a lost race into the same
  ForbiddenError.

Ownership on room change:
  update_room requires the booking being moved to be the caller's own
  booking. Owning *some* booking is not enough.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from hotel_booking.core.errors import ForbiddenError, NotFoundError
from hotel_booking.core.logging import get_logger
from hotel_booking.core.metrics import record_booking_operation
from hotel_booking.models.booking import Booking
from hotel_booking.repositories import booking_repository, room_repository
from hotel_booking.services.hotel_service import check_hotel_eligibility

logger = get_logger(__name__)


async def list_bookings(db: AsyncSession, user_id: int) -> Booking:
    """Get the user's booking with its room. Raises NotFoundError if none."""
    booking = await booking_repository.find_booking_by_user_id_with_room(db, user_id)
    if not booking:
        raise NotFoundError("User has no booking")
    return booking


async def _check_room_is_vacant(db: AsyncSession, user_id: int, room_id: int) -> None:
    await check_hotel_eligibility(db, user_id)

    room = await room_repository.find_room_by_id(db, room_id, for_update=True)
    if not room:
        raise NotFoundError(f"Room {room_id} not found")

    bookings_count = await booking_repository.count_bookings_by_room_id(db, room_id)
    if bookings_count >= room.capacity:
        logger.warning(
            "room_full",
            room_id=room_id,
            capacity=room.capacity,
            bookings=bookings_count,
        )
        raise ForbiddenError(f"Room {room_id} has no vacancy")


async def create_booking(db: AsyncSession, user_id: int, room_id: int) -> int:
    """
    Book a room for the user and return the new booking id.

    Checks, in order: ticket eligibility, room exists, room has a free slot,
    user has no booking yet.
    """
    await _check_room_is_vacant(db, user_id, room_id)

    existing = await booking_repository.find_booking_by_user_id_with_room(db, user_id)
    if existing:
        logger.warning("booking_failed_already_booked", user_id=user_id, booking_id=existing.id)
        raise ForbiddenError("User already has a booking")

    booking = await booking_repository.create_booking(db, user_id, room_id)

    logger.info("booking_created", booking_id=booking.id, user_id=user_id, room_id=room_id)
    record_booking_operation("create")
    return booking.id


async def update_room(db: AsyncSession, booking_id: int, user_id: int, room_id: int) -> None:
    """
    Move the user's booking to another room.

    The caller must own booking_id. The destination room goes through the
    same eligibility, existence and capacity checks as a new booking.
    """
    booking = await list_bookings(db, user_id)
    if booking.id != booking_id:
        logger.warning(
            "booking_update_rejected",
            reason="not_owner",
            booking_id=booking_id,
            user_id=user_id,
        )
        raise ForbiddenError(f"Booking {booking_id} does not belong to this user")

    previous_room_id = booking.room_id
    await _check_room_is_vacant(db, user_id, room_id)

    await booking_repository.update_booking_by_id(db, booking_id, user_id, room_id)

    logger.info(
        "booking_room_changed",
        booking_id=booking_id,
        user_id=user_id,
        from_room_id=previous_room_id,
        to_room_id=room_id,
    )
    record_booking_operation("change_room")
