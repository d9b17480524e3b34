"""
Service-level tests for the booking rules, called without the HTTP layer.
"""

import pytest

from hotel_booking.core.errors import ForbiddenError, NotFoundError, PaymentRequiredError
from hotel_booking.repositories import booking_repository
from hotel_booking.services import booking_service
from tests import factories


@pytest.mark.asyncio
async def test_list_bookings_returns_booking_with_room(db_session, eligible_user, hotel):
    room = await factories.create_room(db_session, hotel)
    booking = await factories.create_booking(db_session, eligible_user, room)

    found = await booking_service.list_bookings(db_session, eligible_user.id)
    assert found.id == booking.id
    assert found.room.id == room.id


@pytest.mark.asyncio
async def test_list_bookings_without_booking(db_session, test_user):
    with pytest.raises(NotFoundError):
        await booking_service.list_bookings(db_session, test_user.id)


@pytest.mark.asyncio
async def test_create_booking_increments_room_count(db_session, eligible_user, hotel):
    room = await factories.create_room(db_session, hotel, capacity=3)
    assert await booking_repository.count_bookings_by_room_id(db_session, room.id) == 0

    booking_id = await booking_service.create_booking(db_session, eligible_user.id, room.id)

    assert isinstance(booking_id, int)
    assert await booking_repository.count_bookings_by_room_id(db_session, room.id) == 1


@pytest.mark.asyncio
async def test_create_booking_fills_room_to_capacity(db_session, hotel):
    room = await factories.create_room(db_session, hotel, capacity=2)
    users = []
    for _ in range(3):
        user = await factories.create_user(db_session)
        enrollment = await factories.create_enrollment(db_session, user)
        ticket_type = await factories.create_ticket_type(db_session)
        await factories.create_ticket(db_session, enrollment, ticket_type, paid=True)
        users.append(user)

    await booking_service.create_booking(db_session, users[0].id, room.id)
    await booking_service.create_booking(db_session, users[1].id, room.id)
    with pytest.raises(ForbiddenError):
        await booking_service.create_booking(db_session, users[2].id, room.id)

    assert await booking_repository.count_bookings_by_room_id(db_session, room.id) == 2


@pytest.mark.asyncio
async def test_create_booking_ticket_checked_before_room(db_session, test_user):
    """An ineligible ticket fails with PaymentRequired even for a missing room."""
    enrollment = await factories.create_enrollment(db_session, test_user)
    ticket_type = await factories.create_ticket_type(db_session, is_remote=False, includes_hotel=False)
    await factories.create_ticket(db_session, enrollment, ticket_type, paid=True)

    with pytest.raises(PaymentRequiredError):
        await booking_service.create_booking(db_session, test_user.id, 99999)


@pytest.mark.asyncio
async def test_create_booking_room_not_found(db_session, eligible_user):
    with pytest.raises(NotFoundError):
        await booking_service.create_booking(db_session, eligible_user.id, 99999)


@pytest.mark.asyncio
async def test_update_room_keeps_id_and_owner(db_session, eligible_user, hotel):
    first_room = await factories.create_room(db_session, hotel)
    second_room = await factories.create_room(db_session, hotel)
    booking = await factories.create_booking(db_session, eligible_user, first_room)

    await booking_service.update_room(db_session, booking.id, eligible_user.id, second_room.id)

    moved = await booking_service.list_bookings(db_session, eligible_user.id)
    assert moved.id == booking.id
    assert moved.user_id == eligible_user.id
    assert moved.room_id == second_room.id
    assert moved.room.id == second_room.id


@pytest.mark.asyncio
async def test_update_room_to_full_room(db_session, eligible_user, hotel):
    first_room = await factories.create_room(db_session, hotel)
    full_room = await factories.create_room(db_session, hotel, capacity=1)
    booking = await factories.create_booking(db_session, eligible_user, first_room)
    other_user = await factories.create_user(db_session)
    await factories.create_booking(db_session, other_user, full_room)

    with pytest.raises(ForbiddenError):
        await booking_service.update_room(db_session, booking.id, eligible_user.id, full_room.id)


@pytest.mark.asyncio
async def test_update_room_requires_own_booking(db_session, eligible_user, hotel):
    room = await factories.create_room(db_session, hotel)
    other_user = await factories.create_user(db_session)
    other_booking = await factories.create_booking(db_session, other_user, room)

    # eligible_user has no booking at all
    with pytest.raises(NotFoundError):
        await booking_service.update_room(db_session, other_booking.id, eligible_user.id, room.id)


@pytest.mark.asyncio
async def test_update_booking_by_id_missing_row(db_session, test_user, hotel):
    room = await factories.create_room(db_session, hotel)
    with pytest.raises(NotFoundError):
        await booking_repository.update_booking_by_id(db_session, 99999, test_user.id, room.id)


@pytest.mark.asyncio
async def test_create_booking_second_row_for_user_is_forbidden(db_session, eligible_user, hotel):
    """The unique constraint on user_id surfaces as ForbiddenError, not a raw IntegrityError."""
    first_room = await factories.create_room(db_session, hotel)
    second_room = await factories.create_room(db_session, hotel)
    await factories.create_booking(db_session, eligible_user, first_room)
    user_id, first_room_id, second_room_id = eligible_user.id, first_room.id, second_room.id

    with pytest.raises(ForbiddenError):
        await booking_repository.create_booking(db_session, user_id, second_room_id)
    await db_session.rollback()

    assert await booking_repository.count_bookings_by_room_id(db_session, first_room_id) == 1
    assert await booking_repository.count_bookings_by_room_id(db_session, second_room_id) == 0
