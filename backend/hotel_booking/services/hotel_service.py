"""
Hotel listing and the hotel eligibility rule.

A user may see hotels (and book rooms) only with:
  enrollment -> ticket -> ticket type
where the ticket is PAID and its type is in-person and includes the hotel.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from hotel_booking.core.errors import NotFoundError, PaymentRequiredError
from hotel_booking.core.logging import get_logger
from hotel_booking.models.hotel import Hotel
from hotel_booking.models.ticket import TicketStatus
from hotel_booking.repositories import enrollment_repository, hotel_repository, ticket_repository

logger = get_logger(__name__)


async def check_hotel_eligibility(db: AsyncSession, user_id: int) -> None:
    """
    Raise unless the user holds a paid, in-person, hotel-inclusive ticket.

    NotFoundError: the user has no enrollment.
    PaymentRequiredError: no ticket, ticket not paid, remote ticket type,
    or a ticket type without hotel.
    """
    enrollment = await enrollment_repository.find_enrollment_by_user_id(db, user_id)
    if not enrollment:
        logger.info("hotel_access_denied", user_id=user_id, reason="no_enrollment")
        raise NotFoundError("User has no enrollment")

    ticket = await ticket_repository.find_ticket_by_enrollment_id_with_type(db, enrollment.id)
    if not ticket:
        reason = "no_ticket"
    elif ticket.status != TicketStatus.PAID.value:
        reason = "ticket_not_paid"
    elif ticket.ticket_type.is_remote:
        reason = "ticket_remote"
    elif not ticket.ticket_type.includes_hotel:
        reason = "ticket_without_hotel"
    else:
        return

    logger.info("hotel_access_denied", user_id=user_id, reason=reason)
    raise PaymentRequiredError()


async def list_hotels(db: AsyncSession, user_id: int) -> list[Hotel]:
    await check_hotel_eligibility(db, user_id)
    return await hotel_repository.find_hotels(db)


async def get_hotel_with_rooms(db: AsyncSession, user_id: int, hotel_id: int) -> Hotel:
    await check_hotel_eligibility(db, user_id)

    hotel = await hotel_repository.find_hotel_by_id_with_rooms(db, hotel_id)
    if not hotel:
        raise NotFoundError(f"Hotel {hotel_id} not found")
    return hotel
