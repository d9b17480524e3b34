from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from hotel_booking.models.ticket import Ticket


async def find_ticket_by_enrollment_id_with_type(
    db: AsyncSession,
    enrollment_id: int,
) -> Optional[Ticket]:
    """Get the enrollment's ticket with its ticket type eagerly loaded."""
    result = await db.execute(
        select(Ticket)
        .options(selectinload(Ticket.ticket_type))
        .where(Ticket.enrollment_id == enrollment_id)
    )
    return result.scalar_one_or_none()
