from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_booking.models.hotel import Room


async def find_room_by_id(
    db: AsyncSession,
    room_id: int,
    for_update: bool = False,
) -> Optional[Room]:
    """
    Get a room by id.

    With for_update=True the row is locked (SELECT ... FOR UPDATE) until the
    surrounding transaction ends. Writers that check room capacity take this
    lock first so two requests cannot both see the last free slot.
    """
    query = select(Room).where(Room.id == room_id)
    if for_update:
        query = query.with_for_update()
    result = await db.execute(query)
    return result.scalar_one_or_none()
