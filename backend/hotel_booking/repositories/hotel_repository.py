from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from hotel_booking.models.hotel import Hotel


async def find_hotels(db: AsyncSession) -> list[Hotel]:
    result = await db.execute(select(Hotel).order_by(Hotel.id.asc()))
    return list(result.scalars().all())


async def find_hotel_by_id_with_rooms(db: AsyncSession, hotel_id: int) -> Optional[Hotel]:
    # populate_existing: a hotel already in the session must not keep a stale rooms list
    result = await db.execute(
        select(Hotel)
        .options(selectinload(Hotel.rooms))
        .where(Hotel.id == hotel_id)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()
