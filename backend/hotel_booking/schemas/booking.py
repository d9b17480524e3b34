"""
Pydantic schemas for booking-related request/response validation.
"""

from pydantic import BaseModel, ConfigDict, Field

from hotel_booking.schemas.hotel import RoomResponse


class BookingRequest(BaseModel):
    room_id: int = Field(..., alias="roomId", gt=0)

    model_config = ConfigDict(populate_by_name=True)


class BookingIdResponse(BaseModel):
    booking_id: int = Field(..., serialization_alias="bookingId")


class BookingWithRoomResponse(BaseModel):
    id: int
    room: RoomResponse = Field(serialization_alias="Room")

    model_config = {"from_attributes": True}
