"""
Pydantic schemas for hotel and room responses.
Keys are serialized in camelCase (hotelId, createdAt, ...).
"""

from datetime import datetime
from pydantic import AliasGenerator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

camel_case_output = ConfigDict(
    from_attributes=True,
    alias_generator=AliasGenerator(serialization_alias=to_camel),
)


class RoomResponse(BaseModel):
    id: int
    name: str
    capacity: int
    hotel_id: int
    created_at: datetime
    updated_at: datetime

    model_config = camel_case_output


class HotelResponse(BaseModel):
    id: int
    name: str
    image: str
    created_at: datetime
    updated_at: datetime

    model_config = camel_case_output


class HotelWithRoomsResponse(HotelResponse):
    rooms: list[RoomResponse] = Field(serialization_alias="Rooms")
