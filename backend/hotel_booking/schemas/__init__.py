from hotel_booking.schemas.user import UserCreate, UserResponse, UserLogin, Token
from hotel_booking.schemas.hotel import RoomResponse, HotelResponse, HotelWithRoomsResponse
from hotel_booking.schemas.booking import BookingRequest, BookingIdResponse, BookingWithRoomResponse

__all__ = [
    "UserCreate", "UserResponse", "UserLogin", "Token",
    "RoomResponse", "HotelResponse", "HotelWithRoomsResponse",
    "BookingRequest", "BookingIdResponse", "BookingWithRoomResponse",
]
