from app.schemas.user import UserCreate, UserLogin, UserResponse, SignInResponse
from app.schemas.event import EventResponse
from app.schemas.ticket import TicketCreate, TicketTypeResponse, TicketResponse
from app.schemas.hotel import HotelResponse, HotelWithRoomsResponse, RoomResponse
from app.schemas.enrollment import EnrollmentUpsert, EnrollmentResponse
from app.schemas.booking import BookingCreate, BookingResponse
from app.schemas.payment import CardData, PaymentProcess, PaymentResponse

__all__ = [
    "UserCreate", "UserLogin", "UserResponse", "SignInResponse",
    "EventResponse",
    "TicketCreate", "TicketTypeResponse", "TicketResponse",
    "HotelResponse", "HotelWithRoomsResponse", "RoomResponse",
    "EnrollmentUpsert", "EnrollmentResponse",
    "BookingCreate", "BookingResponse",
    "CardData", "PaymentProcess", "PaymentResponse",
]
