from app.models.user import User, Session
from app.models.event import Event
from app.models.enrollment import Enrollment
from app.models.ticket import TicketType, Ticket, TICKET_PAID, TICKET_RESERVED
from app.models.payment import Payment
from app.models.hotel import Hotel, Room
from app.models.booking import Booking

__all__ = [
    "User", "Session", "Event", "Enrollment",
    "TicketType", "Ticket", "TICKET_PAID", "TICKET_RESERVED",
    "Payment", "Hotel", "Room", "Booking",
]
