"""
Ticket types and the tickets bought against them.

A ticket starts RESERVED and becomes PAID exactly once, when its payment is
processed. The status is a plain string guarded by a CHECK constraint.
"""

from sqlalchemy import Boolean, CheckConstraint, Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from app.db.base import Base, TimestampMixin

TICKET_RESERVED = "RESERVED"
TICKET_PAID = "PAID"


class TicketType(Base, TimestampMixin):
    __tablename__ = "ticket_types"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    price = Column(Integer, nullable=False)
    is_remote = Column(Boolean, nullable=False, default=False)
    includes_hotel = Column(Boolean, nullable=False, default=False)

    tickets = relationship("Ticket", back_populates="ticket_type")

    __table_args__ = (
        CheckConstraint("price >= 0", name="check_ticket_type_price_non_negative"),
    )

    def __repr__(self) -> str:
        return f"<TicketType(id={self.id}, name={self.name}, hotel={self.includes_hotel})>"


class Ticket(Base, TimestampMixin):
    __tablename__ = "tickets"

    id = Column(Integer, primary_key=True, index=True)
    enrollment_id = Column(Integer, ForeignKey("enrollments.id"), nullable=False, index=True)
    ticket_type_id = Column(Integer, ForeignKey("ticket_types.id"), nullable=False)
    status = Column(String(20), nullable=False, default=TICKET_RESERVED)

    enrollment = relationship("Enrollment", back_populates="tickets")
    ticket_type = relationship("TicketType", back_populates="tickets")
    payment = relationship("Payment", back_populates="ticket", uselist=False)

    __table_args__ = (
        CheckConstraint("status IN ('RESERVED', 'PAID')", name="check_ticket_status"),
    )

    @property
    def grants_hotel(self) -> bool:
        """Paid and hotel-inclusive. Requires ticket_type to be loaded."""
        return self.status == TICKET_PAID and bool(self.ticket_type.includes_hotel)

    def __repr__(self) -> str:
        return f"<Ticket(id={self.id}, enrollment={self.enrollment_id}, status={self.status})>"
