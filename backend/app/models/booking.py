"""
Booking model representing a user's claim on a hotel room.

Key design decisions:
- Unique constraint on room_id: a room is held by at most one booking, so two
  requests racing past the service's availability check cannot both insert
- A user normally holds a single booking; moving rooms updates it in place
"""

from sqlalchemy import Column, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from app.db.base import Base, TimestampMixin


class Booking(Base, TimestampMixin):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    room_id = Column(Integer, ForeignKey("rooms.id"), nullable=False)

    user = relationship("User", back_populates="bookings")
    room = relationship("Room", back_populates="booking")

    __table_args__ = (
        UniqueConstraint("room_id", name="uq_booking_room"),
    )

    def __repr__(self) -> str:
        return f"<Booking(id={self.id}, user={self.user_id}, room={self.room_id})>"
