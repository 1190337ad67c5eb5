from sqlalchemy import Column, Date, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from app.db.base import Base, TimestampMixin


class Enrollment(Base, TimestampMixin):
    """A user's registration for the event. One per user; required to buy a ticket."""

    __tablename__ = "enrollments"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, unique=True)
    name = Column(String(255), nullable=False)
    cpf = Column(String(14), nullable=False, unique=True)
    birthday = Column(Date, nullable=False)
    phone = Column(String(20), nullable=False)

    user = relationship("User", back_populates="enrollment")
    tickets = relationship("Ticket", back_populates="enrollment")

    def __repr__(self) -> str:
        return f"<Enrollment(id={self.id}, user={self.user_id})>"
