from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from app.db.base import Base, TimestampMixin


class Payment(Base, TimestampMixin):
    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, index=True)
    # One payment per ticket
    ticket_id = Column(Integer, ForeignKey("tickets.id"), nullable=False, unique=True)
    value = Column(Integer, nullable=False)
    card_issuer = Column(String(20), nullable=False)
    card_last_digits = Column(String(4), nullable=False)

    ticket = relationship("Ticket", back_populates="payment")

    def __repr__(self) -> str:
        return f"<Payment(id={self.id}, ticket={self.ticket_id}, value={self.value})>"
