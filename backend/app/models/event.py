"""
The event attendees register for. The platform serves a single event: the
oldest row.
"""

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String

from app.db.base import Base, TimestampMixin


class Event(Base, TimestampMixin):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    background_image_url = Column(String(1000), nullable=False)
    logo_image_url = Column(String(1000), nullable=False)
    starts_at = Column(DateTime(timezone=True), nullable=False)
    ends_at = Column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        CheckConstraint("ends_at > starts_at", name="check_event_ends_after_start"),
    )

    def __repr__(self) -> str:
        return f"<Event(id={self.id}, title={self.title})>"
