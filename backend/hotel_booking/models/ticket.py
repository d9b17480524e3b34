"""
Ticket and TicketType models.

The ticket type decides whether a ticket grants hotel access: it must be an
in-person type (is_remote = False) that includes the hotel, and the ticket
itself must be PAID.
"""

import enum

from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship

from hotel_booking.db.base import Base, TimestampMixin


class TicketStatus(str, enum.Enum):
    RESERVED = "RESERVED"
    PAID = "PAID"


class TicketType(Base, TimestampMixin):
    __tablename__ = "ticket_types"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    price = Column(Integer, nullable=False)
    is_remote = Column(Boolean, nullable=False)
    includes_hotel = Column(Boolean, nullable=False)

    tickets = relationship("Ticket", back_populates="ticket_type")

    __table_args__ = (
        CheckConstraint("price >= 0", name="check_ticket_type_price_non_negative"),
    )

    def __repr__(self) -> str:
        return (
            f"<TicketType(id={self.id}, remote={self.is_remote}, "
            f"hotel={self.includes_hotel})>"
        )


class Ticket(Base, TimestampMixin):
    __tablename__ = "tickets"

    id = Column(Integer, primary_key=True, index=True)
    ticket_type_id = Column(Integer, ForeignKey("ticket_types.id"), nullable=False, index=True)
    enrollment_id = Column(Integer, ForeignKey("enrollments.id"), nullable=False, unique=True, index=True)
    status = Column(String(20), nullable=False, default=TicketStatus.RESERVED.value)

    ticket_type = relationship("TicketType", back_populates="tickets")
    enrollment = relationship("Enrollment", back_populates="ticket")

    __table_args__ = (
        CheckConstraint("status IN ('RESERVED', 'PAID')", name="check_ticket_status"),
    )

    def __repr__(self) -> str:
        return f"<Ticket(id={self.id}, enrollment={self.enrollment_id}, status={self.status})>"
