from sqlalchemy import Column, Integer, String, Float, DateTime, Text, JSON
from datetime import datetime
from .database import Base
import enum


class BookingStatus(str, enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    # Stored as VARCHAR, validated against catalog.BookingType at the API boundary
    booking_type = Column(String, nullable=False)
    address_text = Column(Text, nullable=False)
    distance_miles = Column(Float, nullable=True)
    scheduled_date = Column(String, nullable=True)
    scheduled_window = Column(String, nullable=True)

    # Recorded estimate: whole dollars, as shown to the customer
    estimate_shown = Column(Integer, nullable=False)
    internal_low = Column(Integer, nullable=True)
    internal_high = Column(Integer, nullable=True)

    input = Column(JSON, nullable=False, default=dict)      # raw form fields
    customer = Column(JSON, nullable=False, default=dict)   # name / phone / email
    status = Column(String, nullable=False, default=BookingStatus.PENDING.value)
