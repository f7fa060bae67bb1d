"""
ORM tables backing the flight/booking data gateway
"""

from sqlalchemy import Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class FlightRow(Base):
    __tablename__ = "flights"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    origin: Mapped[str] = mapped_column(String(8), nullable=False, index=True)
    destination: Mapped[str] = mapped_column(String(8), nullable=False, index=True)
    departure_time: Mapped[str] = mapped_column(String(32), nullable=False)
    arrival_time: Mapped[str] = mapped_column(String(32), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)


class BookingRow(Base):
    __tablename__ = "bookings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    flight_id: Mapped[int] = mapped_column(Integer, ForeignKey("flights.id"), nullable=False)
    passenger_details: Mapped[str] = mapped_column(Text, nullable=False)
    payment_details: Mapped[str] = mapped_column(Text, nullable=False)
    # SQLite datetime('now') layout, UTC
    booking_time: Mapped[str] = mapped_column(String(32), nullable=False)
