"""
Flight/booking data gateway implementations
"""

import asyncio
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Dict, List, Optional, Any

import structlog
from sqlalchemy import select, func, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from ..config import config
from ..interfaces.data_gateway import DataGatewayInterface
from ..types import FlightOffer, BookingRecord, NotFoundError, GatewayError
from .db_models import Base, FlightRow, BookingRow

logger = structlog.get_logger("data_gateway")


DEMO_FLIGHTS = [
    {"origin": "NYC", "destination": "LAX", "departure_time": "2025-06-01T08:00:00",
     "arrival_time": "2025-06-01T11:00:00", "price": 199.0},
    {"origin": "LAX", "destination": "NYC", "departure_time": "2025-06-05T09:30:00",
     "arrival_time": "2025-06-05T17:45:00", "price": 249.0},
    {"origin": "NYC", "destination": "SFO", "departure_time": "2025-06-02T07:15:00",
     "arrival_time": "2025-06-02T10:40:00", "price": 329.0},
    {"origin": "BOS", "destination": "MIA", "departure_time": "2025-06-03T12:00:00",
     "arrival_time": "2025-06-03T15:20:00", "price": 149.0},
]


# SQLite INTEGER range
MAX_STORE_ID = 2 ** 63 - 1


def _storable_id(identifier: int) -> bool:
    return -MAX_STORE_ID - 1 <= identifier <= MAX_STORE_ID


def _booking_timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")


class SqlDataGateway(DataGatewayInterface):
    """SQLAlchemy-backed gateway over the flights and bookings tables"""

    def __init__(self, database_url: Optional[str] = None, echo: Optional[bool] = None):
        self.database_url = database_url or config.database.url
        engine_kwargs: Dict[str, Any] = {
            "echo": config.database.echo if echo is None else echo,
        }
        if ":memory:" in self.database_url:
            # One shared connection, otherwise every checkout sees an empty database
            engine_kwargs.update(poolclass=StaticPool, connect_args={"check_same_thread": False})

        self.engine = create_async_engine(self.database_url, **engine_kwargs)
        self.session_factory = async_sessionmaker(self.engine, class_=AsyncSession, expire_on_commit=False)

    @asynccontextmanager
    async def _store_operation(self, operation: str):
        """Translate store failures into GatewayError; no retries"""
        try:
            yield
        except SQLAlchemyError as e:
            logger.error("Data gateway operation failed", operation=operation, error=str(e))
            raise GatewayError(f"{operation} failed: {e}") from e

    async def initialize(self, seed_demo_data: bool = False) -> None:
        """Create tables and optionally seed demo flights into an empty store"""
        async with self._store_operation("initialize"):
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)

            if not seed_demo_data:
                return

            async with self.session_factory() as session:
                async with session.begin():
                    count = await session.scalar(select(func.count()).select_from(FlightRow))
                    if count:
                        return
                    session.add_all(FlightRow(**flight) for flight in DEMO_FLIGHTS)

            logger.info("Seeded demo flights", count=len(DEMO_FLIGHTS))

    async def add_flight(
        self,
        origin: str,
        destination: str,
        departure_time: str,
        arrival_time: str,
        price: float,
    ) -> FlightOffer:
        """Insert a flight; used for seeding"""
        async with self._store_operation("add_flight"):
            async with self.session_factory() as session:
                async with session.begin():
                    row = FlightRow(
                        origin=origin,
                        destination=destination,
                        departure_time=departure_time,
                        arrival_time=arrival_time,
                        price=price,
                    )
                    session.add(row)
                    await session.flush()
                    return self._to_offer(row)

    async def find_flights_by_route(self, origin: str, destination: str) -> List[FlightOffer]:
        async with self._store_operation("find_flights_by_route"):
            async with self.session_factory() as session:
                result = await session.execute(
                    select(FlightRow)
                    .where(FlightRow.origin == origin, FlightRow.destination == destination)
                    .order_by(FlightRow.id)
                )
                return [self._to_offer(row) for row in result.scalars()]

    async def find_flight_by_id(self, flight_id: int) -> FlightOffer:
        if not _storable_id(flight_id):
            raise NotFoundError("flight", flight_id)

        async with self._store_operation("find_flight_by_id"):
            async with self.session_factory() as session:
                row = await session.get(FlightRow, flight_id)

        if row is None:
            raise NotFoundError("flight", flight_id)
        return self._to_offer(row)

    async def insert_booking(self, flight_id: int, passenger_details: str, payment: str) -> int:
        """
        Create a booking atomically.

        The flight check, the insert and the id read-back share one transaction,
        which commits only after the generated id is known. Any failure rolls
        the insert back so no unconfirmed booking id is ever visible.
        """
        if not _storable_id(flight_id):
            raise NotFoundError("flight", flight_id)

        async with self._store_operation("insert_booking"):
            async with self.session_factory() as session:
                async with session.begin():
                    if await session.get(FlightRow, flight_id) is None:
                        raise NotFoundError("flight", flight_id)

                    booking = BookingRow(
                        flight_id=flight_id,
                        passenger_details=passenger_details,
                        payment_details=payment,
                        booking_time=_booking_timestamp(),
                    )
                    session.add(booking)
                    await session.flush()
                    booking_id = booking.id

        logger.info("Booking created", booking_id=booking_id, flight_id=flight_id)
        return booking_id

    async def find_booking_by_id(self, booking_id: int) -> BookingRecord:
        if not _storable_id(booking_id):
            raise NotFoundError("booking", booking_id)

        async with self._store_operation("find_booking_by_id"):
            async with self.session_factory() as session:
                row = await session.get(BookingRow, booking_id)

        if row is None:
            raise NotFoundError("booking", booking_id)
        return BookingRecord(
            id=row.id,
            flight_id=row.flight_id,
            passenger_details=row.passenger_details,
            payment_details=row.payment_details,
            booking_time=row.booking_time,
        )

    async def health_check(self) -> Dict[str, Any]:
        """Check store health"""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return {"status": "healthy", "available": True}
        except SQLAlchemyError as e:
            return {"status": "unhealthy", "available": False, "error": str(e)}

    async def close(self) -> None:
        """Dispose of the engine and its connections"""
        await self.engine.dispose()

    @staticmethod
    def _to_offer(row: FlightRow) -> FlightOffer:
        return FlightOffer(
            id=row.id,
            origin=row.origin,
            destination=row.destination,
            departure_time=row.departure_time,
            arrival_time=row.arrival_time,
            price=row.price,
        )


class InMemoryDataGateway(DataGatewayInterface):
    """In-memory gateway for testing and development"""

    def __init__(self):
        self.flights: Dict[int, FlightOffer] = {}
        self.bookings: Dict[int, BookingRecord] = {}
        self._lock = asyncio.Lock()

    async def initialize(self, seed_demo_data: bool = False) -> None:
        if seed_demo_data and not self.flights:
            for flight in DEMO_FLIGHTS:
                await self.add_flight(**flight)

    async def add_flight(
        self,
        origin: str,
        destination: str,
        departure_time: str,
        arrival_time: str,
        price: float,
    ) -> FlightOffer:
        async with self._lock:
            flight = FlightOffer(
                id=max(self.flights, default=0) + 1,
                origin=origin,
                destination=destination,
                departure_time=departure_time,
                arrival_time=arrival_time,
                price=price,
            )
            self.flights[flight.id] = flight
            return flight

    async def find_flights_by_route(self, origin: str, destination: str) -> List[FlightOffer]:
        return [
            flight for flight in self.flights.values()
            if flight.origin == origin and flight.destination == destination
        ]

    async def find_flight_by_id(self, flight_id: int) -> FlightOffer:
        if flight_id not in self.flights:
            raise NotFoundError("flight", flight_id)
        return self.flights[flight_id]

    async def insert_booking(self, flight_id: int, passenger_details: str, payment: str) -> int:
        async with self._lock:
            if flight_id not in self.flights:
                raise NotFoundError("flight", flight_id)

            booking = BookingRecord(
                id=max(self.bookings, default=0) + 1,
                flight_id=flight_id,
                passenger_details=passenger_details,
                payment_details=payment,
                booking_time=_booking_timestamp(),
            )
            self.bookings[booking.id] = booking
            return booking.id

    async def find_booking_by_id(self, booking_id: int) -> BookingRecord:
        if booking_id not in self.bookings:
            raise NotFoundError("booking", booking_id)
        return self.bookings[booking_id]

    async def health_check(self) -> Dict[str, Any]:
        return {"status": "healthy", "available": True}

    async def close(self) -> None:
        pass
