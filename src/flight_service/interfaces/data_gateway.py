"""
Flight/booking data gateway interface definitions
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List
from ..types import FlightOffer, BookingRecord


class DataGatewayInterface(ABC):
    """Interface for flight and booking storage"""

    @abstractmethod
    async def find_flights_by_route(self, origin: str, destination: str) -> List[FlightOffer]:
        """Get flights by origin and destination"""
        pass

    @abstractmethod
    async def find_flight_by_id(self, flight_id: int) -> FlightOffer:
        """Get flight by id, raising NotFoundError on a miss"""
        pass

    @abstractmethod
    async def insert_booking(self, flight_id: int, passenger_details: str, payment: str) -> int:
        """Create a booking in a single transaction and return its id"""
        pass

    @abstractmethod
    async def find_booking_by_id(self, booking_id: int) -> BookingRecord:
        """Get booking by id, raising NotFoundError on a miss"""
        pass

    @abstractmethod
    async def initialize(self, seed_demo_data: bool = False) -> None:
        """Prepare the store, optionally seeding demo flights"""
        pass

    @abstractmethod
    async def health_check(self) -> Dict[str, Any]:
        """Check store health"""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release store resources"""
        pass
