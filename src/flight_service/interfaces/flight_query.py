"""
Flight query capability shared by the human and bot surfaces
"""

from abc import ABC, abstractmethod
from typing import List
from ..types import (
    Surface,
    FlightOffer,
    OfferSummary,
    BookingConfirmation,
    BookingDetail,
)


class FlightQueryServiceInterface(ABC):
    """Interface for the operations every surface exposes"""

    surface: Surface

    @abstractmethod
    async def search_flights(self, origin: str, destination: str, dates: List[str]) -> List[FlightOffer]:
        """Search flights on a route"""
        pass

    @abstractmethod
    async def build_offer(self, flight_id: int, addons: List[str]) -> OfferSummary:
        """Price a flight with add-ons"""
        pass

    @abstractmethod
    async def book_flight(self, passenger_details: str, payment: str, flight_id: int) -> BookingConfirmation:
        """Book a flight"""
        pass

    @abstractmethod
    async def get_booking(self, booking_id: int) -> BookingDetail:
        """Get a booking with its flight"""
        pass
