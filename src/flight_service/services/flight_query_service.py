"""
Shared data-fetch path for the human and bot surfaces
"""

from typing import List, Optional

import structlog

from ..interfaces.data_gateway import DataGatewayInterface
from ..interfaces.flight_query import FlightQueryServiceInterface
from ..types import (
    Surface, ClassificationRecord, FlightOffer, OfferSummary,
    BookingConfirmation, BookingDetail,
)
from .audit_logger import AuditLogger, audit_logger as default_audit_logger

ADDON_SURCHARGE = 10.0


class FlightQueryService(FlightQueryServiceInterface):
    """
    Gateway access common to both surfaces.

    Instances are built per request from the request context: they hold the
    gateway handle and the request's classification record, and nothing else.
    Subclasses differ only in how they shape responses.
    """

    surface = Surface.HUMAN

    def __init__(
        self,
        gateway: DataGatewayInterface,
        classification: ClassificationRecord,
        audit: Optional[AuditLogger] = None
    ):
        self.gateway = gateway
        self.classification = classification
        self.audit = audit or default_audit_logger
        self.logger = structlog.get_logger(f"{self.surface.value}_surface").bind(
            surface=self.surface.value,
            automated=classification.is_automated(),
        )

    async def search_flights(self, origin: str, destination: str, dates: List[str]) -> List[FlightOffer]:
        """Search flights on a route; dates are accepted but do not filter"""
        flights = await self.gateway.find_flights_by_route(origin, destination)
        self.logger.debug(
            "Flights searched",
            origin=origin,
            destination=destination,
            dates=dates,
            results=len(flights),
        )
        return flights

    async def build_offer(self, flight_id: int, addons: List[str]) -> OfferSummary:
        """Price a flight with a flat surcharge per add-on (duplicates included)"""
        flight = await self.gateway.find_flight_by_id(flight_id)
        return OfferSummary(
            flight=flight,
            addons=list(addons),
            total_price=flight.price + ADDON_SURCHARGE * len(addons),
        )

    async def book_flight(self, passenger_details: str, payment: str, flight_id: int) -> BookingConfirmation:
        """Book a flight through the gateway's atomic insert"""
        booking_id = await self.gateway.insert_booking(flight_id, passenger_details, payment)
        flight = await self.gateway.find_flight_by_id(flight_id)
        self.audit.log_booking(booking_id, flight_id, payment, self.classification)
        return BookingConfirmation(booking_id=booking_id, flight=flight)

    async def get_booking(self, booking_id: int) -> BookingDetail:
        """Get a booking with its flight embedded"""
        booking = await self.gateway.find_booking_by_id(booking_id)
        flight = await self.gateway.find_flight_by_id(booking.flight_id)
        return BookingDetail(
            booking_id=booking.id,
            flight=flight,
            passenger_details=booking.passenger_details,
            payment_details=booking.payment_details,
            booking_time=booking.booking_time,
        )
