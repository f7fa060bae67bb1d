"""
Bot API surface: the human surface's facts plus machine-consumable elaborations
"""

from typing import Any, Dict, List

from ..types import (
    Surface, FlightOffer, BookingConfirmation, OfferExplanation, OfferInsights,
    BotIntent, JsonValue, validate_json_payload,
)
from .flight_query_service import FlightQueryService
from . import offer_analysis


class BotFlightService(FlightQueryService):
    """
    Operations for automated callers.

    Shares the search/offer/book/get path with the human surface and layers
    explanations, insights, structured bookings, telemetry intake and offer
    negotiation on top. None of the extra views need data the human surface
    cannot reach.
    """

    surface = Surface.BOT

    async def search_flights(self, origin: str, destination: str, dates: List[str]) -> List[FlightOffer]:
        flights = await super().search_flights(origin, destination, dates)
        self.logger.info(
            "Bot searching flights",
            origin=origin,
            destination=destination,
            dates=dates,
            results=len(flights),
        )
        return flights

    async def book_flight(self, passenger_details: str, payment: str, flight_id: int) -> BookingConfirmation:
        self.logger.info("Bot booking flight", flight_id=flight_id)
        return await super().book_flight(passenger_details, payment, flight_id)

    async def request_explanation(self, flight_id: int) -> OfferExplanation:
        """Explain the fare of a flight"""
        flight = await self.gateway.find_flight_by_id(flight_id)
        self.logger.info("Bot requested explanation", flight_id=flight_id)
        return offer_analysis.explain_offer(flight)

    async def offer_insights(self, flight_id: int) -> OfferInsights:
        """Comparative insights for a flight"""
        flight = await self.gateway.find_flight_by_id(flight_id)
        self.logger.info("Bot requested insights", flight_id=flight_id)
        return offer_analysis.offer_insights(flight)

    async def get_structured_booking(self, booking_id: int) -> Dict[str, Any]:
        """Booking joined with its flight, payment masked to the last 4 characters"""
        booking = await self.gateway.find_booking_by_id(booking_id)
        flight = await self.gateway.find_flight_by_id(booking.flight_id)
        return offer_analysis.structured_booking(booking, flight)

    async def submit_intent(self, intent: BotIntent) -> bool:
        """Forward an intent to telemetry; always succeeds"""
        self.audit.log_intent(intent, self.classification)
        return True

    async def submit_behavior_metrics(self, metrics: Any) -> bool:
        """Forward behavior metrics to telemetry; always succeeds"""
        document = validate_json_payload(metrics, "metrics")
        self.audit.log_behavior_metrics(document, self.classification)
        return True

    async def negotiate_offer(self, flight_id: int, negotiation_context: JsonValue) -> Dict[str, Any]:
        """Negotiate a discount or an upgrade for a flight"""
        context = validate_json_payload(negotiation_context, "negotiation context")
        flight = await self.gateway.find_flight_by_id(flight_id)
        outcome = offer_analysis.negotiate(flight, context)
        self.audit.log_negotiation(flight_id, context, outcome, self.classification)
        return outcome
