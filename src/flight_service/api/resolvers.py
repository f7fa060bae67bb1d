"""
GraphQL resolvers.

Resolvers only translate between GraphQL types and the surface service found
on the request context; both schemas share the operations they have in common.
"""

from typing import List

from strawberry.scalars import JSON
from strawberry.types import Info

from .context import RequestContext
from .graphql_types import (
    FlightOfferType, OfferSummaryType, BookingConfirmationType, BookingDetailType,
    OfferExplanationType, OfferInsightsType, BotIntentInput,
)

ContextInfo = Info[RequestContext, None]


# Shared operations
async def resolve_search_flights(
    info: ContextInfo, origin: str, destination: str, dates: List[str]
) -> List[FlightOfferType]:
    flights = await info.context.flights.search_flights(origin, destination, dates)
    return [FlightOfferType.from_model(flight) for flight in flights]


async def resolve_get_booking(info: ContextInfo, id: int) -> BookingDetailType:
    detail = await info.context.flights.get_booking(id)
    return BookingDetailType.from_model(detail)


async def resolve_build_offer(info: ContextInfo, flight_id: int, addons: List[str]) -> OfferSummaryType:
    summary = await info.context.flights.build_offer(flight_id, addons)
    return OfferSummaryType.from_model(summary)


async def resolve_book_flight(
    info: ContextInfo, passenger_details: str, payment: str, flight_id: int
) -> BookingConfirmationType:
    confirmation = await info.context.flights.book_flight(passenger_details, payment, flight_id)
    return BookingConfirmationType.from_model(confirmation)


# Bot-only operations
async def resolve_bot_book_flight(
    info: ContextInfo, passenger_details: str, payment: str, flight_id: float
) -> BookingConfirmationType:
    # automated clients send the id as a Float
    confirmation = await info.context.flights.book_flight(passenger_details, payment, int(flight_id))
    return BookingConfirmationType.from_model(confirmation)


async def resolve_request_explanation(info: ContextInfo, flight_id: int) -> OfferExplanationType:
    explanation = await info.context.flights.request_explanation(flight_id)
    return OfferExplanationType.from_model(explanation)


async def resolve_offer_insights(info: ContextInfo, flight_id: int) -> OfferInsightsType:
    insights = await info.context.flights.offer_insights(flight_id)
    return OfferInsightsType.from_model(insights)


async def resolve_get_structured_booking(info: ContextInfo, id: int) -> JSON:
    return await info.context.flights.get_structured_booking(id)


async def resolve_submit_intent(info: ContextInfo, intent: BotIntentInput) -> bool:
    return await info.context.flights.submit_intent(intent.to_model())


async def resolve_submit_behavior_metrics(info: ContextInfo, metrics: JSON) -> bool:
    return await info.context.flights.submit_behavior_metrics(metrics)


async def resolve_negotiate_offer(info: ContextInfo, flight_id: int, negotiation_context: JSON) -> JSON:
    return await info.context.flights.negotiate_offer(flight_id, negotiation_context)
