"""
GraphQL schema for the bot surface (/bot/graphql)

Carries every human operation with identical underlying facts, plus
structured elaborations for automated clients.
"""

from typing import List

import strawberry
from strawberry.scalars import JSON

from .graphql_types import (
    FlightOfferType, OfferSummaryType, BookingConfirmationType, BookingDetailType,
    OfferExplanationType, OfferInsightsType,
)
from .resolvers import (
    resolve_search_flights, resolve_get_booking, resolve_build_offer, resolve_bot_book_flight,
    resolve_request_explanation, resolve_offer_insights, resolve_get_structured_booking,
    resolve_submit_intent, resolve_submit_behavior_metrics, resolve_negotiate_offer,
)
from .schema_base import FlightSchema


@strawberry.type(name="BotQuery")
class BotQuery:
    search_flights: List[FlightOfferType] = strawberry.field(
        resolver=resolve_search_flights,
        description="Search flights by origin, destination and (optional) dates",
    )
    get_booking: BookingDetailType = strawberry.field(resolver=resolve_get_booking)
    request_explanation: OfferExplanationType = strawberry.field(
        resolver=resolve_request_explanation,
        description="Structured explanation of a flight offer",
    )
    offer_insights: OfferInsightsType = strawberry.field(
        resolver=resolve_offer_insights,
        description="Comparative insights for a flight offer",
    )
    get_structured_booking: JSON = strawberry.field(
        resolver=resolve_get_structured_booking,
        description="Booking joined with its flight as a JSON document; payment masked",
    )


@strawberry.type(name="BotMutation")
class BotMutation:
    build_offer: OfferSummaryType = strawberry.mutation(resolver=resolve_build_offer)
    book_flight: BookingConfirmationType = strawberry.mutation(
        resolver=resolve_bot_book_flight,
        description="Book a flight; flightId is accepted as a Float",
    )
    submit_intent: bool = strawberry.mutation(
        resolver=resolve_submit_intent,
        description="Submit user intent data (search, booking, abandonment)",
    )
    submit_behavior_metrics: bool = strawberry.mutation(
        resolver=resolve_submit_behavior_metrics,
        description="Submit behavior metrics from client-side tracking",
    )
    negotiate_offer: JSON = strawberry.mutation(
        resolver=resolve_negotiate_offer,
        description="Negotiate a discount or upgrade for a flight",
    )


schema = FlightSchema(query=BotQuery, mutation=BotMutation)
