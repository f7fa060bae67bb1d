"""
GraphQL schema for the human surface (/graphql)
"""

from typing import List

import strawberry

from .graphql_types import FlightOfferType, OfferSummaryType, BookingConfirmationType, BookingDetailType
from .resolvers import resolve_search_flights, resolve_get_booking, resolve_build_offer, resolve_book_flight
from .schema_base import FlightSchema


@strawberry.type
class Query:
    search_flights: List[FlightOfferType] = strawberry.field(
        resolver=resolve_search_flights,
        description="Search flights by origin, destination and (optional) dates",
    )
    get_booking: BookingDetailType = strawberry.field(
        resolver=resolve_get_booking,
        description="Retrieve a booking by its ID",
    )


@strawberry.type
class Mutation:
    build_offer: OfferSummaryType = strawberry.mutation(
        resolver=resolve_build_offer,
        description="Build an offer summary for a flight and selected add-ons",
    )
    book_flight: BookingConfirmationType = strawberry.mutation(
        resolver=resolve_book_flight,
        description="Book a flight with passenger and payment details",
    )


schema = FlightSchema(query=Query, mutation=Mutation)
