"""
GraphQL object and input types shared by both schemas
"""

from typing import List, Optional

import strawberry
from strawberry.scalars import JSON

from ..types import (
    FlightOffer, OfferSummary, BookingConfirmation, BookingDetail,
    OfferExplanation, OfferInsights, BotIntent, validate_json_payload,
)


@strawberry.type(name="FlightOffer", description="Flight offer returned by searchFlights")
class FlightOfferType:
    id: int
    origin: str
    destination: str
    departure_time: str
    arrival_time: str
    price: float

    @classmethod
    def from_model(cls, flight: FlightOffer) -> "FlightOfferType":
        return cls(
            id=flight.id,
            origin=flight.origin,
            destination=flight.destination,
            departure_time=flight.departure_time,
            arrival_time=flight.arrival_time,
            price=flight.price,
        )


@strawberry.type(name="OfferSummary", description="Flight offer priced with selected add-ons")
class OfferSummaryType:
    flight: FlightOfferType
    addons: List[str]
    total_price: float

    @classmethod
    def from_model(cls, summary: OfferSummary) -> "OfferSummaryType":
        return cls(
            flight=FlightOfferType.from_model(summary.flight),
            addons=summary.addons,
            total_price=summary.total_price,
        )


@strawberry.type(name="BookingConfirmation")
class BookingConfirmationType:
    booking_id: int
    flight: FlightOfferType

    @classmethod
    def from_model(cls, confirmation: BookingConfirmation) -> "BookingConfirmationType":
        return cls(
            booking_id=confirmation.booking_id,
            flight=FlightOfferType.from_model(confirmation.flight),
        )


@strawberry.type(name="BookingDetail")
class BookingDetailType:
    booking_id: int
    flight: FlightOfferType
    passenger_details: str
    payment_details: str
    booking_time: str

    @classmethod
    def from_model(cls, detail: BookingDetail) -> "BookingDetailType":
        return cls(
            booking_id=detail.booking_id,
            flight=FlightOfferType.from_model(detail.flight),
            passenger_details=detail.passenger_details,
            payment_details=detail.payment_details,
            booking_time=detail.booking_time,
        )


@strawberry.type(name="SeatDetails")
class SeatDetailsType:
    pitch_inches: float
    width_inches: float
    recline_degrees: float
    has_power: bool
    has_wifi: bool


@strawberry.type(name="OfferExplanation", description="Fare breakdown of a flight offer")
class OfferExplanationType:
    flight_id: int
    base_fare: float
    taxes_fees: float
    comparative_value: float
    cancellation_policy: str
    seat_details: SeatDetailsType
    structured_explanation: JSON

    @classmethod
    def from_model(cls, explanation: OfferExplanation) -> "OfferExplanationType":
        return cls(
            flight_id=explanation.flight_id,
            base_fare=explanation.base_fare,
            taxes_fees=explanation.taxes_fees,
            comparative_value=explanation.comparative_value,
            cancellation_policy=explanation.cancellation_policy,
            seat_details=SeatDetailsType(**explanation.seat_details.model_dump()),
            structured_explanation=explanation.structured_explanation,
        )


@strawberry.type(name="HistoricalPrice")
class HistoricalPriceType:
    date: str
    price: float


@strawberry.type(name="PriceComparison")
class PriceComparisonType:
    average_price: float
    percentile: float
    price_history: List[HistoricalPriceType]


@strawberry.type(name="OfferInsights", description="Comparative insights for a flight offer")
class OfferInsightsType:
    flight_id: int
    price_comparison: PriceComparisonType
    convenience_score: float
    reliability_score: float
    structured_data: JSON

    @classmethod
    def from_model(cls, insights: OfferInsights) -> "OfferInsightsType":
        comparison = insights.price_comparison
        return cls(
            flight_id=insights.flight_id,
            price_comparison=PriceComparisonType(
                average_price=comparison.average_price,
                percentile=comparison.percentile,
                price_history=[
                    HistoricalPriceType(date=point.date, price=point.price)
                    for point in comparison.price_history
                ],
            ),
            convenience_score=insights.convenience_score,
            reliability_score=insights.reliability_score,
            structured_data=insights.structured_data,
        )


@strawberry.input(name="BotIntent", description="Intent reported by an automated client")
class BotIntentInput:
    intent_type: str
    query_params: Optional[JSON] = None
    reason: Optional[str] = None
    additional_context: Optional[JSON] = None

    def to_model(self) -> BotIntent:
        """Validate the free-form fields at the boundary"""
        return BotIntent(
            intent_type=self.intent_type,
            query_params=validate_json_payload(self.query_params, "query params"),
            reason=self.reason,
            additional_context=validate_json_payload(self.additional_context, "additional context"),
        )
