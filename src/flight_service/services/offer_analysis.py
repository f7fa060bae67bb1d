"""
Derived bot views of flight offers.

Every view here is a pure function of a FlightOffer (and, for negotiation, the
caller-supplied context), so the bot surface never needs state the human
surface cannot see. Views are recomputed on every call; nothing is cached.
The historical and alternative-flight figures are synthetic: only their shape
and formulas are meaningful.
"""

import math
from typing import Any, Dict, Optional

from ..types import (
    FlightOffer, BookingRecord, OfferExplanation, SeatDetails, OfferInsights,
    PriceComparison, HistoricalPrice, NegotiationType, JsonValue,
)
from ..utils.rounding import round_half_away
from ..utils.validators import mask_payment

BASE_FARE_SHARE = 0.85
PREMIUM_PRICE_THRESHOLD = 200.0
COMPARATIVE_VALUE = 0.78
CANCELLATION_POLICY = "Cancellable with 70% refund up to 24 hours before departure"

HISTORY_YEAR = 2024
HISTORY_POINTS = 5
HISTORY_BASE_VARIANCE = 0.95
HISTORY_VARIANCE_STEP = 0.02

DISCOUNT_RATE = 0.95
DISCOUNT_PERCENT = 5
UPGRADE_RATE = 0.15
OFFER_EXPIRATION = "30 minutes"
UPGRADE_BENEFITS = ["More legroom", "Priority boarding", "Free drink"]


def explain_offer(flight: FlightOffer) -> OfferExplanation:
    """Break a fare down into base fare, taxes and the service profile"""
    price = flight.price
    base_fare = price * BASE_FARE_SHARE
    # price * 0.15 up to rounding; subtracting keeps base_fare + taxes_fees == price exact
    taxes_fees = price - base_fare
    premium = price > PREMIUM_PRICE_THRESHOLD

    return OfferExplanation(
        flight_id=flight.id,
        base_fare=base_fare,
        taxes_fees=taxes_fees,
        comparative_value=COMPARATIVE_VALUE,
        cancellation_policy=CANCELLATION_POLICY,
        seat_details=SeatDetails(
            pitch_inches=32.0,
            width_inches=18.5,
            recline_degrees=5.0,
            has_power=True,
            has_wifi=premium,
        ),
        structured_explanation={
            "fare_class": "Economy",
            "baggage_allowance": {
                "carry_on": 1,
                "checked": 1,
                "weight_limit_kg": 23,
            },
            "meal_service": premium,
            "loyalty_points": math.floor(price / 10),
            "change_fee": math.floor(price * 0.1),
        },
    )


def offer_insights(flight: FlightOffer) -> OfferInsights:
    """Synthesize price history, scores and neighbouring alternatives"""
    base_price = flight.price
    price_history = [
        HistoricalPrice(
            date=f"{HISTORY_YEAR}-{i + 1:02d}-01",
            price=base_price * (HISTORY_BASE_VARIANCE + i * HISTORY_VARIANCE_STEP),
        )
        for i in range(1, HISTORY_POINTS + 1)
    ]

    return OfferInsights(
        flight_id=flight.id,
        price_comparison=PriceComparison(
            average_price=base_price * 1.05,
            percentile=35.0,  # lower is a better deal
            price_history=price_history,
        ),
        convenience_score=0.75,
        reliability_score=0.88,
        structured_data={
            "delay_probability": 0.12,
            "cancellation_risk": 0.03,
            "airport_transfer_time": {
                "origin": 25,
                "destination": 30,
            },
            "alternative_flights": [
                {"id": flight.id + 1, "price_difference": "+$35", "time_difference": "-45min"},
                {"id": flight.id - 1, "price_difference": "-$20", "time_difference": "+90min"},
            ],
        },
    )


def structured_booking(booking: BookingRecord, flight: FlightOffer) -> Dict[str, Any]:
    """Join a booking with its flight as a machine-readable document"""
    return {
        "booking": {
            "id": booking.id,
            "created_at": booking.booking_time,
            "passenger": booking.passenger_details,
            "payment_last4": mask_payment(booking.payment_details),
        },
        "flight": {
            "id": flight.id,
            "route": {
                "origin": {
                    "code": flight.origin,
                    "departure_time": flight.departure_time,
                },
                "destination": {
                    "code": flight.destination,
                    "arrival_time": flight.arrival_time,
                },
            },
            "price": {
                "total": flight.price,
                "currency": "USD",
            },
        },
        "machine_readable": {
            "duration_minutes": 180,
            "miles": 1250,
            "carbon_offset_available": True,
        },
    }


def negotiation_type(negotiation_context: JsonValue) -> Optional[str]:
    """
    Read the requested negotiation type.

    Returns None when no type is given. A type that is present but not a
    string counts as a discount request.
    """
    if not isinstance(negotiation_context, dict) or "type" not in negotiation_context:
        return None

    requested = negotiation_context["type"]
    if not isinstance(requested, str):
        return NegotiationType.DISCOUNT.value
    return requested


def negotiate(flight: FlightOffer, negotiation_context: JsonValue) -> Dict[str, Any]:
    """Resolve a negotiation request to a discount, an upgrade or no offer"""
    requested = negotiation_type(negotiation_context)

    if requested == NegotiationType.DISCOUNT.value:
        return {
            "success": True,
            "original_price": flight.price,
            "negotiated_price": round_half_away(flight.price * DISCOUNT_RATE),
            "discount_percent": DISCOUNT_PERCENT,
            "discount_reason": "Loyalty member pricing",
            "expiration": OFFER_EXPIRATION,
        }

    if requested == NegotiationType.UPGRADE.value:
        return {
            "success": True,
            "original_seat": "Economy",
            "upgraded_seat": "Economy Plus",
            "upgrade_fee": round_half_away(flight.price * UPGRADE_RATE),
            "benefits": list(UPGRADE_BENEFITS),
            "expiration": OFFER_EXPIRATION,
        }

    return {
        "success": False,
        "reason": "No negotiation available for this request type",
        "alternative_offers": [],
    }
