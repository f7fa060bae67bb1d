"""
Core data types for the flight search and booking service
"""

from enum import Enum
from typing import Optional, List, Dict, Any
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field, JsonValue, TypeAdapter, ValidationError


# Confidence at or above which a caller is treated as automated
AUTOMATION_THRESHOLD = 0.55
DEFAULT_CONFIDENCE = 0.5
DEFAULT_AGENT_TYPE = "unknown"
BOT_AGENT_TYPE = "bot"


class Surface(str, Enum):
    """API surfaces a request can be served by"""
    HUMAN = "human"
    BOT = "bot"


class NegotiationType(str, Enum):
    """Negotiation requests the bot surface understands"""
    DISCOUNT = "discount"
    UPGRADE = "upgrade"


# Classification Models
class ClassificationRecord(BaseModel):
    """Per-request judgment of whether the caller is an automated agent"""
    model_config = ConfigDict(frozen=True)

    confidence_score: float = Field(DEFAULT_CONFIDENCE, ge=0.0, le=1.0, description="Bot confidence signal")
    agent_type: str = Field(DEFAULT_AGENT_TYPE, description="Self-reported agent type label")
    observed_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def is_automated(self) -> bool:
        return self.confidence_score >= AUTOMATION_THRESHOLD or self.agent_type == BOT_AGENT_TYPE


# Flight and Booking Models
class FlightOffer(BaseModel):
    """Flight offer as stored by the data gateway"""
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Flight identifier")
    origin: str = Field(..., description="Departure airport code")
    destination: str = Field(..., description="Arrival airport code")
    departure_time: str = Field(..., description="Scheduled departure time")
    arrival_time: str = Field(..., description="Scheduled arrival time")
    price: float = Field(..., description="Fare in USD")


class BookingRecord(BaseModel):
    """Booking row as stored by the data gateway"""
    model_config = ConfigDict(frozen=True)

    id: int
    flight_id: int
    passenger_details: str
    payment_details: str
    booking_time: str


class OfferSummary(BaseModel):
    """Flight offer priced with the selected add-ons"""
    flight: FlightOffer
    addons: List[str]
    total_price: float


class BookingConfirmation(BaseModel):
    """Confirmation returned after a successful booking"""
    booking_id: int
    flight: FlightOffer


class BookingDetail(BaseModel):
    """Booking with its flight embedded"""
    booking_id: int
    flight: FlightOffer
    passenger_details: str
    payment_details: str
    booking_time: str


# Bot view models
class SeatDetails(BaseModel):
    """Seat profile for a flight offer"""
    pitch_inches: float
    width_inches: float
    recline_degrees: float
    has_power: bool
    has_wifi: bool


class OfferExplanation(BaseModel):
    """Fare breakdown and service profile of a flight offer"""
    flight_id: int
    base_fare: float
    taxes_fees: float
    comparative_value: float
    cancellation_policy: str
    seat_details: SeatDetails
    structured_explanation: Dict[str, Any]


class HistoricalPrice(BaseModel):
    """Single historical price point"""
    date: str
    price: float


class PriceComparison(BaseModel):
    """Price position of an offer against its history"""
    average_price: float
    percentile: float
    price_history: List[HistoricalPrice]


class OfferInsights(BaseModel):
    """Comparative insights for a flight offer"""
    flight_id: int
    price_comparison: PriceComparison
    convenience_score: float
    reliability_score: float
    structured_data: Dict[str, Any]


class BotIntent(BaseModel):
    """Intent reported by an automated client"""
    intent_type: str
    query_params: Optional[JsonValue] = None
    reason: Optional[str] = None
    additional_context: Optional[JsonValue] = None


# Custom Exceptions
class FlightServiceError(Exception):
    """Base exception for flight service"""
    error_code = "INTERNAL_ERROR"

    def __init__(self, message: str, error_code: Optional[str] = None):
        if error_code:
            self.error_code = error_code
        super().__init__(message)

    @property
    def extensions(self) -> Dict[str, Any]:
        """GraphQL error extensions picked up by the executor"""
        return {"code": self.error_code}


class NotFoundError(FlightServiceError):
    """Exception for lookups that miss"""

    def __init__(self, entity: str, identifier: Any):
        self.entity = entity
        self.identifier = identifier
        super().__init__(
            f"{entity.capitalize()} not found: {identifier}",
            f"{entity.upper()}_NOT_FOUND",
        )


class GatewayError(FlightServiceError):
    """Exception for failures of the underlying flight/booking store"""
    error_code = "GATEWAY_FAILURE"


class PayloadValidationError(FlightServiceError):
    """Exception for free-form payloads that are not JSON documents"""
    error_code = "INVALID_PAYLOAD"


_json_value_adapter = TypeAdapter(JsonValue)


def validate_json_payload(payload: Any, field_name: str = "payload") -> JsonValue:
    """Validate a free-form payload against the closed JSON value variant"""
    try:
        return _json_value_adapter.validate_python(payload)
    except ValidationError as e:
        raise PayloadValidationError(f"Invalid {field_name}: {e.error_count()} validation error(s)") from e
