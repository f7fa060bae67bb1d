"""
Audit logging service for the flight service.

Forwards bot telemetry (intents, behavior metrics, negotiation attempts) and
booking events to the structured log, masking payment details on the way.
"""

import json
from typing import Any, Dict, Optional
from enum import Enum

import structlog

from ..types import BotIntent, ClassificationRecord, JsonValue
from ..config import config
from ..utils.validators import mask_payment


class AuditEventType(str, Enum):
    """Types of audit events"""
    BOT_INTENT = "bot_intent"
    BEHAVIOR_METRICS = "behavior_metrics"
    NEGOTIATION_ATTEMPT = "negotiation_attempt"
    BOOKING_CREATED = "booking_created"


class AuditLogger:
    """
    Service for audit logging with payment masking and structured logging.

    Telemetry payloads are logged, never persisted.
    """

    def __init__(self, enabled: Optional[bool] = None):
        """Initialize the audit logger."""
        self.logger = structlog.get_logger("audit")
        self.enabled = config.logging.enable_audit if enabled is None else enabled

    def log_intent(
        self,
        intent: BotIntent,
        classification: Optional[ClassificationRecord] = None,
        source: str = "graphql"
    ) -> None:
        """
        Log an intent reported by an automated client.

        Args:
            intent: Validated intent payload
            classification: Classification of the reporting request
            source: Entry point the intent arrived through
        """
        if not self.enabled:
            return

        self.logger.info(
            "Bot intent received",
            event_type=AuditEventType.BOT_INTENT,
            source=source,
            intent_type=intent.intent_type,
            reason=intent.reason,
            query_params=intent.query_params,
            additional_context=intent.additional_context,
            **self._classification_fields(classification)
        )

    def log_behavior_metrics(
        self,
        metrics: JsonValue,
        classification: Optional[ClassificationRecord] = None,
        source: str = "graphql"
    ) -> None:
        """
        Log client-side behavior metrics.

        Args:
            metrics: Validated metrics document
            classification: Classification of the reporting request
            source: Entry point the metrics arrived through
        """
        if not self.enabled:
            return

        self.logger.info(
            "Bot behavior metrics received",
            event_type=AuditEventType.BEHAVIOR_METRICS,
            source=source,
            metrics=metrics,
            payload_size=len(json.dumps(metrics, default=str)),
            **self._classification_fields(classification)
        )

    def log_negotiation(
        self,
        flight_id: int,
        negotiation_context: JsonValue,
        outcome: Dict[str, Any],
        classification: Optional[ClassificationRecord] = None
    ) -> None:
        """Log a negotiation attempt and its outcome."""
        if not self.enabled:
            return

        self.logger.info(
            "Bot negotiation attempt",
            event_type=AuditEventType.NEGOTIATION_ATTEMPT,
            flight_id=flight_id,
            negotiation_context=negotiation_context,
            success=outcome.get("success"),
            **self._classification_fields(classification)
        )

    def log_booking(
        self,
        booking_id: int,
        flight_id: int,
        payment: str,
        classification: Optional[ClassificationRecord] = None
    ) -> None:
        """Log a created booking; only the payment suffix is recorded."""
        if not self.enabled:
            return

        self.logger.info(
            "Booking created",
            event_type=AuditEventType.BOOKING_CREATED,
            booking_id=booking_id,
            flight_id=flight_id,
            payment_last4=mask_payment(payment),
            **self._classification_fields(classification)
        )

    @staticmethod
    def _classification_fields(classification: Optional[ClassificationRecord]) -> Dict[str, Any]:
        if classification is None:
            return {}
        return {
            "confidence": classification.confidence_score,
            "agent_type": classification.agent_type,
            "automated": classification.is_automated(),
        }


# Global audit logger instance
audit_logger = AuditLogger()
