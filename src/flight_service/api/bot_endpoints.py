"""
Plain HTTP endpoints for one-shot bot telemetry.

Payloads are forwarded to the audit log and never stored.
"""

from fastapi import APIRouter, Request

from ..types import BotIntent, PayloadValidationError, validate_json_payload

# Create router for bot telemetry endpoints
router = APIRouter(prefix="/bot", tags=["bot"])


@router.post("/behaviorMetrics")
async def submit_behavior_metrics(request: Request):
    """
    Accept client-side behavior metrics.

    Any JSON document is accepted and the response is always 200.
    """
    try:
        payload = await request.json()
    except ValueError as e:
        raise PayloadValidationError("Request body is not valid JSON") from e

    metrics = validate_json_payload(payload, "metrics")
    request.app.state.container.audit.log_behavior_metrics(
        metrics,
        request.state.classification,
        source="http"
    )
    return {"status": "accepted"}


@router.post("/intent")
async def submit_intent(intent: BotIntent, request: Request):
    """Accept an intent reported by an automated client"""
    request.app.state.container.audit.log_intent(
        intent,
        request.state.classification,
        source="http"
    )
    return {"status": "accepted"}
