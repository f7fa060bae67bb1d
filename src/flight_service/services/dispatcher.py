"""
Dispatcher: chooses the serving surface for a classified request
"""

from typing import Any, Callable, Dict, Optional

import structlog

from ..types import ClassificationRecord, Surface

logger = structlog.get_logger("dispatcher")

ClassificationSink = Callable[[Dict[str, Any]], None]


def _log_decision(event: Dict[str, Any]) -> None:
    logger.info("classification_decision", **event)


class Dispatcher:
    """
    Routes requests to the human or bot surface.

    The decision is advisory: both endpoints serve every caller, and the
    selected surface only drives telemetry and internal branching.
    """

    def __init__(self, sink: Optional[ClassificationSink] = None):
        self.sink = sink or _log_decision

    @staticmethod
    def select_surface(record: ClassificationRecord) -> Surface:
        return Surface.BOT if record.is_automated() else Surface.HUMAN

    def observe(self, path: str, record: ClassificationRecord) -> Surface:
        """Select the surface and emit the per-request classification event"""
        surface = self.select_surface(record)
        self.sink({
            "path": path,
            "confidence": record.confidence_score,
            "agent_type": record.agent_type,
            "automated": surface == Surface.BOT,
        })
        return surface

    def check_endpoint(self, endpoint: Surface, record: ClassificationRecord) -> Surface:
        """Return the classified surface, noting callers served on the other endpoint"""
        selected = self.select_surface(record)
        if selected != endpoint:
            logger.debug(
                "Caller served on non-matching surface",
                endpoint=endpoint.value,
                classified_as=selected.value,
                confidence=record.confidence_score,
                agent_type=record.agent_type,
            )
        return selected
