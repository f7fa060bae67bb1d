"""
Classification context builder: inbound signal headers to ClassificationRecord
"""

from typing import Mapping, Optional

from ..config import config
from ..types import ClassificationRecord, DEFAULT_CONFIDENCE, DEFAULT_AGENT_TYPE
from ..utils.validators import parse_confidence, parse_agent_type


class ClassificationContextBuilder:
    """
    Builds the per-request classification record.

    Classification is best-effort: missing or malformed signals fall back to
    the ambiguous defaults (confidence 0.5, agent type "unknown") and never
    abort the request. The builder has no side effects.
    """

    def __init__(self, confidence_header: Optional[str] = None, agent_type_header: Optional[str] = None):
        self.confidence_header = (confidence_header or config.classification.confidence_header).lower()
        self.agent_type_header = (agent_type_header or config.classification.agent_type_header).lower()

    def build(self, headers: Mapping[str, str]) -> ClassificationRecord:
        """Build a record from request headers (matched case-insensitively)"""
        normalized = {key.lower(): value for key, value in headers.items()}
        return self.from_signals(
            normalized.get(self.confidence_header),
            normalized.get(self.agent_type_header),
        )

    @staticmethod
    def from_signals(confidence: Optional[str], agent_type: Optional[str]) -> ClassificationRecord:
        """Build a record from raw signal values"""
        parsed_confidence = parse_confidence(confidence)
        parsed_agent_type = parse_agent_type(agent_type)

        return ClassificationRecord(
            confidence_score=DEFAULT_CONFIDENCE if parsed_confidence is None else parsed_confidence,
            agent_type=DEFAULT_AGENT_TYPE if parsed_agent_type is None else parsed_agent_type,
        )
