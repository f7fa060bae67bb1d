"""
Services module initialization
"""

from .classification_builder import ClassificationContextBuilder
from .dispatcher import Dispatcher, ClassificationSink
from .audit_logger import AuditLogger, AuditEventType, audit_logger
from .flight_query_service import FlightQueryService, ADDON_SURCHARGE
from .human_surface import HumanFlightService
from .bot_surface import BotFlightService
from . import offer_analysis

__all__ = [
    'ClassificationContextBuilder',
    'Dispatcher',
    'ClassificationSink',
    'AuditLogger',
    'AuditEventType',
    'audit_logger',
    'FlightQueryService',
    'ADDON_SURCHARGE',
    'HumanFlightService',
    'BotFlightService',
    'offer_analysis',
]
