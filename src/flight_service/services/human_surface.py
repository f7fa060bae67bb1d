"""
Human API surface: concise, display-ready flight data
"""

from ..types import Surface
from .flight_query_service import FlightQueryService


class HumanFlightService(FlightQueryService):
    """Operations for human callers; responses carry only display fields"""

    surface = Surface.HUMAN
