"""
Interface definitions for flight service components
"""

from .data_gateway import DataGatewayInterface
from .flight_query import FlightQueryServiceInterface

__all__ = [
    "DataGatewayInterface",
    "FlightQueryServiceInterface",
]
