"""
Clients for the flight/booking store
"""

from .data_gateway import SqlDataGateway, InMemoryDataGateway, DEMO_FLIGHTS

__all__ = [
    "SqlDataGateway",
    "InMemoryDataGateway",
    "DEMO_FLIGHTS",
]
