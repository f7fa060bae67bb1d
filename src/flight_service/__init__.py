"""
Flight Search and Booking Service

A GraphQL flight-search-and-booking service with two parallel surfaces: a
concise one for human callers and a richer, machine-consumable one for
automated agents. Every request is classified from inbound signal headers and
the classification travels with the request through either surface.
"""

__version__ = "1.0.0"
__author__ = "Flight Service Team"
