"""
HTTP and GraphQL entry points
"""

from .bot_endpoints import router as bot_router
from .context import RequestContext, get_human_context, get_bot_context
from .human_schema import schema as human_schema
from .bot_schema import schema as bot_schema
from .middleware import classify_request

__all__ = [
    "bot_router",
    "RequestContext",
    "get_human_context",
    "get_bot_context",
    "human_schema",
    "bot_schema",
    "classify_request",
]
