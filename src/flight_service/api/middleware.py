"""
HTTP middleware attaching the classification record to every request
"""

import structlog
from fastapi import Request


async def classify_request(request: Request, call_next):
    """Classify the caller before any route handler observes the request"""
    container = request.app.state.container

    record = container.classification_builder.build(request.headers)
    request.state.classification = record
    surface = container.dispatcher.observe(request.url.path, record)

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(path=request.url.path, classified_as=surface.value)

    return await call_next(request)
