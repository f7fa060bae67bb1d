"""
Error handling for the flight service
"""

from typing import Dict, Any, Optional
from datetime import datetime, timezone

import structlog
from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from graphql import GraphQLError

from .types import FlightServiceError, NotFoundError, GatewayError, PayloadValidationError

logger = structlog.get_logger()


class ErrorCode:
    """Standard error codes for the flight service"""

    # Client errors (4xx)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_PAYLOAD = "INVALID_PAYLOAD"
    FLIGHT_NOT_FOUND = "FLIGHT_NOT_FOUND"
    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"
    ENDPOINT_NOT_FOUND = "ENDPOINT_NOT_FOUND"

    # Server errors (5xx)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    GATEWAY_FAILURE = "GATEWAY_FAILURE"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"


class ErrorHandler:
    """Centralized error response formatting"""

    @staticmethod
    def create_error_response(
        message: str,
        error_code: str,
        details: Optional[Any] = None,
    ) -> Dict[str, Any]:
        """Create standardized error response"""

        error_response = {
            "status": "error",
            "message": message,
            "error_code": error_code,
            "timestamp": datetime.now(timezone.utc).isoformat()
        }

        if details:
            error_response["details"] = details

        return error_response

    @staticmethod
    def status_code_for(exception: Exception) -> int:
        """HTTP status for a service exception"""
        if isinstance(exception, NotFoundError):
            return 404
        if isinstance(exception, PayloadValidationError):
            return 400
        if isinstance(exception, GatewayError):
            return 503
        return 500


def log_graphql_error(error: GraphQLError, operation: Optional[str] = None) -> None:
    """Log a GraphQL error; domain errors are warnings, anything else is an error"""
    original = error.original_error

    if isinstance(original, GatewayError):
        logger.error(
            "GraphQL operation failed",
            operation=operation,
            path=error.path,
            error_code=original.error_code,
            error_message=str(original),
        )
    elif isinstance(original, FlightServiceError):
        logger.warning(
            "GraphQL operation rejected",
            operation=operation,
            path=error.path,
            error_code=original.error_code,
            error_message=str(original),
        )
    elif original is not None:
        logger.error(
            "Unhandled error in GraphQL resolver",
            operation=operation,
            path=error.path,
            error_type=type(original).__name__,
            error_message=str(original),
            exc_info=original,
        )
    else:
        logger.info("GraphQL request invalid", operation=operation, error_message=error.message)


# Global error handlers for FastAPI
async def service_exception_handler(request: Request, exc: FlightServiceError) -> JSONResponse:
    """Handler for service exceptions raised outside GraphQL"""

    status_code = ErrorHandler.status_code_for(exc)
    logger.warning(
        "Service error",
        error_code=exc.error_code,
        error_message=str(exc),
        url=str(request.url),
        method=request.method,
    )

    return JSONResponse(
        status_code=status_code,
        content=ErrorHandler.create_error_response(str(exc), exc.error_code)
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler for unhandled exceptions"""

    logger.error(
        "Unhandled exception",
        error_type=type(exc).__name__,
        error_message=str(exc),
        url=str(request.url),
        method=request.method,
        exc_info=exc,
    )

    return JSONResponse(
        status_code=500,
        content=ErrorHandler.create_error_response(
            "We're experiencing technical difficulties. Please try again later.",
            ErrorCode.INTERNAL_ERROR,
            details={"exception_type": type(exc).__name__},
        )
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handler for HTTP exceptions"""

    if isinstance(exc.detail, dict):
        content = exc.detail
    elif exc.status_code == 404:
        content = ErrorHandler.create_error_response(
            f"Endpoint not found: {request.method} {request.url.path}",
            ErrorCode.ENDPOINT_NOT_FOUND,
        )
    else:
        content = ErrorHandler.create_error_response(str(exc.detail), ErrorCode.INTERNAL_ERROR)

    return JSONResponse(status_code=exc.status_code, content=content)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handler for request validation exceptions"""

    logger.warning(
        "Request validation failed",
        error=str(exc),
        url=str(request.url),
    )

    return JSONResponse(
        status_code=422,
        content=ErrorHandler.create_error_response(
            "Request validation failed. Please check your input and try again.",
            ErrorCode.VALIDATION_ERROR,
            details=jsonable_encoder(exc.errors()),
        )
    )
