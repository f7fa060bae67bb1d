"""
Main application entry point
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from strawberry.fastapi import GraphQLRouter

from . import __version__
from .config import config
from .container import ServiceContainer
from .interfaces.data_gateway import DataGatewayInterface
from .services import AuditLogger, ClassificationSink
from .types import FlightServiceError
from .utils.logger import setup_logging
from .api import (
    bot_router, bot_schema, human_schema, classify_request,
    get_human_context, get_bot_context,
)
from .error_handlers import (
    service_exception_handler, global_exception_handler,
    http_exception_handler, validation_exception_handler,
)

setup_logging()

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    # Startup
    logger.info("Starting Flight Service API", version=__version__)

    container: ServiceContainer = app.state.container
    try:
        await container.initialize()
    except Exception as e:
        logger.error("Failed to initialize service container", error=str(e))
        raise

    yield

    # Shutdown
    logger.info("Shutting down Flight Service API")
    await container.cleanup()


def create_app(
    gateway: Optional[DataGatewayInterface] = None,
    classification_sink: Optional[ClassificationSink] = None,
    audit: Optional[AuditLogger] = None,
    seed_demo_data: Optional[bool] = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        gateway: Data gateway to serve from; a SQL gateway on the configured
            database when omitted
        classification_sink: Receiver for per-request classification events;
            structured logging when omitted
        audit: Audit logger for bot telemetry
        seed_demo_data: Seed demo flights into an empty store
    """
    app = FastAPI(
        title="Flight Service API",
        description="Flight search and booking over GraphQL with human and bot surfaces",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if config.server.debug else None,
        redoc_url="/redoc" if config.server.debug else None,
    )
    app.state.container = ServiceContainer(
        gateway=gateway,
        classification_sink=classification_sink,
        audit=audit,
        seed_demo_data=seed_demo_data,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if config.is_development else [],
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    # Classification runs before any route handler
    app.middleware("http")(classify_request)

    app.include_router(GraphQLRouter(human_schema, context_getter=get_human_context), prefix="/graphql")
    app.include_router(GraphQLRouter(bot_schema, context_getter=get_bot_context), prefix="/bot/graphql")
    app.include_router(bot_router)

    app.add_exception_handler(FlightServiceError, service_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    @app.get("/health")
    async def health_check(request: Request):
        """
        Health check endpoint

        Returns the status of the service and its data gateway, and how the
        caller was classified
        """
        container: ServiceContainer = request.app.state.container
        classification = request.state.classification

        health_status = {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "version": __version__,
            "environment": config.server.environment,
            "components": {},
            "classification": {
                "confidence": classification.confidence_score,
                "agent_type": classification.agent_type,
                "automated": classification.is_automated(),
                "surface": container.dispatcher.select_surface(classification).value,
            },
        }

        if container.is_initialized():
            health_status["components"]["gateway"] = await container.gateway.health_check()
            health_status["components"]["gateway"]["type"] = type(container.gateway).__name__
        else:
            health_status["components"]["gateway"] = {
                "status": "unhealthy",
                "message": "Service container not initialized"
            }

        if any(comp["status"] != "healthy" for comp in health_status["components"].values()):
            health_status["status"] = "unhealthy"

        return health_status

    return app


app = create_app()


def main():
    """Main entry point"""
    uvicorn.run(
        "flight_service.main:app",
        host=config.server.host,
        port=config.server.port,
        reload=config.is_development,
        log_level=config.logging.level.lower(),
    )


if __name__ == "__main__":
    main()
