"""
Dependency container for flight service components
"""

from typing import Any, Dict, Optional

import structlog

from .config import config
from .types import ClassificationRecord, Surface
from .interfaces.data_gateway import DataGatewayInterface
from .clients.data_gateway import SqlDataGateway
from .services import (
    ClassificationContextBuilder, ClassificationSink, Dispatcher,
    AuditLogger, audit_logger, FlightQueryService, HumanFlightService, BotFlightService,
)

logger = structlog.get_logger()


class ServiceContainer:
    """
    Holds the components shared across requests.

    One container belongs to one application instance. Per-request state (the
    classification record and the surface service built around it) is never
    stored here; `build_service` creates it fresh for each request.
    """

    def __init__(
        self,
        gateway: Optional[DataGatewayInterface] = None,
        classification_sink: Optional[ClassificationSink] = None,
        audit: Optional[AuditLogger] = None,
        seed_demo_data: Optional[bool] = None
    ):
        self.gateway = gateway
        self.classification_builder = ClassificationContextBuilder()
        self.dispatcher = Dispatcher(sink=classification_sink)
        self.audit = audit or audit_logger
        self.seed_demo_data = config.database.seed_demo_data if seed_demo_data is None else seed_demo_data
        self._initialized = False

    async def initialize(self):
        """Initialize the data gateway"""
        if self._initialized:
            return

        logger.info("Initializing service container")

        if self.gateway is None:
            self.gateway = SqlDataGateway()

        try:
            await self.gateway.initialize(seed_demo_data=self.seed_demo_data)
        except Exception as e:
            logger.error("Failed to initialize data gateway", error=str(e))
            raise

        self._initialized = True
        logger.info("Service container initialized successfully", gateway=type(self.gateway).__name__)

    def build_service(self, endpoint: Surface, classification: ClassificationRecord) -> FlightQueryService:
        """Build the surface service serving one request on the given endpoint"""
        if not self._initialized:
            raise RuntimeError("Service container not initialized")

        service_class = BotFlightService if endpoint == Surface.BOT else HumanFlightService
        return service_class(self.gateway, classification, self.audit)

    async def cleanup(self):
        """Release the data gateway"""
        if not self._initialized:
            return

        logger.info("Cleaning up service container")
        try:
            await self.gateway.close()
        finally:
            self._initialized = False

    def is_initialized(self) -> bool:
        """Check if container is initialized"""
        return self._initialized

    def list_services(self) -> Dict[str, str]:
        """List shared components and their types"""
        components: Dict[str, Any] = {
            "gateway": self.gateway,
            "classification_builder": self.classification_builder,
            "dispatcher": self.dispatcher,
            "audit": self.audit,
        }
        return {name: type(component).__name__ for name, component in components.items()}
