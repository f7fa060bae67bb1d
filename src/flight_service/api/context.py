"""
Per-request GraphQL execution context
"""

from fastapi import Request
from strawberry.fastapi import BaseContext

from ..interfaces.data_gateway import DataGatewayInterface
from ..services import FlightQueryService
from ..types import ClassificationRecord, Surface


class RequestContext(BaseContext):
    """
    Everything a resolver may touch for one request: the gateway handle, the
    classification record, the surface the caller was classified for, the
    endpoint actually hit and the surface service serving it.
    """

    def __init__(
        self,
        gateway: DataGatewayInterface,
        classification: ClassificationRecord,
        surface: Surface,
        endpoint: Surface,
        flights: FlightQueryService,
    ):
        super().__init__()
        self.gateway = gateway
        self.classification = classification
        self.surface = surface
        self.endpoint = endpoint
        self.flights = flights


def _build_context(request: Request, endpoint: Surface) -> RequestContext:
    container = request.app.state.container
    classification = request.state.classification
    surface = container.dispatcher.check_endpoint(endpoint, classification)

    return RequestContext(
        gateway=container.gateway,
        classification=classification,
        surface=surface,
        endpoint=endpoint,
        flights=container.build_service(endpoint, classification),
    )


async def get_human_context(request: Request) -> RequestContext:
    return _build_context(request, Surface.HUMAN)


async def get_bot_context(request: Request) -> RequestContext:
    return _build_context(request, Surface.BOT)
