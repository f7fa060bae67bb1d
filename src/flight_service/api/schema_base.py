"""
Strawberry schema with structured error logging
"""

from typing import List, Optional

import strawberry
from graphql import GraphQLError
from strawberry.extensions import MaskErrors
from strawberry.types import ExecutionContext

from ..error_handlers import log_graphql_error
from ..types import FlightServiceError


def _should_mask(error: GraphQLError) -> bool:
    # domain errors and GraphQL validation errors keep their message
    original = error.original_error
    return original is not None and not isinstance(original, FlightServiceError)


class FlightSchema(strawberry.Schema):
    """Schema that reports resolver errors through structlog"""

    def __init__(self, query, mutation=None, **kwargs):
        extensions = list(kwargs.pop("extensions", []))
        extensions.append(lambda: MaskErrors(should_mask_error=_should_mask, error_message="Internal server error"))
        super().__init__(query=query, mutation=mutation, extensions=extensions, **kwargs)

    def process_errors(
        self,
        errors: List[GraphQLError],
        execution_context: Optional[ExecutionContext] = None,
    ) -> None:
        operation = execution_context.operation_name if execution_context else None
        for error in errors:
            log_graphql_error(error, operation)
