"""
GraphQL endpoint.

Exposes the chat controller through a strawberry schema:

    query { status { message model } }
    mutation { generateResponse(input: {message: "..."}) { content model finishReason } }
"""
import logging
from typing import Any, Dict, Optional, Union

import strawberry
from fastapi import Depends
from strawberry.fastapi import GraphQLRouter
from strawberry.types import ExecutionResult, Info

from src.api.dependencies.chat import get_chat_controller
from src.api.models import ChatResponse, StatusResponse
from src.config.settings import Settings
from src.controllers.chat_controller import INVALID_JSON_MESSAGE, ChatController
from src.services.errors import ServiceError, ValidationError

logger = logging.getLogger(__name__)


@strawberry.type
class ServiceStatus:
    message: str
    model: str

    @classmethod
    def from_response(cls, response: StatusResponse) -> "ServiceStatus":
        return cls(message=response.message, model=response.model)


@strawberry.type
class ChatCompletion:
    content: str
    model: str
    finish_reason: Optional[str]

    @classmethod
    def from_response(cls, response: ChatResponse) -> "ChatCompletion":
        return cls(
            content=response.content,
            model=response.model,
            finish_reason=response.finish_reason,
        )


@strawberry.input
class GenerateResponseInput:
    message: str


@strawberry.type
class Query:
    @strawberry.field
    def status(self, info: Info) -> ServiceStatus:
        controller: ChatController = info.context["controller"]
        return ServiceStatus.from_response(controller.status())


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def generate_response(
        self, info: Info, input: GenerateResponseInput
    ) -> ChatCompletion:
        controller: ChatController = info.context["controller"]
        result = await controller.complete(input.message)
        return ChatCompletion.from_response(result)


schema = strawberry.Schema(query=Query, mutation=Mutation)


async def get_graphql_context(
    controller: ChatController = Depends(get_chat_controller),
) -> Dict[str, Any]:
    """Per-request resolver context."""
    return {"controller": controller}


class ChatGraphQLRouter(GraphQLRouter):
    """GraphQL router sharing the REST error contract.

    Service errors raised by resolvers are re-raised instead of being
    reported in ``errors``, so the error handling middleware answers them
    with ``{"error": ...}`` and the matching HTTP status.
    """

    def parse_json(self, data: Union[str, bytes]) -> Any:
        try:
            return self.decode_json(data)
        except ValueError as e:
            raise ValidationError(INVALID_JSON_MESSAGE) from e

    async def process_result(self, request, result: ExecutionResult):
        for error in result.errors or []:
            if isinstance(error.original_error, ServiceError):
                logger.debug(f"GraphQL resolver failed: {error.original_error}")
                raise error.original_error
        return await super().process_result(request, result)


def build_graphql_router(settings: Settings) -> GraphQLRouter:
    """Create the ``/graphql`` router, serving GraphiQL when enabled."""
    return ChatGraphQLRouter(
        schema,
        path="/graphql",
        context_getter=get_graphql_context,
        graphql_ide="graphiql" if settings.graphql_ide else None,
    )
