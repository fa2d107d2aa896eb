"""
Chat completion endpoints.

Relays a single user message to the completion API and returns the
normalized result.
"""
from fastapi import APIRouter, Depends, Request, status

from src.api.dependencies.chat import get_chat_controller
from src.api.models import ChatResponse, ErrorResponse
from src.controllers.chat_controller import ChatController

# ============================================================================
# Router
# ============================================================================

router = APIRouter()


# ============================================================================
# Endpoints
# ============================================================================


@router.post(
    "/openai",
    status_code=status.HTTP_200_OK,
    response_model=ChatResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid JSON or missing message"},
        500: {"model": ErrorResponse, "description": "Configuration or upstream failure"},
    },
)
@router.post(
    "/",
    status_code=status.HTTP_200_OK,
    response_model=ChatResponse,
    include_in_schema=False,
)
async def create_completion(
    request: Request,
    controller: ChatController = Depends(get_chat_controller),
) -> ChatResponse:
    """
    Generate a chat completion.

    Expects a JSON body ``{"message": "..."}``. The body is read raw so that
    malformed JSON and a missing message are reported as 400 with a single
    ``error`` string rather than the framework's validation format.
    """
    chat_request = controller.parse_request(await request.body())
    return await controller.complete(chat_request.message)
