"""
Health check endpoint.
Reports whether the upstream credential is configured and which model is active.
"""
from fastapi import APIRouter, Depends

from src.api.dependencies.chat import get_chat_controller
from src.api.models import StatusResponse
from src.controllers.chat_controller import ChatController

router = APIRouter(tags=["health"])

HEALTH_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"]


@router.api_route("/health", methods=HEALTH_METHODS, response_model=StatusResponse)
async def health_check(
    controller: ChatController = Depends(get_chat_controller),
) -> StatusResponse:
    """Service status. Answers any method so uptime probes need no configuration."""
    return controller.status()
