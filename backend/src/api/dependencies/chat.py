"""
Dependency providers shared by the REST and GraphQL endpoints.
"""
from fastapi import Depends, Request

from src.config.settings import Settings
from src.controllers.chat_controller import ChatController


def get_app_settings(request: Request) -> Settings:
    """Settings bound to the running application by the app factory."""
    return request.app.state.settings


def get_chat_controller(
    settings: Settings = Depends(get_app_settings),
) -> ChatController:
    """Dependency injection for ChatController."""
    return ChatController(settings)
