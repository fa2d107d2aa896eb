"""
Chat controller shared by the REST and GraphQL transports.

Validates inbound chat input, reports service status and delegates
completions to the upstream client.
"""
import json
import logging
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from src.api.models.chat import ChatRequest, ChatResponse, StatusResponse
from src.config.settings import Settings
from src.services.completions import CompletionClient
from src.services.errors import ValidationError

logger = logging.getLogger(__name__)

STATUS_AVAILABLE = "服务可用"
STATUS_MISSING_API_KEY = "缺少 OPENAI_API_KEY"

INVALID_JSON_MESSAGE = "Invalid JSON body"
MESSAGE_REQUIRED_MESSAGE = "`message` is required."


class ChatController:
    """Controller for chat operations."""

    def __init__(
        self,
        settings: Settings,
        completion_client: Optional[CompletionClient] = None,
    ):
        self.settings = settings
        self.completion_client = completion_client or CompletionClient(settings)

    def status(self) -> StatusResponse:
        """Report whether the upstream credential is present and the active model."""
        return StatusResponse(
            message=STATUS_AVAILABLE if self.settings.has_api_key else STATUS_MISSING_API_KEY,
            model=self.settings.openai_model,
        )

    def parse_request(self, body: bytes) -> ChatRequest:
        """
        Parse a raw JSON request body into a ChatRequest.

        Args:
            body: Raw HTTP request body

        Returns:
            ChatRequest with a non-blank message

        Raises:
            ValidationError: If the body is not JSON or lacks a usable message
        """
        try:
            payload = json.loads(body)
        except ValueError:
            raise ValidationError(INVALID_JSON_MESSAGE)

        return self.validate_payload(payload)

    def validate_payload(self, payload) -> ChatRequest:
        """Validate an already decoded payload."""
        try:
            return ChatRequest.model_validate(payload)
        except PydanticValidationError as e:
            logger.debug(f"Rejected chat payload: {e.errors()}")
            raise ValidationError(MESSAGE_REQUIRED_MESSAGE)

    async def complete(self, message: str) -> ChatResponse:
        """
        Generate a completion for one user message.

        Raises:
            ValidationError: If the message is blank; no upstream call is made
            ConfigurationError: If no API key is configured
            UpstreamError: If the completion API call fails
        """
        request = self.validate_payload({"message": message})
        return await self.completion_client.complete(request.message)
