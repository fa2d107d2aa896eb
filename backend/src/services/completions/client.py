"""
Client for the upstream chat completion API.

Sends a single non-streaming completion request per call using the OpenAI
SDK and normalizes the result.
"""
import logging
from typing import Optional

import httpx
from openai import APIConnectionError, APIStatusError, AsyncOpenAI

from src.api.models.chat import ChatResponse
from src.config.settings import Settings
from src.services.completions.decoding import decode_completion
from src.services.errors import ConfigurationError, UpstreamError
from src.services.prompts import CHAT_SYSTEM_PROMPT

logger = logging.getLogger(__name__)

DEFAULT_TEMPERATURE = 0.7


class CompletionClient:
    """Client for one-shot chat completions."""

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            settings: Application settings holding credentials and model
            transport: Optional httpx transport used instead of the network
        """
        self.settings = settings
        self._transport = transport

    def _build_client(self) -> AsyncOpenAI:
        http_client = None
        if self._transport is not None:
            http_client = httpx.AsyncClient(
                transport=self._transport,
                timeout=self.settings.openai_timeout_seconds,
            )
        return AsyncOpenAI(
            api_key=self.settings.openai_api_key,
            base_url=self.settings.openai_base_url,
            timeout=self.settings.openai_timeout_seconds,
            max_retries=0,
            http_client=http_client,
        )

    async def complete(self, message: str) -> ChatResponse:
        """
        Generate a completion for a single user message.

        Args:
            message: User text, sent after the fixed system prompt

        Returns:
            Normalized ChatResponse

        Raises:
            ConfigurationError: If no API key is configured
            UpstreamError: If the API responds with a non-success status
                or cannot be reached
        """
        if not self.settings.has_api_key:
            raise ConfigurationError("OPENAI_API_KEY is not configured.")

        model = self.settings.openai_model
        messages = [
            {"role": "system", "content": CHAT_SYSTEM_PROMPT},
            {"role": "user", "content": message},
        ]

        async with self._build_client() as client:
            try:
                raw = await client.chat.completions.with_raw_response.create(
                    model=model,
                    messages=messages,
                    temperature=DEFAULT_TEMPERATURE,
                )
            except APIStatusError as e:
                logger.warning(
                    f"Completion request failed with status {e.status_code} (model={model})"
                )
                raise UpstreamError(e.status_code, e.response.text) from e
            except APIConnectionError as e:
                logger.error(f"Completion API unreachable: {e}")
                raise UpstreamError(None, str(e)) from e

            http_response = raw.http_response
            try:
                payload = http_response.json()
            except ValueError as e:
                logger.warning(f"Completion API returned a non-JSON body (model={model})")
                raise UpstreamError(http_response.status_code, http_response.text) from e

            result = decode_completion(payload, model)
        logger.info(
            f"Completion succeeded (model={result.model}, finish_reason={result.finish_reason})"
        )
        return result
