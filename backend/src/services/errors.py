"""
Service-level exceptions.

Each exception carries the HTTP status the error handling middleware
responds with; the response body is always ``{"error": str(exc)}``.
"""
from typing import Optional

from fastapi import status


class ServiceError(Exception):
    """Base class for errors raised while serving a chat request."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR


class ValidationError(ServiceError):
    """The inbound request is malformed or missing required input."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConfigurationError(ServiceError):
    """A required setting (the upstream credential) is missing."""


class UpstreamError(ServiceError):
    """The completion API did not return a successful response."""

    def __init__(self, upstream_status: Optional[int], body: str):
        self.upstream_status = upstream_status
        self.body = body
        if upstream_status is None:
            super().__init__(f"OpenAI request failed: {body}")
        else:
            super().__init__(f"OpenAI request failed: {upstream_status} {body}")
