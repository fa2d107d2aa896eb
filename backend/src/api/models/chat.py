"""
Request and response models for chat endpoints.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ChatRequest(BaseModel):
    """Payload for a single chat completion.

    - message: user text forwarded upstream as-is; must not be blank
    """

    message: str

    @field_validator("message")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("message must not be blank")
        return value


class ChatResponse(BaseModel):
    """Normalized completion returned to callers."""

    model_config = ConfigDict(populate_by_name=True)

    content: str = ""
    model: str
    finish_reason: Optional[str] = Field(default=None, alias="finishReason")


class StatusResponse(BaseModel):
    """Service availability and active model."""

    message: str
    model: str
