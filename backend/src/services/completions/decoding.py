"""
Decoding of upstream chat completion payloads.

Only the first choice is read. Missing, null or mistyped fields fall back
to documented defaults so a ChatResponse can always be built.
"""
from typing import Any, Dict, Optional

from src.api.models.chat import ChatResponse


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any, default: Optional[str]) -> Optional[str]:
    return value if isinstance(value, str) else default


def decode_completion(payload: Any, requested_model: str) -> ChatResponse:
    """
    Map an upstream completion body onto the normalized response shape.

    Args:
        payload: Parsed JSON body returned by the completion API
        requested_model: Model name sent upstream, used when the body omits one

    Returns:
        ChatResponse with ``content`` defaulting to ``""``, ``finish_reason``
        to ``None`` and ``model`` to ``requested_model``
    """
    data = _as_dict(payload)

    choices = data.get("choices")
    first_choice = _as_dict(choices[0]) if isinstance(choices, list) and choices else {}
    message = _as_dict(first_choice.get("message"))

    return ChatResponse(
        content=_as_str(message.get("content"), ""),
        model=_as_str(data.get("model"), "") or requested_model,
        finish_reason=_as_str(first_choice.get("finish_reason"), None),
    )
