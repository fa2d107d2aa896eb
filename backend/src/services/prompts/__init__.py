from .chat_prompts import (
    CHAT_SYSTEM_PROMPT,
)

__all__ = [
    "CHAT_SYSTEM_PROMPT",
]
