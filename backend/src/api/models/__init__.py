from .chat import ChatRequest, ChatResponse, StatusResponse
from .error import ErrorResponse

__all__ = [
    "ErrorResponse",
    "ChatRequest",
    "ChatResponse",
    "StatusResponse",
]
