from .client import CompletionClient
from .decoding import decode_completion

__all__ = [
    "CompletionClient",
    "decode_completion",
]
