from .chat import ChatError, ChatRequest, ChatResponse

__all__ = [
    "ChatError",
    "ChatRequest",
    "ChatResponse",
]
