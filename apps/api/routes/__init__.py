from .chat import router as chat_router
from .pages import router as pages_router

__all__ = [
    "chat_router",
    "pages_router",
]
