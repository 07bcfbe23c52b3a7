from __future__ import annotations

import os

from fastapi import APIRouter
from fastapi.responses import FileResponse


STATIC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "static"))

router = APIRouter()


@router.get("/", include_in_schema=False)
def chat_page() -> FileResponse:
    return FileResponse(os.path.join(STATIC_DIR, "chat.html"), media_type="text/html")
