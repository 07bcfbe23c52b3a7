from __future__ import annotations

import logging
from typing import Optional, Union

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic_ai import Agent

from apps.api.schemas.chat import ChatError, ChatRequest, ChatResponse
from packages.core.agent import MENU_SYSTEM_PROMPT, build_agent, run_agent
from packages.core.tools.registry import build_menu_tool_registry


CHAT_FAILED = "Failed to process request"

router = APIRouter()
_logger = logging.getLogger("agent_lab.api.chat")


def _build_agent() -> Agent:
    return build_agent(build_menu_tool_registry(), MENU_SYSTEM_PROMPT)


_AGENT: Optional[Agent] = None


def _agent() -> Agent:
    global _AGENT
    if _AGENT is None:
        _AGENT = _build_agent()
    return _AGENT


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={500: {"model": ChatError}},
)
async def chat(payload: ChatRequest) -> Union[ChatResponse, JSONResponse]:
    try:
        reply = await run_agent(_agent(), payload.message)
    except Exception:
        _logger.exception("agent_error message=%r", payload.message)
        return JSONResponse(status_code=500, content=ChatError(error=CHAT_FAILED).model_dump())
    return ChatResponse(response=reply.content)
