from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from opentelemetry import trace
from pydantic_ai import Agent
from pydantic_ai.messages import ModelMessage, ModelResponse
from pydantic_ai.models import Model
from pydantic_ai.settings import ModelSettings

from .llm.gemini import build_model, build_model_settings
from .tools.registry import ToolRegistry


RESEARCH_SYSTEM_PROMPT = (
    "You are a helpful research assistant with access to Google search. "
    "Use the search tool to find current information. Always cite sources when "
    "providing information. Be accurate and concise."
)

MENU_SYSTEM_PROMPT = (
    "You are a helpful restaurant assistant that uses tools to answer menu questions."
)

_logger = logging.getLogger("agent_lab.agent")
_tracer = trace.get_tracer("agent_lab.agent")


@dataclass
class AgentReply:
    content: str
    messages: List[ModelMessage] = field(default_factory=list)


def build_agent(
    registry: Optional[ToolRegistry],
    system_prompt: Optional[str] = None,
    model: Optional[Model] = None,
    model_settings: Optional[ModelSettings] = None,
) -> Agent:
    """Compose a chat model, the registry's tools and a system prompt.

    Without an explicit ``model`` the Gemini model is built from the
    environment, which requires ``GOOGLE_API_KEY``.
    """
    if model is None:
        model = build_model()
        model_settings = model_settings or build_model_settings()
    tools = registry.agent_tools() if registry is not None else []
    return Agent(
        model=model,
        system_prompt=system_prompt or (),
        tools=tools,
        model_settings=model_settings,
    )


def _last_message_text(messages: List[ModelMessage]) -> Optional[str]:
    if not messages or not isinstance(messages[-1], ModelResponse):
        return None
    texts = [part.content for part in messages[-1].parts if part.part_kind == "text"]
    if not texts:
        return None
    return "".join(texts)


async def run_agent(agent: Agent, message: str) -> AgentReply:
    with _tracer.start_as_current_span("agent.run", attributes={"agent.input": message}):
        result = await agent.run(message)
    messages = result.all_messages()
    content = _last_message_text(messages)
    if content is None:
        content = str(result.output)
    _logger.info("agent_run messages=%d reply_chars=%d", len(messages), len(content))
    return AgentReply(content=content, messages=messages)
