from __future__ import annotations

import functools
import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from opentelemetry import trace
from pydantic_ai import Tool

from .menu_tools import get_menu
from .search_tools import google_search


ToolHandler = Callable[..., str]


@dataclass(frozen=True)
class ToolDefinition:
    """A tool the agent may call.

    The handler's signature is the argument schema the model sees: required
    parameters have no default, optional ones do. Handlers return text and
    report their own failures as text.
    """

    name: str
    description: str
    handler: ToolHandler


class ToolRegistry:
    def __init__(self) -> None:
        self._tools: Dict[str, ToolDefinition] = {}
        self._logger = logging.getLogger("agent_lab.tools")
        self._tracer = trace.get_tracer("agent_lab.tools")

    def register(self, tool: ToolDefinition) -> None:
        if tool.name in self._tools:
            raise ValueError(f"Tool already registered: {tool.name}")
        self._tools[tool.name] = tool

    def agent_tools(self) -> List[Tool]:
        return [
            Tool(
                self._dispatcher(tool),
                takes_ctx=False,
                name=tool.name,
                description=tool.description,
            )
            for tool in self._tools.values()
        ]

    def _dispatcher(self, tool: ToolDefinition) -> ToolHandler:
        # wraps keeps the handler's signature, which is the tool's argument schema
        @functools.wraps(tool.handler)
        def dispatch(**kwargs: Any) -> str:
            return self.call(tool.name, kwargs)

        return dispatch

    def call(self, name: str, args: Dict[str, Any]) -> str:
        if name not in self._tools:
            return f"Unknown tool: {name}"
        with self._tracer.start_as_current_span(
            "tool.call",
            attributes={"tool.name": name, "tool.args": json.dumps(args, default=str)},
        ):
            try:
                result = self._tools[name].handler(**args)
            except Exception as exc:
                self._logger.exception("tool_failed name=%s args=%s error=%s", name, args, exc)
                return f"Tool {name} failed: {exc}"
        self._logger.info("tool_call name=%s args=%s result=%r", name, args, result)
        return result

    def has_tool(self, name: str) -> bool:
        return name in self._tools

    def list_tools(self) -> List[str]:
        return list(self._tools.keys())


def build_menu_tool_registry() -> ToolRegistry:
    registry = ToolRegistry()
    registry.register(
        ToolDefinition(
            name="getMenuTool",
            description=(
                "Returns the final answer for today's menu for the given category "
                "(breakfast, lunch or dinner). Use this tool to directly answer the "
                "user's menu question."
            ),
            handler=get_menu,
        )
    )
    return registry


def build_search_tool_registry() -> ToolRegistry:
    registry = ToolRegistry()
    registry.register(
        ToolDefinition(
            name="google_search",
            description=(
                "Search Google for current information. Use this tool to find recent "
                "news, information, or facts. Returns top search results with titles "
                "and snippets."
            ),
            handler=google_search,
        )
    )
    return registry
