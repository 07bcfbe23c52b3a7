from __future__ import annotations

import argparse
import asyncio
import logging
from typing import List, Optional

from pydantic_ai import Agent

from packages.core.agent import RESEARCH_SYSTEM_PROMPT, build_agent, run_agent
from packages.core.config import load_env_file
from packages.core.logging_config import configure_logging
from packages.core.observability import init_tracing
from packages.core.tools.registry import build_search_tool_registry


DEFAULT_QUERY = "What are the latest developments in AI?"

_logger = logging.getLogger("agent_lab.research")


def build_research_agent() -> Agent:
    return build_agent(build_search_tool_registry(), RESEARCH_SYSTEM_PROMPT)


async def answer(agent: Agent, query: str) -> int:
    print(f"\n🤖 Query: {query}\n")
    try:
        reply = await run_agent(agent, query)
    except Exception:
        _logger.exception("research_agent_failed query=%r", query)
        return 1
    print(f"\n✅ Response:\n{reply.content}\n")
    return 0


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Ask the research agent one question.")
    parser.add_argument("query", nargs="?", default=DEFAULT_QUERY)
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    load_env_file()
    configure_logging()
    init_tracing("agent-lab.research-agent")
    args = _parse_args(argv)
    return asyncio.run(answer(build_research_agent(), args.query))


if __name__ == "__main__":
    raise SystemExit(main())
