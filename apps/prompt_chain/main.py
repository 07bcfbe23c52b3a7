from __future__ import annotations

import argparse
import asyncio
from typing import List, Optional

from packages.core.agent import build_agent
from packages.core.config import load_env_file
from packages.core.llm.chain import PromptChain, PromptTemplate
from packages.core.logging_config import configure_logging
from packages.core.observability import init_tracing


QUESTION_PROMPT = PromptTemplate(
    "You are a helpful Assitant, Answer the question {question}"
)
DEFAULT_QUESTION = "What is the Future of AI in healthCare"


def build_chain() -> PromptChain:
    return PromptChain(QUESTION_PROMPT, build_agent(registry=None))


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Ask Gemini one templated question.")
    parser.add_argument("question", nargs="?", default=DEFAULT_QUESTION)
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    load_env_file()
    configure_logging()
    init_tracing("agent-lab.prompt-chain")
    args = _parse_args(argv)
    result = asyncio.run(build_chain().invoke({"question": args.question}))
    print("Gemini Response:\n", result)


if __name__ == "__main__":
    main()
