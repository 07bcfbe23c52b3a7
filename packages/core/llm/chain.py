from __future__ import annotations

from dataclasses import dataclass
from string import Formatter
from typing import Any, Dict, List

from pydantic_ai import Agent


@dataclass(frozen=True)
class PromptTemplate:
    template: str

    @property
    def input_variables(self) -> List[str]:
        names: List[str] = []
        for _, field_name, _, _ in Formatter().parse(self.template):
            if field_name and field_name not in names:
                names.append(field_name)
        return names

    def format(self, **variables: Any) -> str:
        missing = [name for name in self.input_variables if name not in variables]
        if missing:
            raise ValueError(f"Missing prompt variables: {', '.join(missing)}")
        return self.template.format(**variables)


class PromptChain:
    """Format a prompt and hand it to a tool-less agent."""

    def __init__(self, prompt: PromptTemplate, agent: Agent) -> None:
        self._prompt = prompt
        self._agent = agent

    async def invoke(self, variables: Dict[str, Any]) -> str:
        result = await self._agent.run(self._prompt.format(**variables))
        return str(result.output)
