from __future__ import annotations

import logging
from typing import List

from ..search import serpapi


MAX_RESULT_CHARS = 1000
MIN_RESULTS = 1
MAX_RESULTS = 10

_logger = logging.getLogger("agent_lab.tools.search")


def _clamp_results(num_results: int) -> int:
    return max(MIN_RESULTS, min(MAX_RESULTS, int(num_results)))


def _format_results(payload: dict, limit: int) -> str:
    lines: List[str] = []
    answer = serpapi.answer_box_text(payload)
    if answer:
        lines.append(f"Answer: {answer}")
    for index, result in enumerate(serpapi.organic_results(payload, limit), start=1):
        lines.append(f"{index}. {result['title']}")
        if result["snippet"]:
            lines.append(f"   {result['snippet']}")
        if result["link"]:
            lines.append(f"   Source: {result['link']}")
    if not lines:
        return "No good search result found"
    return "\n".join(lines)


def google_search(query: str, num_results: int = 5) -> str:
    """Search Google and return the top results.

    Args:
        query: The search query (e.g., 'latest AI news 2025')
        num_results: Number of results to return (1-10, default: 5)
    """
    try:
        limit = _clamp_results(num_results)
        payload = serpapi.search(query, limit=limit)
        text = _format_results(payload, limit)
    except Exception as exc:
        _logger.warning("search_failed query=%r error=%s", query, exc)
        return f"Search error: {exc}"
    return text[:MAX_RESULT_CHARS]
