from __future__ import annotations

import os
from typing import Any, Dict, List, Optional

import httpx

from ..config import optional_float_env


SERPAPI_SEARCH_URL = "https://serpapi.com/search.json"
DEFAULT_LOCATION = "India"
DEFAULT_LANGUAGE = "en"
DEFAULT_COUNTRY = "us"


class SearchNotConfigured(RuntimeError):
    pass


def _api_key() -> str:
    api_key = os.getenv("SERPAPI_API_KEY")
    if not api_key:
        raise SearchNotConfigured("SERPAPI_API_KEY is required for web search.")
    return api_key


def search(query: str, limit: int = 10) -> Dict[str, Any]:
    params: Dict[str, Any] = {
        "engine": "google",
        "q": query,
        "api_key": _api_key(),
        "location": DEFAULT_LOCATION,
        "hl": DEFAULT_LANGUAGE,
        "gl": DEFAULT_COUNTRY,
        "num": limit,
    }
    response = httpx.get(
        SERPAPI_SEARCH_URL,
        params=params,
        timeout=optional_float_env("SEARCH_TIMEOUT_SECONDS"),
    )
    response.raise_for_status()
    payload = response.json()
    if payload.get("error"):
        raise RuntimeError(str(payload["error"]))
    return payload


def answer_box_text(payload: Dict[str, Any]) -> Optional[str]:
    box = payload.get("answer_box") or {}
    for key in ("answer", "snippet", "result"):
        value = box.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def organic_results(payload: Dict[str, Any], limit: int) -> List[Dict[str, str]]:
    results: List[Dict[str, str]] = []
    for item in payload.get("organic_results") or []:
        if len(results) >= limit:
            break
        results.append(
            {
                "title": str(item.get("title") or "").strip(),
                "snippet": str(item.get("snippet") or "").strip(),
                "link": str(item.get("link") or "").strip(),
            }
        )
    return results
