from .serpapi import SearchNotConfigured, answer_box_text, organic_results, search

__all__ = [
    "SearchNotConfigured",
    "answer_box_text",
    "organic_results",
    "search",
]
